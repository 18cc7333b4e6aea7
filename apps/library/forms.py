"""Library forms — bible books and bible versions."""
from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.constants import Testament
from apps.core.forms import ResourceForm


class BookForm(ResourceForm):
    name = forms.CharField(label=_('Name'), required=False, max_length=100)
    abbreviation = forms.CharField(label=_('Abbreviation'), required=False, max_length=20)
    testament = forms.ChoiceField(
        label=_('Testament'), required=False,
        choices=[('', _('Select testament'))] + list(Testament.CHOICES),
    )
    chapters = forms.IntegerField(label=_('Chapters'), required=False, min_value=1)

    required_checks = (
        ('name', _('Book name is required')),
        ('testament', _('Please select a testament')),
    )


class BibleForm(ResourceForm):
    name = forms.CharField(label=_('Name'), required=False, max_length=255)
    abbreviation = forms.CharField(label=_('Abbreviation'), required=False, max_length=20)
    language = forms.CharField(label=_('Language'), required=False, max_length=100)

    required_checks = (
        ('name', _('Bible name is required')),
        ('abbreviation', _('Abbreviation is required')),
    )
