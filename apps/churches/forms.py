"""Church forms — churches and denominations."""
from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.forms import LookupChoiceField, ResourceForm
from apps.core.widgets import LookupSearchWidget


class ChurchForm(ResourceForm):
    name = forms.CharField(label=_('Church Name'), required=False, max_length=255)
    denomination = LookupChoiceField(
        label=_('Denomination'),
        widget=LookupSearchWidget(placeholder=_('Search and select denomination')),
    )
    address = forms.CharField(
        label=_('Address'), required=False,
        widget=forms.Textarea(attrs={'rows': 2}),
    )
    latitude = forms.DecimalField(label=_('Latitude'), required=False, max_digits=10, decimal_places=7)
    longitude = forms.DecimalField(label=_('Longitude'), required=False, max_digits=10, decimal_places=7)
    speakers = forms.CharField(
        label=_('Speakers'), required=False,
        widget=forms.Textarea(attrs={'rows': 2}),
    )

    required_checks = (
        ('name', _('Church name is required')),
        ('denomination', _('Please select a denomination')),
    )
    payload_names = {'denomination': 'denomination_id'}

    def __init__(self, *args, denominations=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['denomination'].entities = denominations


class DenominationForm(ResourceForm):
    name = forms.CharField(label=_('Name'), required=False, max_length=255)
    notes = forms.CharField(
        label=_('Notes'), required=False,
        widget=forms.Textarea(attrs={'rows': 3}),
    )

    required_checks = (
        ('name', _('Denomination name is required')),
    )
