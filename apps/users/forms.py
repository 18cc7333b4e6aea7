"""User forms."""
from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.forms import FlagField, ResourceForm


class UserForm(ResourceForm):
    """Edit an app user. Accounts are created by the users themselves."""
    first_name = forms.CharField(label=_('First Name'), required=False, max_length=150)
    last_name = forms.CharField(label=_('Last Name'), required=False, max_length=150)
    email = forms.EmailField(label=_('Email'), required=False)
    login_enabled = FlagField(label=_('Login enabled'))

    required_checks = (
        ('first_name', _('First name is required')),
        ('email', _('Email is required')),
    )
