"""Login form."""
from django import forms
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import AdminFormMixin


class LoginForm(AdminFormMixin, forms.Form):
    email = forms.EmailField(
        label=_('Email address'),
        error_messages={'required': _('Email is required')},
        widget=forms.EmailInput(attrs={'autocomplete': 'email', 'autofocus': True}),
    )
    password = forms.CharField(
        label=_('Password'),
        strip=False,
        error_messages={'required': _('Password is required')},
        widget=forms.PasswordInput(attrs={'autocomplete': 'current-password'}),
    )
