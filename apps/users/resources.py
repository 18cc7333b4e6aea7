"""Backend resources managed by the users pages."""
from django.utils.translation import gettext_lazy as _

from apps.core.resources import Column, Resource, register

from .forms import UserForm

USERS = register(Resource(
    name='user',
    endpoint='users',
    key='users',
    label=_('User'),
    label_plural=_('Users'),
    namespace='frontend:users',
    form_class=UserForm,
    columns=(
        Column('first_name', _('First Name')),
        Column('last_name', _('Last Name')),
        Column('email', _('Email')),
        Column('login_enabled', _('Login'), flag=True),
    ),
    search_fields=('first_name', 'last_name', 'email'),
    allow_create=False,
    order=80,
))
