"""Backend resources managed by the library pages."""
from django.utils.translation import gettext_lazy as _

from apps.core.resources import Column, Resource, register

from .forms import BibleForm, BookForm

NAMESPACE = 'frontend:library'


BOOKS = register(Resource(
    name='book',
    endpoint='books',
    key='books',
    label=_('Book'),
    label_plural=_('Books'),
    namespace=NAMESPACE,
    form_class=BookForm,
    columns=(
        Column('name', _('Name')),
        Column('abbreviation', _('Abbreviation')),
        Column('testament', _('Testament')),
        Column('chapters', _('Chapters')),
    ),
    search_fields=('name', 'abbreviation'),
    order=60,
))

BIBLES = register(Resource(
    name='bible',
    endpoint='bibles',
    key='bibles',
    label=_('Bible'),
    label_plural=_('Bibles'),
    namespace=NAMESPACE,
    form_class=BibleForm,
    columns=(
        Column('name', _('Name')),
        Column('abbreviation', _('Abbreviation')),
        Column('language', _('Language')),
    ),
    search_fields=('name', 'abbreviation', 'language'),
    order=70,
))
