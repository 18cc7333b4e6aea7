"""Backend resources managed by the churches pages."""
from django.utils.translation import gettext_lazy as _

from apps.core.resources import Column, Resource, register

from .forms import ChurchForm, DenominationForm

NAMESPACE = 'frontend:churches'


CHURCHES = register(Resource(
    name='church',
    endpoint='churches',
    key='churches',
    label=_('Church'),
    label_plural=_('Churches'),
    namespace=NAMESPACE,
    form_class=ChurchForm,
    columns=(
        Column('name', _('Name')),
        Column('denomination_name', _('Denomination')),
        Column('address', _('Address')),
        Column('speakers', _('Speakers')),
    ),
    search_fields=('name', 'address', 'denomination_name'),
    order=40,
))

DENOMINATIONS = register(Resource(
    name='denomination',
    endpoint='denominations',
    key='denominations',
    label=_('Denomination'),
    label_plural=_('Denominations'),
    namespace=NAMESPACE,
    form_class=DenominationForm,
    columns=(
        Column('name', _('Name')),
        Column('notes', _('Notes')),
    ),
    order=50,
))
