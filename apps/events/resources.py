"""Backend resources managed by the events pages."""
from django.utils.translation import gettext_lazy as _

from apps.core.resources import Column, Resource, register

from .forms import EventForm, EventFrequencyForm, EventTypeForm

NAMESPACE = 'frontend:events'


EVENTS = register(Resource(
    name='event',
    endpoint='events',
    key='events',
    label=_('Event'),
    label_plural=_('Events'),
    namespace=NAMESPACE,
    form_class=EventForm,
    columns=(
        Column('name', _('Name')),
        Column('type_name', _('Event Type')),
        Column('date', _('Schedule')),
        Column('church_name', _('Church')),
        Column('notes', _('Notes')),
    ),
    search_fields=('name', 'type_name', 'church_name', 'notes'),
    order=10,
))

EVENT_TYPES = register(Resource(
    name='event_type',
    endpoint='event-types',
    key='event_types',
    label=_('Event Type'),
    label_plural=_('Event Types'),
    namespace=NAMESPACE,
    form_class=EventTypeForm,
    order=20,
))

EVENT_FREQUENCIES = register(Resource(
    name='event_frequency',
    endpoint='event-frequencies',
    key='frequencies',
    label=_('Event Frequency'),
    label_plural=_('Event Frequencies'),
    namespace=NAMESPACE,
    form_class=EventFrequencyForm,
    columns=(
        Column('name', _('Name')),
        Column('active', _('Active'), flag=True),
        Column('showme', _('Shown'), flag=True),
        Column('notes', _('Notes')),
    ),
    search_fields=('name', 'notes'),
    order=30,
))
