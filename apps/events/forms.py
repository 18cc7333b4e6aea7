"""Event forms — events, event types, event frequencies."""
from django import forms
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _

from apps.core.constants import Duration
from apps.core.forms import FlagField, LookupChoiceField, ResourceForm
from apps.core.widgets import LookupSearchWidget


# ──────────────────────────────────────────────────────────────────────────────
# Event
# ──────────────────────────────────────────────────────────────────────────────

class EventForm(ResourceForm):
    """
    Add/edit form for one event.

    Selections resolve to full lookup entities; ``to_payload`` sends their
    ids. Locations are limited to the selected church: a location from
    another church is dropped rather than rejected. A frequency hidden from
    the selectors is accepted only when it is ``current_frequency``, the one
    the edited record already uses.
    """
    name = forms.CharField(
        label=_('Event Name'), required=False, max_length=255,
        widget=forms.TextInput(attrs={'placeholder': _('Enter event name')}),
    )
    event_type = LookupChoiceField(
        label=_('Event Type'),
        widget=LookupSearchWidget(placeholder=_('Search and select event type')),
    )
    date = forms.DateField(
        label=_('Date'), required=False,
        widget=forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
    )
    time = forms.TimeField(
        label=_('Time'), required=False,
        widget=forms.TimeInput(attrs={'type': 'time'}, format='%H:%M'),
    )
    duration = forms.IntegerField(
        label=_('Duration (minutes)'),
        initial=Duration.DEFAULT,
        min_value=Duration.MIN,
        step_size=Duration.STEP,
        error_messages={
            'required': _('Please enter a duration'),
            'invalid': _('Duration must be a number of minutes'),
            'min_value': _('Duration must be at least %(limit_value)s minutes'),
            'step_size': _('Duration must be a multiple of %(limit_value)s minutes'),
        },
        widget=forms.NumberInput(attrs={'min': Duration.MIN, 'step': Duration.STEP}),
    )
    church = LookupChoiceField(
        label=_('Church'),
        widget=LookupSearchWidget(placeholder=_('Search and select church')),
    )
    location = LookupChoiceField(
        label=_('Location'),
        clear_unknown=True,
        widget=LookupSearchWidget(
            source_url=reverse_lazy('api:events:church_locations', kwargs={'church_id': '__value__'}),
            depends_on='church',
            placeholder=_('Search and select location (optional)'),
        ),
    )
    frequency = LookupChoiceField(
        label=_('Frequency'),
        widget=LookupSearchWidget(placeholder=_('Search and select frequency')),
    )
    notes = forms.CharField(
        label=_('Notes'), required=False,
        widget=forms.Textarea(attrs={'rows': 3, 'placeholder': _('Add any additional notes')}),
    )

    required_checks = (
        ('name', _('Event name is required')),
        ('event_type', _('Please select an event type')),
        ('frequency', _('Please select an event frequency')),
        ('church', _('Please select a church')),
        ('date', _('Please select a date')),
        ('time', _('Please select a time')),
    )
    payload_names = {
        'event_type': 'type_id',
        'church': 'church_id',
        'location': 'location_id',
        'frequency': 'frequency_id',
    }

    def __init__(self, *args, reference=None, locations=(), current_frequency=None, **kwargs):
        super().__init__(*args, **kwargs)
        if current_frequency is None and self.record is not None:
            current_frequency = self.record.get('frequency_id')
        if reference is not None:
            self.fields['event_type'].entities = reference.event_types
            self.fields['church'].entities = reference.churches
            self.fields['frequency'].entities = reference.frequency_entities(current_frequency)
            self.fields['frequency'].widget.candidates = reference.selectable_frequencies
        self.fields['location'].entities = locations

    def to_payload(self):
        payload = super().to_payload()
        if not payload.get('location_id'):
            payload.pop('location_id', None)
        return payload


# ──────────────────────────────────────────────────────────────────────────────
# Event Type / Frequency
# ──────────────────────────────────────────────────────────────────────────────

class EventTypeForm(ResourceForm):
    name = forms.CharField(label=_('Name'), required=False, max_length=255)

    required_checks = (
        ('name', _('Event type name is required')),
    )


class EventFrequencyForm(ResourceForm):
    name = forms.CharField(label=_('Name'), required=False, max_length=255)
    active = FlagField(label=_('Active'), initial=True)
    showme = FlagField(label=_('Show in event forms'), initial=True)
    notes = forms.CharField(
        label=_('Notes'), required=False,
        widget=forms.Textarea(attrs={'rows': 3}),
    )

    required_checks = (
        ('name', _('Frequency name is required')),
    )
