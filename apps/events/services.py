"""Event services — reference data for event forms and schedule formatting."""
import logging
from datetime import date, datetime, time

from apps.core.backend import BackendError
from apps.core.lookups import LookupSource, fetch_lookup, fetch_lookups, find_by_id, is_flag_set

logger = logging.getLogger(__name__)


EVENT_TYPES = LookupSource('event_types', 'event-types/all', 'event_types')
FREQUENCIES = LookupSource('frequencies', 'event-frequencies/all', 'frequencies')
CHURCHES = LookupSource('churches', 'churches/all', 'churches')


class EventReferenceData:
    """
    Lookup lists behind the event form selectors.

    Loaded once per page (types, frequencies and churches in parallel) and
    shared by everything on that page. Church locations depend on the
    selected church and are fetched separately.
    """

    sources = (EVENT_TYPES, FREQUENCIES, CHURCHES)

    def __init__(self, event_types=(), frequencies=(), churches=()):
        self.event_types = list(event_types)
        self.frequencies = list(frequencies)
        self.churches = list(churches)

    @classmethod
    def load(cls, client):
        return cls(**fetch_lookups(client, cls.sources))

    @property
    def selectable_frequencies(self):
        """Frequencies flagged both active and shown; the rest stay hidden."""
        return [
            frequency for frequency in self.frequencies
            if is_flag_set(frequency.get('active')) and is_flag_set(frequency.get('showme'))
        ]

    def frequency_entities(self, current_id=None):
        """
        Frequencies a submitted form may reference.

        The selectable ones, plus the hidden frequency an edited event
        already uses so it survives an unchanged save.
        """
        entities = self.selectable_frequencies
        current = find_by_id(self.frequencies, current_id)
        if current is not None and current not in entities:
            entities.append(current)
        return entities

    @staticmethod
    def fetch_locations(client, church_id):
        """Locations of one church; ``[]`` when unknown or unavailable."""
        if church_id in (None, ''):
            return []
        try:
            items = client.all(f'churches/{church_id}/locations', 'locations')
        except BackendError as exc:
            if exc.status_code != 404:
                logger.warning('Could not load locations of church %s: %s', church_id, exc)
                return []
            items = fetch_lookup(client, LookupSource(
                'church_locations', 'church-locations/all', 'church_locations',
                params={'church_id': church_id},
            ))
        # Entries without an id cannot be selected
        return [
            item for item in items
            if isinstance(item, dict) and item.get('id') not in (None, '')
        ]


def _parse_date(value):
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value)[:10], '%Y-%m-%d').date()
    except (TypeError, ValueError):
        return None


def _parse_time(value):
    if isinstance(value, time):
        return value
    parts = str(value or '').split(':')
    try:
        return time(int(parts[0]), int(parts[1]))
    except (IndexError, ValueError):
        return None


def format_time_12h(value):
    """``13:05`` -> ``1:05 pm``."""
    hour = value.hour % 12 or 12
    suffix = 'am' if value.hour < 12 else 'pm'
    return f'{hour}:{value.minute:02d} {suffix}'


def format_schedule(date_value, time_value, duration):
    """
    Display parts of an event's schedule.

    Returns ``day_of_week`` (``Sunday``), ``date`` in UK order
    (``09/06/2024``) and ``time_with_duration`` (``10:00 am (60min)``).
    Unparseable parts are returned as an empty string.
    """
    event_date = _parse_date(date_value)
    event_time = _parse_time(time_value)

    time_text = format_time_12h(event_time) if event_time else ''
    if time_text and duration not in (None, ''):
        time_text = f'{time_text} ({duration}min)'

    return {
        'day_of_week': event_date.strftime('%A') if event_date else '',
        'date': event_date.strftime('%d/%m/%Y') if event_date else '',
        'time_with_duration': time_text,
    }
