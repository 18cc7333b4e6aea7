"""Events frontend views."""
import logging

from django.http import Http404

from apps.core.backend import BackendError
from apps.core.views_frontend import ResourceFormView, ResourceListView

from .services import EventReferenceData, format_schedule

logger = logging.getLogger(__name__)


class EventListView(ResourceListView):
    """Events table: schedule spelled out, church with its location underneath."""
    template_name = 'events/event_list.html'

    def get_row(self, record):
        row = super().get_row(record)
        row['schedule'] = format_schedule(
            record.get('date'), record.get('time'), record.get('duration'),
        )
        return row


class EventFormView(ResourceFormView):
    """
    Add/edit an event.

    Types, frequencies and churches are loaded together once per request.
    Locations follow the church: the submitted one on POST, the record's
    on GET.
    """
    template_name = 'events/event_form.html'

    def get_reference(self):
        if not hasattr(self, '_reference'):
            self._reference = EventReferenceData.load(self.get_client())
        return self._reference

    def get_current_frequency(self, record):
        """Frequency id the stored event uses; looked up again on an edit POST."""
        if record is not None:
            return record.get('frequency_id')
        if not self.is_edit:
            return None
        try:
            return self.find_record(self.kwargs['pk']).get('frequency_id')
        except (BackendError, Http404) as exc:
            logger.warning('Could not reload event %s: %s', self.kwargs['pk'], exc)
            return None

    def get_form_kwargs(self, record=None, data=None):
        kwargs = super().get_form_kwargs(record=record, data=data)
        if data is not None:
            church_id = data.get('church')
        elif record is not None:
            church_id = record.get('church_id')
        else:
            church_id = None
        kwargs['reference'] = self.get_reference()
        kwargs['locations'] = EventReferenceData.fetch_locations(self.get_client(), church_id)
        kwargs['current_frequency'] = self.get_current_frequency(record)
        return kwargs
