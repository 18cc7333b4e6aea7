"""
List controller shared by every resource page.

A controller holds the page, page size, sort order and search term of one
list page and drives the fetch through a small state machine::

    loading -> ready          first fetch
    ready   -> loading        page change / refresh
    ready   -> error          fetch failed
    error   -> loading        retry

Each fetch is tagged with a sequence number. Only the result of the most
recent fetch is applied; a slower, superseded fetch is dropped.
"""
import itertools
import logging
import threading

from django.utils.translation import gettext_lazy as _

from .backend import BackendError
from .constants import ListState

logger = logging.getLogger(__name__)


def record_matches(record, term, fields):
    """Case-insensitive substring match of ``term`` over ``fields`` of ``record``."""
    if not term:
        return True
    for field in fields:
        value = record.get(field)
        if value and term in str(value).lower():
            return True
    return False


def filter_records(records, term, fields):
    """
    Keep the records matching ``term`` on any of ``fields``.

    Works on the page already fetched; it never changes page accounting.
    """
    term = (term or '').strip().lower()
    return [record for record in records if record_matches(record, term, fields)]


class ListController:
    """Paginated, searchable list of one backend resource."""

    error_message = _('Failed to fetch records. Please try again later.')

    def __init__(self, client, resource, page=1, per_page=None, sort_by=None,
                 sort_order=None, search='', search_fields=('name',), key=None):
        self.client = client
        self.resource = resource
        self.key = key
        self.page = max(page, 1)
        self.per_page = per_page
        self.sort_by = sort_by
        self.sort_order = sort_order
        self.search = search or ''
        self.search_fields = tuple(search_fields)

        self.state = ListState.LOADING
        self.records = []
        self.pagination = None
        self.error = None

        self._sequence = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def begin(self):
        """Enter ``loading`` and return the token of the new fetch."""
        with self._lock:
            self._latest = next(self._sequence)
            self.state = ListState.LOADING
            self.error = None
            return self._latest

    def is_current(self, token):
        return token == self._latest

    def resolve(self, token, records, pagination):
        """Apply a fetch result; returns False when ``token`` was superseded."""
        with self._lock:
            if not self.is_current(token):
                logger.debug('Dropping stale %s page (token %s)', self.resource, token)
                return False
            self.records = list(records)
            self.pagination = pagination
            self.page = pagination.current_page
            self.state = ListState.READY
            return True

    def fail(self, token, message):
        with self._lock:
            if not self.is_current(token):
                return False
            self.records = []
            self.pagination = None
            self.error = message
            self.state = ListState.ERROR
            return True

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def load(self):
        """Fetch the current page; failures land in ``error``, never raise."""
        token = self.begin()
        try:
            records, pagination = self.client.list(
                self.resource,
                page=self.page,
                per_page=self.per_page,
                sort_by=self.sort_by,
                sort_order=self.sort_order,
                key=self.key,
                fallback=str(self.error_message),
            )
        except BackendError as exc:
            logger.warning('Listing %s page %s failed: %s', self.resource, self.page, exc)
            self.fail(token, str(self.error_message))
        else:
            self.resolve(token, records, pagination)
        return self

    def go_to(self, page):
        if self.pagination is not None:
            page = min(page, self.pagination.total_pages)
        self.page = max(page, 1)
        return self.load()

    def refresh(self):
        return self.load()

    def retry(self):
        return self.load()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def visible_records(self):
        return filter_records(self.records, self.search, self.search_fields)

    @property
    def is_ready(self):
        return self.state == ListState.READY

    @property
    def is_error(self):
        return self.state == ListState.ERROR

    def find(self, record_id):
        """Return the record on the loaded page with ``record_id``."""
        record_id = str(record_id)
        for record in self.records:
            if str(record.get('id')) == record_id:
                return record
        return None

