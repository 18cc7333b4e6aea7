"""
REST backend client.

Every record the dashboard shows lives behind the backend configured by
``BACKEND_BASE_URL``. This module is the only place that speaks HTTP to it:
it encodes requests (query parameters for reads, multipart bodies for writes),
decides whether a response succeeded, and turns every failure into a
``BackendError`` carrying a human-readable message.

Usage:
    client = get_client()
    records, pagination = client.list('events', page=2)
    client.create('events', {'name': 'Sunday Service', ...})
"""
import logging

import requests
from django.conf import settings
from django.utils.translation import gettext as _

from .constants import ApiStatus
from .pagination import Pagination

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """A backend call that did not succeed.

    ``kind`` separates transport failures (no response at all) from
    server-reported failures (a response with an error status or body).
    """

    TRANSPORT = 'transport'
    SERVER = 'server'

    def __init__(self, message, kind=SERVER, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.payload = payload

    def __str__(self):
        return str(self.message)


def extract_collection(payload, key):
    """
    Return the list of items held in a lookup/list response.

    Accepts ``{"status": "success", "data": {key: [...]}}``,
    ``{"data": [...]}`` or a bare list. Anything else yields ``[]``.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []

    data = payload.get('data')
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        items = data.get(key)
        if isinstance(items, list):
            return items
    return []


def extract_error_message(payload=None, exc=None, fallback=None):
    """
    Pick the message shown to the user for a failed call.

    Priority: body ``message``, body ``error``, transport error text, fallback.
    """
    if isinstance(payload, dict):
        for field in ('message', 'error'):
            value = payload.get(field)
            if value:
                return str(value)
    if exc is not None and str(exc):
        return str(exc)
    return fallback or _('Something went wrong. Please try again.')


def is_success(status_code, payload, strict=False):
    """
    Decide whether a response counts as a success.

    Non-2xx responses always fail. Inside 2xx the default policy accepts a body
    ``status`` of ``success`` or an HTTP 200/201; ``strict`` requires the body
    status, when present, to be ``success``.
    """
    if not 200 <= status_code < 300:
        return False

    body_status = payload.get('status') if isinstance(payload, dict) else None
    if strict:
        return body_status is None or body_status == ApiStatus.SUCCESS
    return body_status == ApiStatus.SUCCESS or status_code in (200, 201)


class BackendClient:
    """Client for the admin REST backend."""

    def __init__(self, base_url=None, timeout=None, strict_status=None, session=None):
        self.base_url = (base_url or settings.BACKEND_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.BACKEND_TIMEOUT
        if strict_status is None:
            strict_status = settings.BACKEND_STRICT_STATUS
        self.strict_status = strict_status
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})

    def url(self, path):
        return f'{self.base_url}/{path.lstrip("/")}'

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def request(self, method, path, fallback=None, **kwargs):
        """
        Issue one request and return the decoded JSON payload.

        Raises BackendError on transport failure, non-success status or an
        undecodable body.
        """
        url = self.url(path)
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error('Backend %s %s failed: %s', method, url, exc)
            raise BackendError(
                extract_error_message(exc=exc, fallback=fallback),
                kind=BackendError.TRANSPORT,
            ) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not is_success(response.status_code, payload, strict=self.strict_status):
            message = extract_error_message(payload, fallback=fallback)
            logger.warning(
                'Backend %s %s returned %s: %s', method, url, response.status_code, message,
            )
            raise BackendError(
                message,
                status_code=response.status_code,
                payload=payload,
            )

        if payload is None:
            logger.warning('Backend %s %s returned a non-JSON body', method, url)
            raise BackendError(
                fallback or _('The server returned an unexpected response.'),
                status_code=response.status_code,
            )

        body_status = payload.get('status') if isinstance(payload, dict) else None
        if body_status not in (None, ApiStatus.SUCCESS):
            logger.warning(
                'Backend %s %s answered HTTP %s with status %r',
                method, url, response.status_code, body_status,
            )

        return payload

    def get(self, path, params=None, fallback=None):
        return self.request('GET', path, params=params, fallback=fallback)

    def post_form(self, path, fields, fallback=None):
        """POST ``fields`` as a multipart form body."""
        files = {
            name: (None, '' if value is None else str(value))
            for name, value in fields.items()
        }
        return self.request('POST', path, files=files, fallback=fallback)

    # ------------------------------------------------------------------
    # Resource operations
    # ------------------------------------------------------------------

    def list(self, resource, page=1, per_page=None, sort_by=None, sort_order=None,
             key=None, fallback=None):
        """Fetch one page of ``resource``; returns ``(records, Pagination)``."""
        per_page = per_page or settings.ADMIN_PAGE_SIZE
        params = {'page': page, 'per_page': per_page}
        if sort_by:
            params['sort_by'] = sort_by
            if sort_order:
                params['sort_order'] = sort_order

        payload = self.get(resource, params=params, fallback=fallback)

        records = extract_collection(payload, key or resource.replace('-', '_'))
        data = payload.get('data') if isinstance(payload, dict) else None
        raw_pagination = data.get('pagination') if isinstance(data, dict) else None
        pagination = Pagination.from_payload(
            raw_pagination, count=len(records), page=page, per_page=per_page,
        )
        return records, pagination

    def all(self, path, key, params=None):
        """Fetch a full lookup list (``/event-types/all`` and friends)."""
        return extract_collection(self.get(path, params=params), key)

    def create(self, resource, payload, fallback=None):
        return self._record(self.post_form(f'{resource}/create', payload, fallback=fallback))

    def update(self, resource, record_id, payload, fallback=None):
        fields = {'id': record_id, **payload}
        return self._record(self.post_form(f'{resource}/edit', fields, fallback=fallback))

    def delete(self, resource, record_id, fallback=None):
        self.post_form(f'{resource}/delete', {'id': record_id}, fallback=fallback)
        return True

    def login(self, email, password, fallback=None):
        """Authenticate an admin; returns the ``data`` block of the response."""
        payload = self.request(
            'POST', 'admin/login',
            json={'email': email, 'password': password},
            fallback=fallback,
        )
        if not isinstance(payload, dict) or payload.get('status') != ApiStatus.SUCCESS:
            raise BackendError(
                extract_error_message(payload, fallback=fallback),
                payload=payload,
            )
        data = payload.get('data')
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _record(payload):
        data = payload.get('data') if isinstance(payload, dict) else None
        return data if isinstance(data, dict) else {}


def get_client():
    """Return a client configured from settings."""
    return BackendClient()
