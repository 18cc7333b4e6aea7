"""Two-step delete confirmation backed by the session and the cache."""
import logging
import secrets

from django.conf import settings
from django.core.cache import cache

from .backend import BackendError
from .constants import DeleteState, SessionKeys

logger = logging.getLogger(__name__)


class DeleteConfirmation:
    """
    Select -> confirm flow for deleting one backend record.

    ``begin`` targets a record and issues a one-time token (state becomes
    ``confirming``). ``confirm`` spends the token on exactly one delete call:
    further confirms carrying the same token, while the call is in flight or
    after it succeeded, do nothing. A failed call releases the token so the
    user can try again.
    """

    def __init__(self, request, resource):
        self.request = request
        self.resource = resource

    @property
    def pending(self):
        pending = self.request.session.get(SessionKeys.PENDING_DELETE)
        if pending and pending.get('resource') == self.resource:
            return pending
        return None

    @property
    def state(self):
        return DeleteState.CONFIRMING if self.pending else DeleteState.IDLE

    def begin(self, record_id):
        """Target ``record_id`` and return the confirmation token."""
        token = secrets.token_urlsafe(16)
        self.request.session[SessionKeys.PENDING_DELETE] = {
            'resource': self.resource,
            'id': str(record_id),
            'token': token,
        }
        return token

    def cancel(self):
        if self.pending:
            del self.request.session[SessionKeys.PENDING_DELETE]

    def _in_flight_key(self, token):
        return f'delete:{self.resource}:{token}'

    def confirm(self, client, record_id, token, fallback=None):
        """
        Issue the delete for ``record_id``.

        Returns True when the record was deleted, None when the confirm was a
        no-op (unknown, stale or already spent token). Raises BackendError
        when the backend refused the delete.
        """
        pending = self.pending
        if not pending or pending['id'] != str(record_id) or pending['token'] != token:
            logger.info('Ignoring delete confirm for %s %s: no matching token', self.resource, record_id)
            return None

        key = self._in_flight_key(token)
        if not cache.add(key, True, timeout=settings.DELETE_TOKEN_TTL):
            logger.info('Delete of %s %s already in flight', self.resource, record_id)
            return None

        try:
            client.delete(self.resource, record_id, fallback=fallback)
        except BackendError:
            cache.delete(key)
            raise

        self.cancel()
        return True
