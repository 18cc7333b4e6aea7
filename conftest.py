"""Fixtures shared by every app's tests."""
from unittest import mock

import pytest
from django.conf import settings as django_settings
from django.core.cache import cache

from apps.core.constants import SessionKeys
from apps.core.tests.factories import AdminPayloadFactory
from apps.core.tests.fakes import FakeBackend


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def backend(settings):
    """Every backend call made through ``requests`` lands on a ``FakeBackend``."""
    settings.BACKEND_BASE_URL = 'http://backend.test/api'
    fake = FakeBackend(settings.BACKEND_BASE_URL)
    with mock.patch('apps.core.backend.requests.Session.request', side_effect=fake) as patched:
        fake.mock = patched
        yield fake


def store_session(client, **values):
    """Write ``values`` into the test client's signed-cookie session."""
    session = client.session
    for key, value in values.items():
        session[key] = value
    session.save()
    # Signed-cookie sessions carry their data in the key itself
    client.cookies[django_settings.SESSION_COOKIE_NAME] = session.session_key
    return session


@pytest.fixture
def admin_record():
    return AdminPayloadFactory(email='admin@goworship.test')


@pytest.fixture
def admin_client(client, admin_record):
    store_session(client, **{SessionKeys.USER: admin_record, SessionKeys.ADMIN: admin_record})
    return client
