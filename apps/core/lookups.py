"""
Reference-data loading for form selectors.

Lookup lists (event types, churches, denominations...) are fetched from the
backend's ``/<resource>/all`` endpoints. A lookup that cannot be fetched
degrades to an empty list: a selector with no options is shown instead of an
error page.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from .backend import BackendError
from .constants import TRUTHY_FLAGS

logger = logging.getLogger(__name__)


class LookupSource:
    """Where one lookup list lives on the backend."""

    def __init__(self, name, path, key, params=None):
        self.name = name
        self.path = path
        self.key = key
        self.params = params

    def __repr__(self):
        return f'LookupSource({self.name!r}, {self.path!r})'


def fetch_lookup(client, source):
    """Fetch one lookup list; never raises."""
    try:
        items = client.all(source.path, source.key, params=source.params)
    except BackendError as exc:
        logger.warning('Could not load %s: %s', source.name, exc)
        return []
    return [item for item in items if isinstance(item, dict)]


def fetch_lookups(client, sources):
    """
    Fetch several lookup lists concurrently.

    Returns ``{source.name: [items]}``. Each list is fetched independently, so
    one failing endpoint leaves the others intact.
    """
    sources = list(sources)
    if not sources:
        return {}

    with ThreadPoolExecutor(max_workers=len(sources)) as executor:
        futures = {
            source.name: executor.submit(fetch_lookup, client, source)
            for source in sources
        }
        return {name: future.result() for name, future in futures.items()}


def find_by_id(items, item_id):
    """Return the item whose id matches ``item_id`` (compared as strings)."""
    if item_id in (None, ''):
        return None
    item_id = str(item_id)
    for item in items:
        if str(item.get('id')) == item_id:
            return item
    return None


def filter_by_name(items, term):
    """Case-insensitive substring match on ``name``."""
    term = (term or '').strip().lower()
    if not term:
        return list(items)
    return [item for item in items if term in str(item.get('name') or '').lower()]


def is_flag_set(value):
    """Backend boolean flags arrive as '1'/'0' strings (or real booleans)."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_FLAGS
