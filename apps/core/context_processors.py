"""Context processors for the sidebar and the logged-in admin."""
from django.conf import settings
from django.urls import NoReverseMatch

from .permissions import get_session_admin
from .resources import all_resources


def admin_session(request):
    """Expose the logged-in admin record (sidebar email, logout button)."""
    return {
        'session_admin': get_session_admin(request),
        'site_name': settings.ADMIN_SITE_NAME,
    }


def navigation(request):
    """Sidebar links, one per registered resource."""
    if get_session_admin(request) is None:
        return {'nav_items': []}

    items = []
    for resource in all_resources():
        try:
            url = resource.url('list')
        except NoReverseMatch:
            continue
        items.append({'label': resource.label_plural, 'url': url, 'active': False})

    # The longest matching prefix wins: /events/ must not light up on /events/types/
    matches = [item for item in items if request.path.startswith(item['url'])]
    if matches:
        max(matches, key=lambda item: len(item['url']))['active'] = True
    return {'nav_items': items}
