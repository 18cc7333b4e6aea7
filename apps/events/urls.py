"""Events URLs."""
from django.urls import path

from apps.core.urls import resource_urlpatterns

from . import views_api
from .resources import EVENT_FREQUENCIES, EVENT_TYPES, EVENTS
from .views_frontend import EventFormView, EventListView

api_urlpatterns = [
    path(
        'churches/<str:church_id>/locations/',
        views_api.ChurchLocationsView.as_view(),
        name='church_locations',
    ),
]

frontend_urlpatterns = [
    *resource_urlpatterns(EVENT_TYPES, prefix='types/'),
    *resource_urlpatterns(EVENT_FREQUENCIES, prefix='frequencies/'),
    *resource_urlpatterns(EVENTS, list_view=EventListView, form_view=EventFormView),
]
