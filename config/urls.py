"""GoWorship Admin URL configuration with namespaced routing."""
from django.urls import path, include
from django.views.generic import RedirectView

from apps.accounts.urls import frontend_urlpatterns as accounts_frontend
from apps.events.urls import api_urlpatterns as events_api
from apps.events.urls import frontend_urlpatterns as events_frontend
from apps.churches.urls import frontend_urlpatterns as churches_frontend
from apps.library.urls import frontend_urlpatterns as library_frontend
from apps.users.urls import frontend_urlpatterns as users_frontend


api_patterns = [
    path('events/', include((events_api, 'events'))),
]


frontend_patterns = [
    path('events/', include((events_frontend, 'events'))),
    path('churches/', include((churches_frontend, 'churches'))),
    path('library/', include((library_frontend, 'library'))),
    path('users/', include((users_frontend, 'users'))),
]


urlpatterns = [
    path('', RedirectView.as_view(url='/dashboard/', permanent=False), name='home'),
    path('', include((accounts_frontend, 'accounts'))),
    path('api/', include((api_patterns, 'api'))),
    path('', include((frontend_patterns, 'frontend'))),
]
