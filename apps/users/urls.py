"""Users URLs."""
from apps.core.urls import resource_urlpatterns

from .resources import USERS

frontend_urlpatterns = resource_urlpatterns(USERS)
