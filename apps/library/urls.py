"""Library URLs."""
from apps.core.urls import resource_urlpatterns

from .resources import BIBLES, BOOKS

frontend_urlpatterns = [
    *resource_urlpatterns(BOOKS, prefix='books/'),
    *resource_urlpatterns(BIBLES, prefix='bibles/'),
]
