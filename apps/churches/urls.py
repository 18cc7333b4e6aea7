"""Churches URLs."""
from apps.core.urls import resource_urlpatterns

from .resources import CHURCHES, DENOMINATIONS
from .views_frontend import ChurchFormView

frontend_urlpatterns = [
    *resource_urlpatterns(DENOMINATIONS, prefix='denominations/'),
    *resource_urlpatterns(CHURCHES, form_view=ChurchFormView),
]
