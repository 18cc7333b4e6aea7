"""URL pattern builders shared by the resource apps."""
from django.urls import path

from .views_frontend import ResourceDeleteView, ResourceFormView, ResourceListView


def resource_urlpatterns(resource, prefix='', list_view=ResourceListView,
                         form_view=ResourceFormView, delete_view=ResourceDeleteView):
    """
    List / create / edit / delete routes for ``resource``.

    Route names are ``<name>_list``, ``<name>_create``, ``<name>_update`` and
    ``<name>_delete``.
    """
    name = resource.name
    patterns = [
        path(f'{prefix}', list_view.as_view(resource=resource), name=f'{name}_list'),
        path(f'{prefix}<str:pk>/edit/', form_view.as_view(resource=resource), name=f'{name}_update'),
        path(f'{prefix}<str:pk>/delete/', delete_view.as_view(resource=resource), name=f'{name}_delete'),
    ]
    if resource.allow_create:
        patterns.append(
            path(f'{prefix}create/', form_view.as_view(resource=resource), name=f'{name}_create'),
        )
    return patterns
