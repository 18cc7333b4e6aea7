"""
Registry of the backend resources managed by the dashboard.

Each app declares its resources in ``resources.py``; the generic views in
``views_frontend`` and the sidebar read everything they need from here.
"""
from django.urls import reverse
from django.utils.text import format_lazy
from django.utils.translation import gettext_lazy as _


class Column:
    """One column of a resource table."""

    def __init__(self, field, label, flag=False):
        self.field = field
        self.label = label
        self.flag = flag


class Resource:
    """A backend resource: its endpoint, wire key, labels, table and form."""

    def __init__(self, name, endpoint, key, label, label_plural, namespace,
                 form_class=None, columns=(), search_fields=('name',),
                 allow_create=True, sort_by=None, sort_order=None, order=100):
        self.name = name
        self.endpoint = endpoint
        self.key = key
        self.label = label
        self.label_plural = label_plural
        self.namespace = namespace
        self.form_class = form_class
        self.columns = tuple(columns) or (Column('name', _('Name')),)
        self.search_fields = tuple(search_fields)
        self.allow_create = allow_create
        self.sort_by = sort_by
        self.sort_order = sort_order
        self.order = order

    def __repr__(self):
        return f'Resource({self.name!r})'

    def url_name(self, action):
        return f'{self.namespace}:{self.name}_{action}'

    def url(self, action, **kwargs):
        return reverse(self.url_name(action), kwargs=kwargs or None)

    # User-visible messages
    @property
    def fetch_error(self):
        return format_lazy(_('Failed to fetch {}. Please try again later.'), self.label_plural.lower())

    @property
    def create_error(self):
        return format_lazy(_('Failed to create {}. Please try again.'), self.label.lower())

    @property
    def update_error(self):
        return format_lazy(_('Failed to update {}. Please try again.'), self.label.lower())

    @property
    def delete_error(self):
        return format_lazy(_('Failed to delete {}. Please try again later.'), self.label.lower())

    @property
    def created_message(self):
        return format_lazy(_('{} created.'), self.label)

    @property
    def updated_message(self):
        return format_lazy(_('{} updated.'), self.label)

    @property
    def deleted_message(self):
        return format_lazy(_('{} deleted.'), self.label)


_registry = {}


def register(resource):
    _registry[resource.name] = resource
    return resource


def get_resource(name):
    return _registry[name]


def all_resources():
    return sorted(_registry.values(), key=lambda resource: resource.order)
