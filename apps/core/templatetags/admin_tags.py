"""Template tags for resource tables, pagers and forms."""
from django import template
from django.utils.http import urlencode

from apps.core.constants import EMPTY_VALUE

register = template.Library()


@register.filter(name='add_class')
def add_class(field, css_class):
    """Add CSS class to a form field widget."""
    if hasattr(field, 'as_widget'):
        return field.as_widget(attrs={'class': css_class})
    return field


@register.filter(name='or_dash')
def or_dash(value):
    """Render empty values as a dash."""
    if value in (None, ''):
        return EMPTY_VALUE
    return value


@register.simple_tag(takes_context=True)
def page_url(context, page):
    """
    Query string for ``page`` keeping the other list parameters.

    Usage:
        <a href="{% page_url 3 %}">3</a>
    """
    request = context.get('request')
    params = request.GET.copy() if request else {}
    params['page'] = page
    if request is None:
        return f'?{urlencode(params)}'
    return f'?{params.urlencode()}'


@register.simple_tag(takes_context=True)
def record_url(context, record, action):
    """URL of ``action`` (update/delete) for ``record`` on the current page."""
    resource = context['resource']
    url = resource.url(action, pk=record.get('id'))
    page = context.get('page') or 1
    if page > 1:
        url = f'{url}?{urlencode({"page": page})}'
    return url


@register.filter(name='resource_url')
def resource_url(resource, action):
    """URL of a record-less ``action`` (list/create) of ``resource``."""
    return resource.url(action)
