"""Access control: the admin session guard for views and the JSON API."""
from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect
from django.utils.http import urlencode
from django.utils.translation import gettext_lazy as _
from rest_framework import permissions

from .constants import SessionKeys


def get_session_admin(request):
    """Return the logged-in admin record stored at login, or None."""
    session = getattr(request, 'session', None)
    if session is None:
        return None
    admin = session.get(SessionKeys.ADMIN)
    return admin if isinstance(admin, dict) else None


def is_admin_session(request):
    return get_session_admin(request) is not None


def redirect_to_login(request):
    query = urlencode({'next': request.get_full_path()})
    return redirect(f'{settings.LOGIN_URL}?{query}')


def admin_required(view_func):
    """Redirect to the login page unless an admin is logged in."""

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not is_admin_session(request):
            messages.info(request, _('Please log in to continue.'))
            return redirect_to_login(request)
        return view_func(request, *args, **kwargs)

    return wrapper


class IsAdminSession(permissions.BasePermission):
    """Allows requests carrying a logged-in admin session."""
    message = _('You must be logged in as an administrator.')

    def has_permission(self, request, view):
        return is_admin_session(request)
