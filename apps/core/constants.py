"""Centralized constants and choices for the application."""
from django.utils.translation import gettext_lazy as _


class ApiStatus:
    """Values of the ``status`` field in backend response envelopes."""
    SUCCESS = 'success'
    ERROR = 'error'


class ListState:
    """List controller states."""
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'


class DeleteState:
    """Delete confirmation states."""
    IDLE = 'idle'
    CONFIRMING = 'confirming'


class SortOrder:
    """Sort directions accepted by list endpoints."""
    ASC = 'asc'
    DESC = 'desc'


class SessionKeys:
    """Keys used in the Django session."""
    USER = 'user'
    ADMIN = 'admin'
    PENDING_DELETE = 'pending_delete'


class Duration:
    """Event duration bounds in minutes."""
    MIN = 15
    STEP = 15
    DEFAULT = 60


class Testament:
    """Bible testaments."""
    OLD = 'old'
    NEW = 'new'

    CHOICES = [
        (OLD, _('Old Testament')),
        (NEW, _('New Testament')),
    ]


# Backend flag values that count as "on" ('1', 'true', ...)
TRUTHY_FLAGS = {'1', 'true', 'yes', 'on'}

# Pages shown in full before the pager collapses into a window
PAGER_MAX_PAGES = 5

# Placeholder rendered for empty cells
EMPTY_VALUE = '-'
