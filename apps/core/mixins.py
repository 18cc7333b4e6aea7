"""
Core mixins - View and form mixins for GoWorship Admin.

This module provides mixins for Django views and forms that handle
the admin session, page context and form error reporting.
"""
from django.contrib import messages
from django.utils.translation import gettext_lazy as _

from .permissions import is_admin_session, redirect_to_login


# =============================================================================
# PERMISSION MIXINS
# =============================================================================

class AdminRequiredMixin:
    """
    Mixin that requires an admin to be logged in.
    """

    def dispatch(self, request, *args, **kwargs):
        if not is_admin_session(request):
            return self.handle_no_permission()
        return super().dispatch(request, *args, **kwargs)

    def handle_no_permission(self):
        messages.info(self.request, _('Please log in to continue.'))
        return redirect_to_login(self.request)


# =============================================================================
# CONTEXT MIXINS
# =============================================================================

class PageTitleMixin:
    """
    Mixin that adds page title to context.

    Set page_title attribute on the view or override get_page_title().
    """
    page_title = None

    def get_page_title(self):
        """Return the page title."""
        return self.page_title

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['page_title'] = self.get_page_title()
        return context


# =============================================================================
# FORM MIXINS
# =============================================================================

class AdminFormMixin:
    """
    Form mixin that styles widgets and reports one error at a time.

    ``error_message`` is the message shown above the form: the form-level
    error if any, otherwise the first field error in field order.
    """
    input_css_class = 'form-control'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            css = field.widget.attrs.get('class', '')
            if self.input_css_class not in css.split():
                field.widget.attrs['class'] = f'{css} {self.input_css_class}'.strip()

    @property
    def error_message(self):
        if not self.is_bound or not self.errors:
            return ''
        non_field = self.non_field_errors()
        if non_field:
            return non_field[0]
        for name in self.fields:
            if name in self.errors:
                return self.errors[name][0]
        return ''
