"""Login, logout and the dashboard landing page."""
import logging
from concurrent.futures import ThreadPoolExecutor

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_POST

from apps.core.backend import BackendError, get_client
from apps.core.constants import EMPTY_VALUE, SessionKeys
from apps.core.permissions import admin_required, is_admin_session
from apps.core.resources import all_resources

from .forms import LoginForm

logger = logging.getLogger(__name__)


def _safe_next(request):
    next_url = request.POST.get('next') or request.GET.get('next') or ''
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure(),
    ):
        return next_url
    return settings.LOGIN_REDIRECT_URL


def login_view(request):
    """Admin sign-in against the backend's ``admin/login`` endpoint."""
    if is_admin_session(request):
        return redirect(settings.LOGIN_REDIRECT_URL)

    error = ''
    if request.method == 'POST':
        form = LoginForm(request.POST)
        if form.is_valid():
            try:
                data = get_client().login(
                    form.cleaned_data['email'],
                    form.cleaned_data['password'],
                    fallback=str(_('Invalid email or password')),
                )
            except BackendError as exc:
                if exc.kind == BackendError.TRANSPORT:
                    error = _('An error occurred. Please try again.')
                else:
                    error = str(exc)
            else:
                user = data.get('user') if isinstance(data.get('user'), dict) else {}
                # Fresh session key on privilege change
                request.session.cycle_key()
                request.session[SessionKeys.USER] = user
                request.session[SessionKeys.ADMIN] = user
                logger.info('Admin %s logged in', user.get('email', form.cleaned_data['email']))
                return redirect(_safe_next(request))
        else:
            error = form.error_message
    else:
        form = LoginForm()

    context = {
        'form': form,
        'error': error,
        'next': request.GET.get('next', ''),
        'page_title': _('Sign in'),
    }
    return render(request, 'accounts/login.html', context)


@require_POST
def logout_view(request):
    request.session.flush()
    messages.info(request, _('You have been logged out.'))
    return redirect(settings.LOGIN_URL)


def _resource_total(client, resource):
    try:
        _records, pagination = client.list(resource.endpoint, page=1, per_page=1, key=resource.key)
    except BackendError as exc:
        logger.warning('Could not count %s: %s', resource.endpoint, exc)
        return EMPTY_VALUE
    return pagination.total


@admin_required
def dashboard(request):
    """Landing page: one card per managed resource with its record total."""
    client = get_client()
    resources = all_resources()
    with ThreadPoolExecutor(max_workers=max(len(resources), 1)) as executor:
        totals = list(executor.map(lambda resource: _resource_total(client, resource), resources))

    cards = [
        {'label': resource.label_plural, 'url': resource.url('list'), 'total': total}
        for resource, total in zip(resources, totals)
    ]

    context = {
        'cards': cards,
        'page_title': _('Dashboard'),
    }
    return render(request, 'accounts/dashboard.html', context)
