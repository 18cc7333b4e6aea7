"""Generic list / create / edit / delete views for backend resources."""
import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect
from django.utils.http import urlencode
from django.utils.translation import gettext_lazy as _
from django.views.generic import TemplateView

from .backend import BackendError, get_client
from .constants import EMPTY_VALUE, SortOrder
from .flows import DeleteConfirmation
from .listing import ListController
from .lookups import is_flag_set
from .mixins import AdminRequiredMixin, PageTitleMixin

logger = logging.getLogger(__name__)


def int_param(params, name, default=1):
    try:
        return max(int(params.get(name, default)), 1)
    except (TypeError, ValueError):
        return default


def record_label(record):
    """Display name of a record: its name, full name, email or id."""
    full_name = ' '.join(
        str(part) for part in (record.get('first_name'), record.get('last_name')) if part
    )
    for value in (record.get('name'), full_name, record.get('email'), record.get('id')):
        if value not in (None, ''):
            return str(value)
    return ''


class ResourceViewMixin(AdminRequiredMixin, PageTitleMixin):
    """Common plumbing for views bound to one ``Resource``."""
    resource = None

    def get_client(self):
        if not hasattr(self, '_client'):
            self._client = get_client()
        return self._client

    @property
    def page(self):
        return int_param(self.request.GET, 'page')

    def list_url(self, page=None):
        url = self.resource.url('list')
        page = page or self.page
        if page > 1:
            url = f'{url}?{urlencode({"page": page})}'
        return url

    def find_record(self, pk):
        """
        Locate record ``pk`` on the list page it was picked from.

        The backend has no single-record endpoint, so the page given by the
        ``page`` query parameter is refetched.
        """
        controller = ListController(
            self.get_client(),
            self.resource.endpoint,
            page=self.page,
            key=self.resource.key,
        )
        controller.error_message = self.resource.fetch_error
        controller.load()
        if controller.is_error:
            raise BackendError(controller.error)
        record = controller.find(pk)
        if record is None:
            raise Http404(f'{self.resource.name} {pk} not found on page {self.page}')
        return record

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['resource'] = self.resource
        context['list_url'] = self.list_url()
        context['page'] = self.page
        return context


class ResourceListView(ResourceViewMixin, TemplateView):
    """Paginated table with a search box over the loaded page."""
    template_name = 'core/resource_list.html'

    def get_page_title(self):
        return self.resource.label_plural

    def get_controller(self):
        params = self.request.GET
        sort_order = params.get('sort_order')
        if sort_order not in (SortOrder.ASC, SortOrder.DESC):
            sort_order = self.resource.sort_order
        controller = ListController(
            self.get_client(),
            self.resource.endpoint,
            page=self.page,
            sort_by=params.get('sort_by') or self.resource.sort_by,
            sort_order=sort_order,
            search=params.get('q', '').strip(),
            search_fields=self.resource.search_fields,
            key=self.resource.key,
        )
        controller.error_message = self.resource.fetch_error
        return controller

    def get_row(self, record):
        cells = []
        for column in self.resource.columns:
            value = record.get(column.field)
            if column.flag:
                value = _('Yes') if is_flag_set(value) else _('No')
            cells.append(value if value not in (None, '') else EMPTY_VALUE)
        return {'record': record, 'cells': cells}

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        controller = self.get_controller().load()
        context.update({
            'controller': controller,
            'rows': [self.get_row(record) for record in controller.visible_records],
            'pagination': controller.pagination,
            'search': controller.search,
            'retry_url': self.request.get_full_path(),
        })
        return context


class ResourceFormView(ResourceViewMixin, TemplateView):
    """Add or edit one record. ``pk`` in the URL selects edit mode."""
    template_name = 'core/resource_form.html'

    @property
    def is_edit(self):
        return 'pk' in self.kwargs

    def get_page_title(self):
        if self.is_edit:
            return _('Edit %(label)s') % {'label': self.resource.label}
        return _('Add %(label)s') % {'label': self.resource.label}

    def get_form_kwargs(self, record=None, data=None):
        return {'data': data, 'record': record}

    def get_form(self, record=None, data=None):
        return self.resource.form_class(**self.get_form_kwargs(record=record, data=data))

    def dispatch(self, request, *args, **kwargs):
        if not self.is_edit and not self.resource.allow_create:
            raise Http404('Records of this kind cannot be created here')
        return super().dispatch(request, *args, **kwargs)

    def get(self, request, *args, **kwargs):
        record = None
        if self.is_edit:
            try:
                record = self.find_record(kwargs['pk'])
            except BackendError as exc:
                messages.error(request, str(exc))
                return redirect(self.list_url())
            except Http404:
                messages.error(request, _('That record is no longer available.'))
                return redirect(self.list_url())
        return self.render_to_response(self.get_context_data(form=self.get_form(record=record)))

    def post(self, request, *args, **kwargs):
        form = self.get_form(data=request.POST)
        if not form.is_valid():
            return self.render_to_response(self.get_context_data(form=form))

        client = self.get_client()
        try:
            if self.is_edit:
                client.update(
                    self.resource.endpoint, kwargs['pk'], form.to_payload(),
                    fallback=str(self.resource.update_error),
                )
            else:
                client.create(
                    self.resource.endpoint, form.to_payload(),
                    fallback=str(self.resource.create_error),
                )
        except BackendError as exc:
            form.add_error(None, str(exc))
            return self.render_to_response(self.get_context_data(form=form))

        if self.is_edit:
            logger.info('Updated %s %s', self.resource.name, kwargs['pk'])
            messages.success(request, self.resource.updated_message)
        else:
            logger.info('Created %s', self.resource.name)
            messages.success(request, self.resource.created_message)
        return redirect(self.list_url())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['is_edit'] = self.is_edit
        if self.is_edit:
            context['busy_label'] = _('Updating…')
            context['submit_label'] = _('Update')
        else:
            context['busy_label'] = _('Creating…')
            context['submit_label'] = _('Create')
        return context


class ResourceDeleteView(ResourceViewMixin, TemplateView):
    """Confirm page (GET) and delete action (POST) for one record."""
    template_name = 'core/resource_confirm_delete.html'

    def get_page_title(self):
        return _('Delete %(label)s') % {'label': self.resource.label}

    def get_flow(self):
        return DeleteConfirmation(self.request, self.resource.endpoint)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['record_label'] = record_label(context.get('record') or {})
        return context

    def get(self, request, *args, **kwargs):
        try:
            record = self.find_record(kwargs['pk'])
        except BackendError as exc:
            messages.error(request, str(exc))
            return redirect(self.list_url())
        except Http404:
            messages.error(request, _('That record is no longer available.'))
            return redirect(self.list_url())

        token = self.get_flow().begin(record.get('id', kwargs['pk']))
        return self.render_to_response(self.get_context_data(record=record, token=token))

    def post(self, request, *args, **kwargs):
        flow = self.get_flow()
        if 'cancel' in request.POST:
            flow.cancel()
            return redirect(self.list_url())

        token = request.POST.get('token', '')
        try:
            deleted = flow.confirm(
                self.get_client(), kwargs['pk'], token,
                fallback=str(self.resource.delete_error),
            )
        except BackendError as exc:
            context = self.get_context_data(
                record={'id': kwargs['pk'], 'name': request.POST.get('label', '')},
                token=token,
                error=str(exc),
            )
            return self.render_to_response(context)

        if deleted:
            logger.info('Deleted %s %s', self.resource.name, kwargs['pk'])
            messages.success(request, self.resource.deleted_message)
        return redirect(self.list_url())
