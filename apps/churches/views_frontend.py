"""Churches frontend views."""
from apps.core.lookups import LookupSource, fetch_lookup
from apps.core.views_frontend import ResourceFormView

DENOMINATIONS = LookupSource('denominations', 'denominations/all', 'denominations')


class ChurchFormView(ResourceFormView):
    """Add/edit a church; the denomination selector is filled from the backend."""

    def get_form_kwargs(self, record=None, data=None):
        kwargs = super().get_form_kwargs(record=record, data=data)
        kwargs['denominations'] = fetch_lookup(self.get_client(), DENOMINATIONS)
        return kwargs
