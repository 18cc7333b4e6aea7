"""Form widgets."""
from django import forms


class LookupSearchWidget(forms.Widget):
    """
    Type-to-filter selector for a lookup entity.

    Renders a visible text input holding the selected entity's name and a
    hidden input holding its id. The candidates are embedded in the page and
    filtered locally while the widget's own container has focus; clearing
    the text clears the id.

    ``candidates`` defaults to ``entities``; set it when the list offered for
    picking is narrower than the list a submitted id may resolve against.

    With ``source_url`` the candidates are refetched whenever the field
    named by ``depends_on`` changes, its value replacing ``__value__`` in
    the URL. A change of that field also clears this one.
    """

    template_name = 'core/widgets/lookup_search.html'

    def __init__(self, source_url=None, depends_on=None, placeholder='', attrs=None):
        super().__init__(attrs)
        self.source_url = source_url
        self.depends_on = depends_on
        self.placeholder = placeholder
        self.entities = []
        self.candidates = None

    def find(self, value):
        if value in (None, ''):
            return None
        return next(
            (item for item in self.entities if str(item.get('id')) == str(value)),
            None,
        )

    def get_candidates(self):
        items = self.entities if self.candidates is None else self.candidates
        return [{'id': item.get('id'), 'name': item.get('name', '')} for item in items]

    def get_context(self, name, value, attrs):
        context = super().get_context(name, value, attrs)
        selected = value if isinstance(value, dict) else self.find(value)
        context['widget'].update({
            'source_url': str(self.source_url or ''),
            'depends_on': self.depends_on or '',
            'placeholder': self.placeholder,
            'candidates': self.get_candidates(),
            'candidates_id': f'{context["widget"]["attrs"].get("id", name)}_candidates',
            'selected_id': selected.get('id', '') if selected else '',
            'selected_name': selected.get('name', '') if selected else '',
        })
        return context

    def value_from_datadict(self, data, files, name):
        return data.get(name)
