"""Shared form building blocks: lookup fields and the resource form base."""
from datetime import time

from django import forms
from django.utils.translation import gettext_lazy as _

from .lookups import find_by_id, is_flag_set
from .mixins import AdminFormMixin
from .widgets import LookupSearchWidget


class LookupChoiceField(forms.Field):
    """
    Selection of one lookup entity (event type, church...).

    The submitted value is an id; ``clean`` returns the full entity dict so
    its name stays available for display. With ``clear_unknown`` an id that
    is not among ``entities`` cleans to None instead of failing.
    """
    widget = LookupSearchWidget
    default_error_messages = {
        'invalid_choice': _('Select a valid choice.'),
    }

    def __init__(self, entities=(), clear_unknown=False, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)
        self.clear_unknown = clear_unknown
        self.entities = entities

    @property
    def entities(self):
        return self._entities

    @entities.setter
    def entities(self, value):
        self._entities = list(value)
        self.widget.entities = self._entities

    def __deepcopy__(self, memo):
        result = super().__deepcopy__(memo)
        result.entities = self._entities
        return result

    def to_python(self, value):
        if isinstance(value, dict):
            return value
        if value in self.empty_values:
            return None
        entity = find_by_id(self._entities, value)
        if entity is None and not self.clear_unknown:
            raise forms.ValidationError(self.error_messages['invalid_choice'], code='invalid_choice')
        return entity

    def prepare_value(self, value):
        if isinstance(value, dict):
            return value.get('id')
        return value


class FlagField(forms.BooleanField):
    """Checkbox for a backend '1'/'0' flag."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(**kwargs)

    def prepare_value(self, value):
        return is_flag_set(value) if value not in (None, '') else value


class ResourceForm(AdminFormMixin, forms.Form):
    """
    Base form for one backend record.

    ``required_checks`` lists ``(field, message)`` pairs checked in order by
    ``clean``; the first empty field stops validation with its message.
    ``payload_names`` maps form fields to wire names when they differ;
    fields listed in ``payload_excluded`` are never sent.
    """
    required_checks = ()
    payload_names = {}
    payload_excluded = ()

    def __init__(self, *args, record=None, **kwargs):
        self.record = record
        if record is not None and 'initial' not in kwargs:
            kwargs['initial'] = self.initial_from_record(record)
        super().__init__(*args, **kwargs)

    def initial_from_record(self, record):
        initial = {}
        for name in self.base_fields:
            wire_name = self.payload_names.get(name, name)
            if wire_name in record:
                initial[name] = record[wire_name]
        return initial

    def clean(self):
        cleaned_data = super().clean()
        for name, message in self.required_checks:
            value = cleaned_data.get(name)
            if isinstance(value, str):
                value = value.strip()
            if value in (None, '', [], {}):
                raise forms.ValidationError(message, code='required')
        return cleaned_data

    def payload_value(self, value):
        if isinstance(value, dict):
            return value.get('id')
        if isinstance(value, bool):
            return '1' if value else '0'
        if value is None:
            return ''
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, time):
            return value.strftime('%H:%M')
        if hasattr(value, 'isoformat'):
            return value.isoformat()
        return value

    def to_payload(self):
        """Translate cleaned data into the body expected by create/edit."""
        return {
            self.payload_names.get(name, name): self.payload_value(value)
            for name, value in self.cleaned_data.items()
            if name not in self.payload_excluded
        }
