"""Tests for the shared form building blocks."""
from datetime import date, time

import pytest
from django import forms

from apps.core.forms import FlagField, LookupChoiceField, ResourceForm
from apps.core.widgets import LookupSearchWidget

CHURCHES = [{'id': '1', 'name': 'Grace Church'}, {'id': '2', 'name': 'Hope Chapel'}]


class SampleForm(ResourceForm):
    name = forms.CharField(required=False)
    church = LookupChoiceField()
    day = forms.DateField(required=False)
    start = forms.TimeField(required=False)
    visible = FlagField()
    internal = forms.CharField(required=False)

    required_checks = (
        ('name', 'Name is required'),
        ('church', 'Please select a church'),
    )
    payload_names = {'church': 'church_id'}
    payload_excluded = ('internal',)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['church'].entities = CHURCHES


class TestLookupChoiceField:

    def test_resolves_entity(self):
        field = LookupChoiceField(entities=CHURCHES)
        assert field.clean('2') == {'id': '2', 'name': 'Hope Chapel'}

    def test_empty_is_none(self):
        assert LookupChoiceField(entities=CHURCHES).clean('') is None

    def test_unknown_id_is_invalid(self):
        field = LookupChoiceField(entities=CHURCHES)
        with pytest.raises(forms.ValidationError) as excinfo:
            field.clean('99')
        assert excinfo.value.code == 'invalid_choice'

    def test_clear_unknown(self):
        assert LookupChoiceField(entities=CHURCHES, clear_unknown=True).clean('99') is None

    def test_entities_are_per_form(self):
        first = SampleForm()
        first.fields['church'].entities = []
        assert SampleForm().fields['church'].entities == CHURCHES


class TestLookupSearchWidget:

    def test_context_shows_selected_name(self):
        widget = LookupSearchWidget(placeholder='Pick one')
        widget.entities = CHURCHES
        context = widget.get_context('church', '2', {'id': 'id_church'})['widget']

        assert context['selected_id'] == '2'
        assert context['selected_name'] == 'Hope Chapel'
        assert context['candidates'] == CHURCHES
        assert context['candidates_id'] == 'id_church_candidates'

    def test_candidates_can_be_narrower_than_entities(self):
        widget = LookupSearchWidget()
        widget.entities = CHURCHES
        widget.candidates = CHURCHES[:1]
        context = widget.get_context('church', '2', {'id': 'id_church'})['widget']

        assert context['candidates'] == CHURCHES[:1]
        assert context['selected_name'] == 'Hope Chapel'

    def test_render(self):
        widget = LookupSearchWidget(source_url='/api/x/__value__/', depends_on='church')
        widget.entities = CHURCHES
        html = widget.render('location', '1', attrs={'id': 'id_location'})

        assert 'data-depends-on="church"' in html
        assert 'value="Grace Church"' in html
        assert 'id="id_location_candidates"' in html


class TestResourceForm:

    def test_first_missing_required_field_wins(self):
        form = SampleForm(data={'name': '  ', 'church': ''})
        assert not form.is_valid()
        assert form.error_message == 'Name is required'

    def test_next_check_after_name(self):
        form = SampleForm(data={'name': 'Main', 'church': ''})
        assert not form.is_valid()
        assert form.error_message == 'Please select a church'

    def test_validation_is_idempotent(self):
        data = {'name': 'Main', 'church': ''}
        messages = {SampleForm(data=data).error_message for _ in range(3)}
        assert messages == {'Please select a church'}

    def test_payload(self):
        form = SampleForm(data={
            'name': ' Main ', 'church': '1', 'day': '2024-06-09', 'start': '10:00',
            'visible': 'on', 'internal': 'x',
        })
        assert form.is_valid(), form.errors
        assert form.to_payload() == {
            'name': 'Main',
            'church_id': '1',
            'day': '2024-06-09',
            'start': '10:00',
            'visible': '1',
        }

    def test_payload_values(self):
        form = SampleForm()
        assert form.payload_value(time(9, 5)) == '09:05'
        assert form.payload_value(date(2024, 6, 9)) == '2024-06-09'
        assert form.payload_value(False) == '0'
        assert form.payload_value(None) == ''
        assert form.payload_value(60) == 60

    def test_initial_from_record(self):
        form = SampleForm(record={'id': '4', 'name': 'Main', 'church_id': '2', 'visible': '0'})
        assert form.initial == {'name': 'Main', 'church': '2', 'visible': '0'}

    def test_inputs_get_form_control_class(self):
        assert 'form-control' in SampleForm().fields['name'].widget.attrs['class']
