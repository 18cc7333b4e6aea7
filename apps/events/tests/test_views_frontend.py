"""Tests for the event pages."""
import pytest

from apps.core.tests.factories import ChurchPayloadFactory, EventTypePayloadFactory, FrequencyPayloadFactory
from apps.core.tests.fakes import list_payload, success
from apps.events.tests.factories import EventPayloadFactory


@pytest.fixture
def reference(backend):
    types = [EventTypePayloadFactory(id='1', name='Worship')]
    frequencies = [
        FrequencyPayloadFactory(id='1', name='Weekly'),
        FrequencyPayloadFactory(id='2', name='Legacy', showme='0'),
    ]
    churches = [ChurchPayloadFactory(id='1', name='Grace Church'), ChurchPayloadFactory(id='2', name='Hope Chapel')]
    backend.on('GET', 'event-types/all', success({'event_types': types}))
    backend.on('GET', 'event-frequencies/all', success({'frequencies': frequencies}))
    backend.on('GET', 'churches/all', success({'churches': churches}))
    backend.on('GET', 'churches/1/locations', success({'locations': [{'id': '5', 'name': 'Main Hall'}]}))
    return backend


class TestEventList:

    def test_unauthenticated_redirects_to_login(self, client, backend):
        response = client.get('/events/')
        assert response.status_code == 302
        assert response.url == '/login/?next=%2Fevents%2F'

    def test_schedule_and_names(self, admin_client, backend):
        event = EventPayloadFactory(
            name='Sunday Service', location_name='Main Hall', notes='', frequency_name='Weekly',
        )
        backend.on('GET', 'events', list_payload('events', [event]))
        response = admin_client.get('/events/')

        content = response.content.decode()
        assert response.context['rows'][0]['schedule'] == {
            'day_of_week': 'Sunday',
            'date': '09/06/2024',
            'time_with_duration': '10:00 am (60min)',
        }
        assert 'Sunday Service' in content
        assert 'Main Hall' in content
        assert 'Weekly' in content

    def test_search_over_type_and_church(self, admin_client, backend):
        events = [
            EventPayloadFactory(name='Morning', type_name='Prayer', church_name='Grace Church'),
            EventPayloadFactory(name='Evening', type_name='Worship', church_name='Hope Chapel'),
        ]
        backend.on('GET', 'events', list_payload('events', events))

        response = admin_client.get('/events/', {'q': 'hope'})
        assert [row['record']['name'] for row in response.context['rows']] == ['Evening']

        response = admin_client.get('/events/', {'q': 'prayer'})
        assert [row['record']['name'] for row in response.context['rows']] == ['Morning']


class TestEventCreate:

    def test_form_loads_reference_data_once(self, admin_client, reference):
        response = admin_client.get('/events/create/')

        assert response.status_code == 200
        for path in ('event-types/all', 'event-frequencies/all', 'churches/all'):
            assert len(reference.calls_to('GET', path)) == 1
        content = response.content.decode()
        assert 'Grace Church' in content
        assert 'Legacy' not in content

    def test_round_trip(self, admin_client, reference):
        created = {}

        def create(call):
            created.update(call.form)
            return success({'id': '10'})

        def listing(call):
            records = []
            if created:
                records.append(EventPayloadFactory(
                    id='10', name=created['name'], date=created['date'], time=created['time'],
                    duration=created['duration'], notes=created['notes'],
                ))
            return list_payload('events', records)

        reference.on('POST', 'events/create', create)
        reference.on('GET', 'events', listing)

        response = admin_client.post('/events/create/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '1', 'location': '', 'frequency': '1', 'notes': '',
        }, follow=True)

        assert created == {
            'name': 'Sunday Service', 'type_id': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church_id': '1', 'frequency_id': '1', 'notes': '',
        }
        row = response.context['rows'][0]
        assert row['record']['name'] == 'Sunday Service'
        assert row['schedule'] == {
            'day_of_week': 'Sunday',
            'date': '09/06/2024',
            'time_with_duration': '10:00 am (60min)',
        }
        assert 'Event created.' in response.content.decode()

    def test_validation_error_sends_nothing(self, admin_client, reference):
        response = admin_client.post('/events/create/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '', 'frequency': '1',
        })

        assert response.status_code == 200
        assert 'Please select a church' in response.content.decode()
        assert reference.calls_to('POST', 'events/create') == []

    def test_backend_failure_keeps_draft(self, admin_client, reference):
        reference.on('POST', 'events/create', {'status': 'error'}, status=500)
        response = admin_client.post('/events/create/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '1', 'location': '5', 'frequency': '1',
        })

        content = response.content.decode()
        assert 'Failed to create event. Please try again.' in content
        assert 'value="Sunday Service"' in content
        assert 'value="Main Hall"' in content

    def test_location_from_other_church_is_dropped(self, admin_client, reference):
        reference.on('POST', 'events/create', success({'id': '10'}))
        reference.on('GET', 'churches/2/locations', success({'locations': [{'id': '8', 'name': 'Annex'}]}))
        admin_client.post('/events/create/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '2', 'location': '5', 'frequency': '1',
        })

        form = reference.calls_to('POST', 'events/create')[0].form
        assert form['church_id'] == '2'
        assert 'location_id' not in form


class TestEventUpdate:

    def test_prefilled_with_hidden_frequency(self, admin_client, reference):
        event = EventPayloadFactory(id='9', frequency_id='2', location_id='5', church_id='1')
        reference.on('GET', 'events', list_payload('events', [event]))
        response = admin_client.get('/events/9/edit/')

        form = response.context['form']
        assert form.initial['frequency'] == '2'
        assert 'Legacy' in str(form['frequency'])
        assert 'Main Hall' in str(form['location'])

    def test_update_keeps_hidden_frequency(self, admin_client, reference):
        event = EventPayloadFactory(id='9', frequency_id='2', church_id='1')
        reference.on('GET', 'events', list_payload('events', [event]))
        reference.on('POST', 'events/edit', success())
        response = admin_client.post('/events/9/edit/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '1', 'frequency': '2',
        })

        assert response.status_code == 302
        form = reference.calls_to('POST', 'events/edit')[0].form
        assert form['id'] == '9'
        assert form['frequency_id'] == '2'

    def test_update_rejects_other_hidden_frequency(self, admin_client, reference):
        event = EventPayloadFactory(id='9', frequency_id='1', church_id='1')
        reference.on('GET', 'events', list_payload('events', [event]))
        response = admin_client.post('/events/9/edit/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '1', 'frequency': '2', 'initial_frequency': '2',
        })

        assert response.status_code == 200
        assert 'Please select an event frequency' in response.content.decode()
        assert reference.calls_to('POST', 'events/edit') == []

    def test_create_rejects_hidden_frequency(self, admin_client, reference):
        response = admin_client.post('/events/create/', {
            'name': 'Sunday Service', 'event_type': '1', 'date': '2024-06-09', 'time': '10:00',
            'duration': '60', 'church': '1', 'frequency': '2', 'initial_frequency': '2',
        })

        assert response.status_code == 200
        assert reference.calls_to('POST', 'events/create') == []
        assert reference.calls_to('GET', 'events') == []
