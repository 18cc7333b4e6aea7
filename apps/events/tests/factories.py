"""Event payload factories."""
import factory


class EventPayloadFactory(factory.DictFactory):
    """An event record as the backend lists it."""
    id = factory.Sequence(lambda n: str(n + 1))
    name = factory.Sequence(lambda n: f'Event {n}')
    type_id = '1'
    type_name = 'Worship'
    date = '2024-06-09'
    time = '10:00:00'
    duration = '60'
    church_id = '1'
    church_name = 'Grace Church'
    location_id = None
    location_name = None
    frequency_id = '1'
    frequency_name = 'Weekly'
    notes = ''
