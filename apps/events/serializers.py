"""Event serializers — lookup candidates served to the event form."""
from rest_framework import serializers


class LocationCandidateSerializer(serializers.Serializer):
    """One church location offered by the location selector."""
    id = serializers.CharField()
    name = serializers.CharField(allow_blank=True, default='')


class LocationQuerySerializer(serializers.Serializer):
    """Query parameters of the church locations lookup."""
    q = serializers.CharField(required=False, allow_blank=True, default='')
    seq = serializers.IntegerField(required=False, min_value=0, default=0)
