"""Events API Views."""
from rest_framework import views
from rest_framework.response import Response

from apps.core.backend import get_client
from apps.core.lookups import filter_by_name
from apps.core.permissions import IsAdminSession

from .serializers import LocationCandidateSerializer, LocationQuerySerializer
from .services import EventReferenceData


class ChurchLocationsView(views.APIView):
    """
    Locations of one church for the event form's location selector.

    ``q`` narrows by name; ``seq`` is echoed back so the page can drop
    responses that arrive after a newer request was issued.
    """

    permission_classes = [IsAdminSession]

    def get(self, request, church_id):
        query = LocationQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        locations = EventReferenceData.fetch_locations(get_client(), church_id)
        locations = filter_by_name(locations, query.validated_data['q'])
        return Response({
            'seq': query.validated_data['seq'],
            'church_id': church_id,
            'results': LocationCandidateSerializer(locations, many=True).data,
        })
