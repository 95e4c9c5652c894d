from typing import Dict, Optional, Type

from django.db.models import QuerySet

from ts.apps.common.singleton import Singleton
from ts.apps.trips.enums import ResourceKind
from ts.apps.trips.models import ShareableModel, Trip
from ts.exceptions import InvalidResourceKindError, NotFoundError

from .models import CarRental, Event, Flight, Hotel, Transportation


class ResourceLocator( Singleton ):
    """
    Maps resource kinds to their models and loads the creator/parent-trip
    facts the sharing core needs.
    """

    def __init_singleton__(self):
        self._model_map = {
            ResourceKind.TRIP: Trip,
            ResourceKind.FLIGHT: Flight,
            ResourceKind.HOTEL: Hotel,
            ResourceKind.EVENT: Event,
            ResourceKind.TRANSPORTATION: Transportation,
            ResourceKind.CAR_RENTAL: CarRental,
        }
        return

    def coerce_kind( self, resource_kind ) -> ResourceKind:
        try:
            return ResourceKind.coerce( resource_kind )
        except ValueError:
            raise InvalidResourceKindError( f'Unknown resource kind "{resource_kind}"' )

    def model_for( self, resource_kind ) -> Type[ ShareableModel ]:
        return self._model_map[ self.coerce_kind( resource_kind ) ]

    def find( self, resource_kind, resource_id ) -> Optional[ ShareableModel ]:
        model_class = self.model_for( resource_kind )
        try:
            return model_class.objects.filter( pk = resource_id ).first()
        except ( TypeError, ValueError ):
            return None

    def get( self, resource_kind, resource_id ) -> ShareableModel:
        resource = self.find( resource_kind, resource_id )
        if resource is None:
            raise NotFoundError( f'{self.coerce_kind( resource_kind ).label} not found' )
        return resource

    def child_items( self, trip_id ) -> Dict[ ResourceKind, QuerySet ]:
        """ Current items of a trip, per item kind. """
        return {
            resource_kind: self._model_map[ resource_kind ].objects.for_trip( trip_id )
            for resource_kind in ResourceKind.item_kinds()
        }
