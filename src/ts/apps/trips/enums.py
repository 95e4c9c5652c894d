from typing import List

from ts.apps.common.enums import LabeledEnum


class ResourceKind( LabeledEnum ):
    """
    Everything that can carry attendee grants. Stored by lowercase name,
    so CAR_RENTAL persists as 'car_rental'.
    """
    TRIP            = ( 'Trip'           , 'Container for travel items' )
    FLIGHT          = ( 'Flight'         , '' )
    HOTEL           = ( 'Hotel'          , '' )
    EVENT           = ( 'Event'          , '' )
    TRANSPORTATION  = ( 'Transportation' , 'Train, bus, ferry and similar legs' )
    CAR_RENTAL      = ( 'Car Rental'     , '' )

    @property
    def is_trip(self) -> bool:
        return bool( self == ResourceKind.TRIP )

    @property
    def is_item(self) -> bool:
        return not self.is_trip

    @classmethod
    def item_kinds(cls) -> List[ 'ResourceKind' ]:
        return [ x for x in cls if x.is_item ]


class TripPurpose( LabeledEnum ):

    LEISURE    = ( 'Leisure'   , '' )
    BUSINESS   = ( 'Business'  , '' )
    FAMILY     = ( 'Family'    , '' )
    ROMANTIC   = ( 'Romantic'  , '' )
    ADVENTURE  = ( 'Adventure' , '' )
    OTHER      = ( 'Other'     , '' )
