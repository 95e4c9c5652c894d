from ts.apps.common.enums import LabeledEnum


class TransportationMethod( LabeledEnum ):

    TRAIN    = ( 'Train'   , '' )
    BUS      = ( 'Bus'     , '' )
    FERRY    = ( 'Ferry'   , '' )
    SHUTTLE  = ( 'Shuttle' , '' )
    TAXI     = ( 'Taxi'    , '' )
    OTHER    = ( 'Other'   , '' )
