from django.contrib import admin

from ts.apps.common.admin_utils import admin_link

from . import models


class TravelItemAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_filter = ( 'created_datetime', )
    readonly_fields = ( 'created_datetime', 'modified_datetime', 'uuid' )

    @admin_link( 'created_by', 'Creator' )
    def creator_link(self, created_by):
        return created_by.email or created_by.uuid_str

    @admin_link( 'trip', 'Trip', empty_description = '(Standalone)' )
    def trip_link(self, trip):
        return trip.name


@admin.register( models.Flight )
class FlightAdmin( TravelItemAdmin ):
    list_display = ( '__str__', 'creator_link', 'trip_link', 'departure_datetime' )
    search_fields = [ 'flight_number', 'airline', 'origin', 'destination' ]


@admin.register( models.Hotel )
class HotelAdmin( TravelItemAdmin ):
    list_display = ( 'hotel_name', 'creator_link', 'trip_link', 'check_in_datetime' )
    search_fields = [ 'hotel_name', 'address' ]


@admin.register( models.Event )
class EventAdmin( TravelItemAdmin ):
    list_display = ( 'name', 'creator_link', 'trip_link', 'start_datetime' )
    search_fields = [ 'name', 'location' ]


@admin.register( models.Transportation )
class TransportationAdmin( TravelItemAdmin ):
    list_display = ( '__str__', 'creator_link', 'trip_link', 'method', 'departure_datetime' )
    list_filter = ( 'method', 'created_datetime' )
    search_fields = [ 'journey_number', 'origin', 'destination' ]


@admin.register( models.CarRental )
class CarRentalAdmin( TravelItemAdmin ):
    list_display = ( 'company', 'creator_link', 'trip_link', 'pickup_datetime' )
    search_fields = [ 'company', 'pickup_location' ]
