from django.db import models

from ts.apps.common.model_fields import LabeledEnumField
from ts.apps.trips.enums import ResourceKind
from ts.apps.trips.models import ShareableModel

from .enums import TransportationMethod
from . import managers


class TravelItem( ShareableModel ):
    """
    Abstract base for the five item kinds. An item with no trip is a
    standalone item. Deleting the trip deletes its items.
    """
    objects = managers.TravelItemManager()

    trip = models.ForeignKey(
        'trips.Trip',
        on_delete = models.CASCADE,
        null = True,
        blank = True,
        related_name = '%(class)s_items',
    )
    confirmation_number = models.CharField(
        max_length = 100,
        blank = True,
    )
    notes = models.TextField(
        blank = True,
    )

    class Meta:
        abstract = True

    @property
    def parent_trip_id(self) -> int:
        return self.trip_id


class Flight( TravelItem ):
    RESOURCE_KIND = ResourceKind.FLIGHT

    airline = models.CharField( max_length = 100, blank = True )
    flight_number = models.CharField( max_length = 20 )
    origin = models.CharField( max_length = 200 )
    destination = models.CharField( max_length = 200 )
    departure_datetime = models.DateTimeField()
    arrival_datetime = models.DateTimeField( null = True, blank = True )
    seat = models.CharField( max_length = 20, blank = True )

    class Meta:
        verbose_name = 'Flight'
        verbose_name_plural = 'Flights'
        ordering = [ 'departure_datetime' ]

    def __str__(self):
        return f'{self.airline} {self.flight_number} {self.origin} -> {self.destination}'.strip()


class Hotel( TravelItem ):
    RESOURCE_KIND = ResourceKind.HOTEL

    hotel_name = models.CharField( max_length = 200 )
    address = models.CharField( max_length = 500, blank = True )
    check_in_datetime = models.DateTimeField()
    check_out_datetime = models.DateTimeField()
    room_number = models.CharField( max_length = 20, blank = True )

    class Meta:
        verbose_name = 'Hotel'
        verbose_name_plural = 'Hotels'
        ordering = [ 'check_in_datetime' ]

    def __str__(self):
        return self.hotel_name


class Event( TravelItem ):
    RESOURCE_KIND = ResourceKind.EVENT

    name = models.CharField( max_length = 200 )
    location = models.CharField( max_length = 500, blank = True )
    start_datetime = models.DateTimeField()
    end_datetime = models.DateTimeField( null = True, blank = True )
    description = models.TextField( blank = True )
    event_url = models.URLField( blank = True )

    class Meta:
        verbose_name = 'Event'
        verbose_name_plural = 'Events'
        ordering = [ 'start_datetime' ]

    def __str__(self):
        return self.name


class Transportation( TravelItem ):
    RESOURCE_KIND = ResourceKind.TRANSPORTATION

    method = LabeledEnumField(
        TransportationMethod,
        'Method',
    )
    journey_number = models.CharField( max_length = 50, blank = True )
    origin = models.CharField( max_length = 200 )
    destination = models.CharField( max_length = 200 )
    departure_datetime = models.DateTimeField()
    arrival_datetime = models.DateTimeField( null = True, blank = True )

    class Meta:
        verbose_name = 'Transportation'
        verbose_name_plural = 'Transportation'
        ordering = [ 'departure_datetime' ]

    def __str__(self):
        return f'{self.method.label} {self.origin} -> {self.destination}'


class CarRental( TravelItem ):
    RESOURCE_KIND = ResourceKind.CAR_RENTAL

    company = models.CharField( max_length = 200 )
    pickup_location = models.CharField( max_length = 500 )
    dropoff_location = models.CharField( max_length = 500, blank = True )
    pickup_datetime = models.DateTimeField()
    dropoff_datetime = models.DateTimeField()

    class Meta:
        verbose_name = 'Car Rental'
        verbose_name_plural = 'Car Rentals'
        ordering = [ 'pickup_datetime' ]

    def __str__(self):
        return f'{self.company} ({self.pickup_location})'
