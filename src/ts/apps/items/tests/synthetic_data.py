"""
Synthetic data generators for the five travel item kinds.

Items are created through the item managers, so the creator grant and
the inheritance of the parent trip's attendees happen as in production.
"""
from datetime import timedelta

from django.utils import timezone

from ts.apps.items.enums import TransportationMethod
from ts.apps.items.models import CarRental, Event, Flight, Hotel, Transportation


class ItemSyntheticData:

    @staticmethod
    def create_test_flight(user, trip=None, flight_number='UA100', **kwargs):
        departure = kwargs.pop('departure_datetime', timezone.now() + timedelta(days=7))
        return Flight.objects.create_with_creator(
            creator=user,
            trip=trip,
            airline=kwargs.pop('airline', 'United'),
            flight_number=flight_number,
            origin=kwargs.pop('origin', 'SFO'),
            destination=kwargs.pop('destination', 'LIS'),
            departure_datetime=departure,
            **kwargs
        )

    @staticmethod
    def create_test_hotel(user, trip=None, hotel_name='Test Hotel', **kwargs):
        check_in = kwargs.pop('check_in_datetime', timezone.now() + timedelta(days=7))
        return Hotel.objects.create_with_creator(
            creator=user,
            trip=trip,
            hotel_name=hotel_name,
            check_in_datetime=check_in,
            check_out_datetime=kwargs.pop('check_out_datetime', check_in + timedelta(days=3)),
            **kwargs
        )

    @staticmethod
    def create_test_event(user, trip=None, name='Test Event', **kwargs):
        return Event.objects.create_with_creator(
            creator=user,
            trip=trip,
            name=name,
            start_datetime=kwargs.pop('start_datetime', timezone.now() + timedelta(days=8)),
            **kwargs
        )

    @staticmethod
    def create_test_transportation(user, trip=None, method=TransportationMethod.TRAIN, **kwargs):
        return Transportation.objects.create_with_creator(
            creator=user,
            trip=trip,
            method=method,
            origin=kwargs.pop('origin', 'Lisbon'),
            destination=kwargs.pop('destination', 'Porto'),
            departure_datetime=kwargs.pop('departure_datetime', timezone.now() + timedelta(days=9)),
            **kwargs
        )

    @staticmethod
    def create_test_car_rental(user, trip=None, company='Test Rentals', **kwargs):
        pickup = kwargs.pop('pickup_datetime', timezone.now() + timedelta(days=7))
        return CarRental.objects.create_with_creator(
            creator=user,
            trip=trip,
            company=company,
            pickup_location=kwargs.pop('pickup_location', 'LIS Airport'),
            pickup_datetime=pickup,
            dropoff_datetime=kwargs.pop('dropoff_datetime', pickup + timedelta(days=5)),
            **kwargs
        )

    @classmethod
    def create_one_of_each(cls, user, trip=None):
        """ One item of every kind, in ResourceKind.item_kinds() order. """
        return [
            cls.create_test_flight(user=user, trip=trip),
            cls.create_test_hotel(user=user, trip=trip),
            cls.create_test_event(user=user, trip=trip),
            cls.create_test_transportation(user=user, trip=trip),
            cls.create_test_car_rental(user=user, trip=trip),
        ]
