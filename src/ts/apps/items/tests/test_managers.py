import logging
from unittest import mock

from django.test import TestCase

from ts.apps.attendees.cascade import CascadeCoordinator
from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.registry import AttendeeRegistry
from ts.apps.attendees.schemas import CascadeResult
from ts.apps.items.models import Flight, Hotel
from ts.apps.trips.enums import ResourceKind
from ts.apps.trips.tests.synthetic_data import TripSyntheticData

from .synthetic_data import ItemSyntheticData

logging.disable(logging.CRITICAL)


class TravelItemCreateWithCreatorTestCase(TestCase):

    def setUp(self):
        self.creator = TripSyntheticData.create_test_user(email='creator@example.com')
        self.friend = TripSyntheticData.create_test_user(email='friend@example.com')
        self.trip = TripSyntheticData.create_test_trip(user=self.creator)

    def test_creator_gets_manage_grant_on_every_kind(self):
        item_list = ItemSyntheticData.create_one_of_each(user=self.creator)
        self.assertEqual([x.resource_kind for x in item_list], ResourceKind.item_kinds())
        for item in item_list:
            self.assertEqual(
                AttendeeRegistry().level_of(item.resource_kind, item.pk, self.creator.pk),
                AttendeePermissionLevel.MANAGE,
            )
            continue

    def test_item_inherits_trip_attendees(self):
        AttendeeRegistry().grant(
            ResourceKind.TRIP, self.trip.pk, self.friend.pk,
            AttendeePermissionLevel.VIEW, granted_by_id=self.creator.pk,
        )
        hotel = ItemSyntheticData.create_test_hotel(user=self.creator, trip=self.trip)

        # Levels are copied as they are on the trip.
        self.assertEqual(
            AttendeeRegistry().level_of(ResourceKind.HOTEL, hotel.pk, self.friend.pk),
            AttendeePermissionLevel.VIEW,
        )
        self.assertEqual(len(AttendeeRegistry().list_grants(ResourceKind.HOTEL, hotel.pk)), 2)

    def test_standalone_item_does_not_inherit(self):
        with mock.patch.object(CascadeCoordinator, 'on_item_created') as mock_inherit:
            flight = ItemSyntheticData.create_test_flight(user=self.creator)

        mock_inherit.assert_not_called()
        self.assertIsNone(flight.parent_trip_id)
        self.assertEqual(Flight.objects.standalone_for_user(self.creator).count(), 1)

    def test_inheritance_failures_do_not_fail_creation(self):
        with mock.patch.object(CascadeCoordinator, 'on_item_created', return_value=CascadeResult()):
            hotel = ItemSyntheticData.create_test_hotel(user=self.creator, trip=self.trip)

        self.assertTrue(Hotel.objects.filter(pk=hotel.pk).exists())
        self.assertEqual(list(Hotel.objects.for_trip(self.trip.pk)), [hotel])
        self.assertTrue(hotel.has_parent_trip)
