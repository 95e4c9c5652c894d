import logging

from django.test import TestCase

from ts.apps.items.models import CarRental, Flight
from ts.apps.items.resources import ResourceLocator
from ts.apps.trips.enums import ResourceKind
from ts.apps.trips.models import Trip
from ts.apps.trips.tests.synthetic_data import TripSyntheticData
from ts.exceptions import InvalidResourceKindError, NotFoundError

from .synthetic_data import ItemSyntheticData

logging.disable(logging.CRITICAL)


class ResourceLocatorTestCase(TestCase):

    def setUp(self):
        self.user = TripSyntheticData.create_test_user(email='user@example.com')
        self.trip = TripSyntheticData.create_test_trip(user=self.user)
        self.locator = ResourceLocator()

    def test_model_for_accepts_stored_names(self):
        self.assertIs(self.locator.model_for('trip'), Trip)
        self.assertIs(self.locator.model_for('car_rental'), CarRental)
        self.assertIs(self.locator.model_for(ResourceKind.FLIGHT), Flight)

    def test_unknown_kind_raises(self):
        with self.assertRaises(InvalidResourceKindError):
            self.locator.model_for('cruise')

    def test_find_and_get(self):
        self.assertEqual(self.locator.find(ResourceKind.TRIP, self.trip.pk), self.trip)
        self.assertIsNone(self.locator.find(ResourceKind.TRIP, self.trip.pk + 1000))
        self.assertIsNone(self.locator.find(ResourceKind.TRIP, 'not-a-number'))
        with self.assertRaises(NotFoundError):
            self.locator.get(ResourceKind.HOTEL, 12345)

    def test_child_items_covers_every_item_kind(self):
        item_list = ItemSyntheticData.create_one_of_each(user=self.user, trip=self.trip)
        ItemSyntheticData.create_test_flight(user=self.user)

        child_map = self.locator.child_items(self.trip.pk)
        self.assertEqual(set(child_map.keys()), set(ResourceKind.item_kinds()))
        for item in item_list:
            self.assertEqual(list(child_map[item.resource_kind]), [item])
            continue
