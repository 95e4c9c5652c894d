import logging
from unittest import mock

import redis

from django.db import DatabaseError
from django.test import TestCase, override_settings

from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.models import Attendee
from ts.apps.attendees.registry import AttendeeRegistry
from ts.apps.common import redis_client
from ts.apps.companions.enums import CompanionPermissionLevel
from ts.apps.companions.models import Companion
from ts.apps.trips.enums import ResourceKind
from ts.apps.trips.models import Trip

from .synthetic_data import TripSyntheticData

logging.disable(logging.CRITICAL)


class TripCreateWithCreatorTestCase(TestCase):

    def setUp(self):
        self.creator = TripSyntheticData.create_test_user(email='creator@example.com')

    def test_creator_gets_manage_grant(self):
        trip = Trip.objects.create_with_creator(creator=self.creator, name='Lisbon')

        self.assertEqual(trip.created_by, self.creator)
        self.assertEqual(
            AttendeeRegistry().level_of(ResourceKind.TRIP, trip.pk, self.creator.pk),
            AttendeePermissionLevel.MANAGE,
        )
        grant = Attendee.objects.get(resource_kind=ResourceKind.TRIP, resource_id=trip.pk)
        self.assertEqual(grant.granted_by, self.creator)

    def test_failed_grant_rolls_back_trip(self):
        """Trip row and creator grant are written together or not at all."""
        with mock.patch.object(AttendeeRegistry, 'grant', side_effect=DatabaseError('boom')):
            with self.assertRaises(DatabaseError):
                Trip.objects.create_with_creator(creator=self.creator, name='Lisbon')

        self.assertFalse(Trip.objects.exists())

    @override_settings(SHARING_CACHE_ENABLED=True)
    def test_unreachable_cache_does_not_block_creation(self):
        redis_client.clear_redis_client()
        self.addCleanup(redis_client.clear_redis_client)
        with mock.patch.object(redis.StrictRedis, 'ping',
                               side_effect=redis.exceptions.TimeoutError('Timeout connecting to server')):
            trip = Trip.objects.create_with_creator(creator=self.creator, name='Lisbon')

        self.assertTrue(Trip.objects.filter(pk=trip.pk).exists())
        self.assertEqual(
            AttendeeRegistry().level_of(ResourceKind.TRIP, trip.pk, self.creator.pk),
            AttendeePermissionLevel.MANAGE,
        )

    def test_resource_properties(self):
        trip = TripSyntheticData.create_test_trip(user=self.creator)
        self.assertEqual(trip.resource_kind, ResourceKind.TRIP)
        self.assertEqual(trip.resource_id, trip.pk)
        self.assertEqual(trip.creator_id, self.creator.pk)
        self.assertIsNone(trip.parent_trip_id)
        self.assertFalse(trip.has_parent_trip)


class TripVisibleToTestCase(TestCase):

    def setUp(self):
        self.owner = TripSyntheticData.create_test_user(email='owner@example.com')
        self.attendee = TripSyntheticData.create_test_user(email='attendee@example.com')
        self.companion = TripSyntheticData.create_test_user(email='companion@example.com')
        self.outsider = TripSyntheticData.create_test_user(email='outsider@example.com')
        self.trip = TripSyntheticData.create_test_trip(user=self.owner, name='Shared')
        AttendeeRegistry().grant(
            ResourceKind.TRIP, self.trip.pk, self.attendee.pk,
            AttendeePermissionLevel.VIEW, granted_by_id=self.owner.pk,
        )

    def test_creator_sees_own_trip(self):
        self.assertIn(self.trip, Trip.objects.visible_to(self.owner))

    def test_attendee_sees_trip(self):
        self.assertIn(self.trip, Trip.objects.visible_to(self.attendee))

    def test_companion_with_view_sees_trip(self):
        Companion.objects.create(
            grantor=self.companion, grantee=self.owner, level=CompanionPermissionLevel.VIEW,
        )
        self.assertIn(self.trip, Trip.objects.visible_to(self.companion))

    def test_companion_with_none_level_does_not_see_trip(self):
        Companion.objects.create(
            grantor=self.companion, grantee=self.owner, level=CompanionPermissionLevel.NONE,
        )
        self.assertNotIn(self.trip, Trip.objects.visible_to(self.companion))

    def test_outsider_sees_nothing(self):
        self.assertEqual(Trip.objects.visible_to(self.outsider).count(), 0)

    def test_no_duplicates_when_visible_several_ways(self):
        AttendeeRegistry().grant(
            ResourceKind.TRIP, self.trip.pk, self.companion.pk,
            AttendeePermissionLevel.MANAGE, granted_by_id=self.owner.pk,
        )
        Companion.objects.create(
            grantor=self.companion, grantee=self.owner, level=CompanionPermissionLevel.MANAGE_ALL,
        )
        self.assertEqual(Trip.objects.visible_to(self.companion).count(), 1)
