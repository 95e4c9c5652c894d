"""
Tests for LabeledEnumField, exercised through the sharing models.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import connection
from django.test import TestCase

from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.models import Attendee
from ts.apps.companions.enums import CompanionPermissionLevel
from ts.apps.companions.models import Companion
from ts.apps.trips.enums import ResourceKind, TripPurpose
from ts.apps.trips.models import Trip
from ts.apps.trips.tests.synthetic_data import TripSyntheticData

logging.disable(logging.CRITICAL)


class LabeledEnumFieldTestCase(TestCase):

    def setUp(self):
        self.user = TripSyntheticData.create_test_user(email='user@example.com')
        self.other = TripSyntheticData.create_test_user(email='other@example.com')

    def test_assigning_string_returns_enum(self):
        attendee = Attendee(account=self.user, resource_kind='car_rental', resource_id=1, level='MANAGE')
        self.assertEqual(attendee.resource_kind, ResourceKind.CAR_RENTAL)
        self.assertEqual(attendee.level, AttendeePermissionLevel.MANAGE)

    def test_stored_as_lowercase_name(self):
        Companion.objects.create(grantor=self.user, grantee=self.other, level=CompanionPermissionLevel.MANAGE_ALL)
        with connection.cursor() as cursor:
            cursor.execute(f'SELECT level FROM {Companion._meta.db_table}')
            self.assertEqual(cursor.fetchone()[0], 'manage_all')

    def test_round_trip_from_database(self):
        Attendee.objects.create(
            account=self.user,
            resource_kind=ResourceKind.TRANSPORTATION,
            resource_id=7,
            level=AttendeePermissionLevel.VIEW,
        )
        attendee = Attendee.objects.get()
        self.assertIs(attendee.resource_kind, ResourceKind.TRANSPORTATION)
        self.assertIs(attendee.level, AttendeePermissionLevel.VIEW)

    def test_filter_by_enum_and_string(self):
        Attendee.objects.create(account=self.user, resource_kind=ResourceKind.HOTEL, resource_id=3, level='view')
        self.assertEqual(Attendee.objects.filter(resource_kind=ResourceKind.HOTEL).count(), 1)
        self.assertEqual(Attendee.objects.filter(resource_kind='hotel').count(), 1)

    def test_strict_field_rejects_unknown_value(self):
        attendee = Attendee(account=self.user, resource_kind='trip', resource_id=1, level='owner')
        with self.assertRaises(ValidationError):
            attendee.level

    def test_safe_field_falls_back_to_default(self):
        trip = Trip(created_by=self.user, name='X', purpose='not-a-purpose')
        self.assertEqual(trip.purpose, TripPurpose.default())

    def test_default_value(self):
        trip = Trip(created_by=self.user, name='X')
        self.assertEqual(trip.purpose, TripPurpose.LEISURE)

    def test_validate_reports_valid_values(self):
        field = Attendee._meta.get_field('level')
        with self.assertRaises(ValidationError) as context:
            field.validate('owner', None)
        self.assertIn('view', str(context.exception))

    def test_deconstruct_keeps_enum_options(self):
        name, path, args, kwargs = Attendee._meta.get_field('level').deconstruct()
        self.assertIs(kwargs['enum_class'], AttendeePermissionLevel)
        self.assertFalse(kwargs['use_safe_conversion'])
