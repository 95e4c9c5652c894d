import logging

from django.test import SimpleTestCase

from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.companions.enums import CompanionPermissionLevel
from ts.apps.trips.enums import ResourceKind

logging.disable(logging.CRITICAL)


class LabeledEnumTestCase(SimpleTestCase):

    def test_str_is_lowercase_name(self):
        self.assertEqual(str(ResourceKind.CAR_RENTAL), 'car_rental')
        self.assertEqual(str(CompanionPermissionLevel.MANAGE_ALL), 'manage_all')

    def test_from_name(self):
        self.assertEqual(ResourceKind.from_name(' Car_Rental '), ResourceKind.CAR_RENTAL)
        with self.assertRaises(ValueError):
            ResourceKind.from_name('cruise')
        with self.assertRaises(ValueError):
            ResourceKind.from_name('')

    def test_coerce(self):
        self.assertIs(AttendeePermissionLevel.coerce(AttendeePermissionLevel.VIEW), AttendeePermissionLevel.VIEW)
        self.assertIs(AttendeePermissionLevel.coerce('manage'), AttendeePermissionLevel.MANAGE)
        with self.assertRaises(ValueError):
            AttendeePermissionLevel.coerce(2)
        with self.assertRaises(ValueError):
            AttendeePermissionLevel.coerce(CompanionPermissionLevel.VIEW)

    def test_to_dict_and_choices(self):
        self.assertEqual(AttendeePermissionLevel.MANAGE.to_dict()['value'], 'manage')
        self.assertEqual(AttendeePermissionLevel.choices(), [('view', 'View'), ('manage', 'Manage')])

    def test_item_kinds(self):
        self.assertEqual(len(ResourceKind.item_kinds()), 5)
        self.assertNotIn(ResourceKind.TRIP, ResourceKind.item_kinds())
        self.assertTrue(ResourceKind.TRIP.is_trip)
        self.assertTrue(ResourceKind.EVENT.is_item)

    def test_companion_levels(self):
        self.assertFalse(CompanionPermissionLevel.NONE.can_view)
        self.assertTrue(CompanionPermissionLevel.VIEW.can_view)
        self.assertFalse(CompanionPermissionLevel.VIEW.can_manage_all)
        self.assertTrue(CompanionPermissionLevel.MANAGE_ALL.can_manage_all)
        self.assertEqual(CompanionPermissionLevel.default(), CompanionPermissionLevel.NONE)
