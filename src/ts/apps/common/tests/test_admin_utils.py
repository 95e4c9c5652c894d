import logging

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from ts.apps.attendees.admin import AttendeeAdmin
from ts.apps.attendees.models import Attendee
from ts.apps.common.admin_utils import admin_change_url
from ts.apps.items.tests.synthetic_data import ItemSyntheticData
from ts.apps.trips.tests.synthetic_data import TripSyntheticData

logging.disable(logging.CRITICAL)

User = get_user_model()


class AdminLinkTestCase(TestCase):

    def setUp(self):
        self.admin_user = User.objects.create_superuser(email='admin@example.com', password='pass')
        self.owner = TripSyntheticData.create_test_user(email='owner@example.com')
        self.trip = TripSyntheticData.create_test_trip(user=self.owner)

    def test_admin_change_url(self):
        self.assertEqual(
            admin_change_url(self.owner),
            reverse('admin:custom_customuser_change', args=(self.owner.pk,)),
        )

    def test_link_and_empty_description(self):
        attendee = Attendee.objects.get(account=self.owner)
        model_admin = AttendeeAdmin(Attendee, None)
        self.assertIn(admin_change_url(self.owner), model_admin.account_link(attendee))

        attendee.granted_by = None
        self.assertEqual(model_admin.granted_by_link(attendee), '(System)')

    def test_changelists_render(self):
        ItemSyntheticData.create_one_of_each(user=self.owner, trip=self.trip)
        self.client.force_login(self.admin_user)
        for url_name in [
            'admin:trips_trip_changelist',
            'admin:attendees_attendee_changelist',
            'admin:companions_companion_changelist',
            'admin:items_flight_changelist',
            'admin:items_transportation_changelist',
            'admin:custom_customuser_changelist',
        ]:
            response = self.client.get(reverse(url_name))
            self.assertEqual(response.status_code, 200, url_name)
            continue
