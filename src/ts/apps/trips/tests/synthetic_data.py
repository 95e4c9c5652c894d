"""
Synthetic data generators for accounts and trips.

Creates real database objects (never mocks) for use in Django tests.
Trips are created through the manager so the creator's manage grant
exists exactly as it does in production.
"""
from django.contrib.auth import get_user_model

from ts.apps.trips.enums import TripPurpose
from ts.apps.trips.models import Trip

User = get_user_model()


class TripSyntheticData:

    @staticmethod
    def create_test_user(email='user@example.com', password='testpass123', **kwargs):
        kwargs.setdefault('first_name', email.split('@')[0].title())
        kwargs.setdefault('last_name', 'T')
        return User.objects.create_user(email=email, password=password, **kwargs)

    @staticmethod
    def create_test_placeholder(email=None, phone=None, first_name='Pat', last_name='P'):
        return User.objects.create_user(
            email=email,
            phone=phone,
            first_name=first_name,
            last_name=last_name,
            is_placeholder=True,
        )

    @staticmethod
    def create_test_trip(user, name='Test Trip', purpose=TripPurpose.LEISURE, **kwargs):
        """
        Create a Trip with its creator's manage grant.

        Example:
            trip = TripSyntheticData.create_test_trip(user=self.user, name='Lisbon')
        """
        return Trip.objects.create_with_creator(
            creator=user,
            name=name,
            purpose=purpose,
            **kwargs
        )
