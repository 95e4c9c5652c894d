from django.apps import apps
from django.db import models, transaction
from django.db.models import Q


class TripManager(models.Manager):

    def created_by_user(self, user):
        return self.filter( created_by = user )

    def visible_to(self, user):
        """
        Trips the user may view: created by them, shared with them through
        an attendee grant on the trip, or created by an account they hold a
        view/manage_all companion edge towards.
        """
        from ts.apps.companions.enums import CompanionPermissionLevel
        from .enums import ResourceKind

        Attendee = apps.get_model( 'attendees', 'Attendee' )
        Companion = apps.get_model( 'companions', 'Companion' )

        attendee_trip_ids = Attendee.objects.filter(
            account = user,
            resource_kind = ResourceKind.TRIP,
        ).values( 'resource_id' )
        companion_owner_ids = Companion.objects.filter(
            grantor = user,
            level__in = [ str(x) for x in CompanionPermissionLevel.viewing_levels() ],
        ).values( 'grantee_id' )

        return self.filter(
            Q( created_by = user )
            | Q( pk__in = attendee_trip_ids )
            | Q( created_by__in = companion_owner_ids )
        ).distinct()

    def create_with_creator(self, creator, **trip_fields):
        """
        Create a trip and its creator's manage-level attendee grant in one
        transaction.

        Example:
            trip = Trip.objects.create_with_creator(
                creator = request.user,
                name = 'Summer Vacation',
            )
        """
        from ts.apps.attendees.enums import AttendeePermissionLevel
        from ts.apps.attendees.registry import AttendeeRegistry

        with transaction.atomic():
            trip = self.create( created_by = creator, **trip_fields )
            AttendeeRegistry().grant(
                resource_kind = trip.resource_kind,
                resource_id = trip.pk,
                account_id = creator.pk,
                level = AttendeePermissionLevel.MANAGE,
                granted_by_id = creator.pk,
            )
        return trip
