import logging

from django.db import models, transaction

logger = logging.getLogger(__name__)


class TravelItemManager(models.Manager):

    def for_trip(self, trip_id):
        return self.filter( trip_id = trip_id )

    def standalone_for_user(self, user):
        return self.filter( created_by = user, trip__isnull = True )

    def create_with_creator(self, creator, trip = None, **item_fields):
        """
        Create an item with its creator's manage-level grant (atomic), then
        copy the parent trip's current attendee grants onto it.

        The copy runs after the transaction commits its own rows and is
        best-effort: a grant that cannot be copied is logged and skipped,
        never failing the item creation.
        """
        from ts.apps.attendees.cascade import CascadeCoordinator
        from ts.apps.attendees.enums import AttendeePermissionLevel
        from ts.apps.attendees.registry import AttendeeRegistry

        with transaction.atomic():
            item = self.create( created_by = creator, trip = trip, **item_fields )
            AttendeeRegistry().grant(
                resource_kind = item.resource_kind,
                resource_id = item.pk,
                account_id = creator.pk,
                level = AttendeePermissionLevel.MANAGE,
                granted_by_id = creator.pk,
            )

        if item.trip_id:
            inherit_result = CascadeCoordinator().on_item_created(
                parent_trip_id = item.trip_id,
                item_kind = item.resource_kind,
                item_id = item.pk,
            )
            logger.debug( f'Item {item.resource_kind}:{item.pk} inherited'
                          f' {inherit_result.success_count} trip grants' )
        return item
