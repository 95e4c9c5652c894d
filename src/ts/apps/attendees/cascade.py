import logging

from django.db import DatabaseError

from ts.apps.common.singleton import Singleton
from ts.apps.trips.enums import ResourceKind
from ts.exceptions import SharingError

from .enums import AttendeePermissionLevel
from .registry import AttendeeRegistry
from .schemas import CascadeOutcome, CascadeResult

logger = logging.getLogger(__name__)


class CascadeCoordinator( Singleton ):
    """
    Propagates trip-level attendee changes to the trip's items.

    Every child write is independent and best-effort: one failing item is
    logged and recorded in the CascadeResult, and the remaining items are
    still processed. Nothing here holds a lock across the trip's items, so
    an item created while a cascade is running may or may not receive the
    in-flight grant; reconcile_trip() repairs that after the fact.
    """

    def __init_singleton__(self):
        from ts.apps.items.resources import ResourceLocator

        self._registry = AttendeeRegistry()
        self._resource_locator = ResourceLocator()
        return

    def on_item_created( self,
                         parent_trip_id  : int,
                         item_kind       : ResourceKind,
                         item_id         : int ) -> CascadeResult:
        """
        Copy the trip's current grants onto a new item (a one-time snapshot).
        Levels and granted_by are copied as-is.
        """
        cascade_result = CascadeResult()
        for trip_grant in self._registry.list_grants( ResourceKind.TRIP, parent_trip_id ):
            cascade_result.add( self._grant_one(
                resource_kind = item_kind,
                resource_id = item_id,
                account_id = trip_grant.account_id,
                level = trip_grant.level,
                granted_by_id = trip_grant.granted_by_id,
            ))
            continue
        return cascade_result

    def cascade_add( self,
                     trip_id        : int,
                     account_id     : int,
                     level          : AttendeePermissionLevel,
                     granted_by_id  : int ) -> CascadeResult:
        cascade_result = CascadeResult()
        for item_kind, item_queryset in self._resource_locator.child_items( trip_id ).items():
            for item_id in item_queryset.values_list( 'pk', flat = True ):
                cascade_result.add( self._grant_one(
                    resource_kind = item_kind,
                    resource_id = item_id,
                    account_id = account_id,
                    level = level,
                    granted_by_id = granted_by_id,
                ))
                continue
            continue

        logger.info( f'Cascade add for account {account_id} on trip {trip_id}:'
                     f' {cascade_result.success_count} granted,'
                     f' {cascade_result.failure_count} skipped' )
        return cascade_result

    def cascade_remove( self,
                        trip_id     : int,
                        account_id  : int ) -> CascadeResult:
        cascade_result = CascadeResult()
        for item_kind, item_queryset in self._resource_locator.child_items( trip_id ).items():
            for item_id in item_queryset.values_list( 'pk', flat = True ):
                cascade_result.add( self._revoke_one(
                    resource_kind = item_kind,
                    resource_id = item_id,
                    account_id = account_id,
                ))
                continue
            continue

        logger.info( f'Cascade remove for account {account_id} on trip {trip_id}:'
                     f' {sum( cascade_result.removed_counts_by_kind().values() )} removed,'
                     f' {cascade_result.failure_count} failed' )
        return cascade_result

    def reconcile_trip( self, trip_id : int ) -> CascadeResult:
        """
        Re-run the add cascade for every trip-level grant, filling in items
        a previous partial cascade missed. Items that already carry a grant
        show up as (expected) skipped outcomes.
        """
        cascade_result = CascadeResult()
        for trip_grant in self._registry.list_grants( ResourceKind.TRIP, trip_id ):
            cascade_result.extend( self.cascade_add(
                trip_id = trip_id,
                account_id = trip_grant.account_id,
                level = AttendeePermissionLevel.MANAGE,
                granted_by_id = trip_grant.granted_by_id,
            ))
            continue
        return cascade_result

    def _grant_one( self, resource_kind, resource_id, account_id, level, granted_by_id ) -> CascadeOutcome:
        try:
            attendee = self._registry.grant(
                resource_kind = resource_kind,
                resource_id = resource_id,
                account_id = account_id,
                level = level,
                granted_by_id = granted_by_id,
            )
        except ( SharingError, DatabaseError ) as e:
            logger.warning( f'Cascade grant skipped for {resource_kind}:{resource_id}'
                            f' account {account_id}: {e}' )
            return CascadeOutcome(
                resource_kind = resource_kind,
                resource_id = resource_id,
                account_id = account_id,
                succeeded = False,
                error_message = str(e),
            )
        return CascadeOutcome(
            resource_kind = resource_kind,
            resource_id = resource_id,
            account_id = account_id,
            succeeded = True,
            attendee = attendee,
        )

    def _revoke_one( self, resource_kind, resource_id, account_id ) -> CascadeOutcome:
        try:
            was_removed = self._registry.revoke(
                resource_kind = resource_kind,
                resource_id = resource_id,
                account_id = account_id,
            )
        except ( SharingError, DatabaseError ) as e:
            logger.warning( f'Cascade revoke failed for {resource_kind}:{resource_id}'
                            f' account {account_id}: {e}' )
            return CascadeOutcome(
                resource_kind = resource_kind,
                resource_id = resource_id,
                account_id = account_id,
                succeeded = False,
                error_message = str(e),
            )
        return CascadeOutcome(
            resource_kind = resource_kind,
            resource_id = resource_id,
            account_id = account_id,
            succeeded = True,
            removed_count = 1 if was_removed else 0,
        )
