import logging
from typing import Iterable, List, Optional

from django.db import IntegrityError, transaction

from ts.apps.common.cache import SharingCacheInvalidator
from ts.apps.common.singleton import Singleton
from ts.apps.trips.enums import ResourceKind
from ts.exceptions import (
    AlreadyExistsError,
    InvalidLevelError,
    InvalidResourceKindError,
    NotFoundError,
    SharingError,
)

from .enums import AttendeePermissionLevel
from .models import Attendee

logger = logging.getLogger(__name__)


class AttendeeRegistry( Singleton ):
    """
    Creates, updates, removes and queries attendee grants. A grant is unique
    per (account, resource_kind, resource_id).

    Holds no per-request state. Trip-level mutations that must reach the
    trip's items go through CascadeCoordinator.
    """

    def __init_singleton__(self):
        self._cache_invalidator = SharingCacheInvalidator()
        return

    @classmethod
    def coerce_level( cls, level ) -> AttendeePermissionLevel:
        try:
            return AttendeePermissionLevel.coerce( level )
        except ValueError:
            raise InvalidLevelError( f'Invalid attendee permission level "{level}"' )

    @classmethod
    def coerce_kind( cls, resource_kind ) -> ResourceKind:
        try:
            return ResourceKind.coerce( resource_kind )
        except ValueError:
            raise InvalidResourceKindError( f'Unknown resource kind "{resource_kind}"' )

    def grant( self,
               resource_kind  : ResourceKind,
               resource_id    : int,
               account_id     : int,
               level          : AttendeePermissionLevel,
               granted_by_id  : int                      = None ) -> Attendee:
        resource_kind = self.coerce_kind( resource_kind )
        level = self.coerce_level( level )

        if Attendee.objects.for_resource( resource_kind, resource_id ).filter(
                account_id = account_id ).exists():
            raise AlreadyExistsError( 'Account is already an attendee' )

        # A concurrent grant for the same key loses on the unique constraint.
        try:
            with transaction.atomic():
                attendee = Attendee.objects.create(
                    account_id = account_id,
                    resource_kind = resource_kind,
                    resource_id = resource_id,
                    level = level,
                    granted_by_id = granted_by_id,
                )
        except IntegrityError:
            raise AlreadyExistsError( 'Account is already an attendee' )

        logger.debug( f'Granted {level} on {resource_kind}:{resource_id} to account {account_id}' )
        self._notify_changed( resource_kind, resource_id, account_id )
        return attendee

    def revoke( self,
                resource_kind  : ResourceKind,
                resource_id    : int,
                account_id     : int ) -> bool:
        resource_kind = self.coerce_kind( resource_kind )
        deleted_count, _ = Attendee.objects.for_resource(
            resource_kind, resource_id ).filter( account_id = account_id ).delete()
        if deleted_count:
            logger.debug( f'Revoked {resource_kind}:{resource_id} from account {account_id}' )
            self._notify_changed( resource_kind, resource_id, account_id )
        return bool( deleted_count > 0 )

    def update_level( self,
                      resource_kind  : ResourceKind,
                      resource_id    : int,
                      account_id     : int,
                      level          : AttendeePermissionLevel ) -> Attendee:
        resource_kind = self.coerce_kind( resource_kind )
        level = self.coerce_level( level )

        attendee = Attendee.objects.for_resource( resource_kind, resource_id ).filter(
            account_id = account_id ).first()
        if attendee is None:
            raise NotFoundError( 'Attendee not found' )

        attendee.level = level
        attendee.save( update_fields = [ 'level', 'modified_datetime' ] )
        self._notify_changed( resource_kind, resource_id, account_id )
        return attendee

    def list_grants( self,
                     resource_kind  : ResourceKind,
                     resource_id    : int ) -> List[ Attendee ]:
        """ All grants on a resource, oldest first. """
        resource_kind = self.coerce_kind( resource_kind )
        return list(
            Attendee.objects.for_resource( resource_kind, resource_id )
            .select_related( 'account', 'granted_by' )
            .order_by( 'created_datetime', 'id' )
        )

    def get_grant( self, attendee_id : int ) -> Attendee:
        attendee = Attendee.objects.filter( pk = attendee_id ).select_related( 'account' ).first()
        if attendee is None:
            raise NotFoundError( 'Attendee not found' )
        return attendee

    def level_of( self,
                  resource_kind  : ResourceKind,
                  resource_id    : int,
                  account_id     : int ) -> Optional[ AttendeePermissionLevel ]:
        if account_id is None or resource_id is None:
            return None
        attendee = Attendee.objects.for_resource( resource_kind, resource_id ).filter(
            account_id = account_id ).only( 'level' ).first()
        if attendee is None:
            return None
        return attendee.level

    def resources_for_account( self,
                               account_id     : int,
                               resource_kind  : ResourceKind  = None ) -> List[ Attendee ]:
        queryset = Attendee.objects.for_account( account_id )
        if resource_kind is not None:
            queryset = queryset.filter( resource_kind = self.coerce_kind( resource_kind ))
        return list( queryset.order_by( 'created_datetime', 'id' ))

    def bulk_grant( self,
                    resource_kind  : ResourceKind,
                    resource_id    : int,
                    account_ids    : Iterable[ int ],
                    level          : AttendeePermissionLevel,
                    granted_by_id  : int                      = None ) -> List[ Attendee ]:
        """ Best-effort: accounts that cannot be granted are logged and skipped. """
        attendee_list = list()
        for account_id in account_ids:
            try:
                attendee_list.append( self.grant(
                    resource_kind = resource_kind,
                    resource_id = resource_id,
                    account_id = account_id,
                    level = level,
                    granted_by_id = granted_by_id,
                ))
            except SharingError as e:
                logger.warning( f'Bulk grant skipped {resource_kind}:{resource_id}'
                                f' for account {account_id}: {e}' )
            continue
        return attendee_list

    @classmethod
    def is_creator_removable( cls,
                              resource_kind    : ResourceKind,
                              has_parent_trip  : bool ) -> bool:
        """
        A creator may only be detached from an item that belongs to a trip,
        never from a trip or a standalone item. Callers enforce this.
        """
        return bool( not cls.coerce_kind( resource_kind ).is_trip and has_parent_trip )

    def _notify_changed( self, resource_kind : ResourceKind, resource_id : int, account_id : int ):
        self._cache_invalidator.invalidate_user_trips( account_id )
        if resource_kind.is_trip:
            self._cache_invalidator.invalidate_trip_details( resource_id )
        return
