import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404

from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.registry import AttendeeRegistry
from ts.apps.common.singleton import Singleton
from ts.apps.companions.directory import CompanionDirectory
from ts.apps.trips.enums import ResourceKind
from ts.apps.trips.models import ShareableModel, Trip
from ts.exceptions import InvalidLevelError

from .enums import PermissionAction
from .schemas import ResourcePermissions

logger = logging.getLogger(__name__)


class PermissionResolver( Singleton ):
    """
    Decides whether an account may view, manage or delete a trip or item.

    Every answer is re-derived from the stored grants and companion edges;
    nothing is cached here. Checks run in tier order and stop at the
    first that allows:

      1. the account created the resource
      2. an attendee grant on the resource itself
      3. an attendee grant on the resource's parent trip (items only)
      4. a companion edge from the account towards the resource creator

    Manage requires the 'manage' attendee level in tiers 2 and 3 and the
    'manage_all' companion level in tier 4. Trip management stops after
    tier 2. Deletion is always creator-only.

    A missing resource or account never raises; the answer is False.
    """

    def __init_singleton__(self):
        self._registry = AttendeeRegistry()
        self._directory = CompanionDirectory()
        return

    def can_view( self, resource : ShareableModel, user_id : int ) -> bool:
        if resource is None or user_id is None:
            return False
        if self._is_creator( resource, user_id ):
            return True
        if self._registry.level_of( resource.resource_kind, resource.resource_id, user_id ) is not None:
            return True
        if resource.parent_trip_id is not None:
            if self._registry.level_of( ResourceKind.TRIP, resource.parent_trip_id, user_id ) is not None:
                return True
        return self._directory.can_view_all( user_id, resource.creator_id )

    def can_manage( self, resource : ShareableModel, user_id : int ) -> bool:
        if resource is None or user_id is None:
            return False
        if self._is_creator( resource, user_id ):
            return True
        if self._is_manage_level( self._registry.level_of(
                resource.resource_kind, resource.resource_id, user_id )):
            return True
        if resource.parent_trip_id is not None:
            if self._is_manage_level( self._registry.level_of(
                    ResourceKind.TRIP, resource.parent_trip_id, user_id )):
                return True
        return self._directory.can_manage_all( user_id, resource.creator_id )

    def can_view_trip( self, trip : Trip, user_id : int ) -> bool:
        if trip is None or user_id is None:
            return False
        if self._is_creator( trip, user_id ):
            return True
        if self._registry.level_of( ResourceKind.TRIP, trip.pk, user_id ) is not None:
            return True
        return self._directory.can_view_all( user_id, trip.creator_id )

    def can_manage_trip( self, trip : Trip, user_id : int ) -> bool:
        """ No companion fallback: a manage_all edge does not reach trips. """
        if trip is None or user_id is None:
            return False
        if self._is_creator( trip, user_id ):
            return True
        return self._is_manage_level( self._registry.level_of( ResourceKind.TRIP, trip.pk, user_id ))

    def can_delete( self, resource : ShareableModel, user_id : int ) -> bool:
        if resource is None or user_id is None:
            return False
        return self._is_creator( resource, user_id )

    def permissions_for( self, resource : ShareableModel, user_id : int ) -> ResourcePermissions:
        if resource is not None and resource.resource_kind.is_trip:
            return self.trip_permissions_for( resource, user_id )
        can_view = self.can_view( resource, user_id )
        return ResourcePermissions(
            can_view = can_view,
            can_manage = bool( can_view and self.can_manage( resource, user_id )),
            can_delete = self.can_delete( resource, user_id ),
            is_creator = bool( resource is not None and self._is_creator( resource, user_id )),
        )

    def trip_permissions_for( self, trip : Trip, user_id : int ) -> ResourcePermissions:
        can_view = self.can_view_trip( trip, user_id )
        return ResourcePermissions(
            can_view = can_view,
            can_manage = bool( can_view and self.can_manage_trip( trip, user_id )),
            can_delete = self.can_delete( trip, user_id ),
            is_creator = bool( trip is not None and self._is_creator( trip, user_id )),
        )

    def verify_access( self,
                       resource  : ShareableModel,
                       user_id   : int,
                       action    : PermissionAction ) -> None:
        """
        Raises Http404 for a missing resource and PermissionDenied for a
        refused action, so views can tell "not found" from "forbidden".
        """
        try:
            action = PermissionAction.coerce( action )
        except ValueError:
            raise InvalidLevelError( f'Unknown permission action "{action}"' )

        if resource is None:
            raise Http404()

        if self.is_allowed( resource, user_id, action ):
            return
        logger.debug( f'Denied {action} on {resource.resource_kind}:{resource.resource_id}'
                      f' for account {user_id}' )
        raise PermissionDenied( 'Insufficient permission for this action' )

    def is_allowed( self,
                    resource  : ShareableModel,
                    user_id   : int,
                    action    : PermissionAction ) -> bool:
        if action == PermissionAction.DELETE:
            return self.can_delete( resource, user_id )
        is_trip = bool( resource is not None and resource.resource_kind.is_trip )
        if action == PermissionAction.MANAGE:
            if is_trip:
                return self.can_manage_trip( resource, user_id )
            return self.can_manage( resource, user_id )
        if is_trip:
            return self.can_view_trip( resource, user_id )
        return self.can_view( resource, user_id )

    def _is_creator( self, resource : ShareableModel, user_id : int ) -> bool:
        return bool( resource.creator_id is not None and resource.creator_id == user_id )

    def _is_manage_level( self, level : AttendeePermissionLevel ) -> bool:
        return bool( level is not None and level.can_manage )
