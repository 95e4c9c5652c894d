import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from ts.apps.api.constants import APIFields as F
from ts.apps.api.messages import APIMessages as M
from ts.apps.api.views import TsApiView
from ts.apps.attendees.cascade import CascadeCoordinator
from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.registry import AttendeeRegistry
from ts.apps.items.resources import ResourceLocator
from ts.apps.permissions.mixins import ResourceViewMixin
from ts.apps.user.account_manager import AccountManager
from ts.exceptions import NotFoundError

from .serializers import AttendeeCreateSerializer, AttendeeSerializer, AttendeeUpdateSerializer

logger = logging.getLogger(__name__)


class AttendeeCollectionView( ResourceViewMixin, TsApiView ):
    """
    GET /api/v1/attendees/?resource_kind={kind}&resource_id={id}
    Lists the grants on one trip or item, oldest first.

    POST /api/v1/attendees/
    Adds an existing account (by email) to a trip or item. Adding to a
    trip also grants 'manage' on every item the trip currently holds.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request: Request ) -> Response:
        resource = self.get_resource(
            resource_kind = request.query_params.get( F.RESOURCE_KIND ),
            resource_id = request.query_params.get( F.RESOURCE_ID ),
        )
        self.assert_can_view( request, resource )

        attendee_list = AttendeeRegistry().list_grants( resource.resource_kind, resource.resource_id )
        serializer = AttendeeSerializer( attendee_list, many = True )
        return Response( serializer.data )

    def post( self, request: Request ) -> Response:
        serializer = AttendeeCreateSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )
        validated_data = serializer.validated_data

        resource = self.get_resource(
            resource_kind = validated_data[ 'resource_kind' ],
            resource_id = validated_data[ 'resource_id' ],
        )
        self.assert_can_manage( request, resource )

        account = AccountManager().find_by_identifier( validated_data[ 'email' ] )
        if account is None:
            raise NotFoundError( M.not_found( 'User with this email' ))

        attendee = AttendeeRegistry().grant(
            resource_kind = resource.resource_kind,
            resource_id = resource.resource_id,
            account_id = account.pk,
            level = validated_data[ 'permission_level' ],
            granted_by_id = request.user.pk,
        )

        response_data = AttendeeSerializer( attendee ).data
        if resource.resource_kind.is_trip:
            cascade_result = CascadeCoordinator().cascade_add(
                trip_id = resource.resource_id,
                account_id = account.pk,
                level = AttendeePermissionLevel.MANAGE,
                granted_by_id = request.user.pk,
            )
            response_data[ F.CASCADE ] = {
                F.GRANTED_COUNT: cascade_result.success_count,
                F.FAILED_COUNT: cascade_result.failure_count,
            }
        return Response( response_data, status = status.HTTP_201_CREATED )


class AttendeeItemView( ResourceViewMixin, TsApiView ):
    """
    PATCH /api/v1/attendees/{id}/
    Changes the grant's level (requires manage on the resource).

    DELETE /api/v1/attendees/{id}/
    Removes the grant. Allowed for the resource creator and for the
    attendee themself. The creator can only be detached from an item that
    belongs to a trip. Removing from a trip also removes the account from
    the trip's items.
    """
    permission_classes = [ IsAuthenticated ]

    def _get_attendee_and_resource( self, attendee_id: int ):
        try:
            attendee = AttendeeRegistry().get_grant( attendee_id )
        except NotFoundError:
            raise Http404()
        resource = ResourceLocator().find( attendee.resource_kind, attendee.resource_id )
        if resource is None:
            raise Http404()
        return attendee, resource

    def patch( self, request: Request, attendee_id: int ) -> Response:
        attendee, resource = self._get_attendee_and_resource( attendee_id )
        self.assert_can_manage( request, resource )

        serializer = AttendeeUpdateSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        attendee = AttendeeRegistry().update_level(
            resource_kind = attendee.resource_kind,
            resource_id = attendee.resource_id,
            account_id = attendee.account_id,
            level = serializer.validated_data[ 'permission_level' ],
        )
        return Response( AttendeeSerializer( attendee ).data )

    def delete( self, request: Request, attendee_id: int ) -> Response:
        attendee, resource = self._get_attendee_and_resource( attendee_id )

        if ( attendee.account_id == resource.creator_id
             and not AttendeeRegistry.is_creator_removable( resource.resource_kind,
                                                            resource.has_parent_trip )):
            raise PermissionDenied( M.CREATOR_NOT_REMOVABLE )

        if request.user.pk not in ( resource.creator_id, attendee.account_id ):
            raise PermissionDenied( M.REMOVE_NOT_ALLOWED )

        AttendeeRegistry().revoke(
            resource_kind = attendee.resource_kind,
            resource_id = attendee.resource_id,
            account_id = attendee.account_id,
        )
        if resource.resource_kind.is_trip:
            CascadeCoordinator().cascade_remove(
                trip_id = resource.resource_id,
                account_id = attendee.account_id,
            )
        return Response( status = status.HTTP_204_NO_CONTENT )
