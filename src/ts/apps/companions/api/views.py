from uuid import UUID

from django.contrib.auth import get_user_model
from django.http import Http404

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from ts.apps.api.views import TsApiView
from ts.apps.companions.directory import CompanionDirectory

from .serializers import (
    CompanionCreateSerializer,
    CompanionSerializer,
    CompanionUpdateSerializer,
    IncomingCompanionSerializer,
    OutgoingCompanionSerializer,
)

User = get_user_model()


class CompanionCollectionView( TsApiView ):
    """
    GET /api/v1/companions/
    Accounts the requester can access, with what each grants back.

    POST /api/v1/companions/
    Adds a companion by email or phone. An unknown identifier creates a
    placeholder account and then needs first_name and last_name.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request: Request ) -> Response:
        outgoing_list = CompanionDirectory().get_outgoing( request.user.pk )
        serializer = OutgoingCompanionSerializer( outgoing_list, many = True )
        return Response( serializer.data )

    def post( self, request: Request ) -> Response:
        serializer = CompanionCreateSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )
        validated_data = serializer.validated_data

        companion = CompanionDirectory().add_companion(
            grantor_id = request.user.pk,
            identifier = validated_data[ 'identifier' ],
            level = validated_data[ 'permission_level' ],
            first_name = validated_data.get( 'first_name' ),
            last_name = validated_data.get( 'last_name' ),
        )
        return Response( CompanionSerializer( companion ).data, status = status.HTTP_201_CREATED )


class IncomingCompanionView( TsApiView ):
    """
    GET /api/v1/companions/added-me/
    Accounts that added the requester.
    """
    permission_classes = [ IsAuthenticated ]

    def get( self, request: Request ) -> Response:
        incoming_list = CompanionDirectory().get_incoming( request.user.pk )
        serializer = IncomingCompanionSerializer( incoming_list, many = True )
        return Response( serializer.data )


class CompanionItemView( TsApiView ):
    """
    PATCH /api/v1/companions/{user_uuid}/
    Changes the level of the requester's own edge towards that account.

    DELETE /api/v1/companions/{user_uuid}/
    Removes the relationship in both directions.
    """
    permission_classes = [ IsAuthenticated ]

    def _get_other_user( self, user_uuid: UUID ):
        try:
            return User.objects.get( uuid = user_uuid )
        except User.DoesNotExist:
            raise Http404()

    def patch( self, request: Request, user_uuid: UUID ) -> Response:
        other_user = self._get_other_user( user_uuid )

        serializer = CompanionUpdateSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        companion = CompanionDirectory().update_permission(
            grantor_id = request.user.pk,
            grantee_id = other_user.pk,
            level = serializer.validated_data[ 'permission_level' ],
        )
        return Response( CompanionSerializer( companion ).data )

    def delete( self, request: Request, user_uuid: UUID ) -> Response:
        other_user = self._get_other_user( user_uuid )
        CompanionDirectory().remove_companion(
            grantor_id = request.user.pk,
            grantee_id = other_user.pk,
        )
        return Response( status = status.HTTP_204_NO_CONTENT )
