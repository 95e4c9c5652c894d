from typing import Any, Dict

from rest_framework import serializers

from ts.apps.api.constants import APIFields as F
from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.models import Attendee
from ts.apps.trips.enums import ResourceKind


class AttendeeSerializer( serializers.Serializer ):
    """
    Explicit (non-model) serializer so the API contract only changes
    deliberately.
    """

    def to_representation( self, instance: Attendee ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.RESOURCE_KIND: str( instance.resource_kind ),
            F.RESOURCE_ID: instance.resource_id,
            F.PERMISSION_LEVEL: str( instance.level ),
            F.ACCOUNT: instance.account.to_public_dict(),
            F.GRANTED_BY: instance.granted_by.uuid_str if instance.granted_by_id else None,
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
        }


class AttendeeCreateSerializer( serializers.Serializer ):

    email = serializers.CharField( max_length = 254 )
    resource_kind = serializers.ChoiceField( choices = [ str(x) for x in ResourceKind ] )
    resource_id = serializers.IntegerField( min_value = 1 )
    permission_level = serializers.ChoiceField(
        choices = [ str(x) for x in AttendeePermissionLevel ],
        required = False,
    )

    def validate( self, attrs ):
        attrs[ 'resource_kind' ] = ResourceKind.from_name( attrs[ 'resource_kind' ] )
        if attrs.get( 'permission_level' ):
            attrs[ 'permission_level' ] = AttendeePermissionLevel.from_name( attrs[ 'permission_level' ] )
        elif attrs[ 'resource_kind' ].is_trip:
            attrs[ 'permission_level' ] = AttendeePermissionLevel.MANAGE
        else:
            attrs[ 'permission_level' ] = AttendeePermissionLevel.VIEW
        return attrs


class AttendeeUpdateSerializer( serializers.Serializer ):

    permission_level = serializers.ChoiceField(
        choices = [ str(x) for x in AttendeePermissionLevel ],
    )

    def validate_permission_level( self, value ):
        return AttendeePermissionLevel.from_name( value )
