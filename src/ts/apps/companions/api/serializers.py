from typing import Any, Dict

from rest_framework import serializers

from ts.apps.api.constants import APIFields as F
from ts.apps.companions.enums import CompanionPermissionLevel
from ts.apps.companions.models import Companion
from ts.apps.companions.schemas import OutgoingCompanionData


class OutgoingCompanionSerializer( serializers.Serializer ):

    def to_representation( self, instance: OutgoingCompanionData ) -> Dict[str, Any]:
        return {
            F.COMPANION: instance.companion.grantee.to_public_dict(),
            F.PERMISSION_LEVEL: str( instance.companion.level ),
            F.REVERSE_PERMISSION_LEVEL: str( instance.reverse_level ),
            F.IS_MUTUAL: instance.is_mutual,
            F.CREATED_DATETIME: instance.companion.created_datetime.isoformat(),
        }


class IncomingCompanionSerializer( serializers.Serializer ):

    def to_representation( self, instance: Companion ) -> Dict[str, Any]:
        return {
            F.COMPANION: instance.grantor.to_public_dict(),
            F.PERMISSION_LEVEL: str( instance.level ),
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
        }


class CompanionSerializer( serializers.Serializer ):
    """ One edge as seen by its grantor. """

    def to_representation( self, instance: Companion ) -> Dict[str, Any]:
        return {
            F.COMPANION: instance.grantee.to_public_dict(),
            F.PERMISSION_LEVEL: str( instance.level ),
            F.CREATED_DATETIME: instance.created_datetime.isoformat(),
        }


class CompanionCreateSerializer( serializers.Serializer ):

    identifier = serializers.CharField( max_length = 254 )
    permission_level = serializers.ChoiceField(
        choices = [ str(x) for x in CompanionPermissionLevel ],
        required = False,
        default = str( CompanionPermissionLevel.VIEW ),
    )
    first_name = serializers.CharField( max_length = 150, required = False, allow_blank = True )
    last_name = serializers.CharField( max_length = 150, required = False, allow_blank = True )

    def validate_permission_level( self, value ):
        return CompanionPermissionLevel.from_name( value )


class CompanionUpdateSerializer( serializers.Serializer ):

    permission_level = serializers.ChoiceField(
        choices = [ str(x) for x in CompanionPermissionLevel ],
    )

    def validate_permission_level( self, value ):
        return CompanionPermissionLevel.from_name( value )
