from typing import List

from ts.apps.common.enums import LabeledEnum


class CompanionPermissionLevel( LabeledEnum ):
    """
    Global level held by an edge's grantor over the grantee's trips and
    items. Never includes deletion.
    """
    NONE        = ( 'None'       , 'No access (default for the reciprocal edge)' )
    VIEW        = ( 'View'       , 'Can view all trips and items' )
    MANAGE_ALL  = ( 'Manage All' , 'Can view and edit all trips and items' )

    @property
    def can_view(self) -> bool:
        return bool( self in CompanionPermissionLevel.viewing_levels() )

    @property
    def can_manage_all(self) -> bool:
        return bool( self == CompanionPermissionLevel.MANAGE_ALL )

    @classmethod
    def viewing_levels(cls) -> List[ 'CompanionPermissionLevel' ]:
        return [ cls.VIEW, cls.MANAGE_ALL ]
