from ts.apps.common.enums import LabeledEnum


class AttendeePermissionLevel( LabeledEnum ):
    """
    Local permission on one trip or item. Neither level allows deletion;
    only the creator of a resource can delete it.
    """
    VIEW    = ( 'View'   , 'Can view the trip or item' )
    MANAGE  = ( 'Manage' , 'Can view and edit the trip or item' )

    @property
    def can_manage(self) -> bool:
        return bool( self == AttendeePermissionLevel.MANAGE )
