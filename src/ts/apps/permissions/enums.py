from ts.apps.common.enums import LabeledEnum


class PermissionAction( LabeledEnum ):

    VIEW    = ( 'View'   , 'Read the resource' )
    MANAGE  = ( 'Manage' , 'Edit the resource and its sharing' )
    DELETE  = ( 'Delete' , 'Remove the resource (creator only)' )
