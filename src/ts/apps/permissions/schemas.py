from dataclasses import dataclass


@dataclass( frozen = True )
class ResourcePermissions:
    """ All verdicts for one user on one resource. """

    can_view    : bool  = False
    can_manage  : bool  = False
    can_delete  : bool  = False
    is_creator  : bool  = False

    @property
    def is_shared(self) -> bool:
        """ Visible through an attendee grant or companion edge, not ownership. """
        return bool( self.can_view and not self.is_creator )

    def to_dict(self):
        return {
            'can_view': self.can_view,
            'can_manage': self.can_manage,
            'can_delete': self.can_delete,
            'is_creator': self.is_creator,
            'is_shared': self.is_shared,
        }
