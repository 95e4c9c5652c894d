from dataclasses import dataclass

from .enums import CompanionPermissionLevel
from .models import Companion


@dataclass
class OutgoingCompanionData:
    """
    An edge the account owns ("accounts I can access"), together with the
    level of the reciprocal edge ("what they grant me back").
    """

    companion      : Companion
    reverse_level  : CompanionPermissionLevel

    @property
    def is_mutual(self) -> bool:
        return bool( self.companion.level.can_view and self.reverse_level.can_view )
