from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ts.apps.trips.enums import ResourceKind

from .models import Attendee


@dataclass
class CascadeOutcome:
    """ What happened to one child resource during a cascade. """

    resource_kind  : ResourceKind
    resource_id    : int
    account_id     : int
    succeeded      : bool
    attendee       : Optional[ Attendee ]  = None
    removed_count  : int                   = 0
    error_message  : Optional[ str ]       = None


@dataclass
class CascadeResult:
    """
    Per-item outcomes of a best-effort cascade. A cascade never raises for
    a single item; failures are recorded here instead.
    """

    outcome_list  : List[ CascadeOutcome ]  = field( default_factory = list )

    def add( self, outcome : CascadeOutcome ) -> None:
        self.outcome_list.append( outcome )
        return

    def extend( self, other : 'CascadeResult' ) -> None:
        self.outcome_list.extend( other.outcome_list )
        return

    @property
    def succeeded(self) -> List[ CascadeOutcome ]:
        return [ x for x in self.outcome_list if x.succeeded ]

    @property
    def failed(self) -> List[ CascadeOutcome ]:
        return [ x for x in self.outcome_list if not x.succeeded ]

    @property
    def success_count(self) -> int:
        return len( self.succeeded )

    @property
    def failure_count(self) -> int:
        return len( self.failed )

    @property
    def is_complete(self) -> bool:
        return bool( self.failure_count == 0 )

    def granted_by_kind(self) -> Dict[ ResourceKind, List[ Attendee ]]:
        granted_map = { x: list() for x in ResourceKind.item_kinds() }
        for outcome in self.succeeded:
            if outcome.attendee is not None:
                granted_map.setdefault( outcome.resource_kind, list() ).append( outcome.attendee )
            continue
        return granted_map

    def removed_counts_by_kind(self) -> Dict[ ResourceKind, int ]:
        count_map = { x: 0 for x in ResourceKind.item_kinds() }
        for outcome in self.succeeded:
            count_map[ outcome.resource_kind ] = count_map.get( outcome.resource_kind, 0 ) + outcome.removed_count
            continue
        return count_map
