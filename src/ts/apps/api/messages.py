"""
Consistent phrasing for user-facing API messages.
"""


class APIMessages:

    @staticmethod
    def is_required(field: str) -> str:
        return f'{field} is required'

    @staticmethod
    def not_found(resource: str) -> str:
        return f'{resource} not found'

    # -------------------------------------------------------------------------
    # Sharing messages
    # -------------------------------------------------------------------------
    CREATOR_NOT_REMOVABLE = 'The creator can only be removed from an item that belongs to a trip.'
    REMOVE_NOT_ALLOWED = 'Only the creator or the attendee themself can remove this attendee.'

    # -------------------------------------------------------------------------
    # Generic error messages
    # -------------------------------------------------------------------------
    BAD_REQUEST = 'Bad request'
