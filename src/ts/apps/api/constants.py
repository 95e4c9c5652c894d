"""
API field name constants. Check here before adding a new field name to a
request or response.
"""


class APIFields:

    # -------------------------------------------------------------------------
    # Common fields
    # -------------------------------------------------------------------------
    ERROR = 'error'
    ID = 'id'
    UUID = 'uuid'
    EMAIL = 'email'
    PHONE = 'phone'
    FIRST_NAME = 'first_name'
    LAST_NAME = 'last_name'
    IS_PLACEHOLDER = 'is_placeholder'
    CREATED_DATETIME = 'created_datetime'
    MODIFIED_DATETIME = 'modified_datetime'

    # -------------------------------------------------------------------------
    # Sharing
    # -------------------------------------------------------------------------
    RESOURCE_KIND = 'resource_kind'
    RESOURCE_ID = 'resource_id'
    PERMISSION_LEVEL = 'permission_level'
    REVERSE_PERMISSION_LEVEL = 'reverse_permission_level'
    IS_MUTUAL = 'is_mutual'
    IDENTIFIER = 'identifier'
    ACCOUNT = 'account'
    GRANTED_BY = 'granted_by'
    COMPANION = 'companion'
    CASCADE = 'cascade'
    GRANTED_COUNT = 'granted_count'
    REMOVED_COUNT = 'removed_count'
    FAILED_COUNT = 'failed_count'
