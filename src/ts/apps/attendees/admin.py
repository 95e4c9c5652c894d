from django.contrib import admin

from ts.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.Attendee )
class AttendeeAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'account_link',
        'resource_kind',
        'resource_id',
        'level',
        'granted_by_link',
        'created_datetime',
    )

    list_filter = ( 'resource_kind', 'level', 'created_datetime' )
    search_fields = [ 'account__email', 'account__phone' ]
    readonly_fields = ( 'created_datetime', 'modified_datetime' )

    @admin_link( 'account', 'Account' )
    def account_link(self, account):
        return str( account )

    @admin_link( 'granted_by', 'Granted By', empty_description = '(System)' )
    def granted_by_link(self, granted_by):
        return str( granted_by )
