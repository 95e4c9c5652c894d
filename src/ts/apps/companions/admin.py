from django.contrib import admin

from ts.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.Companion )
class CompanionAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'grantor_link',
        'grantee_link',
        'level',
        'created_datetime',
    )

    list_filter = ( 'level', 'created_datetime' )
    search_fields = [ 'grantor__email', 'grantee__email', 'grantee__phone' ]
    readonly_fields = ( 'created_datetime', 'modified_datetime' )

    @admin_link( 'grantor', 'Grantor' )
    def grantor_link(self, grantor):
        return str( grantor )

    @admin_link( 'grantee', 'Grantee' )
    def grantee_link(self, grantee):
        return str( grantee )

    # Edges exist in pairs; adding or deleting one side here would break that.
    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj = None):
        return False
