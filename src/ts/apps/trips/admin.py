from django.contrib import admin

from ts.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.Trip )
class TripAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'name',
        'creator_link',
        'purpose',
        'departure_date',
        'return_date',
        'uuid',
        'created_datetime',
    )

    list_filter = ( 'purpose', 'is_confirmed', 'created_datetime' )
    search_fields = [ 'name', 'description', 'created_by__email' ]
    readonly_fields = ( 'created_datetime', 'modified_datetime', 'uuid' )

    @admin_link( 'created_by', 'Creator' )
    def creator_link(self, created_by):
        return created_by.email or created_by.uuid_str
