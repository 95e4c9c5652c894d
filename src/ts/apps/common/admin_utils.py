from django.urls import reverse
from django.utils.html import format_html


def admin_change_url( obj ) -> str:
    return reverse(
        f'admin:{obj._meta.app_label}_{obj._meta.model_name}_change',
        args = ( obj.pk, ),
    )


def admin_link( model_attribute_name : str,
                short_description : str,
                empty_description : str = "-" ):
    """ Decorator for linking between related fields in admin interfaces. """

    def wrap(func):
        def field_func(self, obj):
            related_obj = getattr( obj, model_attribute_name )
            if related_obj is None:
                return empty_description
            return format_html(
                '<a href="{}">{}</a>',
                admin_change_url( related_obj ),
                func( self, related_obj ),
            )
        field_func.short_description = short_description
        return field_func
    return wrap
