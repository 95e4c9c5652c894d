from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.translation import gettext_lazy as _

from .forms import (
    CustomUserChangeForm,
    CustomUserCreationForm,
)
from .models import CustomUser


@admin.register( CustomUser )
class CustomUserAdmin( UserAdmin ):
    model = CustomUser
    form = CustomUserChangeForm
    add_form = CustomUserCreationForm

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "phone",
                    "first_name",
                    "last_name",
                    "password1",
                    "password2",
                ),
            },
        ),
    )

    fieldsets = (
        (None, {"fields": ("email", "phone", "password")}),
        (_("Personal info"), {"fields": ("first_name", "last_name")}),
        (
            _("Sharing"),
            {"fields": ("is_placeholder",)},
        ),
        (
            _("Permissions"),
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                ),
            },
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined")}),
    )

    list_display = ("email", "phone", "uuid", "first_name", "last_name", "is_placeholder", "is_staff")
    list_filter = ("is_placeholder", "is_staff", "is_superuser", "is_active")
    search_fields = ( "email", "phone", "uuid" )
    ordering = ("id",)
