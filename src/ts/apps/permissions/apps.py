from django.apps import AppConfig


class PermissionsConfig( AppConfig ):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ts.apps.permissions'
