from django.apps import AppConfig


class CommonConfig( AppConfig ):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ts.apps.common'
