from django.apps import AppConfig


class ItemsConfig( AppConfig ):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ts.apps.items'
