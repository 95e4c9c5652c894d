from django.apps import AppConfig


class AttendeesConfig( AppConfig ):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ts.apps.attendees'

    def ready(self):
        from . import signals  # noqa: F401
        return
