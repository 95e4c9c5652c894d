"""
WSGI config for the trip-share project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault( 'DJANGO_SETTINGS_MODULE', 'ts.settings.development' )

application = get_wsgi_application()
