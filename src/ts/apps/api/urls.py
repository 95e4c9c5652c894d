from django.urls import path, include


urlpatterns = [
    path('v1/attendees/', include('ts.apps.attendees.api.urls')),
    path('v1/companions/', include('ts.apps.companions.api.urls')),
]
