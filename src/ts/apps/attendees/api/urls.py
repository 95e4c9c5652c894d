from django.urls import path

from . import views


urlpatterns = [
    path( '', views.AttendeeCollectionView.as_view(), name = 'api_attendee_collection' ),
    path( '<int:attendee_id>/', views.AttendeeItemView.as_view(), name = 'api_attendee_item' ),
]
