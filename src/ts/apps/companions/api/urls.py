from django.urls import path

from . import views


urlpatterns = [
    path( '', views.CompanionCollectionView.as_view(), name = 'api_companion_collection' ),
    path( 'added-me/', views.IncomingCompanionView.as_view(), name = 'api_companion_incoming' ),
    path( '<uuid:user_uuid>/', views.CompanionItemView.as_view(), name = 'api_companion_item' ),
]
