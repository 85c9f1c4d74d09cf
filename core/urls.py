# core/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    path('diensten', views.diensten, name='diensten'),
    path('over-ons', views.over_ons, name='over_ons'),
    path('privacybeleid', views.privacybeleid, name='privacybeleid'),
]
