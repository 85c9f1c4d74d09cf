# contact/urls.py
from django.apps import apps
from django.urls import path
from .views import ContactView

urlpatterns = [
    path('contact', ContactView.as_view(store=apps.get_app_config('contact').store), name='contact'),
]
