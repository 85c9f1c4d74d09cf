# chatbot/urls.py
from django.apps import apps
from django.urls import path
from .views import ChatView

urlpatterns = [
    path('chat', ChatView.as_view(client=apps.get_app_config('chatbot').client), name='chat'),
]
