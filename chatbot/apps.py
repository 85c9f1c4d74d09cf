from django.apps import AppConfig


class ChatbotConfig(AppConfig):
    name = 'chatbot'

    def ready(self):
        from core.ai_client import AIClient
        self.client = AIClient()
