"""
ASGI config for ict_eerbeek project.
"""
import atexit
import os

from django.apps import apps
from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ict_eerbeek.settings.dev')

application = get_asgi_application()

store = apps.get_app_config('contact').store
store.ensure_schema()
atexit.register(store.close)
