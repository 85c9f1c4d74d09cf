"""
WSGI config for ict_eerbeek project.

Builds the application, then makes sure the contact submission table exists
before the first request is served.
"""
import atexit
import os

from django.apps import apps
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ict_eerbeek.settings.dev')

application = get_wsgi_application()

store = apps.get_app_config('contact').store
store.ensure_schema()
atexit.register(store.close)
