"""
WSGI config for the Boxton layout project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'boxton_django.settings')

application = get_wsgi_application()
