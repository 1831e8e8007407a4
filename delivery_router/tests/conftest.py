import os
import django

# Configure Django settings before any tests are run
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'delivery_router.tests.test_settings')
django.setup()

# # For running all tests
# python -m pytest delivery_router/tests/
