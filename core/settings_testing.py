"""
Settings for the test suite.

Provides a throwaway SECRET_KEY and pins DEBUG on so the production
security block (SSL redirect, secure cookies) stays out of the test client's
way. Everything else comes from core.settings.
"""
import os

os.environ.setdefault('SECRET_KEY', 'django-insecure-test-key-not-for-production')
os.environ['DEBUG'] = 'True'

from core.settings import *  # noqa: E402,F401,F403
