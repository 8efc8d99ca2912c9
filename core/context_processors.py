"""
Template context processors.
"""
from django.conf import settings


def site(request):
    """Expose the configured site name to every template rendered with a request."""
    return {'site_name': settings.SITE_NAME}
