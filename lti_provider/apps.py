"""
lti_provider Django application initialization.
"""

from django.apps import AppConfig


class LtiProviderApp(AppConfig):
    """
    Configuration for the lti_provider Django application.
    """

    name = 'lti_provider'
    verbose_name = 'LTI 1.1 Provider'
    default_auto_field = 'django.db.models.AutoField'
