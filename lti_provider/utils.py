"""
Utility functions for the LTI provider
"""
from django.conf import settings

DEFAULT_CREDENTIAL_LOOKUP = 'lti_provider.credentials.DatabaseCredentialLookup'
DEFAULT_SESSION_STORE = 'lti_provider.session_store.CacheLaunchSessionStore'
DEFAULT_SESSION_TIMEOUT = 60 * 60


def get_lti_provider_base():
    """
    Returns the base url the launch URL is built from, if it is overridden.

    Launches are signed against the URL the consumer sent the request to. Behind a proxy or a TLS
    terminating load balancer the URL Django sees differs from it, use the setting
    LTI_PROVIDER_BASE_URL_OVERRIDE in that case.
    """
    return getattr(settings, 'LTI_PROVIDER_BASE_URL_OVERRIDE', None)


def get_launch_url(request):
    """
    Returns the absolute URL, without query string, a launch request was signed against.

    :param request: the Django request of the launch
    """
    base_url = get_lti_provider_base()
    if base_url:
        return base_url.rstrip('/') + request.path
    return request.build_absolute_uri(request.path)


def get_registered_consumers():
    """
    Returns the consumer key -> shared secret mapping configured in LTI_PROVIDER_CONSUMERS.
    """
    return getattr(settings, 'LTI_PROVIDER_CONSUMERS', {})


def get_credential_lookup_path():
    return getattr(settings, 'LTI_PROVIDER_CREDENTIAL_LOOKUP', DEFAULT_CREDENTIAL_LOOKUP)


def get_session_store_path():
    return getattr(settings, 'LTI_PROVIDER_SESSION_STORE', DEFAULT_SESSION_STORE)


def get_session_cache_alias():
    return getattr(settings, 'LTI_PROVIDER_SESSION_CACHE', 'default')


def get_session_timeout():
    """
    Returns how long, in seconds, a launch session is kept.
    """
    return getattr(settings, 'LTI_PROVIDER_SESSION_TIMEOUT', DEFAULT_SESSION_TIMEOUT)


def get_welcome_url():
    return getattr(settings, 'LTI_PROVIDER_WELCOME_URL', '/')


def get_error_url():
    return getattr(settings, 'LTI_PROVIDER_ERROR_URL', '/')
