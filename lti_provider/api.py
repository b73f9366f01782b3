"""
Python APIs used to admit LTI 1.1 launches and to read the session they establish.

Outcome services use `get_launch_session` to find the outcome service URL and result sourcedid
of the user's launch.
"""
from django.utils.module_loading import import_string

from lti_provider.lti_1p1.provider import LtiProvider1p1
from lti_provider.utils import get_credential_lookup_path, get_session_store_path


def get_credential_lookup():
    """
    Returns an instance of the credential lookup backend configured in LTI_PROVIDER_CREDENTIAL_LOOKUP.
    """
    return import_string(get_credential_lookup_path())()


def get_session_store():
    """
    Returns an instance of the session store configured in LTI_PROVIDER_SESSION_STORE.
    """
    return import_string(get_session_store_path())()


def get_launch_provider():
    """
    Returns an LtiProvider1p1 wired to the configured credential lookup and session store.
    """
    return LtiProvider1p1(
        credential_lookup=get_credential_lookup(),
        session_store=get_session_store(),
    )


def get_launch_session(session_key):
    """
    Returns the LaunchSession stored for a transport session key, or None if there is no admitted launch.

    Arguments:
        session_key (str): the Django session key of the user
    """
    return get_session_store().get(session_key)
