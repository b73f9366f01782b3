"""
Validation of the parameters an LTI 1.1 basic launch request must carry.
"""
import logging

from .constants import (
    LTI_1P1_HTTP_METHOD,
    LTI_1P1_MESSAGE_TYPE,
    LTI_1P1_REQUIRED_PARAMETERS,
    LTI_1P1_VERSION,
    OAUTH_SIGNATURE_METHOD,
    OAUTH_VERSION,
)
from .data import LaunchDiagnostic
from .exceptions import InvalidParameterValue, MissingParameter

log = logging.getLogger(__name__)


def _check_literal(launch_request, name, expected_value):
    if name not in launch_request:
        return MissingParameter(f"Missing {name}.")
    if launch_request[name] != expected_value:
        return InvalidParameterValue(f"Invalid {name} ({launch_request[name]}), expected {expected_value}.")
    return None


def _check_present(launch_request, name):
    if name not in launch_request:
        return MissingParameter(f"Missing {name}.")
    return None


def _check_not_empty(launch_request, name):
    if not launch_request.get(name):
        return MissingParameter(f"Missing {name}.")
    return None


def validate_launch_parameters(launch_request):
    """
    Validate that a launch request carries all the LTI and OAuth parameters required for a basic launch.

    Every check is run, so a rejected request reports all of its problems at once.

    Arguments:
        launch_request (LaunchRequest): the request to validate, it is not modified

    Returns:
        (bool, list): whether the request is valid and the LaunchDiagnostic found
    """
    errors = []

    if launch_request.http_method != LTI_1P1_HTTP_METHOD:
        errors.append(InvalidParameterValue(f"Missing or wrong REQUEST_METHOD ({launch_request.http_method})."))

    errors.append(_check_literal(launch_request, 'lti_message_type', LTI_1P1_MESSAGE_TYPE))
    errors.append(_check_literal(launch_request, 'lti_version', LTI_1P1_VERSION))
    errors.extend(_check_not_empty(launch_request, name) for name in LTI_1P1_REQUIRED_PARAMETERS)

    errors.append(_check_present(launch_request, 'oauth_consumer_key'))
    errors.append(_check_present(launch_request, 'oauth_nonce'))
    errors.append(_check_present(launch_request, 'oauth_signature'))
    errors.append(_check_literal(launch_request, 'oauth_signature_method', OAUTH_SIGNATURE_METHOD))
    errors.append(_check_present(launch_request, 'oauth_timestamp'))
    errors.append(_check_literal(launch_request, 'oauth_version', OAUTH_VERSION))

    diagnostics = [LaunchDiagnostic.from_error(error) for error in errors if error is not None]
    for diagnostic in diagnostics:
        log.error("[LTI] %s", diagnostic.message)

    if diagnostics:
        return False, diagnostics
    else:
        return True, []
