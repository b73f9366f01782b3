"""
Exceptions for the LTI 1.1 launch provider.

Every exception maps to one `LaunchErrorKind`, which is what ends up
in the diagnostics of a rejected launch.
"""
from .constants import LaunchErrorKind


class LtiLaunchError(Exception):
    """
    This is the base exception for LTI 1.1 launch errors. Launch errors should extend this class and set the
    `kind` attribute to the error kind they report.
    """
    kind = None
    message = None

    def __init__(self, message=None):
        if not message:
            message = self.message
        super().__init__(message)


class MissingParameter(LtiLaunchError):
    kind = LaunchErrorKind.MISSING_PARAMETER
    message = "A required launch parameter is missing."


class InvalidParameterValue(LtiLaunchError):
    kind = LaunchErrorKind.INVALID_PARAMETER_VALUE
    message = "A launch parameter has an invalid value."


class OAuthParsingFailure(LtiLaunchError):
    kind = LaunchErrorKind.OAUTH_PARSING_FAILURE
    message = "The OAuth Authorization header could not be parsed."


class SignatureMismatch(LtiLaunchError):
    kind = LaunchErrorKind.SIGNATURE_MISMATCH
    message = "The OAuth signature does not match the request."


class CredentialNotFound(LtiLaunchError):
    kind = LaunchErrorKind.CREDENTIAL_NOT_FOUND
    message = "No shared secret is registered for the consumer key."


class MissingRole(LtiLaunchError):
    """
    Raised when the launch carries neither the Instructor nor the Learner role.
    """
    kind = LaunchErrorKind.MISSING_ROLE
    message = "Missing required instructor or learner role."

    def __init__(self, roles=None, message=None):
        self.roles = roles
        if not message and roles is not None:
            message = f"{self.message} ({roles})"
        super().__init__(message)


class SessionStoreFailure(LtiLaunchError):
    kind = LaunchErrorKind.SESSION_STORE_FAILURE
    message = "The launch session could not be stored."
