"""
LTI 1.1 Constants definition file

This includes the literal values a basic launch request must carry,
the LIS role vocabulary used to admit a launch and the enums used
to report the outcome of a launch.
"""
from enum import Enum


LTI_1P1_MESSAGE_TYPE = 'basic-lti-launch-request'
LTI_1P1_VERSION = 'LTI-1p0'
LTI_1P1_HTTP_METHOD = 'POST'

OAUTH_SIGNATURE_METHOD = 'HMAC-SHA1'
OAUTH_VERSION = '1.0'

# Parameters that must be present and hold a non-empty value
LTI_1P1_REQUIRED_PARAMETERS = [
    'resource_link_id',
    'user_id',
    'roles',
]

# https://www.imsglobal.org/specs/ltiv1p1/implementation-guide#toc-16
LTI_1P1_ROLE_URN_PREFIX = 'urn:lti:role:ims/lis/'
LTI_1P1_ROLE_INSTRUCTOR = LTI_1P1_ROLE_URN_PREFIX + 'Instructor'
LTI_1P1_ROLE_LEARNER = LTI_1P1_ROLE_URN_PREFIX + 'Learner'


class LaunchErrorKind(Enum):
    """ Reasons a launch request can be rejected for """
    MISSING_PARAMETER = 'MissingParameter'
    INVALID_PARAMETER_VALUE = 'InvalidParameterValue'
    OAUTH_PARSING_FAILURE = 'OAuthParsingFailure'
    SIGNATURE_MISMATCH = 'SignatureMismatch'
    CREDENTIAL_NOT_FOUND = 'CredentialNotFound'
    MISSING_ROLE = 'MissingRole'
    SESSION_STORE_FAILURE = 'SessionStoreFailure'


class LaunchState(Enum):
    """ States a launch request goes through while it is being admitted """
    RECEIVED = 'Received'
    PARAMS_CHECKED = 'ParamsChecked'
    SIGNATURE_CHECKED = 'SignatureChecked'
    ROLE_RESOLVED = 'RoleResolved'
    SESSION_ESTABLISHED = 'SessionEstablished'
    REJECTED = 'Rejected'


class LaunchCapability(Enum):
    """ Capability a launch session is admitted with """
    INSTRUCTOR = 'Instructor'
    LEARNER = 'Learner'


LAUNCH_REDIRECT_WELCOME = 'welcome'
LAUNCH_REDIRECT_ERROR = 'error'
