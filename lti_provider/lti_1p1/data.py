"""
This module provides the data structures that flow through an LTI 1.1 launch: the request being admitted, the
credential it is verified with, the session it produces and the verdict reported back to the transport layer.
"""
from types import MappingProxyType

from attrs import field, frozen, validators

from .constants import (
    LAUNCH_REDIRECT_ERROR,
    LAUNCH_REDIRECT_WELCOME,
    LaunchCapability,
    LaunchErrorKind,
    LaunchState,
)


def _freeze_params(params):
    return MappingProxyType(dict(params))


@frozen
class LaunchRequest:
    """
    The LaunchRequest class holds everything the launch provider needs to know about an inbound launch.

    * http_method (required): The HTTP method the request was sent with.
    * url (required): The absolute URL the request was sent to (scheme, host and path).
    * params (required): A read-only mapping of the launch parameters. It is the union of the form body
        parameters and the OAuth parameters of the Authorization header, see `oauth.merge_launch_parameters`.
    """
    http_method = field()
    url = field()
    params = field(factory=dict, converter=_freeze_params)

    def get(self, name, default=None):
        return self.params.get(name, default)

    def __getitem__(self, name):
        return self.params[name]

    def __contains__(self, name):
        return name in self.params


@frozen
class ConsumerCredential:
    """
    A consumer key and the shared secret registered for it. The secret is kept out of the repr so the
    credential can't leak through log messages.
    """
    consumer_key = field()
    secret = field(repr=False)


@frozen
class LaunchSession:
    """
    The LaunchSession class describes the actor admitted by a successful launch.

    * user_id (required): The LTI user_id of the launching user.
    * resource_link_id (required): The placement of the link that was launched.
    * roles (required): The normalized set of role URNs the user launched with.
    * capability (required): The LaunchCapability the session was admitted with.
    * person_name_given (optional): lis_person_name_given of the user.
    * person_name_family (optional): lis_person_name_family of the user.
    * outcome_service_url (conditionally required): URL of the outcome service to send grades back to. It is
        required if result_sourcedid is provided.
    * result_sourcedid (conditionally required): The LIS Result Identifier to send grades back for. It is required
        if outcome_service_url is provided.
    """
    user_id = field()
    resource_link_id = field()
    roles = field(converter=frozenset)
    capability = field(validator=validators.instance_of(LaunchCapability))
    person_name_given = field(default=None)
    person_name_family = field(default=None)
    outcome_service_url = field(default=None)
    result_sourcedid = field(default=None)

    @result_sourcedid.validator
    def _check_outcome_pair(self, attribute, value):  # pylint: disable=unused-argument
        if bool(self.outcome_service_url) != bool(value):
            raise ValueError("outcome_service_url and result_sourcedid must be provided together.")

    @property
    def has_grade_return(self):
        return bool(self.outcome_service_url and self.result_sourcedid)

    def to_dict(self):
        """
        Returns the session as a plain dict, keyed by the LTI parameter names, to hand to a session store.
        """
        data = {
            'user_id': self.user_id,
            'lis_person_name_given': self.person_name_given,
            'lis_person_name_family': self.person_name_family,
            'resource_link_id': self.resource_link_id,
            'roles': sorted(self.roles),
            'capability': self.capability.value,
        }
        if self.has_grade_return:
            data.update({
                'lis_outcome_service_url': self.outcome_service_url,
                'lis_result_sourcedid': self.result_sourcedid,
            })
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            user_id=data['user_id'],
            resource_link_id=data['resource_link_id'],
            roles=data['roles'],
            capability=LaunchCapability(data['capability']),
            person_name_given=data.get('lis_person_name_given'),
            person_name_family=data.get('lis_person_name_family'),
            outcome_service_url=data.get('lis_outcome_service_url'),
            result_sourcedid=data.get('lis_result_sourcedid'),
        )


@frozen
class LaunchDiagnostic:
    """
    A single reason a launch was rejected.
    """
    kind = field(validator=validators.instance_of(LaunchErrorKind))
    message = field()

    @classmethod
    def from_error(cls, error):
        return cls(kind=error.kind, message=str(error))


@frozen
class LaunchVerdict:
    """
    The outcome of admitting a launch request.

    * admitted (required): True only if the launch reached the SessionEstablished state.
    * state (required): The terminal LaunchState of the launch.
    * diagnostics (optional): Ordered LaunchDiagnostic instances explaining a rejection.
    * session (optional): The LaunchSession handed to the session store, for admitted launches.
    """
    admitted = field()
    state = field(validator=validators.instance_of(LaunchState))
    diagnostics = field(factory=tuple, converter=tuple)
    session = field(default=None, validator=validators.optional(validators.instance_of(LaunchSession)))

    @property
    def redirect_target(self):
        return LAUNCH_REDIRECT_WELCOME if self.admitted else LAUNCH_REDIRECT_ERROR

    @property
    def error_kinds(self):
        return [diagnostic.kind for diagnostic in self.diagnostics]
