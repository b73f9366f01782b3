"""
This module encapsulates the admission of LTI 1.1 basic launch requests.

For the LTI 1.1 specification see:
https://www.imsglobal.org/specs/ltiv1p1
"""
import logging

from .constants import LaunchState
from .data import LaunchDiagnostic, LaunchRequest, LaunchVerdict
from .exceptions import LtiLaunchError, OAuthParsingFailure, SessionStoreFailure, SignatureMismatch
from .oauth import merge_launch_parameters, parse_authorization_header, verify_launch_signature
from .roles import normalize_roles
from .session import establish_launch_session
from .validation import validate_launch_parameters

log = logging.getLogger(__name__)


class LtiProvider1p1:
    """
    Admits LTI 1.1 launch requests.

    A launch goes through Received -> ParamsChecked -> SignatureChecked -> RoleResolved -> SessionEstablished,
    and ends up Rejected as soon as a stage fails. Only a launch reaching SessionEstablished writes a session.
    """

    def __init__(self, credential_lookup, session_store):
        """
        Initialize LTI 1.1 Provider class

        Arguments:
            credential_lookup (ConsumerCredentialLookup):  resolves consumer keys to their shared secret
            session_store (LaunchSessionStore):  stores launch sessions under a transport session key
        """
        self.credential_lookup = credential_lookup
        self.session_store = session_store

    @staticmethod
    def build_launch_request(http_method, url, body_params, authorization_header=None):
        """
        Builds a LaunchRequest from the pieces of an HTTP request.

        Raises:
            OAuthParsingFailure if the Authorization header can't be parsed
        """
        header_params = parse_authorization_header(authorization_header)
        return LaunchRequest(
            http_method=http_method,
            url=url,
            params=merge_launch_parameters(header_params, body_params),
        )

    def admit(self, http_method, url, body_params, authorization_header=None, session_key=None):
        """
        Validates, authenticates and establishes a session for a launch request.

        Arguments:
            http_method (string):  HTTP method of the request
            url (string):  absolute URL the request was sent to, without query string
            body_params (dict):  form parameters of the request
            authorization_header (string):  value of the Authorization header, if any
            session_key (string):  transport session identifier the launch session is stored under

        Returns:
            LaunchVerdict: the outcome of the launch
        """
        log.info("[LTI] Launch request received.")
        state = LaunchState.RECEIVED

        try:
            launch_request = self.build_launch_request(http_method, url, body_params, authorization_header)
        except OAuthParsingFailure as err:
            return self._reject(state, [LaunchDiagnostic.from_error(err)], session_key)

        is_valid, diagnostics = validate_launch_parameters(launch_request)
        if not is_valid:
            return self._reject(state, diagnostics, session_key)
        state = LaunchState.PARAMS_CHECKED

        try:
            credential = self.credential_lookup.resolve_credential(launch_request['oauth_consumer_key'])
            if not verify_launch_signature(launch_request, credential):
                raise SignatureMismatch()
            state = LaunchState.SIGNATURE_CHECKED

            launch_session = establish_launch_session(launch_request, normalize_roles(launch_request['roles']))
            state = LaunchState.ROLE_RESOLVED

            self.session_store.replace(session_key, launch_session)
        except LtiLaunchError as err:
            return self._reject(state, [LaunchDiagnostic.from_error(err)], session_key)

        log.info(
            "[LTI] Launch session established for user_id %s with %s capability.",
            launch_session.user_id,
            launch_session.capability.value,
        )
        return LaunchVerdict(
            admitted=True,
            state=LaunchState.SESSION_ESTABLISHED,
            session=launch_session,
        )

    def _reject(self, state, diagnostics, session_key):
        """
        Rejects the launch, dropping any session a previous launch left under the same session key.
        """
        diagnostics = list(diagnostics)
        log.error(
            "[LTI] Launch rejected in state %s: %s",
            state.value,
            ", ".join(diagnostic.message for diagnostic in diagnostics),
        )

        if session_key:
            try:
                self.session_store.clear(session_key)
            except SessionStoreFailure as err:
                log.error("[LTI] Unable to clear previous launch session: %s", err)
                diagnostics.append(LaunchDiagnostic.from_error(err))

        return LaunchVerdict(
            admitted=False,
            state=LaunchState.REJECTED,
            diagnostics=diagnostics,
        )
