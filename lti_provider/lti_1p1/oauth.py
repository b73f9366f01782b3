"""
Utility functions for verifying the OAuth 1.0a signature of an LTI 1.1 launch.

Launches are signed with a single-legged HMAC-SHA1 signature, so there is no token secret involved:
the signing key is the percent-encoded consumer secret followed by '&'.
See https://tools.ietf.org/html/rfc5849#section-3.4
"""

import logging

from oauthlib import oauth1
from oauthlib.common import safe_string_equals
from oauthlib.oauth1.rfc5849 import signature, utils

from .exceptions import OAuthParsingFailure

log = logging.getLogger(__name__)


def parse_authorization_header(authorization_header):
    """
    Extracts the OAuth parameters from an `Authorization: OAuth ...` header.

    The header looks like:
    Authorization: OAuth oauth_nonce="80966668944732164491378916897",
    oauth_timestamp="1378916897", oauth_version="1.0", oauth_signature_method="HMAC-SHA1",
    oauth_consumer_key="", oauth_signature="frVp4JuvT1mVXlxktiAUjQ7%2F1cw%3D"

    Arguments:
        authorization_header (str): value of the Authorization header, may be empty

    Returns:
        dict: unescaped `oauth_*` parameters, empty if there is no header

    Raises:
        OAuthParsingFailure if the header is present but malformed
    """
    if not authorization_header:
        return {}

    try:
        params = utils.parse_authorization_header(authorization_header)
    except (ValueError, TypeError) as err:
        raise OAuthParsingFailure(f"Malformed OAuth Authorization header: {err}") from err

    # `realm` and any other non-oauth value is not part of the signed parameters.
    return {key: utils.unescape(value) for key, value in params if key.startswith('oauth_')}


def merge_launch_parameters(header_params, body_params):
    """
    Combines the Authorization header parameters with the form body parameters.

    When the same key is sent in both places the header value wins.
    """
    params = dict(body_params)
    params.update(header_params)
    return params


def get_signed_parameters(params):
    """
    Returns the parameters covered by the signature, as a list of (key, value) tuples.

    `oauth_signature` itself is never part of the signed set.
    """
    return [(key, value) for key, value in params.items() if key != 'oauth_signature']


def get_signature_base_string(http_method, url, params):
    """
    Builds the signature base string: METHOD&percent-encode(url)&percent-encode(normalized parameters)

    Arguments:
        http_method (str): HTTP method of the request
        url (str): absolute request URL, any query string is ignored
        params (dict): launch parameters, `oauth_signature` is left out

    Raises:
        ValueError if the url isn't absolute
    """
    normalized_params = signature.normalize_parameters(get_signed_parameters(params))
    return signature.signature_base_string(
        http_method.upper(),
        signature.base_string_uri(url),
        normalized_params,
    )


def get_launch_signature(base_string, secret, consumer_key=''):
    """
    Returns the base64 encoded HMAC-SHA1 signature of the base string, signed with the consumer secret.

    There is no resource owner in a launch, so the signing key is the consumer secret followed by '&'.
    """
    client = oauth1.Client(consumer_key, client_secret=secret or '')
    return signature.sign_hmac_sha1_with_client(base_string, client)


def verify_launch_signature(launch_request, credential):
    """
    Verify the `oauth_signature` of a launch request against the shared secret of its consumer.

    Arguments:
        launch_request (LaunchRequest): the merged launch request
        credential (ConsumerCredential): credential registered for the request's consumer key

    Returns:
        bool: True if the signature matches
    """
    try:
        base_string = get_signature_base_string(launch_request.http_method, launch_request.url, launch_request.params)
    except ValueError as err:
        log.error("[LTI] Unable to build signature base string for url %s: %s", launch_request.url, err)
        return False

    expected_signature = get_launch_signature(base_string, credential.secret, credential.consumer_key)
    if safe_string_equals(expected_signature, launch_request.get('oauth_signature', '')):
        return True

    log.error(
        "[LTI] Signature mismatch. oauth_consumer_key (%s) oauth_nonce (%s) oauth_timestamp (%s)",
        launch_request.get('oauth_consumer_key'),
        launch_request.get('oauth_nonce'),
        launch_request.get('oauth_timestamp'),
    )
    return False
