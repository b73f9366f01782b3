"""
LTI provider launch views
"""
import logging

from django.shortcuts import redirect
from django.views.decorators.clickjacking import xframe_options_exempt
from django.views.decorators.csrf import csrf_exempt

from lti_provider.api import get_launch_provider
from lti_provider.lti_1p1.constants import LAUNCH_REDIRECT_WELCOME
from lti_provider.signals import LTI_1P1_LAUNCH_ADMITTED
from lti_provider.utils import get_error_url, get_launch_url, get_welcome_url

log = logging.getLogger(__name__)


def _get_session_key(request):
    """
    Returns the session key of the request, creating a session if the browser doesn't have one yet.
    """
    if not request.session.session_key:
        request.session.create()
    return request.session.session_key


@xframe_options_exempt
@csrf_exempt
def launch_endpoint(request):
    """
    Receives an LTI 1.1 basic launch request from a tool consumer.

    The launch is admitted by the configured LtiProvider1p1 and the browser is redirected to the
    welcome page if it succeeds, or to the error page otherwise. The reasons of a rejection are only
    logged, the user doesn't get to see them.

    Any HTTP method is accepted here so a launch with the wrong method is reported like any other
    invalid launch.
    """
    session_key = _get_session_key(request)
    provider = get_launch_provider()
    verdict = provider.admit(
        http_method=request.method,
        url=get_launch_url(request),
        body_params=request.POST.dict(),
        authorization_header=request.headers.get('Authorization'),
        session_key=session_key,
    )

    if verdict.redirect_target != LAUNCH_REDIRECT_WELCOME:
        log.info("[LTI] Redirecting rejected launch from request path %s to the error page.", request.path)
        return redirect(get_error_url())

    LTI_1P1_LAUNCH_ADMITTED.send(
        sender=None,
        session_key=session_key,
        launch_session=verdict.session,
    )
    return redirect(get_welcome_url())
