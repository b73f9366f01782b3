"""
Launch session establishment for admitted LTI 1.1 launches.
"""
import logging

from .constants import LTI_1P1_ROLE_INSTRUCTOR, LTI_1P1_ROLE_LEARNER, LaunchCapability
from .data import LaunchSession
from .exceptions import MissingRole

log = logging.getLogger(__name__)


def get_launch_capability(roles):
    """
    Returns the LaunchCapability granted by a set of role URNs, or None if none is granted.

    Instructor takes precedence over Learner when both roles are present.
    """
    if LTI_1P1_ROLE_INSTRUCTOR in roles:
        return LaunchCapability.INSTRUCTOR
    if LTI_1P1_ROLE_LEARNER in roles:
        return LaunchCapability.LEARNER
    return None


def establish_launch_session(launch_request, roles):
    """
    Builds the LaunchSession for a validated and authenticated launch request.

    Only Instructor sessions carry grade return data, and only if both the outcome service URL and the
    result sourcedid were sent. A missing one of the two is not an error, the session just can't return grades.

    Arguments:
        launch_request (LaunchRequest): validated, signature-verified request
        roles (frozenset): the normalized role URNs of the request

    Returns:
        LaunchSession: a new session, never a modified previous one

    Raises:
        MissingRole if the roles grant neither Instructor nor Learner capability
    """
    capability = get_launch_capability(roles)
    if capability is None:
        raise MissingRole(roles=launch_request.get('roles'))

    outcome_service_url = None
    result_sourcedid = None
    if capability == LaunchCapability.INSTRUCTOR:
        if launch_request.get('lis_outcome_service_url') and launch_request.get('lis_result_sourcedid'):
            outcome_service_url = launch_request['lis_outcome_service_url']
            result_sourcedid = launch_request['lis_result_sourcedid']
        else:
            log.info(
                "[LTI] Instructor launch for resource_link_id %s has no grade return data.",
                launch_request.get('resource_link_id'),
            )

    return LaunchSession(
        user_id=launch_request['user_id'],
        resource_link_id=launch_request['resource_link_id'],
        roles=roles,
        capability=capability,
        person_name_given=launch_request.get('lis_person_name_given'),
        person_name_family=launch_request.get('lis_person_name_family'),
        outcome_service_url=outcome_service_url,
        result_sourcedid=result_sourcedid,
    )
