"""
LTI 1.1 role claim handling.
"""
from .constants import LTI_1P1_ROLE_URN_PREFIX


def normalize_role(role):
    """
    Promotes a short role name to its LIS role URN. Roles already given as an URN are left unchanged.
    """
    if role.startswith('urn:'):
        return role
    return LTI_1P1_ROLE_URN_PREFIX + role


def normalize_roles(roles):
    """
    Turns the raw `roles` launch parameter into a set of role URNs.

    Short and fully qualified forms of a role collapse into one entry since both normalize to the same URN,
    but URNs from other vocabularies (e.g. `urn:lti:instrole:ims/lis/Instructor`) are kept as they are.

    Arguments:
        roles (string):  A comma separated list of role values

    Returns:
        frozenset: role URNs, empty if no role was given
    """
    if not roles:
        return frozenset()

    return frozenset(
        normalize_role(role.strip())
        for role in roles.split(',')
        if role.strip()
    )
