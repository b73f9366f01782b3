"""
Unit tests for lti_provider.lti_1p1.session module
"""
import unittest

import ddt

from lti_provider.lti_1p1.constants import LaunchCapability, LaunchErrorKind
from lti_provider.lti_1p1.data import LaunchRequest
from lti_provider.lti_1p1.exceptions import MissingRole
from lti_provider.lti_1p1.roles import normalize_roles
from lti_provider.lti_1p1.session import establish_launch_session, get_launch_capability
from lti_provider.tests.test_utils import LAUNCH_URL, make_launch_params


def _establish(**overrides):
    launch_request = LaunchRequest(http_method='POST', url=LAUNCH_URL, params=make_launch_params(**overrides))
    return establish_launch_session(launch_request, normalize_roles(launch_request.get('roles')))


@ddt.ddt
class TestEstablishLaunchSession(unittest.TestCase):
    """
    Unit tests for `lti_provider.lti_1p1.session.establish_launch_session`
    """

    def test_instructor_session(self):
        launch_session = _establish(roles='Instructor')

        self.assertEqual(launch_session.capability, LaunchCapability.INSTRUCTOR)
        self.assertEqual(launch_session.user_id, 'user-1')
        self.assertEqual(launch_session.resource_link_id, 'link-1')
        self.assertEqual(launch_session.person_name_given, 'Mary')
        self.assertEqual(launch_session.person_name_family, 'Doe')
        self.assertEqual(launch_session.roles, frozenset({'urn:lti:role:ims/lis/Instructor'}))
        self.assertEqual(launch_session.outcome_service_url, 'https://lms.example.com/outcomes')
        self.assertEqual(launch_session.result_sourcedid, 'result-42')
        self.assertTrue(launch_session.has_grade_return)

    @ddt.data(
        {'lis_outcome_service_url': None},
        {'lis_result_sourcedid': None},
        {'lis_outcome_service_url': None, 'lis_result_sourcedid': None},
        {'lis_result_sourcedid': ''},
    )
    def test_instructor_session_without_grade_return(self, overrides):
        """
        Test that missing one of the outcome parameters drops grade return instead of rejecting the launch
        """
        launch_session = _establish(roles='Instructor', **overrides)

        self.assertEqual(launch_session.capability, LaunchCapability.INSTRUCTOR)
        self.assertFalse(launch_session.has_grade_return)
        self.assertIsNone(launch_session.outcome_service_url)
        self.assertIsNone(launch_session.result_sourcedid)

    def test_learner_session_has_no_grade_return(self):
        launch_session = _establish(roles='Learner')

        self.assertEqual(launch_session.capability, LaunchCapability.LEARNER)
        self.assertFalse(launch_session.has_grade_return)

    def test_instructor_wins_over_learner(self):
        launch_session = _establish(roles='Learner,Instructor')

        self.assertEqual(launch_session.capability, LaunchCapability.INSTRUCTOR)
        self.assertEqual(len(launch_session.roles), 2)

    @ddt.data('Mentor', 'urn:lti:instrole:ims/lis/Instructor', 'urn:custom:role', '')
    def test_missing_role(self, roles):
        with self.assertRaises(MissingRole) as context:
            _establish(roles=roles)

        self.assertEqual(context.exception.kind, LaunchErrorKind.MISSING_ROLE)
        self.assertEqual(context.exception.roles, roles)
        self.assertIn(f"({roles})", str(context.exception))


class TestGetLaunchCapability(unittest.TestCase):
    """
    Unit tests for `lti_provider.lti_1p1.session.get_launch_capability`
    """

    def test_no_capability(self):
        self.assertIsNone(get_launch_capability(frozenset()))
