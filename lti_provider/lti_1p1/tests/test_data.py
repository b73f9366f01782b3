"""
Unit tests for lti_provider.lti_1p1.data module
"""
import unittest

from attrs.exceptions import FrozenInstanceError

from lti_provider.lti_1p1.constants import LaunchCapability, LaunchErrorKind, LaunchState
from lti_provider.lti_1p1.data import (ConsumerCredential, LaunchDiagnostic, LaunchRequest,
                                       LaunchSession, LaunchVerdict)
from lti_provider.lti_1p1.exceptions import SignatureMismatch


def _make_launch_session(**overrides):
    kwargs = {
        'user_id': 'user-1',
        'resource_link_id': 'link-1',
        'roles': ['urn:lti:role:ims/lis/Instructor'],
        'capability': LaunchCapability.INSTRUCTOR,
        'person_name_given': 'Mary',
        'person_name_family': 'Doe',
        'outcome_service_url': 'https://lms.example.com/outcomes',
        'result_sourcedid': 'result-42',
    }
    kwargs.update(overrides)
    return LaunchSession(**kwargs)


class TestLaunchRequest(unittest.TestCase):
    """
    Unit tests for `LaunchRequest`
    """

    def test_params_are_read_only(self):
        params = {'user_id': 'user-1'}
        launch_request = LaunchRequest(http_method='POST', url='https://example.com/launch', params=params)

        with self.assertRaises(TypeError):
            launch_request.params['user_id'] = 'someone-else'  # pylint: disable=unsupported-assignment-operation
        with self.assertRaises(FrozenInstanceError):
            launch_request.url = 'https://example.com/other'

        params['user_id'] = 'someone-else'
        self.assertEqual(launch_request['user_id'], 'user-1')

    def test_mapping_access(self):
        launch_request = LaunchRequest(http_method='POST', url='https://example.com/launch', params={'roles': ''})

        self.assertIn('roles', launch_request)
        self.assertNotIn('user_id', launch_request)
        self.assertEqual(launch_request.get('user_id', 'default'), 'default')


class TestConsumerCredential(unittest.TestCase):
    """
    Unit tests for `ConsumerCredential`
    """

    def test_secret_not_in_repr(self):
        credential = ConsumerCredential(consumer_key='consumer-key', secret='s3cret')

        self.assertIn('consumer-key', repr(credential))
        self.assertNotIn('s3cret', repr(credential))


class TestLaunchSession(unittest.TestCase):
    """
    Unit tests for `LaunchSession`
    """

    def test_dict_round_trip(self):
        launch_session = _make_launch_session()

        self.assertEqual(LaunchSession.from_dict(launch_session.to_dict()), launch_session)

    def test_to_dict(self):
        self.assertEqual(_make_launch_session(roles=['b', 'a']).to_dict(), {
            'user_id': 'user-1',
            'lis_person_name_given': 'Mary',
            'lis_person_name_family': 'Doe',
            'resource_link_id': 'link-1',
            'roles': ['a', 'b'],
            'capability': 'Instructor',
            'lis_outcome_service_url': 'https://lms.example.com/outcomes',
            'lis_result_sourcedid': 'result-42',
        })

    def test_to_dict_without_grade_return(self):
        data = _make_launch_session(outcome_service_url=None, result_sourcedid=None).to_dict()

        self.assertNotIn('lis_outcome_service_url', data)
        self.assertNotIn('lis_result_sourcedid', data)

    def test_outcome_parameters_required_together(self):
        with self.assertRaises(ValueError):
            _make_launch_session(result_sourcedid=None)
        with self.assertRaises(ValueError):
            _make_launch_session(outcome_service_url=None)

    def test_invalid_capability(self):
        with self.assertRaises(TypeError):
            _make_launch_session(capability='Instructor')


class TestLaunchVerdict(unittest.TestCase):
    """
    Unit tests for `LaunchVerdict` and `LaunchDiagnostic`
    """

    def test_diagnostic_from_error(self):
        diagnostic = LaunchDiagnostic.from_error(SignatureMismatch())

        self.assertEqual(diagnostic.kind, LaunchErrorKind.SIGNATURE_MISMATCH)
        self.assertEqual(diagnostic.message, SignatureMismatch.message)

    def test_redirect_target(self):
        admitted = LaunchVerdict(
            admitted=True,
            state=LaunchState.SESSION_ESTABLISHED,
            session=_make_launch_session(),
        )
        rejected = LaunchVerdict(
            admitted=False,
            state=LaunchState.REJECTED,
            diagnostics=[LaunchDiagnostic.from_error(SignatureMismatch())],
        )

        self.assertEqual(admitted.redirect_target, 'welcome')
        self.assertEqual(rejected.redirect_target, 'error')
        self.assertEqual(rejected.error_kinds, [LaunchErrorKind.SIGNATURE_MISMATCH])
        self.assertIsInstance(rejected.diagnostics, tuple)
