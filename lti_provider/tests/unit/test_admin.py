"""
Tests for the LTI provider admin.
"""
from django.contrib import admin
from django.test.testcases import TestCase

from lti_provider.admin import LtiConsumerAdmin
from lti_provider.models import LtiConsumer


class TestLtiConsumerAdmin(TestCase):
    """
    Unit tests for LtiConsumerAdmin
    """

    def test_registered(self):
        self.assertIsInstance(admin.site._registry[LtiConsumer], LtiConsumerAdmin)  # pylint: disable=protected-access

    def test_secret_not_listed(self):
        self.assertNotIn('consumer_secret', LtiConsumerAdmin.list_display)
