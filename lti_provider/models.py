"""
LTI consumer registration models.
"""
from django.db import models
from django.utils.translation import gettext_lazy as _

from lti_provider.lti_1p1.data import ConsumerCredential


class LtiConsumer(models.Model):
    """
    Tool consumer allowed to launch into this provider.

    The consumer signs its launches with `consumer_secret`, identifying itself with `consumer_key`.

    .. no_pii:
    """
    consumer_name = models.CharField(
        max_length=255,
        blank=True,
        help_text=_("Name of the platform the launches come from."),
    )
    consumer_key = models.CharField(
        max_length=255,
        unique=True,
        help_text=_("OAuth consumer key sent by the platform as oauth_consumer_key."),
    )
    consumer_secret = models.CharField(
        max_length=255,
        help_text=_("Shared secret used to sign launches. Keep this value secret."),
    )

    def __str__(self):
        return f"{self.consumer_name or self.consumer_key}"

    def get_credential(self):
        """
        Returns the ConsumerCredential used to verify launches from this consumer.
        """
        return ConsumerCredential(consumer_key=self.consumer_key, secret=self.consumer_secret)
