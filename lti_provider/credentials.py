"""
Consumer credential lookup backends.

The launch provider only needs to turn an `oauth_consumer_key` into the secret shared with that consumer.
Backends are selected with the LTI_PROVIDER_CREDENTIAL_LOOKUP setting.
"""
import logging

from django.db import DatabaseError

from lti_provider.lti_1p1.data import ConsumerCredential
from lti_provider.lti_1p1.exceptions import CredentialNotFound
from lti_provider.models import LtiConsumer
from lti_provider.utils import get_registered_consumers

log = logging.getLogger(__name__)


class ConsumerCredentialLookup:
    """
    Base class for credential lookup backends.
    """

    def resolve_credential(self, consumer_key):
        """
        Returns the ConsumerCredential registered for the consumer key.

        Raises:
            CredentialNotFound if the consumer key isn't registered
        """
        raise NotImplementedError


class SettingsCredentialLookup(ConsumerCredentialLookup):
    """
    Looks consumers up in the LTI_PROVIDER_CONSUMERS setting, a consumer key -> shared secret dict.
    """

    def resolve_credential(self, consumer_key):
        secret = get_registered_consumers().get(consumer_key)
        if not secret:
            log.error("[LTI] No secret configured for oauth_consumer_key (%s).", consumer_key)
            raise CredentialNotFound(f"No secret configured for oauth_consumer_key ({consumer_key}).")
        return ConsumerCredential(consumer_key=consumer_key, secret=secret)


class DatabaseCredentialLookup(ConsumerCredentialLookup):
    """
    Looks consumers up in the LtiConsumer model.
    """

    def resolve_credential(self, consumer_key):
        try:
            lti_consumer = LtiConsumer.objects.get(consumer_key=consumer_key)
        except LtiConsumer.DoesNotExist as exc:
            log.error("[LTI] No LtiConsumer registered for oauth_consumer_key (%s).", consumer_key)
            raise CredentialNotFound(
                f"No LtiConsumer registered for oauth_consumer_key ({consumer_key})."
            ) from exc
        except DatabaseError as exc:
            log.exception("[LTI] Unable to look up oauth_consumer_key (%s).", consumer_key)
            raise CredentialNotFound(f"Unable to look up oauth_consumer_key ({consumer_key}): {exc}") from exc
        return lti_consumer.get_credential()
