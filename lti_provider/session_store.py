"""
Launch session store backends.

A store keeps at most one LaunchSession per transport session key. Storing a session replaces
the previous one in a single write, so readers never see a cleared session in between.
Backends are selected with the LTI_PROVIDER_SESSION_STORE setting.
"""
import logging

from django.core.cache import caches

from lti_provider.lti_1p1.data import LaunchSession
from lti_provider.lti_1p1.exceptions import SessionStoreFailure
from lti_provider.utils import get_session_cache_alias, get_session_timeout

log = logging.getLogger(__name__)


class LaunchSessionStore:
    """
    Base class for launch session stores.
    """

    def replace(self, session_key, launch_session):
        """
        Stores launch_session under session_key, replacing any previous session.

        Raises:
            SessionStoreFailure if the session couldn't be written
        """
        raise NotImplementedError

    def clear(self, session_key):
        """
        Removes the session stored under session_key, if any.

        Raises:
            SessionStoreFailure if the session couldn't be removed
        """
        raise NotImplementedError

    def get(self, session_key):
        """
        Returns the LaunchSession stored under session_key, or None.
        """
        raise NotImplementedError


class CacheLaunchSessionStore(LaunchSessionStore):
    """
    Keeps launch sessions in a Django cache, for LTI_PROVIDER_SESSION_TIMEOUT seconds.
    """

    def __init__(self, cache_alias=None, timeout=None):
        self.cache_alias = cache_alias or get_session_cache_alias()
        self.timeout = timeout if timeout is not None else get_session_timeout()

    @property
    def cache(self):
        return caches[self.cache_alias]

    @staticmethod
    def get_cache_key(session_key):
        return f"lti_provider.launch_session.{session_key}"

    def replace(self, session_key, launch_session):
        if not session_key:
            raise SessionStoreFailure("A session key is required to store a launch session.")

        try:
            self.cache.set(self.get_cache_key(session_key), launch_session.to_dict(), self.timeout)
        except Exception as exc:  # pylint: disable=broad-except
            log.exception("[LTI] Unable to store launch session.")
            raise SessionStoreFailure(f"Unable to store launch session: {exc}") from exc

    def clear(self, session_key):
        try:
            self.cache.delete(self.get_cache_key(session_key))
        except Exception as exc:  # pylint: disable=broad-except
            log.exception("[LTI] Unable to clear launch session.")
            raise SessionStoreFailure(f"Unable to clear launch session: {exc}") from exc

    def get(self, session_key):
        if not session_key:
            return None
        data = self.cache.get(self.get_cache_key(session_key))
        if data is None:
            return None
        return LaunchSession.from_dict(data)
