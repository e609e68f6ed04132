import logging

from backend import BACKEND_ERRORS


logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "sb_access_token"
REFRESH_TOKEN_KEY = "sb_refresh_token"


class AuthSessionCache:
    """Holds the backend session for the current visitor.

    The backend's change stream is the only writer: sign in, sign out and
    token refreshes all arrive through ``_on_auth_change``, which also keeps
    the tokens saved in the visitor's storage in step.
    """

    def __init__(self, auth, storage):
        self._auth = auth
        self._storage = storage
        self._session = None
        self._subscription = None

    @property
    def session(self):
        return self._session

    @property
    def is_authenticated(self):
        return self._session is not None

    def load(self):
        self._subscription = self._auth.on_auth_state_change(self._on_auth_change)

        try:
            access_token = self._storage.get(ACCESS_TOKEN_KEY)
            refresh_token = self._storage.get(REFRESH_TOKEN_KEY)
            if access_token and refresh_token:
                self._auth.set_session(access_token, refresh_token)
            self._session = self._auth.get_session()
        except BACKEND_ERRORS as e:
            logger.error(f"Error loading session: {e}")
            self._session = None
            self._forget_tokens()

        return self._session

    def close(self):
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_auth_change(self, event, session):
        logger.debug(f"Auth state change: {event}")
        self._session = session

        if session is None:
            self._forget_tokens()
        else:
            self._storage[ACCESS_TOKEN_KEY] = session.access_token
            self._storage[REFRESH_TOKEN_KEY] = session.refresh_token

    def _forget_tokens(self):
        self._storage.pop(ACCESS_TOKEN_KEY, None)
        self._storage.pop(REFRESH_TOKEN_KEY, None)
