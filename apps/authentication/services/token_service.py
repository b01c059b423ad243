"""
Token issuing and validation service
"""
import base64
import hmac
import logging
import secrets
import threading
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional, Tuple

from django.conf import settings
from django.utils.module_loading import import_string

from apps.core.exceptions import StoreFailure
from infrastructure.cache.redis_client import RedisClient

logger = logging.getLogger(__name__)

TOKEN_LENGTH = 15
BAD_CREDENTIALS = 'Bad credentials'


class TokenStore(ABC):
    """
    Keyed store of live admin tokens
    """

    @abstractmethod
    def issue(self, token: str) -> None:
        """Mark token as live"""

    @abstractmethod
    def is_live(self, token: str) -> bool:
        """Return True if token was issued and not revoked"""

    @abstractmethod
    def revoke(self, token: str) -> None:
        """Forget token"""


class InMemoryTokenStore(TokenStore):
    """
    Process-local token set. Tokens die with the process.
    """

    def __init__(self):
        self._tokens = set()
        self._lock = threading.Lock()

    def issue(self, token: str) -> None:
        with self._lock:
            self._tokens.add(token)

    def is_live(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.discard(token)


class CacheTokenStore(TokenStore):
    """
    Token store on top of the AUTH_TOKEN_CACHE cache alias, without expiry.

    With django-redis configured the tokens are shared between workers.
    Cache errors surface as StoreFailure rather than as a denied token.
    """

    def __init__(self, client: Optional[RedisClient] = None):
        self.client = client or RedisClient(
            namespace='auth-token',
            alias=settings.AUTH_TOKEN_CACHE,
            raise_errors=True,
        )

    def issue(self, token: str) -> None:
        try:
            stored = self.client.set(token, True, timeout=None)
        except Exception as e:
            raise StoreFailure() from e
        if not stored:
            raise StoreFailure()

    def is_live(self, token: str) -> bool:
        try:
            return bool(self.client.get(token))
        except Exception as e:
            raise StoreFailure() from e

    def revoke(self, token: str) -> None:
        try:
            self.client.delete(token)
        except Exception as e:
            raise StoreFailure() from e


@lru_cache(maxsize=None)
def get_token_store() -> TokenStore:
    """
    Instantiate the store configured by AUTH_TOKEN_STORE (once per process)
    """
    store_class = import_string(settings.AUTH_TOKEN_STORE)
    return store_class()


def generate_token(length: int = TOKEN_LENGTH) -> str:
    """
    Random lowercase hex token of the given length
    """
    return secrets.token_hex((length + 1) // 2)[:length]


def basic_auth_literal(username: str, password: str) -> str:
    """
    Authorization header value for HTTP basic auth
    """
    credentials = base64.b64encode(f"{username}:{password}".encode('utf-8')).decode('ascii')
    return f"Basic {credentials}"


class TokenService:
    """
    Exchanges the admin credentials for tokens and authorizes write requests
    """

    def __init__(self, store: Optional[TokenStore] = None,
                 username: Optional[str] = None, password: Optional[str] = None):
        self._store = store
        self._username = username
        self._password = password

    @property
    def store(self) -> TokenStore:
        return self._store if self._store is not None else get_token_store()

    @property
    def username(self) -> str:
        return self._username if self._username is not None else settings.AUTH_USERNAME

    @property
    def password(self) -> str:
        return self._password if self._password is not None else settings.AUTH_PASSWORD

    def exchange(self, username: Optional[str], password: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
        """
        Exchange credentials for a live token

        Args:
            username: Submitted username
            password: Submitted password

        Returns:
            (token, None) on success, (None, reason) otherwise
        """
        if username != self.username or password != self.password:
            logger.warning(f"Rejected credential exchange for username {username!r}")
            return None, BAD_CREDENTIALS

        token = generate_token()
        self.store.issue(token)
        logger.info("Issued admin token")
        return token, None

    def authorize(self, cookie_token: Optional[str], auth_header: Optional[str]) -> bool:
        """
        Check whether a request may modify bookings

        Args:
            cookie_token: Value of the "token" cookie
            auth_header: Authorization header value

        Returns:
            True if the token is live or the header carries the admin
            basic credentials
        """
        if cookie_token and self.store.is_live(cookie_token):
            return True

        if auth_header:
            expected = basic_auth_literal(self.username, self.password)
            return hmac.compare_digest(auth_header.encode('utf-8'), expected.encode('utf-8'))

        return False


# Singleton instance
token_service = TokenService()
