"""Request construction and HMAC-SHA512 signing."""

import hashlib
import hmac
import threading
import time
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from .config import ClientConfig

SIGNATURE_HEADER = "apisign"


def sign(secret: str, url: str) -> str:
    """
    Sign a fully assembled request URL.

    Args:
        secret: API secret used as the HMAC key
        url: Complete URL including ``apikey`` and ``nonce``

    Returns:
        Hex-encoded HMAC-SHA512 digest
    """
    return hmac.new(secret.encode(), url.encode(), hashlib.sha512).hexdigest()


class NonceGenerator:
    """
    Thread-safe source of strictly increasing nonces.

    Values start from the wall clock in nanoseconds and never repeat, even
    when the clock stalls or steps backwards.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self._last = max(self._clock(), self._last + 1)
            return self._last


class SignedRequest(BaseModel):
    """A request ready to hand to the transport."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)


class SignedRequestBuilder:
    """Turns a resource path and parameters into a (signed) request."""

    def __init__(self, config: ClientConfig, nonce: Optional[Callable[[], Any]] = None):
        """
        Initialize the builder.

        Args:
            config: Client configuration holding endpoint and credentials
            nonce: Nonce source, a fresh NonceGenerator when omitted
        """
        self.config = config
        self._nonce = nonce or NonceGenerator()

    def build(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        requires_auth: bool = False,
    ) -> SignedRequest:
        """
        Build a request for ``path``.

        Parameters are encoded in insertion order; ``None`` values are dropped.
        Authenticated requests get ``apikey`` and ``nonce`` appended and the
        signature of the final URL in the ``apisign`` header.

        Args:
            method: HTTP method
            path: Resource path relative to the API version, e.g. ``public/getmarkets``
            params: Query parameters
            requires_auth: Whether to sign the request

        Returns:
            SignedRequest
        """
        query = [(key, str(value)) for key, value in (params or {}).items() if value is not None]
        credentials = self.config.credentials
        if requires_auth:
            query.append(("apikey", credentials.api_key))
            query.append(("nonce", str(self._nonce())))

        url = self.config.endpoint + path.lstrip("/")
        if query:
            url += "?" + urlencode(query)

        headers = {}
        if requires_auth:
            headers[SIGNATURE_HEADER] = sign(credentials.api_secret.get_secret_value(), url)
        return SignedRequest(method=method.upper(), url=url, headers=headers)
