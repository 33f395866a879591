"""REST transport: build, send and decode one request."""

from typing import Any, Mapping, Optional

import httpx

from .config import ClientConfig
from .envelope import EnvelopeDecoder
from .exceptions import DecodeError, TimeoutError, TransportError
from .logger import Logger, NoopLogger, redact_url
from .signer import SignedRequest, SignedRequestBuilder


class RestClient:
    """
    Synchronous REST client for the Bittrex v1.1 API.

    Holds only immutable configuration and an ``httpx.Client``, so a single
    instance can be shared between threads.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize REST client.

        Args:
            config: Client configuration, defaults to public-only access
            logger: Logger instance
            transport: Custom httpx transport (e.g. ``httpx.MockTransport``)
            http_client: Pre-built httpx client; the caller keeps ownership
        """
        self.config = config or ClientConfig()
        self.logger = logger or NoopLogger()
        self.builder = SignedRequestBuilder(self.config)
        self.decoder = EnvelopeDecoder()

        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=self.config.timeout, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def call(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        auth: bool = False,
        shape: Optional[Any] = None,
        method: str = "GET",
    ) -> Any:
        """
        Perform one request/response round trip.

        Args:
            path: Resource path, e.g. ``public/getorderbook``
            params: Query parameters in wire order
            auth: Whether the endpoint needs a signed request
            shape: Expected ``result`` type, ``None`` to only check success
            method: HTTP method

        Returns:
            Decoded payload

        Raises:
            TransportError: Network failure or non-envelope HTTP error
            DecodeError: Response did not match the expected shape
            APIError: Exchange reported ``success: false``
        """
        request = self.builder.build(method, path, params, requires_auth=auth)
        response = self._send(request)

        if response.is_error:
            try:
                envelope = self.decoder.parse(response.content)
            except DecodeError as e:
                raise TransportError(
                    f"HTTP {response.status_code} from {path}", status_code=response.status_code
                ) from e
            return envelope.decode_result(shape)

        return self.decoder.decode(response.content, shape)

    def _send(self, request: SignedRequest) -> httpx.Response:
        self.logger.debug(f"{request.method} {redact_url(request.url)}")
        try:
            response = self._http.request(request.method, request.url, headers=request.headers)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out after {self.config.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e
        self.logger.debug(f"{request.method} {response.status_code} ({len(response.content)} bytes)")
        return response
