"""
Synchronous CurseForge API client.

This module provides the request executor every endpoint helper is built on:
one pooled HTTP client, authenticated JSON requests with bounded retry,
and streamed file download and upload.
"""

import os
import time
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any, Callable, Iterator, BinaryIO, TypeVar, Union
import httpx
import logging

from .config import CurseForgeConfig
from .retry import RetryHandler
from .exceptions import (
    raise_for_status,
    response_text,
    DecodeError,
    DownloadFailedError,
    FileIOError,
    FileTooLargeError,
    InvalidApiKeyError,
    InvalidParametersError,
    RequestError,
    UploadFailedError,
    UrlError,
    TimeoutError as CurseForgeTimeoutError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_UPLOAD_SIZE = 100 * 1024 * 1024
CHUNK_SIZE = 64 * 1024


def _is_valid_header_value(value: str) -> bool:
    """Check that a value can be sent as an HTTP header without re-encoding."""
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def _clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop unset query parameters and unwrap enum members."""
    if not params:
        return {}
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        cleaned[key] = value
    return cleaned


def _encode_body(body: Any) -> Any:
    """Turn a model with ``to_dict`` into plain JSON data."""
    if hasattr(body, "to_dict"):
        return body.to_dict()
    return body


def _iter_file(fh: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    while True:
        chunk = fh.read(chunk_size)
        if not chunk:
            break
        yield chunk


class CurseForgeClient:
    """
    Synchronous CurseForge API client.

    The client owns a single connection pool and can be shared between
    threads; every call builds its own request state.

    Example:
        >>> client = CurseForgeClient("your-api-key")
        >>> data = client.get("/mods/238222")

    Example with context manager:
        >>> with CurseForgeClient.from_env() as client:
        ...     data = client.get("/categories", params={"gameId": 432})
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[CurseForgeConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the CurseForge client.

        Args:
            api_key: CurseForge API key; overrides the key in ``config``
            config: Full client configuration
            transport: Optional httpx transport (mainly for testing)
            sleep: Function used to wait between retry attempts

        Raises:
            InvalidApiKeyError: If the key is empty or not a valid header value
            InvalidParametersError: If the user agent is not a valid header value
            RequestError: If the HTTP client cannot be built
        """
        if config is None:
            config = CurseForgeConfig(api_key=api_key or "")
        elif api_key is not None:
            config = replace(config, api_key=api_key)

        self._transport = transport
        self._sleep = sleep
        self._client = self._build_http_client(config)
        self._config = config
        self.retry_handler = RetryHandler.from_config(config, sleep=sleep)

    @classmethod
    def with_config(cls, config: CurseForgeConfig, **kwargs) -> "CurseForgeClient":
        """Create a client from a full configuration."""
        return cls(config=config, **kwargs)

    @classmethod
    def from_env(cls, **overrides) -> "CurseForgeClient":
        """
        Create a client whose API key is read from the environment.

        Args:
            **overrides: Configuration fields passed to CurseForgeConfig.from_env

        Raises:
            InvalidApiKeyError: If CURSEFORGE_API_KEY is unset or empty
        """
        return cls(config=CurseForgeConfig.from_env(**overrides))

    def _build_http_client(self, config: CurseForgeConfig) -> httpx.Client:
        """Validate the configuration and create the pooled httpx client."""
        if not config.api_key:
            raise InvalidApiKeyError()
        if not _is_valid_header_value(config.api_key):
            raise InvalidApiKeyError("API key is not a valid header value")
        if not _is_valid_header_value(config.user_agent):
            raise InvalidParametersError("Invalid user agent")
        if config.timeout is None or config.timeout <= 0:
            raise RequestError(
                f"Failed to build HTTP client: invalid timeout {config.timeout!r}"
            )

        headers = {"Accept": "application/json"}
        headers.update(config.headers)
        headers["Authorization"] = f"Bearer {config.api_key}"
        headers["User-Agent"] = config.user_agent

        try:
            return httpx.Client(
                headers=headers,
                timeout=config.to_httpx_timeout(),
                transport=self._transport,
                follow_redirects=True,
            )
        except (TypeError, ValueError) as e:
            raise RequestError(f"Failed to build HTTP client: {e}") from e

    @property
    def config(self) -> CurseForgeConfig:
        """The active (immutable) configuration."""
        return self._config

    @property
    def http_client(self) -> httpx.Client:
        """The underlying httpx client."""
        return self._client

    def configure(self, **changes) -> CurseForgeConfig:
        """
        Replace configuration fields and rebuild the HTTP client.

        Args:
            **changes: CurseForgeConfig fields to change

        Returns:
            The new configuration
        """
        config = replace(self._config, **changes)
        client = self._build_http_client(config)
        old_client = self._client
        self._client = client
        self._config = config
        self.retry_handler = RetryHandler.from_config(config, sleep=self._sleep)
        old_client.close()
        return config

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and clean up resources."""
        self.close()
        return False

    def close(self):
        """Close the client and clean up resources."""
        self._client.close()

    def build_url(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> httpx.URL:
        """
        Build the absolute URL for an API endpoint.

        Args:
            endpoint: Endpoint path relative to the base URL, e.g. ``/mods/123``
            params: Query parameters; ``None`` values are dropped

        Returns:
            The absolute URL

        Raises:
            UrlError: If the result is not an absolute http(s) URL
        """
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint
        raw = f"{self._config.base_url}{endpoint}"

        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise UrlError(f"{raw}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise UrlError(f"{raw}: not an absolute http(s) URL")

        query = _clean_params(params)
        if query:
            url = url.copy_merge_params(query)
        return url

    def _send(self, request: httpx.Request) -> httpx.Response:
        """Send a request, mapping transport failures to client errors."""
        try:
            logger.debug(f"{request.method} {request.url}")
            response = self._client.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout: {e}")
            raise CurseForgeTimeoutError(self._config.timeout) from e
        except httpx.RequestError as e:
            logger.error(f"Connection error: {e}")
            raise RequestError(str(e)) from e
        logger.info(f"{request.method} {request.url} -> {response.status_code}")
        return response

    @staticmethod
    def _decode(response: httpx.Response, parser: Optional[Callable[[Any], T]]) -> Any:
        """Decode a JSON body and convert it with the parser."""
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(str(e), response) from e
        if parser is None:
            return payload
        try:
            return parser(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DecodeError(f"unexpected response shape: {e!r}", response) from e

    def _make_request(
        self,
        build_request: Callable[[], httpx.Request],
        parser: Optional[Callable[[Any], T]],
    ) -> Any:
        """Perform a single attempt."""
        response = self._send(build_request())
        raise_for_status(response)
        return self._decode(response, parser)

    def _request_with_retry(
        self,
        build_request: Callable[[], httpx.Request],
        parser: Optional[Callable[[Any], T]] = None,
    ) -> Any:
        return self.retry_handler.execute(
            lambda: self._make_request(build_request, parser)
        )

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        parser: Optional[Callable[[Any], T]] = None,
    ) -> Any:
        """
        Make a GET request with retry logic.

        Args:
            endpoint: Endpoint path relative to the base URL
            params: Query parameters
            parser: Converts the decoded JSON into the expected type

        Returns:
            Parsed response, or the decoded JSON if no parser is given
        """
        url = self.build_url(endpoint, params)

        def build_request() -> httpx.Request:
            return self._client.build_request("GET", url)

        return self._request_with_retry(build_request, parser)

    def post(
        self,
        endpoint: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        parser: Optional[Callable[[Any], T]] = None,
    ) -> Any:
        """
        Make a POST request with a JSON body and retry logic.

        Args:
            endpoint: Endpoint path relative to the base URL
            body: JSON-serializable body, or a model with ``to_dict``
            params: Query parameters
            parser: Converts the decoded JSON into the expected type

        Returns:
            Parsed response, or the decoded JSON if no parser is given
        """
        url = self.build_url(endpoint, params)
        payload = _encode_body(body)

        def build_request() -> httpx.Request:
            return self._client.build_request("POST", url, json=payload)

        return self._request_with_retry(build_request, parser)

    def download_file(self, url: str, path: Union[str, os.PathLike]) -> Path:
        """
        Stream a file from an absolute URL to a local path.

        The body is written to ``<path>.part`` and moved onto ``path`` only
        once the whole body has been written.

        Args:
            url: Absolute download URL (not relative to the base URL)
            path: Destination file path

        Returns:
            The destination path

        Raises:
            DownloadFailedError: On a non-2xx status or a failed write
        """
        path = Path(path)
        part = path.with_name(path.name + ".part")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileIOError(f"{path.parent}: {e}") from e

        try:
            logger.debug(f"GET {url} -> {path}")
            with self._client.stream("GET", url) as response:
                if not response.is_success:
                    response.read()
                    raise DownloadFailedError(
                        f"HTTP {response.status_code}: {response_text(response)}",
                        response,
                    )
                try:
                    with open(part, "wb") as fh:
                        for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                            fh.write(chunk)
                    os.replace(part, path)
                except OSError as e:
                    raise DownloadFailedError(f"Failed to write {path}: {e}") from e
        except httpx.InvalidURL as e:
            raise UrlError(f"{url}: {e}") from e
        except httpx.TimeoutException as e:
            logger.error(f"Timeout: {e}")
            raise CurseForgeTimeoutError(self._config.timeout) from e
        except httpx.RequestError as e:
            logger.error(f"Connection error: {e}")
            raise RequestError(str(e)) from e
        finally:
            if part.is_file():
                part.unlink()

        logger.info(f"Downloaded {url} to {path}")
        return path

    def upload_file(
        self,
        endpoint: str,
        file_path: Union[str, os.PathLike],
        parser: Optional[Callable[[Any], T]] = None,
    ) -> Any:
        """
        Stream a local file as the body of a POST request.

        Args:
            endpoint: Endpoint path relative to the base URL
            file_path: File to upload
            parser: Converts the decoded JSON into the expected type

        Returns:
            Parsed response, or the decoded JSON if no parser is given

        Raises:
            FileTooLargeError: If the file exceeds MAX_UPLOAD_SIZE
            FileIOError: If the file cannot be read
            UploadFailedError: On a non-2xx status
        """
        file_path = Path(file_path)
        url = self.build_url(endpoint)

        try:
            with open(file_path, "rb") as fh:
                size = os.fstat(fh.fileno()).st_size
                if size > MAX_UPLOAD_SIZE:
                    raise FileTooLargeError(size, MAX_UPLOAD_SIZE)

                request = self._client.build_request(
                    "POST",
                    url,
                    content=_iter_file(fh),
                    headers={
                        "Content-Length": str(size),
                        "Content-Type": "application/octet-stream",
                    },
                )
                response = self._send(request)
        except OSError as e:
            raise FileIOError(f"{file_path}: {e}") from e

        if not response.is_success:
            raise UploadFailedError(response_text(response), response)
        return self._decode(response, parser)
