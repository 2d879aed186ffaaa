"""
Exception hierarchy for the CurseForge API client.

Every failure surfaced by this library is a subclass of CurseForgeError.
Each error knows whether it is worth retrying and, where one exists, the
HTTP status code that produced it.
"""

from typing import Optional
import httpx


class CurseForgeError(Exception):
    """Base exception for all CurseForge client errors."""

    template = "{detail}"
    retryable = False

    def __init__(self, detail: str = "", response: Optional[httpx.Response] = None):
        """
        Initialize a CurseForgeError.

        Args:
            detail: Human readable description of the failure
            response: Optional HTTP response associated with the error
        """
        self.detail = detail
        self.response = response
        self.message = self._format()
        super().__init__(self.message)

    def _format(self) -> str:
        return self.template.format(detail=self.detail)

    @property
    def is_retryable(self) -> bool:
        """Whether the failure is transient and the request may be re-issued."""
        return self.retryable

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status code behind the error, if there is one."""
        return None

    def _clone(self) -> "CurseForgeError":
        return type(self)(self.detail, self.response)

    def normalized(self) -> "CurseForgeError":
        """
        Return a copy of this error that is safe to keep across retry attempts.

        Errors that wrap a lower-level cause (transport, JSON, URL, file I/O)
        collapse into an UnknownError holding only a description of the
        cause; all other kinds are copied as-is.
        """
        return self._clone()


class RequestError(CurseForgeError):
    """The HTTP request could not be completed (connection, protocol, client build)."""

    template = "HTTP request failed: {detail}"
    retryable = True

    def __init__(
        self,
        detail: str = "",
        response: Optional[httpx.Response] = None,
        status: Optional[int] = None,
    ):
        self.status = status
        super().__init__(detail, response)

    @property
    def status_code(self) -> Optional[int]:
        if self.status is not None:
            return self.status
        if self.response is not None:
            return self.response.status_code
        return None

    def normalized(self) -> CurseForgeError:
        return UnknownError(f"Request error: {self.detail}")


class DecodeError(CurseForgeError):
    """A response body could not be decoded into the expected type."""

    template = "JSON error: {detail}"

    def normalized(self) -> CurseForgeError:
        return UnknownError(f"JSON error: {self.detail}")


class UrlError(CurseForgeError):
    """The base URL and endpoint do not form a valid absolute URL."""

    template = "URL parsing failed: {detail}"

    def normalized(self) -> CurseForgeError:
        return UnknownError(f"URL error: {self.detail}")


class FileIOError(CurseForgeError):
    """A local file could not be read or written."""

    template = "IO error: {detail}"

    def normalized(self) -> CurseForgeError:
        return UnknownError(f"IO error: {self.detail}")


class ApiError(CurseForgeError):
    """The API answered with an error status not covered by a narrower kind."""

    def __init__(
        self,
        status: int,
        detail: str = "",
        response: Optional[httpx.Response] = None,
    ):
        self.status = status
        super().__init__(detail, response)

    def _format(self) -> str:
        return f"API error: {self.status} - {self.detail}"

    @property
    def status_code(self) -> Optional[int]:
        return self.status

    def _clone(self) -> CurseForgeError:
        return ApiError(self.status, self.detail, self.response)


class InvalidApiKeyError(CurseForgeError):
    """The API key is missing or cannot be sent as a header."""

    def _format(self) -> str:
        if self.detail:
            return f"Invalid API key: {self.detail}"
        return "Invalid API key"


class RateLimitExceededError(CurseForgeError):
    """Rate limit exceeded (429)."""

    template = "Rate limit exceeded. Try again later."
    retryable = True


class NotFoundError(CurseForgeError):
    """Resource not found (404)."""

    template = "Resource not found: {detail}"


class InvalidParametersError(CurseForgeError):
    """The request was rejected as malformed (4xx)."""

    template = "Invalid parameters: {detail}"


class AuthenticationRequiredError(CurseForgeError):
    """Authentication required (401)."""

    template = "Authentication required"


class PermissionDeniedError(CurseForgeError):
    """Permission denied (403)."""

    template = "Permission denied: {detail}"


class DownloadFailedError(CurseForgeError):
    """A file download did not complete."""

    template = "File download failed: {detail}"


class UploadFailedError(CurseForgeError):
    """A file upload was rejected."""

    template = "File upload failed: {detail}"


class InvalidFileFormatError(CurseForgeError):
    """A file does not have the expected format."""

    template = "Invalid file format: {detail}"


class FileTooLargeError(CurseForgeError):
    """A file exceeds the upload size limit."""

    def __init__(self, size: int, max_size: int):
        """
        Initialize a FileTooLargeError.

        Args:
            size: Actual size of the file in bytes
            max_size: Largest accepted size in bytes
        """
        self.size = size
        self.max_size = max_size
        super().__init__()

    def _format(self) -> str:
        return f"File too large: {self.size} bytes (max: {self.max_size} bytes)"

    def _clone(self) -> CurseForgeError:
        return FileTooLargeError(self.size, self.max_size)


class TimeoutError(CurseForgeError):
    """Request timeout exceeded."""

    retryable = True

    def __init__(self, timeout: Optional[float] = None, response: Optional[httpx.Response] = None):
        """
        Initialize a TimeoutError.

        Args:
            timeout: The configured timeout in seconds
            response: Optional HTTP response associated with the error
        """
        self.timeout = timeout
        super().__init__("", response)

    def _format(self) -> str:
        return f"Network timeout after {self.timeout}s"

    def _clone(self) -> CurseForgeError:
        return TimeoutError(self.timeout, self.response)


class UnknownError(CurseForgeError):
    """Placeholder for an error whose underlying cause was not kept."""

    template = "Unknown error: {detail}"


def response_text(response: httpx.Response) -> str:
    """Return the body text of a response, or a placeholder if it is unreadable."""
    try:
        return response.text
    except (httpx.HTTPError, httpx.StreamError):
        return "Unknown error"


def error_for_status(response: httpx.Response) -> CurseForgeError:
    """
    Build the exception matching an HTTP error status.

    Args:
        response: HTTP response with a non-2xx status

    Returns:
        AuthenticationRequiredError for 401, PermissionDeniedError for 403,
        NotFoundError for 404, RateLimitExceededError for 429,
        InvalidParametersError for other 4xx, ApiError otherwise
    """
    status = response.status_code
    text = response_text(response)

    if status == 401:
        return AuthenticationRequiredError(response=response)
    if status == 403:
        return PermissionDeniedError(text, response)
    if status == 404:
        return NotFoundError(text, response)
    if status == 429:
        return RateLimitExceededError(response=response)
    if 400 <= status < 500:
        return InvalidParametersError(text, response)
    return ApiError(status, text, response)


def raise_for_status(response: httpx.Response) -> None:
    """
    Raise the appropriate CurseForgeError for an HTTP error status.

    Args:
        response: HTTP response to check

    Raises:
        CurseForgeError: The exception built by error_for_status
    """
    if response.is_success:
        return
    raise error_for_status(response)
