"""
CurseForge API - a typed Python client for the CurseForge REST API.

This library provides a synchronous client with bearer authentication,
bounded retry for transient failures, typed response models and helper
functions for the project, file, category, game, search and fingerprint
endpoints.

Example:
    >>> from curseforge_api import CurseForgeClient
    >>> from curseforge_api.projects import get_project
    >>> with CurseForgeClient.from_env() as client:
    ...     project = get_project(client, 238222)
    ...     print(project.name, project.summary)
"""

import logging

from .client import CurseForgeClient, MAX_UPLOAD_SIZE
from .config import CurseForgeConfig, load_api_key, DEFAULT_BASE_URL, MINECRAFT_GAME_ID
from .retry import RetryHandler
from .exceptions import (
    CurseForgeError,
    RequestError,
    DecodeError,
    UrlError,
    FileIOError,
    ApiError,
    InvalidApiKeyError,
    RateLimitExceededError,
    NotFoundError,
    InvalidParametersError,
    AuthenticationRequiredError,
    PermissionDeniedError,
    DownloadFailedError,
    UploadFailedError,
    InvalidFileFormatError,
    FileTooLargeError,
    TimeoutError,
    UnknownError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Client
    "CurseForgeClient",
    "MAX_UPLOAD_SIZE",
    "RetryHandler",
    # Configuration
    "CurseForgeConfig",
    "load_api_key",
    "DEFAULT_BASE_URL",
    "MINECRAFT_GAME_ID",
    # Exceptions
    "CurseForgeError",
    "RequestError",
    "DecodeError",
    "UrlError",
    "FileIOError",
    "ApiError",
    "InvalidApiKeyError",
    "RateLimitExceededError",
    "NotFoundError",
    "InvalidParametersError",
    "AuthenticationRequiredError",
    "PermissionDeniedError",
    "DownloadFailedError",
    "UploadFailedError",
    "InvalidFileFormatError",
    "FileTooLargeError",
    "TimeoutError",
    "UnknownError",
    # Version
    "__version__",
]
