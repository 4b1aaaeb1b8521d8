"""
librus - Async Python client for Librus Synergia.

Usage:
    >>> from librus import LibrusClient
    >>>
    >>> async with await LibrusClient.from_env() as librus:
    ...     grades = await librus.grades()
    ...     unread = await librus.unread_counts()
"""
import logging
from .client import LibrusClient, ClientBuilder

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    AsyncAuthService,
    ApiResponse,
    ResponseHandler,
)

# Credentials and session
from .core.credentials import Credentials, CredentialsBuilder
from .core.session import LibrusSession

# Errors
from .core.exceptions import (
    LibrusError,
    CredentialsError,
    MissingEnvVarError,
    MissingCredentialError,
    AuthenticationError,
    TransportError,
    ApiError,
    DecodeError,
)

from .core.content import decode_base64_text, strip_markup

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for librus modules.

    Sets every librus logger to the given level and keeps propagation on,
    so messages reach whatever handlers the application installed.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'librus',
        'librus.api',
        'librus.auth',
        'librus.session',
        'librus.client',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'LibrusClient',
    'ClientBuilder',
    'Credentials',
    'CredentialsBuilder',
    'LibrusSession',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'AsyncAuthService',
    'ApiResponse',
    'ResponseHandler',
    'LibrusError',
    'CredentialsError',
    'MissingEnvVarError',
    'MissingCredentialError',
    'AuthenticationError',
    'TransportError',
    'ApiError',
    'DecodeError',
    'decode_base64_text',
    'strip_markup',
    'setup_logging',
]
