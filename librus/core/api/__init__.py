"""Librus API module: configuration, transport and login handshake."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig
from .request import ApiResponse, RequestBuilder, ResponseHandler
from .async_client import AsyncAPIClient
from .async_auth import AsyncAuthService

__all__ = [
    # Client
    'AsyncAPIClient',
    'AsyncAuthService',

    # Requests
    'ApiResponse',
    'RequestBuilder',
    'ResponseHandler',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
]
