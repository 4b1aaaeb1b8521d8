"""
Async authentication service.

Handles the Librus login handshake asynchronously.
"""
from typing import Optional

from .async_client import AsyncAPIClient
from ..credentials import Credentials
from ..exceptions import AuthenticationError
from ..logging import get_logger, mask
from ..session import LibrusSession


class AsyncAuthService:
    """
    Asynchronous authentication service.

    Performs the four-request OAuth-style login against the authorization
    host. Each step relies on cookies left by the previous one, so the
    steps run strictly in order on the same client.
    """

    def __init__(self, client: Optional[AsyncAPIClient] = None):
        """
        Initialize auth service.

        Args:
            client: Async API client whose cookie jar will hold the session
                    (a default one is created when omitted)
        """
        self._client = client or AsyncAPIClient()
        self._logger = get_logger('librus.auth')

    @property
    def client(self) -> AsyncAPIClient:
        return self._client

    async def authenticate(self, credentials: Credentials) -> LibrusSession:
        """
        Login to Librus.

        Args:
            credentials: Username and password

        Returns:
            LibrusSession with messaging not yet initialized

        Raises:
            TransportError: If any step could not reach the server
            AuthenticationError: If the final token check is not 200
        """
        config = self._client.config
        self._logger.info(f"Logging in as {mask(credentials.username)}")

        # Step 1: Establish initial cookies
        await self._client.request('GET', config.auth_test_url)

        # Step 2: Submit the login form
        await self._client.request('POST', config.auth_url, data={
            'action': 'login',
            'login': credentials.username,
            'pass': credentials.password,
        })

        # Step 3: Exchange the login for API access
        await self._client.request('GET', config.auth_grant_url)

        # Step 4: Token info status is the only reliable outcome
        token_info = await self._client.request('GET', config.token_info_url)
        if token_info.status != 200:
            self._logger.warning(f"Token check failed with status {token_info.status}")
            raise AuthenticationError(token_info.status)

        self._logger.info("Login successful")
        return LibrusSession(self._client, credentials.username)

    async def login(self, username: str, password: str) -> LibrusSession:
        """Login with explicit username and password."""
        return await self.authenticate(Credentials(username, password))
