"""
Session data models.

Contains the authenticated session produced by the login handshake.
"""
from datetime import datetime
from typing import TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from ..api.async_client import AsyncAPIClient

logger = get_logger('librus.session')


class LibrusSession:
    """
    Authenticated, cookie-bearing session.

    Created only by a successful login handshake and lives as long as the
    client using it. The messaging backend only recognizes the session
    after a warm-up request on the primary host; ``messaging_ready``
    records that it happened and never goes back to False.

    Not safe for concurrent first use of the messaging backend: two
    callers racing through ``ensure_messaging_ready`` may both send the
    warm-up request, which the server tolerates.

    Attributes:
        http: Request executor holding the cookie jar
        username: Login the session was opened for
        created_at: Time the handshake completed
    """

    def __init__(self, http: 'AsyncAPIClient', username: str):
        self.http = http
        self.username = username
        self.created_at = datetime.now()
        self._messaging_ready = False

    @property
    def messaging_ready(self) -> bool:
        """Whether the messaging backend will accept this session."""
        return self._messaging_ready

    async def ensure_messaging_ready(self) -> None:
        """
        Warm up the messaging backend once.

        No-op once it has succeeded. The warm-up response body and status
        are ignored; only transport success counts. On a transport failure
        the flag stays False and the next call tries again.

        Raises:
            TransportError: If the warm-up request could not be sent
        """
        if self._messaging_ready:
            return

        logger.debug("Initializing messaging session")
        await self.http.request('GET', self.http.config.messages_init_url)
        self._messaging_ready = True
        logger.info("Messaging session initialized")

    async def close(self) -> None:
        """Release the underlying HTTP session."""
        await self.http.close()

    def __repr__(self) -> str:
        return (
            f"LibrusSession(username={self.username!r}, "
            f"messaging_ready={self._messaging_ready})"
        )
