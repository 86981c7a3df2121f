"""
HTTP session ownership for FuturesClient.

One ClientSession is shared by every signed call and by the user data
stream opened through the client. It talks to a single exchange host.
"""

from typing import Optional

import aiohttp

from .constants import USER_AGENT
from .models.config import ConnectionConfig

# All traffic goes to one host, so the per-host cap is the effective limit.
MAX_CONNECTIONS = 10


class SessionManager:
    """Creates the client's session on first use and closes it on shutdown."""

    def __init__(self, config: ConnectionConfig):
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def create_session(self) -> aiohttp.ClientSession:
        """
        Return the open session, creating one if needed.

        Must be called from a running event loop. A session closed through
        ``close_session`` is replaced on the next call.
        """
        if self._session is not None and not self._session.closed:
            return self._session

        self._session = aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(limit_per_host=MAX_CONNECTIONS),
            timeout=self._timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )
        return self._session

    async def close_session(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
