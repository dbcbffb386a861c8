# session_auth/adapters/outbound/cache/redis_revocation_store.py

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from session_auth.application.ports.outbound import IRevocationStore
from session_auth.domain.exceptions import RevocationStoreError

logger = logging.getLogger(__name__)


class RedisRevocationStore(IRevocationStore):
    """Thin Redis wrapper for revocation entries."""

    def __init__(self, client: aioredis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, redis_url: str, *, socket_timeout: float = 5.0) -> "RedisRevocationStore":
        # The connection pool is lazy: nothing is opened until the first command
        client = aioredis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )
        return cls(client)

    async def set_until(self, key: str, value: str, expires_at: int) -> None:
        """
        Set ``key`` with an absolute expiry in a single SET ... EXAT command.

        Raises:
            RevocationStoreError: If Redis cannot be reached
        """
        try:
            await self.client.set(key, value, exat=int(expires_at))
        except RedisError as e:
            logger.error(f"Revocation store write failed: {type(e).__name__}: {e}")
            raise RevocationStoreError(original_error=e) from e

    async def exists(self, key: str) -> bool:
        """
        Raises:
            RevocationStoreError: If Redis cannot be reached
        """
        try:
            return bool(await self.client.exists(key))
        except RedisError as e:
            logger.error(f"Revocation store lookup failed: {type(e).__name__}: {e}")
            raise RevocationStoreError(original_error=e) from e

    async def ping(self) -> bool:
        """Check connectivity; used at startup to log the store status."""
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            logger.warning(f"Revocation store not reachable: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
