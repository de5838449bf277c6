"""Redis service for the online project store"""

import redis.asyncio as redis
from typing import Optional


class RedisService:
    """Service for Redis string key operations"""

    def __init__(self, redis_url: str):
        self.redis_url = redis_url
        self._client: Optional[redis.Redis] = None

    async def get_client(self) -> redis.Redis:
        """Get or create Redis client"""
        if self._client is None:
            self._client = await redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True
            )
        return self._client

    async def close(self):
        """Close Redis connection"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def ping(self) -> bool:
        """Check connectivity"""
        client = await self.get_client()
        return bool(await client.ping())

    async def get_value(self, key: str) -> Optional[str]:
        """
        Get a stored value

        Args:
            key: Redis key

        Returns:
            Stored string or None if the key is absent
        """
        client = await self.get_client()
        return await client.get(key)

    async def set_value(self, key: str, value: str):
        """
        Store a value without expiration

        Args:
            key: Redis key
            value: String to store
        """
        client = await self.get_client()
        await client.set(key, value)

    async def key_exists(self, key: str) -> bool:
        """
        Check whether a key is present

        Args:
            key: Redis key

        Returns:
            True if the key exists
        """
        client = await self.get_client()
        return await client.exists(key) > 0

    async def delete_value(self, key: str):
        """
        Delete a stored value

        Args:
            key: Redis key
        """
        client = await self.get_client()
        await client.delete(key)
