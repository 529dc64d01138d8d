"""Redis-backed key-value blob store."""

import redis


class RedisKeyValueStore:
    """KeyValueStore on top of plain Redis GET/SET."""

    def __init__(self, redis_client: redis.Redis, namespace: str = "voyage") -> None:
        """Initialize store.

        Args:
            redis_client: Redis client (must return bytes, not decoded strings)
            namespace: Prefix applied to every key
        """
        self._redis = redis_client
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> bytes | None:
        """Get blob by key."""
        value = self._redis.get(self._key(key))
        if value is None:
            return None
        return value if isinstance(value, bytes) else str(value).encode()

    def set(self, key: str, value: bytes) -> None:
        """Store blob."""
        self._redis.set(self._key(key), value)

    def delete(self, key: str) -> None:
        """Remove blob."""
        self._redis.delete(self._key(key))

    @classmethod
    def from_url(cls, url: str, namespace: str = "voyage") -> "RedisKeyValueStore":
        client = redis.from_url(url)  # type: ignore[no-untyped-call]
        return cls(client, namespace=namespace)
