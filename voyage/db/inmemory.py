"""In-memory implementations of repository interfaces."""


class InMemoryKeyValueStore:
    """In-memory implementation of KeyValueStore."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        """Get blob by key."""
        return self._blobs.get(key)

    def set(self, key: str, value: bytes) -> None:
        """Store blob."""
        self._blobs[key] = value

    def delete(self, key: str) -> None:
        """Remove blob."""
        self._blobs.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._blobs)
