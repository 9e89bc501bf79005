from typing import Optional

import redis
import structlog

from shortlink.core import config
from shortlink.core.errors import BackendUnavailableError, CounterIncrementError
from shortlink.db.redis import get_redis
from shortlink.models.schemas import Link
from shortlink.services import codegen

logger = structlog.get_logger(__name__)


class LinkStore:
    """Assigns codes from the shared counter and persists code -> URL mappings.

    Holds no mutable state of its own. Uniqueness of codes rests entirely on
    the backend's atomic INCRBY, so the client may be shared by any number of
    threads or processes. Every call is a live round trip; nothing is cached.
    """

    def __init__(
        self,
        client: redis.Redis,
        counter_key: str = config.COUNTER_KEY,
        key_prefix: str = config.LINK_KEY_PREFIX,
    ) -> None:
        self._client = client
        self._counter_key = counter_key
        self._key_prefix = key_prefix

    def _key(self, code: str) -> str:
        return f"{self._key_prefix}{code}"

    def create(self, url: str) -> Link:
        """Assign a fresh code to url and store the mapping.

        A failed write after a successful increment strands that counter
        value. It is logged and never reused.
        """
        try:
            number = self._client.incrby(self._counter_key, 1)
        except redis.RedisError as exc:
            logger.error("counter_increment_failed", counter_key=self._counter_key, error=str(exc))
            raise CounterIncrementError(f"Could not increment {self._counter_key}") from exc

        code = codegen.encode(int(number))

        # Unconditional SET: the code is fresh, and NX would turn a retry into a lost increment
        try:
            self._client.set(self._key(code), url)
        except redis.RedisError as exc:
            logger.warning("orphaned_counter_value", counter=number, code=code, error=str(exc))
            raise BackendUnavailableError(f"Could not store link {code}") from exc

        logger.info("link_created", code=code, counter=number)
        return Link(code=code, url=url)

    def get(self, code: str) -> Optional[Link]:
        """Return the link for code, or None if it was never stored."""
        try:
            url = self._client.get(self._key(code))
        except redis.RedisError as exc:
            raise BackendUnavailableError(f"Could not read link {code}") from exc

        if url is None:
            logger.debug("link_not_found", code=code)
            return None
        return Link(code=code, url=url)

    def delete(self, code: str) -> bool:
        """Remove the mapping for code. Returns True if one existed."""
        try:
            removed = self._client.delete(self._key(code))
        except redis.RedisError as exc:
            raise BackendUnavailableError(f"Could not delete link {code}") from exc

        logger.info("link_deleted", code=code, removed=bool(removed))
        return bool(removed)

    def current_counter(self) -> int:
        """Last counter value handed out, 0 if nothing was ever created."""
        try:
            value = self._client.get(self._counter_key)
        except redis.RedisError as exc:
            raise BackendUnavailableError("Could not read counter") from exc
        return int(value) if value is not None else 0

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as exc:
            raise BackendUnavailableError("Backend did not answer ping") from exc


def get_link_store() -> LinkStore:
    return LinkStore(get_redis())
