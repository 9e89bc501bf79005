from typing import cast
import redis

from shortlink.core import config

redis_client = redis.from_url(
    config.REDIS_URL,
    decode_responses=True,
    socket_timeout=config.REDIS_SOCKET_TIMEOUT,
    socket_connect_timeout=config.REDIS_SOCKET_TIMEOUT,
)


def get_redis() -> redis.Redis:
    return cast(redis.Redis, redis_client)
