import os

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
REDIS_SOCKET_TIMEOUT = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))

# Well-known counter name shared by every instance of the service
COUNTER_KEY = os.getenv("COUNTER_KEY", "next.url.id")
LINK_KEY_PREFIX = os.getenv("LINK_KEY_PREFIX", "link:")

DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
