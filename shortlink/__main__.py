import uvicorn

from shortlink.core import config
from shortlink.core.logging import setup_logging


def main() -> None:
    setup_logging(config.DEBUG)
    uvicorn.run("shortlink.main:app", host=config.HOST, port=config.PORT, access_log=False)


if __name__ == "__main__":
    main()
