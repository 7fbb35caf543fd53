"""
Server entrypoint for the banana image adapter.

Interface responsibilities:
- Configure process logging from `LOG_LEVEL`.
- Serve `banana_adapter.api.http_api:app` with uvicorn on `HOST:PORT`.
"""

import logging

import uvicorn

from banana_adapter.config import HOST, LOG_LEVEL, PORT


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "banana_adapter.api.http_api:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
