"""Run the secret sharing HTTP service: python -m sealshare"""

import logging
import os

from sealshare.server import create_app


def main():
    logging.basicConfig(
        level=os.environ.get("SECRET_SHARING_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("SECRET_SHARING_HOST", "127.0.0.1")
    port = int(os.environ.get("SECRET_SHARING_PORT", "8080"))

    app = create_app()
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
