"""
Run the API server: python -m valencio [--host HOST] [--port PORT]
"""
import argparse
import logging

import uvicorn

from valencio.config import settings


def main():
    parser = argparse.ArgumentParser(description=f"{settings.APP_NAME} storefront API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("valencio.main:app", host=args.host, port=args.port, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
