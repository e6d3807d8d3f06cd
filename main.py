import argparse
from pathlib import Path

import uvicorn

from api.app import create_app
from api.config import CATALOG_PATH, LOG_LEVEL
from core.logging_setup import setup_console_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Quiz Pager server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument(
        "--catalog",
        type=Path,
        default=CATALOG_PATH,
        help="Path to the test catalog JSON",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_console_logging(LOG_LEVEL)
    app = create_app(catalog_path=args.catalog)

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
