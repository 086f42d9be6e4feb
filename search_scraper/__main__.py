"""서버 실행 진입점: python -m search_scraper"""

import argparse

import uvicorn

from search_scraper.core.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Search scraper API server")
    parser.add_argument("--host", default=settings.api_host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Port to bind to")
    args = parser.parse_args()

    uvicorn.run(
        "search_scraper.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
