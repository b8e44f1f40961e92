import logging

import uvicorn

from storefront.config import settings


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    uvicorn.run(
        "storefront.web.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()
