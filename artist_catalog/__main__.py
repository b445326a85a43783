"""Run the API with uvicorn: python -m artist_catalog"""

import uvicorn

from artist_catalog.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "artist_catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
