"""Run the journal API with uvicorn: `python -m journal` or `journal-server`."""

import uvicorn

from journal.config import settings


def main() -> None:
    uvicorn.run(
        "journal.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
