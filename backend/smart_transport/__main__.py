"""Run the API with uvicorn: `python -m smart_transport`."""

import uvicorn

from smart_transport.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "smart_transport.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
