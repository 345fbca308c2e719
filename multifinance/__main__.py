"""Run the API with uvicorn: ``python -m multifinance``."""

import uvicorn

from multifinance.core.config import settings


def main() -> None:
    uvicorn.run(
        "multifinance.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
