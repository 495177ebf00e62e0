"""Run the development server: ``python -m salon``."""
from __future__ import annotations

import uvicorn

from salon.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "salon.app_factory:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    main()
