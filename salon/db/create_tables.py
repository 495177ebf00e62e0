"""Create the admin session schema.

Usage:
  python -m salon.db.create_tables [--database-url sqlite:///data/sessions.db]
"""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from salon.core.config import get_settings
from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(database_url: str | None = None) -> None:
    """Create missing session tables on ``database_url`` (default: DATABASE_URL)."""
    Base.metadata.create_all(bind=get_engine(database_url))


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the admin session tables")
    ap.add_argument("--database-url", help="SQLAlchemy URL (default: DATABASE_URL setting)")
    args = ap.parse_args(argv)
    url = args.database_url or get_settings().database_url
    try:
        create_all(url)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables on {url}: {exc}") from exc
    print(f"Session tables ready on {url}")


if __name__ == "__main__":
    main()
