#!/usr/bin/env python3
"""
Create an admin account directly in the JSON data directory.

Usage:
  python scripts/create_admin.py --email admin@example.com --name "Full Name" [--password secret]
"""
from __future__ import annotations

import argparse
import getpass
import sys

from salon.core.config import get_settings
from salon.repositories.json_storage import JsonFileStore
from salon.services.auth_service import AccountExistsError, AuthService, RegistrationError

MIN_PASSWORD = 6


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create an admin account")
    ap.add_argument("--email", required=True, help="Admin e-mail (login)")
    ap.add_argument("--name", required=True, help="Full name shown on the dashboard")
    ap.add_argument("--password", help="Password (prompted when omitted)")
    ap.add_argument("--data-dir", help="Data directory (default: DATA_DIR setting)")
    args = ap.parse_args(argv)

    password = args.password or getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD:
        raise SystemExit(f"Password must be at least {MIN_PASSWORD} characters")

    store = JsonFileStore(args.data_dir or get_settings().data_dir)
    store.initialize()
    auth = AuthService(store)
    try:
        admin = auth.create_admin(args.email, password, args.name)
    except AccountExistsError:
        raise SystemExit(f"Admin '{args.email}' already exists")
    except RegistrationError as exc:
        raise SystemExit(exc.message)
    print("OK: admin created")
    print(f"  ID: {admin['id']}")
    print(f"  Email: {admin['email']}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
