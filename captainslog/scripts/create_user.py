"""Create a user account for Captain's Log.

Usage:
    python -m captainslog.scripts.create_user --email skipper@example.com --password <password> [--name "Skipper"]
"""

from __future__ import annotations

import argparse
import sys

from captainslog.db.session import SessionLocal
from captainslog.models.user import User
from captainslog.services.auth import create_user, normalize_email


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create a Captain's Log user")
    parser.add_argument("--email", required=True, help="Email address (login)")
    parser.add_argument("--password", required=True, help="Password for the new user")
    parser.add_argument("--name", default="", help="Display name")
    args = parser.parse_args(argv)

    email = normalize_email(args.email)
    if not email:
        print("Error: email cannot be empty.")
        sys.exit(1)

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.")
            sys.exit(1)

        user = create_user(db, email, args.password, name=args.name.strip())
        print(f"User '{user.email}' created successfully (id={user.id}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
