"""Register a user mirrored from the identity provider and print a token for it."""

from __future__ import annotations

import argparse

from synergysphere.application.use_cases.users import create_user
from synergysphere.domain.exceptions import DomainError
from synergysphere.infrastructure.database import SessionLocal, initialize_database
from synergysphere.infrastructure.security import create_user_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a SynergySphere user and issue a development access token.",
    )
    parser.add_argument("--email", required=True, help="Email address of the user")
    parser.add_argument(
        "--display-name",
        default=None,
        help="Name shown in activity feeds (defaults to the email)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(session, email=args.email, display_name=args.display_name)
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc.detail}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Email: {user.email}\n"
            f"  Name: {user.label}\n"
            f"  Token: {create_user_token(user.id, user.email)}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
