"""
Create an account from the command line. Run from project root:
  python -m userauth.scripts.create_account USERNAME EMAIL PASSWORD
Example:
  python -m userauth.scripts.create_account alice alice@example.com 'Secret123!'
"""
import argparse
import logging
import sys

from userauth.core.config import get_settings
from userauth.core.database import SessionLocal
from userauth.core.errors import AuthServiceError
from userauth.services import auth as auth_service
from userauth.services.credential_store import CredentialStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a userauth account.")
    parser.add_argument("username", help="Username (stored lowercase)")
    parser.add_argument("email", help="Email address (stored lowercase)")
    parser.add_argument("password", help="Password (at most 72 bytes UTF-8)")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        result = auth_service.register(
            CredentialStore(db),
            get_settings(),
            args.username,
            args.email,
            args.password,
        )
        print(f"Created account '{result.account.username}' with id {result.account.id}.")
        return 0
    except AuthServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
