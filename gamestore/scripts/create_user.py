"""
Create a user from the command line (the only way to create an admin). Run from project root:
  python -m gamestore.scripts.create_user USERNAME EMAIL PASSWORD [--admin]
Example:
  python -m gamestore.scripts.create_user admin admin@example.com your-secure-password --admin
"""
import argparse
import logging
import sys

from gamestore.core.config import get_settings
from gamestore.core.database import create_db_engine, create_session_factory
from gamestore.core.errors import AppError
from gamestore.services.credentials import register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Gamestore user.")
    parser.add_argument("username", help="Username (3+ chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password")
    parser.add_argument("--admin", action="store_true", help="Grant the admin flag")
    args = parser.parse_args(argv)

    settings = get_settings()
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    db = create_session_factory(engine)()
    try:
        user = register_user(
            db,
            settings,
            args.username.strip(),
            args.email,
            args.password,
            is_admin=args.admin,
        )
    except AppError as e:
        logger.error("Could not create user '%s': %s", args.username, e.message)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' (id=%s, admin=%s).", user.username, user.id, user.is_admin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
