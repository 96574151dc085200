"""Create a user from the command line.

Usage:
    uv run python -m scripts.create_user <email> <first_name> <last_name> [password]
If password is omitted, a random one is generated and printed.
Goes through UserService, so the password is hashed exactly as via the API.
"""

import asyncio
import secrets
import sys

from app.api.dependencies import AuthSecurity
from app.application.dtos.user import UserCreate
from app.application.services.user_service import UserService
from app.core.config import get_settings
from app.domain.exceptions import DuplicateEmailException, StoreUnavailableException
from app.infrastructure.persistence.database import Database
from app.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    """Create one user in a single transaction."""
    if len(sys.argv) < 4:
        print(
            "Usage: uv run python -m scripts.create_user <email> <first_name> <last_name> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    email, first_name, last_name = sys.argv[1:4]
    password = sys.argv[4] if len(sys.argv) > 4 else secrets.token_urlsafe(12)

    settings = get_settings()
    database = Database(settings)
    try:
        async with database.transaction() as session:
            service = UserService(UserRepository(session), AuthSecurity(settings))
            user = await service.create_user(
                UserCreate(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                    password=password,
                )
            )
    except DuplicateEmailException:
        print(f"Email already registered: {email}", file=sys.stderr)
        sys.exit(1)
    except StoreUnavailableException:
        print("Database unavailable; check DATABASE_URL or DB_* settings", file=sys.stderr)
        sys.exit(1)
    finally:
        await database.dispose()

    print(f"Created user: {user.id} ({user.email})")
    if len(sys.argv) <= 4:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
