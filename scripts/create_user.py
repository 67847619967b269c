"""Create a user and optionally assign roles by name.

Usage:
    python -m scripts.create_user <username> <email> <mobile> [password] [--role NAME ...]
If password is omitted, a random one is printed.
"""

import argparse
import asyncio
import secrets
import sys

from contact_manager.core.config import get_settings
from contact_manager.domain.exceptions import ContactManagerException
from contact_manager.infrastructure.persistence import database
from contact_manager.infrastructure.persistence.repositories import (
    RoleRepository,
    UserRepository,
    UserRoleRepository,
)
from contact_manager.infrastructure.security.password import get_password_hash


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="python -m scripts.create_user")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("mobile", help="10-digit mobile number")
    parser.add_argument("password", nargs="?")
    parser.add_argument("--role", action="append", default=[], help="Role name to assign")
    return parser.parse_args(argv)


async def main(argv: list[str]) -> None:
    args = _parse_args(argv)
    password = args.password or secrets.token_urlsafe(12)

    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            role_repo = RoleRepository(session)
            user_role_repo = UserRoleRepository(session)
            try:
                hashed = await asyncio.to_thread(get_password_hash, password)
                user = await user_repo.create_user(
                    username=args.username,
                    email=args.email,
                    mobile=args.mobile,
                    hashed_password=hashed,
                )
                for role_name in args.role:
                    role = await role_repo.get_by_name(role_name)
                    if role is None:
                        print(f"Role not found: {role_name}", file=sys.stderr)
                        sys.exit(1)
                    await user_role_repo.assign_role(user.id, role.id)
            except ContactManagerException as e:
                print(f"Could not create user: {e.message}", file=sys.stderr)
                sys.exit(1)
    print(f"Created user: {user.id} ({user.username})")
    if not args.password:
        print(f"Password: {password}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
