"""
Manage vacancy permissions from the command line.

    python -m tasks.permissions init-db
    python -m tasks.permissions grant 42
    python -m tasks.permissions revoke 42
"""
import argparse
import asyncio
import logging

from db.permission_store import SqlPermissionStore
from db.session import SessionLocal, create_tables, engine
from schema.vacancies import UINT64_MAX


logger = logging.getLogger(__name__)


def user_id_arg(value: str) -> int:
    user_id = int(value)
    if not 0 <= user_id <= UINT64_MAX:
        raise argparse.ArgumentTypeError(f"{value} is not an unsigned 64-bit id")
    return user_id


async def set_permission(user_id: int, allowed: bool) -> None:
    async with SessionLocal() as session:
        await SqlPermissionStore(session).grant_vacancy_management(user_id, allowed)
    logger.info(f"Vacancy management for user {user_id} set to {allowed}")


async def run(args: argparse.Namespace) -> None:
    try:
        if args.command == "init-db":
            await create_tables()
            logger.info("Tables created")
        else:
            await set_permission(args.user_id, args.command == "grant")
    finally:
        await engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasks.permissions")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("init-db", help="create missing tables")
    for name in ("grant", "revoke"):
        command = commands.add_parser(name, help=f"{name} vacancy management")
        command.add_argument("user_id", type=user_id_arg)
    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run(build_parser().parse_args(argv)))


if __name__ == "__main__":
    main()
