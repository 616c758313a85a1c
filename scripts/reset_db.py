import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import text

from app.db.session import AsyncSessionLocal

logger = logging.getLogger("reset_db")

# Children first, so the order also works where TRUNCATE ... CASCADE is unavailable
TABLES = ["restaurantpayments", "menus", "payments", "restaurants"]


async def reset_database() -> bool:
    """Empty every table and restart the identity sequences.

    Returns:
        bool: True if the reset committed, False if it was rolled back.
    """
    async with AsyncSessionLocal() as session:
        try:
            await session.execute(
                text(f"TRUNCATE TABLE {', '.join(TABLES)} RESTART IDENTITY CASCADE")
            )
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Database reset failed, changes rolled back")
            return False

        for table_name in TABLES:
            result = await session.execute(text(f"SELECT COUNT(*) FROM {table_name}"))
            logger.info("%s: %s rows", table_name, result.scalar_one())

    return True


def confirm_reset() -> bool:
    print("WARNING: this deletes ALL restaurants, menus and payments.")
    response = input("Continue? (yes/no): ").strip().lower()
    return response in ("yes", "y")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Empty all crudy-restaurants tables")
    parser.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    args = parser.parse_args()

    if not args.yes and not confirm_reset():
        logger.info("Reset cancelled")
        return 0

    if await reset_database():
        logger.info("Reset complete, tables %s are empty", ", ".join(TABLES))
        return 0
    return 1


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    sys.exit(asyncio.run(main()))
