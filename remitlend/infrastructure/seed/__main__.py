import asyncio
import sys

import structlog

from remitlend.core.logging import setup_logging
from remitlend.infrastructure.database import db_manager
from .runner import seed_database

logger = structlog.get_logger(__name__)


async def run() -> int:
    db_manager.init()
    try:
        await db_manager.create_all()
        async with db_manager.session() as session:
            await seed_database(session)
    except Exception:
        logger.exception("seed_failed")
        return 1
    finally:
        await db_manager.close()
    return 0


if __name__ == "__main__":
    setup_logging(log_format="console")
    sys.exit(asyncio.run(run()))
