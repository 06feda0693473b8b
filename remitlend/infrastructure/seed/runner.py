"""
Idempotent database seeding.

Rows that already exist (by user for scores, by user and month for
remittances) are skipped, so the seed can be run any number of times.
"""

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from remitlend.infrastructure.repositories import (
    PostgresRemittanceRepository,
    PostgresScoreRepository,
)
from .data import seed_remittance_records, seed_score_records

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SeedReport:
    inserted_scores: int = 0
    skipped_scores: int = 0
    inserted_remittances: int = 0
    skipped_remittances: int = 0


async def seed_scores(session: AsyncSession) -> tuple[int, int]:
    repository = PostgresScoreRepository(session)
    inserted = skipped = 0

    for record in seed_score_records():
        if await repository.get_by_user_id(record.user_id) is not None:
            logger.info("seed_score_skipped", user_id=record.user_id)
            skipped += 1
            continue

        await repository.save(record)
        logger.info(
            "seed_score_inserted",
            user_id=record.user_id,
            score=record.current_score,
        )
        inserted += 1

    return inserted, skipped


async def seed_remittances(session: AsyncSession) -> tuple[int, int]:
    repository = PostgresRemittanceRepository(session)
    inserted = skipped = 0

    for record in seed_remittance_records():
        if await repository.exists(record.user_id, record.month):
            logger.info(
                "seed_remittance_skipped",
                user_id=record.user_id,
                month=record.month,
            )
            skipped += 1
            continue

        await repository.save(record)
        logger.info(
            "seed_remittance_inserted",
            user_id=record.user_id,
            month=record.month,
        )
        inserted += 1

    return inserted, skipped


async def seed_database(session: AsyncSession) -> SeedReport:
    """
    Insert the demo scores and remittance history.

    Args:
        session: Session to write through; the caller owns the transaction

    Returns:
        Counts of inserted and skipped rows
    """
    logger.info("seed_started")

    inserted_scores, skipped_scores = await seed_scores(session)
    inserted_remittances, skipped_remittances = await seed_remittances(session)

    report = SeedReport(
        inserted_scores=inserted_scores,
        skipped_scores=skipped_scores,
        inserted_remittances=inserted_remittances,
        skipped_remittances=skipped_remittances,
    )
    logger.info("seed_completed", **vars(report))
    return report
