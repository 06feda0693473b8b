"""PostgreSQL implementation of ScoreRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from remitlend.domain.entities import ScoreRecord
from remitlend.domain.interfaces import ScoreRepository
from remitlend.infrastructure.database.models import ScoreModel


class PostgresScoreRepository(ScoreRepository):
    """Stores score rows through an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, record: ScoreRecord) -> ScoreRecord:
        """Persist a score record and return it with its id."""
        model = ScoreModel(
            user_id=record.user_id,
            current_score=record.current_score,
            updated_at=record.updated_at,
        )

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def get_by_user_id(self, user_id: str) -> Optional[ScoreRecord]:
        stmt = select(ScoreModel).where(ScoreModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: ScoreModel) -> ScoreRecord:
        """Convert database model to domain entity."""
        return ScoreRecord(
            id=model.id,
            user_id=model.user_id,
            current_score=model.current_score,
            updated_at=model.updated_at,
        )
