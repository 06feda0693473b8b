"""PostgreSQL implementation of RemittanceRepository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from remitlend.domain.entities import RemittanceRecord, RemittanceStatus
from remitlend.domain.interfaces import RemittanceRepository
from remitlend.infrastructure.database.models import RemittanceHistoryModel


class PostgresRemittanceRepository(RemittanceRepository):
    """Stores remittance history rows through an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, record: RemittanceRecord) -> RemittanceRecord:
        model = RemittanceHistoryModel(
            user_id=record.user_id,
            amount=record.amount,
            month=record.month,
            status=record.status.value,
            created_at=record.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return self._to_entity(model)

    async def exists(self, user_id: str, month: str) -> bool:
        stmt = select(RemittanceHistoryModel.id).where(
            RemittanceHistoryModel.user_id == user_id,
            RemittanceHistoryModel.month == month,
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def get_by_user_id(self, user_id: str) -> List[RemittanceRecord]:
        stmt = (
            select(RemittanceHistoryModel)
            .where(RemittanceHistoryModel.user_id == user_id)
            .order_by(RemittanceHistoryModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: RemittanceHistoryModel) -> RemittanceRecord:
        return RemittanceRecord(
            id=model.id,
            user_id=model.user_id,
            amount=model.amount,
            month=model.month,
            status=RemittanceStatus(model.status),
            created_at=model.created_at,
        )
