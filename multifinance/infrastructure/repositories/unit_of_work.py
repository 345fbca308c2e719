"""SQLAlchemy implementation of UnitOfWork."""

from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.domain.interfaces import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work bound to one AsyncSession.

    Repositories that receive this unit of work execute their writes on
    its session, so commit/rollback covers all of them together.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
