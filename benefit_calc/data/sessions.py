"""Saved calculation sessions.

A session is an opaque snapshot of one calculator run: the calculator type,
the inputs and the results, both as JSON strings. The calculators never touch
this layer; the API saves a session after running one.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from benefit_calc.models.db import Base, CalculationSessionRecord

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    pass


@dataclass(frozen=True)
class CalculationSession:
    id: str
    calculator_type: str
    input_data: str
    results: str
    created_at: datetime


@runtime_checkable
class SessionStore(Protocol):
    async def create(self, calculator_type: str, input_data: str, results: str) -> CalculationSession:
        """Persist a session, assigning its id and creation time."""
        ...

    async def get(self, session_id: str) -> CalculationSession | None:
        """Fetch a session by id."""
        ...

    async def list_by_type(self, calculator_type: str) -> list[CalculationSession]:
        """All sessions for a calculator, oldest first."""
        ...


async def get_or_raise(store: SessionStore, session_id: str) -> CalculationSession:
    session = await store.get(session_id)
    if session is None:
        raise SessionNotFoundError(session_id)
    return session


class MemorySessionStore:
    """Process-local store. Contents are lost on restart."""

    def __init__(self):
        self._sessions: dict[str, CalculationSession] = {}

    async def create(self, calculator_type: str, input_data: str, results: str) -> CalculationSession:
        session = CalculationSession(
            id=str(uuid.uuid4()),
            calculator_type=calculator_type,
            input_data=input_data,
            results=results,
            created_at=datetime.now(timezone.utc),
        )
        self._sessions[session.id] = session
        logger.debug("Stored %s session %s in memory", calculator_type, session.id)
        return session

    async def get(self, session_id: str) -> CalculationSession | None:
        return self._sessions.get(session_id)

    async def list_by_type(self, calculator_type: str) -> list[CalculationSession]:
        return [s for s in self._sessions.values() if s.calculator_type == calculator_type]


def _to_session(record: CalculationSessionRecord) -> CalculationSession:
    return CalculationSession(
        id=record.id,
        calculator_type=record.calculator_type,
        input_data=record.input_data,
        results=record.results,
        created_at=record.created_at,
    )


class SqlSessionStore:
    """SQLAlchemy-backed store over the calculation_sessions table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create_tables(self) -> None:
        async with self.session_factory() as db:
            conn = await db.connection()
            await conn.run_sync(Base.metadata.create_all)
            await db.commit()

    async def create(self, calculator_type: str, input_data: str, results: str) -> CalculationSession:
        record = CalculationSessionRecord(
            id=str(uuid.uuid4()),
            calculator_type=calculator_type,
            input_data=input_data,
            results=results,
            created_at=datetime.now(timezone.utc),
        )
        async with self.session_factory() as db:
            db.add(record)
            await db.commit()
            await db.refresh(record)
        logger.debug("Stored %s session %s", calculator_type, record.id)
        return _to_session(record)

    async def get(self, session_id: str) -> CalculationSession | None:
        async with self.session_factory() as db:
            record = await db.get(CalculationSessionRecord, session_id)
        return _to_session(record) if record else None

    async def list_by_type(self, calculator_type: str) -> list[CalculationSession]:
        stmt = (
            select(CalculationSessionRecord)
            .where(CalculationSessionRecord.calculator_type == calculator_type)
            .order_by(CalculationSessionRecord.created_at)
        )
        async with self.session_factory() as db:
            records = (await db.execute(stmt)).scalars().all()
        return [_to_session(r) for r in records]
