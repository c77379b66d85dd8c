"""FastAPI dependency injection."""

import functools
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from benefit_calc.config import settings
from benefit_calc.data.sessions import MemorySessionStore, SessionStore, SqlSessionStore
from benefit_calc.engine.limits import default_limits
from benefit_calc.models.limits import PlanYearLimits

logger = logging.getLogger(__name__)


@functools.lru_cache
def _build_store() -> SessionStore:
    if settings.session_backend == "sql":
        engine = create_async_engine(settings.database_url, echo=settings.debug)
        return SqlSessionStore(async_sessionmaker(engine, expire_on_commit=False))
    if settings.session_backend != "memory":
        logger.warning("Unknown session backend %r, using in-memory store", settings.session_backend)
    return MemorySessionStore()


async def init_store() -> None:
    """Create the sessions table when running against a database."""
    store = _build_store()
    if isinstance(store, SqlSessionStore):
        await store.create_tables()
        logger.info("Session tables ready")


def get_session_store() -> SessionStore:
    return _build_store()


def get_limits() -> PlanYearLimits:
    return default_limits()
