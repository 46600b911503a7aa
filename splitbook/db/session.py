import asyncio
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class Store:
    """
    Owns the engine holding every group and expense.

    All sessions go through one lock, so a read-modify-write on a group (or a
    balance read over its expenses) never interleaves with another call.
    """

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs = {}
        if ":memory:" in url:
            # one shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.async_session = async_sessionmaker(self.engine, expire_on_commit=False, class_=AsyncSession)
        self._lock = asyncio.Lock()

    async def init_models(self):
        # register every table on Base.metadata
        import splitbook.models.group  # noqa: F401
        import splitbook.models.group_member  # noqa: F401
        import splitbook.models.expense  # noqa: F401
        import splitbook.models.expense_split  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self):
        async with self._lock:
            async with self.async_session() as session:
                yield session

    async def dispose(self):
        await self.engine.dispose()


async def create_store(url: str, echo: bool = False) -> Store:
    store = Store(url, echo=echo)
    await store.init_models()
    logger.info("store ready at %s", url)
    return store
