import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from splitbook.api.v1.routes.balances import router as balances_router
from splitbook.api.v1.routes.expense import router as expense_router
from splitbook.api.v1.routes.group import router as group_router
from splitbook.core.config import settings
from splitbook.core.errors import LedgerError
from splitbook.core.serialization import LedgerJSONResponse, error_payload
from splitbook.db.session import create_store

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

def create_app(database_url: str | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = await create_store(database_url or settings.DATABASE_URL, echo=settings.SQL_ECHO)
        app.state.store = store
        yield
        await store.dispose()

    app = FastAPI(title="Splitbook", lifespan=lifespan)

    @app.get("/")
    async def root():
        return {"message": "Splitbook is live"}

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return LedgerJSONResponse(error_payload(exc), status_code=exc.status_code)

    app.include_router(group_router, prefix="/api/v1/groups")
    app.include_router(expense_router, prefix="/api/v1/groups")
    app.include_router(balances_router, prefix="/api/v1/groups")
    return app

app = create_app()
