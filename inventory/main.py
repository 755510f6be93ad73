import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from inventory.api.v1.routes_items import router as items_router
from inventory.api.v1.routes_navigation import router as navigation_router
from inventory.core.config import settings
from inventory.core.errors import InvalidItemError, NotFoundError
from inventory.ui.provider import get_container

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = get_container().database
    await database.create_all()
    yield
    await database.dispose()


app = FastAPI(title="Inventory", lifespan=lifespan)

app.include_router(items_router)
app.include_router(navigation_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidItemError)
async def invalid_item_handler(request: Request, exc: InvalidItemError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "item_ui_state": exc.item_ui_state},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
