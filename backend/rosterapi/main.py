import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from rosterapi.core.config import settings
from rosterapi.core.errors import NotFoundError
from rosterapi.db.init_db import init_db
from rosterapi.middleware.logging import RequestLoggingMiddleware, setup_logging
from rosterapi.api.routes.teams import router as teams_router
from rosterapi.api.routes.players import router as players_router

logger = logging.getLogger("rosterapi")

app = FastAPI(title=settings.APP_TITLE)
app.add_middleware(RequestLoggingMiddleware)
app.include_router(teams_router)
app.include_router(players_router)


@app.on_event("startup")
def on_startup():
    setup_logging()
    init_db()
    logger.info("Database ready: %s", settings.DATABASE_URL)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("Not found on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Integrity constraint violated."})


@app.get("/health")
def health():
    return {"ok": True}
