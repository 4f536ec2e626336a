"""Aksha companion FastAPI application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from aksha.api import alerts, auth, catalog, chat, contacts, device, health, sos, tracking, ws
from aksha.core.config import settings
from aksha.db.base import Base
from aksha.db.session import engine
from aksha.models import SecureItem  # noqa: F401 - register for create_all

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(contacts.router)
app.include_router(device.router)
app.include_router(tracking.router)
app.include_router(sos.router)
app.include_router(alerts.router)
app.include_router(chat.router)
app.include_router(catalog.router)
app.include_router(ws.router)


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run("aksha.main:app", host=settings.api_host, port=settings.api_port)
