"""FastAPI application entry - post body markup preview service."""

import logging

from . import config
from fastapi import FastAPI

from .api.routes import router

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(
    title="Board Markup",
    description="Render imageboard post bodies to sanitized HTML",
    version="0.1.0",
)
app.include_router(router)


@app.get("/")
async def root():
    return {"service": "board-markup", "docs": "/docs"}
