"""FastAPI application entry point for the devfolio site and API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from devfolio import __version__
from devfolio.api.routes import auth, contact, health, messages, profile, tables
from devfolio.web import admin, pages
from devfolio.web.common import render

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

_JSON_PREFIXES = ("/api", "/health", "/docs", "/openapi.json")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from devfolio.data.db import dispose_engine, init_db

    init_db()
    yield
    dispose_engine()


app = FastAPI(
    title="devfolio",
    description="Personal portfolio site with an admin area for its content",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    """Render the not-found page for unknown site paths; API paths keep JSON errors."""
    if exc.status_code == 404 and not request.url.path.startswith(_JSON_PREFIXES):
        return render(request, "not_found.html", status_code=404, path=request.url.path)
    return await http_exception_handler(request, exc)


app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(contact.router, prefix="/api")
app.include_router(profile.router, prefix="/api")
app.include_router(messages.router, prefix="/api")
app.include_router(tables.experience_router, prefix="/api")
app.include_router(tables.education_router, prefix="/api")
app.include_router(tables.skills_router, prefix="/api")
app.include_router(pages.router)
app.include_router(admin.router)


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "devfolio.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
