"""Main FastAPI application."""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from qrmenu.core.config import settings
from qrmenu.core.logging import setup_logging
from qrmenu.api import health, menu
from qrmenu.services.menu.envelope import error_body


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    yield


app = FastAPI(
    title=settings.app_name,
    description="QR menu browser and admin API for restaurants",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the response envelope."""
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path parameters are client errors, not 422s."""
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=error_body("Invalid request - " + "; ".join(problems)),
    )


app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run("qrmenu.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
