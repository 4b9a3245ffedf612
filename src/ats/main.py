"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ats.api.error_handlers import register_error_handlers
from ats.config import settings
from ats.logging_config import setup_logging
from ats.routers import api_routers, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once on startup."""
    setup_logging(settings.log_level, settings.log_format)
    yield


app = FastAPI(
    title="ATS API",
    description="Applicant tracking backend: organizations, jobs, applicants and assignments",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware to allow the frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Mount routers
app.include_router(health.router)
for router in api_routers:
    app.include_router(router, prefix="/api")


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)


if __name__ == "__main__":
    run()
