"""Team Reminder Bot - FastAPI entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reminder_bot.config import settings
from reminder_bot.core.exceptions import ApiException
from reminder_bot.core.logging import get_logger
from reminder_bot.core.schemas.responses import ErrorResponse, HealthResponse
from reminder_bot.scheduler import start_scheduler, stop_scheduler
from reminder_bot.services.reminders.routes import router as reminders_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.google_space_webhook_url:
        logger.error("GOOGLE_SPACE_WEBHOOK_URL environment variable is not set")
    start_scheduler(settings)
    yield
    stop_scheduler()


app = FastAPI(
    title="Team Reminder Bot",
    description="Scheduled standup and pull request reminders for Google Chat",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """Handle custom API exceptions and return structured error response."""
    logger.warning(f"API error: {exc.message} (status={exc.status_code})")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.message,
            details=exc.details if exc.details else None,
        ).model_dump(),
    )

# Include routes
app.include_router(reminders_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "team-reminder-bot",
        "version": "0.1.0",
        "status": "running",
        "environment": settings.environment,
    }


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Team Reminder Bot on {settings.host}:{settings.port}")
    uvicorn.run(
        "reminder_bot.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
