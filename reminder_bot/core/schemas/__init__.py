"""Core schemas for API responses."""

from reminder_bot.core.schemas.responses import ApiResponse, ErrorResponse, HealthResponse

__all__ = ["ApiResponse", "ErrorResponse", "HealthResponse"]
