"""Common system-level response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Metadata payload returned by the root endpoint."""

    name: str = Field(description="Human-friendly service name")
    environment: str = Field(description="Deployment environment identifier")
    version: str = Field(description="Semantic version of the service")
    api_prefix: str = Field(description="Base path for API routes")


class HealthCheckResponse(BaseModel):
    """Payload returned by the health check endpoint."""

    status: str = Field(default="ok", description="Service health indicator")


class ErrorResponse(BaseModel):
    """Uniform body returned for every error status."""

    timestamp: datetime = Field(description="When the error was produced (UTC)")
    status: int = Field(description="HTTP status code")
    error: str = Field(description="HTTP reason phrase, e.g. 'Not Found'")
    message: str = Field(description="What went wrong")
    path: str = Field(description="Request path that produced the error")


__all__ = ["ErrorResponse", "HealthCheckResponse", "RootResponse"]
