"""Common DTOs for service endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Health status", examples=["healthy"])
    catalog: list[str] = Field(default_factory=list, description="Reserved handles with a pre-rendered card")


class RootResponse(BaseModel):
    """Root endpoint response model."""
    status: str = Field(..., description="API status", examples=["ok"])
    service: str = Field(..., description="Service name", examples=["profilator"])
    version: str = Field(..., description="API version", examples=["0.1.0"])
