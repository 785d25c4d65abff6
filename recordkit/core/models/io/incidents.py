"""
Security incident I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from recordkit.core.database.fields import Severity


class IncidentRead(BaseModel):
    """Schema for reading a security incident from the API."""

    id: int
    type: Optional[str] = None
    severity: Optional[Severity] = None
    title: Optional[str] = None
    body: Optional[str] = None
    details: Optional[Any] = Field(default=None, description="Decoded details, or the raw text if it is not JSON")
    url: Optional[str] = None
    status: Optional[str] = None
    created_by: Optional[int] = None
    created_on: Optional[datetime] = None


class IncidentCreate(BaseModel):
    """Schema for reporting a security incident via the API."""

    type: Optional[str] = Field(default=None, description="Incident type, 'Unknown' when omitted")
    severity: Severity = Field(default=Severity.unknown)
    title: str
    body: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    url: Optional[str] = None
