"""
Security incident entity models.

Incidents are append-only: once stored, only their meta columns change.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from .meta import MetaColumns


class IncidentRecord(MetaColumns, table=True):
    """Persistent security incident.

    Table: security_incidents
    """

    __tablename__ = "security_incidents"
    __table_args__ = ({"extend_existing": True},)

    type: Optional[str] = Field(default=None, max_length=64, description="Incident type")
    severity: Optional[str] = Field(default=None, max_length=16, index=True, description="Severity")
    title: Optional[str] = Field(default=None, max_length=255, description="Title")
    body: Optional[str] = Field(default=None, max_length=65535, description="Body")
    details: Optional[str] = Field(default=None, description="JSON details")
    url: Optional[str] = Field(default=None, max_length=2048, description="URL")
    exception: Optional[str] = Field(default=None, description="Exception")
    data: Optional[str] = Field(default=None, description="Additional JSON data")

    def __repr__(self) -> str:
        return f"IncidentRecord(id={self.id}, severity={self.severity}, title={self.title})"
