"""
Security Incidents API Endpoints.

Incidents are reported once and never edited, so this module only offers
create and read endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, status

from recordkit.core.models.domain import Incident
from recordkit.core.models.io import IncidentCreate, IncidentRead
from recordkit.server.services.deps import IncidentRepositoryDep

router = APIRouter(tags=["incidents"])


def to_read(incident: Incident) -> IncidentRead:
    source = incident.get_source()
    source["details"] = incident.get_details()
    return IncidentRead.model_validate(source)


@router.post(
    "",
    response_model=IncidentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Report Security Incident",
    description="Report a new security incident. Incidents cannot be modified afterwards.",
    responses={
        201: {"description": "Incident reported"},
        400: {"description": "Invalid incident data"},
    },
)
async def create_incident(payload: IncidentCreate, repository: IncidentRepositoryDep) -> IncidentRead:
    """
    Report a security incident.

    - **type**: Free form incident type, ``Unknown`` when omitted.
    - **severity**: One of notice, low, medium, high, severe or unknown.
    - **details**: Arbitrary JSON details, stored as JSON text.
    """
    incident = Incident()
    incident.set_type(payload.type or incident.get_type())
    incident.set_severity(payload.severity)
    incident.set_title(payload.title)
    incident.set_body(payload.body)
    incident.set_details(payload.details)
    incident.set_url(payload.url)

    incident = await repository.create(incident)
    return to_read(incident)


@router.get(
    "",
    response_model=List[IncidentRead],
    summary="List Security Incidents",
    description="List incidents ordered by ID, optionally only those of one severity.",
)
async def list_incidents(
    repository: IncidentRepositoryDep,
    severity: Optional[str] = None,
    limit: int = 100,
    offset: int = 0,
) -> List[IncidentRead]:
    filters = {"severity": severity} if severity else None
    incidents = await repository.list(limit=limit, offset=offset, filters=filters)
    return [to_read(incident) for incident in incidents]


@router.get(
    "/{incident_id}",
    response_model=IncidentRead,
    summary="Get Security Incident",
    responses={
        200: {"description": "Incident found"},
        404: {"description": "Incident not found"},
    },
)
async def get_incident(incident_id: int, repository: IncidentRepositoryDep) -> IncidentRead:
    incident = await repository.load(incident_id)
    return to_read(incident)
