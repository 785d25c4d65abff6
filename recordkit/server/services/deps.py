"""
Repository Dependencies.

Provides request scoped data entry repositories for API and page endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recordkit.core.database import get_session
from recordkit.core.database.repositories import DataEntryRepository
from recordkit.core.models.domain import Incident, Plugin

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_plugin_repository(session: SessionDep) -> DataEntryRepository[Plugin]:
    return DataEntryRepository(session, Plugin)


def get_incident_repository(session: SessionDep) -> DataEntryRepository[Incident]:
    return DataEntryRepository(session, Incident)


PluginRepositoryDep = Annotated[DataEntryRepository[Plugin], Depends(get_plugin_repository)]
IncidentRepositoryDep = Annotated[DataEntryRepository[Incident], Depends(get_incident_repository)]
