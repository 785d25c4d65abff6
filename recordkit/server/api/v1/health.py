"""
Health Check Endpoints.

``/health`` reports whether the server can reach its database, ``/version``
which recordkit release is serving the API.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from recordkit import __version__
from recordkit.core.logging_config import get_logger
from recordkit.server.core import constant
from recordkit.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check that the server is up and its database answers queries.",
    response_description="Server and database status.",
    responses={503: {"description": "The database is unreachable"}},
)
async def health_check(session: SessionDep):
    """
    Run a trivial query against the database.

    Answers 503 with a ``degraded`` status when the query fails.
    """
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed, database unreachable: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "database": "unreachable"},
        )

    return {"status": "ok", "database": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve the recordkit release and API prefix being served.",
    response_description="Version object.",
)
async def version():
    return {"version": __version__, "api": constant.API_V1_STR}
