"""
Security incident HTML pages.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from recordkit.server.services.deps import IncidentRepositoryDep
from recordkit.web.html import HtmlTable, Span
from recordkit.web.page import page_context, render_document

router = APIRouter(tags=["pages"])

INCIDENT_COLUMNS = ("created_on", "type", "severity", "title")


def render_severity(severity: str) -> str:
    """Show the severity as a badge with a tooltip."""
    return (
        Span(severity or "unknown", make_safe=True)
        .add_class(f"badge severity-{severity or 'unknown'}")
        .set_tooltip_title(f"Severity: {severity or 'unknown'}")
        .render()
    )


@router.get("/incidents", response_class=HTMLResponse, summary="Security Incidents Page")
async def incidents_page(repository: IncidentRepositoryDep) -> HTMLResponse:
    rows = await repository.select_rows(*INCIDENT_COLUMNS)

    with page_context():
        table = (
            HtmlTable()
            .set_source_query(rows)
            .set_row_url("/api/v1/incidents/:ROW")
            .set_convert_column("severity", render_severity)
            .set_empty("No security incidents were reported")
        )
        html = render_document("Security incidents", table)

    return HTMLResponse(html)
