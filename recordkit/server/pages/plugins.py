"""
Plugin HTML pages.

Each endpoint renders inside its own ``page_context`` so autofocus, the
tooltip script and the CSRF token belong to exactly one response.
"""

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, RedirectResponse

from recordkit.core.logging_config import get_logger
from recordkit.server.services.csrf import VerifiedFormDep, set_csrf_cookie
from recordkit.server.services.deps import PluginRepositoryDep
from recordkit.web.html import A, DataEntryForm, Div, ElementsBlock, HtmlTable, Span
from recordkit.web.page import page_context, render_document

logger = get_logger(__name__)

router = APIRouter(tags=["pages"])

PLUGIN_COLUMNS = ("name", "vendor", "priority", "menu_priority", "status")


@router.get("/plugins", response_class=HTMLResponse, summary="Plugins Page")
async def plugins_page(repository: PluginRepositoryDep) -> HTMLResponse:
    rows = await repository.select_rows(*PLUGIN_COLUMNS)

    with page_context():
        table = (
            HtmlTable()
            .set_source_query(rows)
            .set_row_url("/plugins/:ROW")
            .set_null_status("Enabled")
            .set_empty("No plugins have been registered yet")
        )
        table.top_buttons.add(A("Documentation", make_safe=True).set_href("/api/v1/docs").add_class("btn btn-secondary"))

        html = render_document("Plugins", table)

    return HTMLResponse(html)


@router.get("/plugins/{plugin_id}", response_class=HTMLResponse, summary="Plugin Page")
async def plugin_page(plugin_id: int, repository: PluginRepositoryDep) -> HTMLResponse:
    plugin = await repository.load(plugin_id)

    with page_context() as page:
        title = Span(plugin.get_display_name(), make_safe=True).add_class("plugin-name")
        if plugin.get_disabled():
            title.set_tooltip_title("This plugin is disabled")

        form = DataEntryForm(plugin).set_action(f"/plugins/{plugin.get_id()}")
        body = ElementsBlock(Div(title).add_class("page-title"), form)

        html = render_document(f"Plugin {plugin.get_display_name()}", body)

    return set_csrf_cookie(HTMLResponse(html), page.csrf_token)


@router.post("/plugins/{plugin_id}", response_class=RedirectResponse, summary="Update Plugin")
async def update_plugin_page(plugin_id: int, form: VerifiedFormDep, repository: PluginRepositoryDep) -> RedirectResponse:
    """Apply the submitted plugin form and redirect back to the plugin page."""
    plugin = await repository.load(plugin_id)

    DataEntryForm(plugin).apply(form)
    await repository.update(plugin)

    logger.info(f"Updated plugin {plugin_id} from its page")
    return RedirectResponse(f"/plugins/{plugin_id}", status_code=status.HTTP_303_SEE_OTHER)
