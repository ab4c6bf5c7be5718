from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from tinylink_app.config import settings
from tinylink_app.dependencies import get_client_context
from tinylink_app.services.context import ClientContext
from tinylink_app.views.directory import PageState, build_page_state
from tinylink_app.views.page import render_page

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def directory_page(context: ClientContext = Depends(get_client_context)):
    """Render the link directory (first visit loads it from the API)"""
    if not context.store.loaded:
        await context.store.refresh()
    return render_page(
        build_page_state(context),
        app_name=settings.app_name,
        api_base_url=context.api_base_url,
        max_code_length=settings.custom_code_max_length,
    )


@router.get("/state", response_model=PageState)
async def page_state(context: ClientContext = Depends(get_client_context)):
    """Same projection as the page, as JSON"""
    return build_page_state(context)
