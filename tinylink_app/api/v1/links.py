from typing import Literal, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import RedirectResponse

from tinylink_app.clipboard import BrowserClipboard
from tinylink_app.dependencies import get_client_context
from tinylink_app.services.context import ClientContext

router = APIRouter(tags=["links"])


def back_to_directory() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/links")
async def create_link(
    url: str = Form(...),
    code: Optional[str] = Form(None),
    context: ClientContext = Depends(get_client_context)
):
    """Submit the create form"""
    try:
        await context.creation.submit(url, code)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )
    return back_to_directory()


@router.post("/links/{code}/delete")
async def delete_link(
    code: str,
    context: ClientContext = Depends(get_client_context)
):
    """Delete one link by code"""
    await context.deletion.remove(code)
    return back_to_directory()


@router.post("/clipboard")
async def copy_to_clipboard(
    text: str = Form(...),
    outcome: Literal["copied", "denied"] = Form("denied"),
    context: ClientContext = Depends(get_client_context)
):
    """
    Report a copy of a short URL.

    The page's script writes to the visitor's clipboard before posting
    and sets `outcome`. A form posted without the script stays "denied".
    """
    await context.copy_action.copy(
        text, clipboard=BrowserClipboard(confirmed=outcome == "copied")
    )
    return back_to_directory()
