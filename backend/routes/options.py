"""
Enum option endpoints.

Endpoints:
    GET  /options                       — Registered enums and their member counts
    GET  /options/{enum_key}            — Option list (value, label, selected)
    GET  /options/{enum_key}/select     — Option list rendered as <select> markup
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from controllers.options_controller import OptionsController
from deps import controller_dependency
from domain.responses import StandardErrorResponse, StandardSuccessResponse
from models import EnumOptionOut, OptionEnumSummary

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/options",
    tags=["options"],
    responses={404: {"model": StandardErrorResponse, "description": "Unknown enum key"}},
)

get_options_controller = controller_dependency(OptionsController)


# ── GET /options ───────────────────────────────────────────────────
@router.get("", response_model=StandardSuccessResponse[list[OptionEnumSummary]])
async def list_option_enums(
    controller: OptionsController = Depends(get_options_controller),
):
    """List the enums that can be served as option lists."""
    return controller.list_enums()


# ── GET /options/{enum_key} ────────────────────────────────────────
@router.get("/{enum_key}", response_model=StandardSuccessResponse[list[EnumOptionOut]])
async def get_enum_options(
    enum_key: str,
    selected: Optional[str] = Query(None, description="Selected member name or value"),
    controller: OptionsController = Depends(get_options_controller),
):
    """
    Get the option list for a registered enum.

    A `selected` value that names no member is ignored.
    """
    return controller.options(enum_key, selected)


# ── GET /options/{enum_key}/select ─────────────────────────────────
@router.get("/{enum_key}/select", response_class=HTMLResponse)
async def get_enum_select(
    enum_key: str,
    selected: Optional[str] = Query(None, description="Selected member name or value"),
    name: Optional[str] = Query(None, description="Form field name (defaults to enum_key)"),
    controller: OptionsController = Depends(get_options_controller),
):
    """Render the option list of a registered enum as an HTML <select>."""
    return controller.select(enum_key, selected, name)
