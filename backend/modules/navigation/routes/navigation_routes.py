from fastapi import APIRouter, Query
from typing import Optional

from ..descriptors import InterfaceKind, get_navigation
from ..schemas.navigation_schemas import NavigationOut

router = APIRouter(prefix="/navigation", tags=["Navigation"])


@router.get("/{kind}", response_model=NavigationOut)
async def get_interface_navigation(
    kind: InterfaceKind,
    current_path: Optional[str] = Query(None, description="Marks the section containing this path as active"),
):
    """Title and sidebar sections for an interface kind"""
    return NavigationOut.from_descriptor(get_navigation(kind), current_path)
