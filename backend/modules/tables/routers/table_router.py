# backend/modules/tables/routers/table_router.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.exports import csv_response, html_response
from ..schemas.table_schemas import (
    TableCreate, TableUpdate, TableResponse,
    TableStatusUpdate, TableStats,
)
from ..services.table_service import TableService

router = APIRouter(prefix="/tables", tags=["Tables"])


def get_table_service(db: Session = Depends(get_db)) -> TableService:
    """Dependency to get table service instance"""
    return TableService(db)


@router.get("", response_model=List[TableResponse])
async def list_tables(
    room_id: Optional[int] = Query(None, description="Only tables in this room"),
    table_service: TableService = Depends(get_table_service),
):
    """Get tables ordered by table number"""
    return table_service.list_tables(room_id)


@router.get("/stats", response_model=TableStats)
async def get_table_stats(table_service: TableService = Depends(get_table_service)):
    """Table counts by status"""
    return table_service.get_table_stats()


@router.get("/export")
async def export_layout(
    room_id: Optional[int] = Query(None),
    table_service: TableService = Depends(get_table_service),
):
    """Export the table layout as CSV"""
    return csv_response(table_service.export_layout_csv(room_id), "table_layout")


@router.get("/print")
async def print_floor_plan(
    room_id: Optional[int] = Query(None),
    table_service: TableService = Depends(get_table_service),
):
    """Printable list of the tables in a room"""
    return html_response(table_service.print_floor_plan(room_id))


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(
    table_data: TableCreate,
    table_service: TableService = Depends(get_table_service),
):
    return table_service.create_table(table_data)


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(
    table_id: int,
    table_service: TableService = Depends(get_table_service),
):
    return table_service.get_table(table_id)


@router.put("/{table_id}", response_model=TableResponse)
async def update_table(
    table_id: int,
    table_data: TableUpdate,
    table_service: TableService = Depends(get_table_service),
):
    return table_service.update_table(table_id, table_data)


@router.put("/{table_id}/status", response_model=TableResponse)
async def update_table_status(
    table_id: int,
    status_update: TableStatusUpdate,
    table_service: TableService = Depends(get_table_service),
):
    """Update table status"""
    return table_service.update_table_status(table_id, status_update.status)


@router.delete("/{table_id}")
async def delete_table(
    table_id: int,
    table_service: TableService = Depends(get_table_service),
):
    table_service.delete_table(table_id)
    return {"success": True, "message": "Table deleted successfully"}
