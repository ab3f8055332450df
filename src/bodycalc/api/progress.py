"""Progress tracking endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from bodycalc.api.models import (
    ProgressEntryCreate,
    ProgressEntryUpdate,
    ProgressImportRequest,
)
from bodycalc.domain.progress import EntryType
from bodycalc.services.dates import today_iso
from bodycalc.services.progress import serialize_entry

if TYPE_CHECKING:
    from bodycalc.services.progress import ProgressService

router = APIRouter(prefix="/progress", tags=["progress"])


def _service(request: Request) -> ProgressService:
    return request.app.state.container.progress_service


@router.get("")
async def list_entries(
    request: Request,
    type: EntryType | None = None,  # noqa: A002
    start: date | None = None,
    end: date | None = None,
) -> dict[str, object]:
    """Return saved entries, newest first, optionally filtered."""
    service = _service(request)
    if start is not None and end is not None:
        entries = service.list_by_date_range(start, end)
        if type is not None:
            entries = [entry for entry in entries if entry.type == type]
    elif type is not None:
        entries = service.list_by_type(type)
    else:
        entries = service.list_entries()
    return {"entries": [serialize_entry(entry) for entry in entries]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def save_entry(
    payload: ProgressEntryCreate, request: Request
) -> dict[str, object]:
    """Save a calculator result."""
    entry = _service(request).save(payload.type, payload.date, payload.data)
    return serialize_entry(entry)


@router.get("/export")
async def export_entries(request: Request) -> Response:
    """Download every entry as an export document."""
    content = _service(request).export_data()
    filename = f"bodycalc-progress-{today_iso()}.json"
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import")
async def import_entries(
    payload: ProgressImportRequest, request: Request
) -> dict[str, object]:
    """Import an export document."""
    result = _service(request).import_data(payload.content, merge=payload.merge)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=result.error
        )
    return asdict(result)


@router.get("/latest/{entry_type}")
async def latest_entry(entry_type: EntryType, request: Request) -> dict[str, object]:
    """Return the newest entry of a type."""
    entry = _service(request).latest(entry_type)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_entry(entry)


@router.get("/chart/{entry_type}/{metric}")
async def chart_series(
    entry_type: EntryType, metric: str, request: Request, limit: int | None = None
) -> dict[str, object]:
    """Return chronological chart points for a metric."""
    container = request.app.state.container
    resolved_limit = limit if limit is not None else container.settings.chart_limit
    points = _service(request).chart_series(entry_type, metric, resolved_limit)
    return {"points": [asdict(point) for point in points]}


@router.get("/stats/{entry_type}/{metric}")
async def metric_stats(
    entry_type: EntryType, metric: str, request: Request
) -> dict[str, object]:
    """Return aggregate statistics for a metric."""
    return asdict(_service(request).stats(entry_type, metric))


@router.patch("/{entry_id}")
async def update_entry(
    entry_id: str, payload: ProgressEntryUpdate, request: Request
) -> dict[str, object]:
    """Apply a partial update to an entry."""
    changes = payload.model_dump(exclude_none=True)
    entry = _service(request).update(entry_id, changes)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_entry(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: str, request: Request) -> Response:
    """Delete one entry."""
    if not _service(request).delete(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_entries(request: Request) -> Response:
    """Delete every entry."""
    if not _service(request).clear_all():
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
