import logging

from fastapi import APIRouter, HTTPException, Response

from app.dependencies import ResultStoreDep, SessionIdDep, SettingsDep
from app.mappers.spreadsheet import XLSX_MEDIA_TYPE, workbook_to_bytes
from app.schemas.responses import ClearResponse, ResultsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/results")


@router.get("", response_model=ResultsResponse)
async def list_results(store: ResultStoreDep, session_id: SessionIdDep) -> ResultsResponse:
    results = store.get_results(session_id)
    return ResultsResponse(total=len(results), results=results)


@router.delete("", response_model=ClearResponse)
async def clear_results(
    store: ResultStoreDep,
    session_id: SessionIdDep,
    confirm: bool = False,
) -> ClearResponse:
    if not confirm:
        raise HTTPException(status_code=400, detail="Clearing results requires confirmation")

    cleared = store.clear(session_id)
    logger.info("Session %s: cleared %d businesses", session_id, cleared)
    return ClearResponse(cleared=cleared)


@router.get("/export")
async def export_results(
    store: ResultStoreDep,
    settings: SettingsDep,
    session_id: SessionIdDep,
) -> Response:
    results = store.get_results(session_id)
    if not results:
        raise HTTPException(status_code=404, detail="No results to export")

    return Response(
        content=workbook_to_bytes(results),
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{settings.export_filename}"',
        },
    )
