"""
Export API endpoints.

POST /api/v1/export                        - export a project posted in the body
POST /api/v1/projects/{project_id}/export  - export a project from the store
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from canvas_export.models.schemas import ErrorResponse, ExportResponse, ExportResult
from canvas_export.services.exporter import ExportFailedError, export_orchestrator
from canvas_export.services.project_store import (
    InvalidProjectKeyError,
    ProjectCorruptedError,
    ProjectNotFoundError,
    ProjectStore,
    get_project_store,
)
from canvas_export.utils.datetime_utils import to_iso_string
from canvas_export.utils.logging import get_logger, log_context

router = APIRouter()
logger = get_logger(__name__)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid project"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Export failed"},
}


def _to_response(result: ExportResult) -> ExportResponse:
    return ExportResponse(
        files=result.files,
        project_name=result.project_name,
        package_name=result.package_name,
        timestamp=to_iso_string(),
    )


@router.post(
    "/export",
    response_model=ExportResponse,
    responses=ERROR_RESPONSES,
    tags=["Export"],
    summary="Export a canvas project",
    description="Generates the Android project documents for the posted canvas model."
)
def export_posted_project(project: Dict[str, Any] = Body(...)) -> ExportResponse:
    """
    The body is decoded by the orchestrator rather than by FastAPI so that a
    malformed record surfaces as ``invalid_project`` instead of a 422.
    """
    components = project.get("components")
    logger.info(
        "api.export.received",
        extra={"components": len(components) if isinstance(components, list) else 0}
    )
    result = export_orchestrator.export(project)
    return _to_response(result)


@router.post(
    "/projects/{project_id}/export",
    response_model=ExportResponse,
    responses={
        **ERROR_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Unknown project"},
    },
    tags=["Export"],
    summary="Export a stored project",
)
async def export_stored_project(
    project_id: str,
    store: ProjectStore = Depends(get_project_store)
):
    with log_context(project_id=project_id):
        try:
            project = await store.get(project_id)
        except (ProjectNotFoundError, InvalidProjectKeyError):
            logger.warning("api.export.project_not_found")
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=ErrorResponse(
                    error="project_not_found",
                    message=f"Project with ID {project_id} not found"
                ).model_dump()
            )
        except ProjectCorruptedError as e:
            logger.error("api.export.project_corrupted", exc_info=e)
            raise ExportFailedError("Failed to export project") from e

        result = export_orchestrator.export(project)
        return _to_response(result)
