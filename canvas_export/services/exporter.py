"""
Export Orchestrator
===================

Turns a canvas ``ProjectRecord`` into the complete set of Android project
documents.

Two states per call:
1. validating - decode the record and require ``id`` and ``name``
2. generating - assign identifiers once, run every generator, assemble output

Either every document is produced or an ``ExportError`` is raised; a partial
mapping never escapes this module.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from canvas_export.config import settings
from canvas_export.models.schemas import ExportResult, OutputPaths, ProjectRecord
from canvas_export.services.generation import (
    assign_identifiers,
    build_config_generator,
    layout_generator,
    manifest_generator,
    readme_generator,
    resource_generator,
    source_generator,
)
from canvas_export.utils.logging import get_logger, log_context, trace_sync

logger = get_logger(__name__)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class ExportError(Exception):
    """Base exception for export failures"""

    reason = "ExportError"
    error_code = "export_error"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Client-facing payload; context stays server-side"""
        return {
            "error": self.error_code,
            "message": self.message,
        }


class InvalidProjectError(ExportError):
    """Raised when the project record is missing required fields or is malformed"""

    reason = "InvalidProject"
    error_code = "invalid_project"


class ExportFailedError(ExportError):
    """Raised when a generator fails unexpectedly"""

    reason = "ExportFailed"
    error_code = "export_failed"


# ============================================================================
# ORCHESTRATOR
# ============================================================================

def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    detail = first.get("msg", "invalid value")
    return f"{location}: {detail}" if location else detail


class ExportOrchestrator:
    """
    Validates a project record and runs the document generators.

    The orchestrator holds no per-call state, so a single instance can be
    shared across concurrent requests.
    """

    def __init__(self, escape_values: Optional[bool] = None):
        self.escape_values = (
            settings.export_escape_values if escape_values is None else escape_values
        )

    def validate(self, data: Union[ProjectRecord, Mapping]) -> ProjectRecord:
        """
        Decode and check the incoming project.

        Raises:
            InvalidProjectError: malformed record, or missing ``id``/``name``
        """
        if isinstance(data, ProjectRecord):
            project = data
        elif isinstance(data, Mapping):
            try:
                project = ProjectRecord.model_validate(dict(data))
            except ValidationError as e:
                detail = _describe_validation_error(e)
                logger.warning(
                    "export.validation.malformed",
                    extra={"errors": e.error_count(), "first_error": detail}
                )
                raise InvalidProjectError(
                    f"Invalid project data: {detail}",
                    errors=e.error_count()
                ) from e
        else:
            raise InvalidProjectError("Project data must be an object")

        if not project.is_identified:
            logger.warning(
                "export.validation.failed",
                extra={"has_id": bool(project.id), "has_name": bool(project.name)}
            )
            raise InvalidProjectError("Project ID and name are required")

        return project

    def generate(self, project: ProjectRecord, escape_values: bool = False) -> ExportResult:
        """Run every generator against a validated record"""
        identifiers = assign_identifiers(project.components)

        files = {
            OutputPaths.LAYOUT: layout_generator.generate(
                project.components, identifiers, escape_values=escape_values
            ),
            OutputPaths.MAIN_ACTIVITY: source_generator.generate(project, identifiers),
            OutputPaths.MANIFEST: manifest_generator.generate(project),
            OutputPaths.BUILD_GRADLE: build_config_generator.generate(project.settings),
            OutputPaths.STRINGS: resource_generator.generate(
                project, identifiers, escape_values=escape_values
            ),
            OutputPaths.README: readme_generator.generate(project),
        }

        return ExportResult(
            files=files,
            project_name=project.name,
            package_name=project.settings.resolved_package_name,
        )

    @trace_sync("export.pipeline")
    def export(
        self,
        data: Union[ProjectRecord, Mapping],
        *,
        escape_values: Optional[bool] = None
    ) -> ExportResult:
        """
        Export a project to its Android documents.

        Args:
            data: ``ProjectRecord`` or its decoded JSON mapping
            escape_values: Override the configured escaping mode

        Returns:
            ExportResult keyed by ``OutputPaths``

        Raises:
            InvalidProjectError: validation failed; nothing was generated
            ExportFailedError: a generator failed; nothing is returned
        """
        project = self.validate(data)
        escape = self.escape_values if escape_values is None else escape_values

        with log_context(project_id=project.id):
            logger.info(
                "export.generation.started",
                extra={
                    "components": len(project.components),
                    "escape_values": escape
                }
            )

            try:
                result = self.generate(project, escape_values=escape)
            except Exception as e:
                logger.error(
                    "export.generation.failed",
                    extra={"error_type": type(e).__name__},
                    exc_info=e
                )
                raise ExportFailedError("Failed to export project") from e

            logger.info(
                "export.generation.completed",
                extra={
                    "documents": len(result.files),
                    "package_name": result.package_name
                }
            )
            return result


export_orchestrator = ExportOrchestrator()


def export_project(
    data: Union[ProjectRecord, Mapping],
    *,
    escape_values: Optional[bool] = None
) -> ExportResult:
    """Export with the shared orchestrator"""
    return export_orchestrator.export(data, escape_values=escape_values)
