"""
Project Store
=============

Storage capability handed to the HTTP layer so it can look up a saved canvas
model before exporting it. The export engine itself never touches a store; it
only ever receives a fully materialized ``ProjectRecord``.

Backends:
- In-memory (default, per process)
- File system (one JSON file per project)
"""

import asyncio
import json
import re
from pathlib import Path
from typing import Dict, List, Protocol

from loguru import logger
from pydantic import ValidationError

from canvas_export.config import settings
from canvas_export.models.schemas import ProjectRecord


# ============================================================================
# EXCEPTIONS
# ============================================================================

class PersistenceError(Exception):
    """Base exception for persistence errors"""
    pass


class ProjectNotFoundError(PersistenceError):
    """Raised when a project doesn't exist"""
    pass


class ProjectCorruptedError(PersistenceError):
    """Raised when a stored project fails validation on load"""
    pass


class InvalidProjectKeyError(PersistenceError):
    """Raised when a project id cannot be used as a storage key"""
    pass


_PROJECT_KEY_PATTERN = re.compile(r'^[A-Za-z0-9_-][A-Za-z0-9_.-]*$')


def _require_key(project_id: str) -> str:
    if not project_id or not _PROJECT_KEY_PATTERN.match(project_id):
        raise InvalidProjectKeyError(f"Invalid project id for storage: {project_id!r}")
    return project_id


# ============================================================================
# STORE INTERFACE
# ============================================================================

class ProjectStore(Protocol):
    """Interface that all project stores must implement"""

    async def get(self, project_id: str) -> ProjectRecord:
        """Load a project; raises ProjectNotFoundError"""
        ...

    async def list_projects(self) -> List[str]:
        """List all stored project IDs"""
        ...

    async def put(self, project: ProjectRecord) -> None:
        """Create or replace a project"""
        ...

    async def delete(self, project_id: str) -> None:
        """Delete a project; missing projects are ignored"""
        ...


# ============================================================================
# IN-MEMORY BACKEND
# ============================================================================

class InMemoryProjectStore:
    """Dictionary-backed store; records are frozen so they are shared as-is"""

    def __init__(self):
        self._projects: Dict[str, ProjectRecord] = {}
        self._lock = asyncio.Lock()

    async def get(self, project_id: str) -> ProjectRecord:
        try:
            return self._projects[project_id]
        except KeyError:
            raise ProjectNotFoundError(f"Project not found: {project_id}") from None

    async def list_projects(self) -> List[str]:
        return sorted(self._projects)

    async def put(self, project: ProjectRecord) -> None:
        project_id = _require_key(project.id or "")
        async with self._lock:
            self._projects[project_id] = project
        logger.debug(f"Stored project in memory: {project_id}")

    async def delete(self, project_id: str) -> None:
        async with self._lock:
            self._projects.pop(project_id, None)
        logger.info(f"Deleted project: {project_id}")


# ============================================================================
# FILE SYSTEM BACKEND
# ============================================================================

class FileSystemProjectStore:
    """
    File-based store using JSON files.

    Structure:
        storage_path/
            {project_id}.json
    """

    def __init__(self, storage_path: str = "./project_store"):
        self.storage_path = Path(storage_path)
        self.storage_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"FileSystemProjectStore initialized: {self.storage_path}")

    def _get_file_path(self, project_id: str) -> Path:
        return self.storage_path / f"{_require_key(project_id)}.json"

    async def get(self, project_id: str) -> ProjectRecord:
        file_path = self._get_file_path(project_id)

        if not file_path.exists():
            raise ProjectNotFoundError(f"Project not found: {project_id}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return ProjectRecord.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Stored project corrupted: {project_id}")
            raise ProjectCorruptedError(f"Stored project is corrupted: {project_id}") from e

    async def list_projects(self) -> List[str]:
        return sorted(path.stem for path in self.storage_path.glob("*.json"))

    async def put(self, project: ProjectRecord) -> None:
        """Write project to file (atomic)"""
        file_path = self._get_file_path(project.id or "")
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(project.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
            logger.debug(f"Saved project to file: {project.id}")
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise PersistenceError(f"Failed to write project: {e}") from e

    async def delete(self, project_id: str) -> None:
        file_path = self._get_file_path(project_id)
        if file_path.exists():
            file_path.unlink()
        logger.info(f"Deleted project file: {project_id}")


# ============================================================================
# FACTORY
# ============================================================================

def create_project_store() -> ProjectStore:
    """Build the store selected by ``APP_PROJECT_STORE_BACKEND``"""
    if settings.project_store_backend == "filesystem":
        return FileSystemProjectStore(settings.project_store_path)
    return InMemoryProjectStore()


project_store: ProjectStore = create_project_store()


def get_project_store() -> ProjectStore:
    """FastAPI dependency; override in tests with ``app.dependency_overrides``"""
    return project_store
