"""
Pytest fixtures for the export service tests.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from canvas_export.main import app
from canvas_export.models.schemas import ProjectRecord
from canvas_export.services.project_store import InMemoryProjectStore, get_project_store

# =============================================================================
# Canvas Model Fixtures
# =============================================================================


def make_component(
    kind: str,
    x: float = 0,
    y: float = 0,
    width: float = 100,
    height: float = 40,
    **properties: Any,
) -> dict:
    """Flat component shape as posted by API clients."""
    return {
        "kind": kind,
        "position": {"x": x, "y": y},
        "size": {"width": width, "height": height},
        "properties": properties,
    }


@pytest.fixture
def component():
    """Factory for flat component dicts."""
    return make_component


@pytest.fixture
def demo_project_data() -> dict:
    """The end-to-end example: one Button offset horizontally."""
    return {
        "id": "1",
        "name": "Demo",
        "components": [make_component("Button", x=10, y=0, text="Go")],
        "settings": {},
    }


@pytest.fixture
def demo_project(demo_project_data: dict) -> ProjectRecord:
    return ProjectRecord.model_validate(demo_project_data)


@pytest.fixture
def login_project_data() -> dict:
    """Editor-shaped project with several widget kinds and full settings."""
    return {
        "id": "login-42",
        "name": "Login Screen",
        "description": "Sign-in form",
        "components": [
            {
                "id": "canvas-a",
                "component": {"type": "TextView", "name": "Text View", "properties": {}},
                "position": {"x": 0, "y": 0},
                "size": {"width": 200, "height": 48},
                "properties": {"text": "Welcome", "textSize": 18, "textColor": "#222222"},
            },
            {
                "id": "canvas-b",
                "component": {"type": "EditText", "name": "Edit Text", "properties": {}},
                "position": {"x": 0, "y": 64},
                "size": {"width": 280, "height": 48},
                "properties": {"hint": "Email", "inputType": "textEmailAddress"},
            },
            {
                "id": "canvas-c",
                "component": {"type": "Button", "name": "Button", "properties": {}},
                "position": {"x": 24, "y": 128},
                "size": {"width": 120, "height": 48},
                "properties": {"text": "Sign in", "backgroundColor": "#6200EE"},
            },
            {
                "id": "canvas-d",
                "component": {"type": "ImageView", "name": "Image View", "properties": {}},
                "position": {"x": 0, "y": 200},
                "size": {"width": 64, "height": 64},
                "properties": {"scaleType": "centerCrop"},
            },
        ],
        "settings": {
            "theme": "material",
            "targetSdk": "33",
            "minSdk": "24",
            "packageName": "com.example.login",
            "versionCode": "7",
            "versionName": "2.1.0",
        },
    }


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def project_store() -> InMemoryProjectStore:
    return InMemoryProjectStore()


@pytest.fixture
def client(project_store: InMemoryProjectStore):
    """FastAPI TestClient backed by a fresh in-memory store."""
    app.dependency_overrides[get_project_store] = lambda: project_store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
