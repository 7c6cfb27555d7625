"""
HTTP surface: export endpoints, error mapping, health probes.
"""

import asyncio

from canvas_export.models.schemas import OutputPaths, ProjectRecord
from canvas_export.services import exporter as exporter_module
from canvas_export.services.project_store import ProjectCorruptedError


# =============================================================================
# POST /api/v1/export
# =============================================================================


class TestExportEndpoint:

    def test_export_success(self, client, demo_project_data):
        response = client.post("/api/v1/export", json=demo_project_data)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["projectName"] == "Demo"
        assert data["packageName"] == "com.androidbuilder.app"
        assert data["timestamp"].endswith("Z")
        assert sorted(data["files"]) == sorted(OutputPaths.all())
        assert 'android:id="@+id/button_1"' in data["files"][OutputPaths.LAYOUT]

    def test_editor_shape_accepted(self, client, login_project_data):
        response = client.post("/api/v1/export", json=login_project_data)

        assert response.status_code == 200
        assert response.json()["packageName"] == "com.example.login"

    def test_missing_name_is_bad_request(self, client):
        response = client.post("/api/v1/export", json={"id": "1", "components": []})

        assert response.status_code == 400
        assert response.json() == {
            "error": "invalid_project",
            "message": "Project ID and name are required",
        }

    def test_malformed_component_is_bad_request(self, client):
        response = client.post(
            "/api/v1/export",
            json={
                "id": "1",
                "name": "Demo",
                "components": [{"kind": "Button", "size": {"width": -5, "height": 40}}],
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_project"
        assert response.json()["message"].startswith("Invalid project data:")

    def test_generator_failure_is_server_error(self, client, monkeypatch, demo_project_data):
        def boom(*args, **kwargs):
            raise KeyError("secret internal detail")

        monkeypatch.setattr(exporter_module.source_generator, "generate", boom)

        response = client.post("/api/v1/export", json=demo_project_data)

        assert response.status_code == 500
        assert response.json() == {
            "error": "export_failed",
            "message": "Failed to export project",
        }

    def test_correlation_id_echoed(self, client, demo_project_data):
        response = client.post(
            "/api/v1/export",
            json=demo_project_data,
            headers={"X-Correlation-ID": "abc-123"},
        )

        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_correlation_id_generated(self, client, demo_project_data):
        response = client.post("/api/v1/export", json=demo_project_data)

        assert response.headers["X-Correlation-ID"]


# =============================================================================
# POST /api/v1/projects/{project_id}/export
# =============================================================================


class TestStoredProjectExport:

    def test_export_stored_project(self, client, project_store, login_project_data):
        asyncio.run(project_store.put(ProjectRecord.model_validate(login_project_data)))

        response = client.post("/api/v1/projects/login-42/export")

        assert response.status_code == 200
        data = response.json()
        assert data["projectName"] == "Login Screen"
        assert "findViewById(R.id.imageview_4)" in data["files"][OutputPaths.MAIN_ACTIVITY]

    def test_stored_and_posted_exports_match(self, client, project_store, login_project_data):
        asyncio.run(project_store.put(ProjectRecord.model_validate(login_project_data)))

        stored = client.post("/api/v1/projects/login-42/export").json()
        posted = client.post("/api/v1/export", json=login_project_data).json()

        assert stored["files"] == posted["files"]

    def test_unknown_project(self, client):
        response = client.post("/api/v1/projects/missing/export")

        assert response.status_code == 404
        assert response.json() == {
            "error": "project_not_found",
            "message": "Project with ID missing not found",
        }

    def test_corrupted_project_is_export_failure(self, client, project_store, monkeypatch):
        async def corrupted(project_id):
            raise ProjectCorruptedError(f"Stored project is corrupted: {project_id}")

        monkeypatch.setattr(project_store, "get", corrupted)

        response = client.post("/api/v1/projects/broken/export")

        assert response.status_code == 500
        assert response.json() == {
            "error": "export_failed",
            "message": "Failed to export project",
        }

    def test_stored_project_without_name(self, client, project_store):
        asyncio.run(project_store.put(ProjectRecord(id="anon")))

        response = client.post("/api/v1/projects/anon/export")

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_project"


# =============================================================================
# Health and service info
# =============================================================================


class TestHealth:

    def test_liveness(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["ready"] is True
        assert data["dependencies"] == {"project_store": "healthy"}

    def test_readiness_reports_broken_store(self, client, project_store, monkeypatch):
        async def broken():
            raise OSError("disk gone")

        monkeypatch.setattr(project_store, "list_projects", broken)

        data = client.get("/health/ready").json()

        assert data["ready"] is False
        assert data["status"] == "not_ready"
        assert data["dependencies"] == {"project_store": "unhealthy"}

    def test_root(self, client):
        data = client.get("/").json()

        assert data["status"] == "running"
        assert data["api"]["export"] == "POST /api/v1/export"
