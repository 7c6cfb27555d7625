"""
Export output models.
"""
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field


class OutputPaths:
    """Fixed logical paths of the generated project documents"""
    LAYOUT = "app/src/main/res/layout/activity_main.xml"
    MAIN_ACTIVITY = "app/src/main/java/MainActivity.java"
    MANIFEST = "app/src/main/AndroidManifest.xml"
    BUILD_GRADLE = "app/build.gradle"
    STRINGS = "app/src/main/res/values/strings.xml"
    README = "README.md"

    @classmethod
    def all(cls) -> List[str]:
        return [
            cls.LAYOUT,
            cls.MAIN_ACTIVITY,
            cls.MANIFEST,
            cls.BUILD_GRADLE,
            cls.STRINGS,
            cls.README,
        ]


class ExportResult(BaseModel):
    """Complete export: every document plus resolved project identity"""
    model_config = ConfigDict(frozen=True)

    files: Dict[str, str] = Field(..., description="Output path -> document text")
    project_name: str
    package_name: str


class ExportResponse(BaseModel):
    """HTTP envelope returned by the export endpoints"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "files": {
                    "app/build.gradle": "plugins {\n    id 'com.android.application'\n}\n..."
                },
                "projectName": "Demo",
                "packageName": "com.androidbuilder.app",
                "timestamp": "2026-01-01T12:00:00.000Z"
            }
        },
    )

    success: bool = True
    files: Dict[str, str]
    project_name: str = Field(..., alias="projectName")
    package_name: str = Field(..., alias="packageName")
    timestamp: str


class ErrorResponse(BaseModel):
    """Structured error body; never carries generator internals"""
    error: str
    message: str
