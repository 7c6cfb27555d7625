"""
Source, manifest, build configuration, string resources and README.
"""

import re
import xml.etree.ElementTree as ET

from canvas_export.models.schemas import ProjectRecord, ProjectSettings
from canvas_export.services.generation import (
    DEPENDENCIES,
    build_config_generator,
    component_string_resource,
    manifest_generator,
    readme_generator,
    resource_generator,
    source_generator,
    theme_style_name,
)

ANDROID_NS = "{http://schemas.android.com/apk/res/android}"


def _strings(document: str) -> dict:
    root = ET.fromstring(document.encode("utf-8"))
    return {element.get("name"): element.text or "" for element in root.findall("string")}


# =============================================================================
# MainActivity.java
# =============================================================================


class TestSourceGenerator:

    def test_default_package(self, demo_project):
        source = source_generator.generate(demo_project)

        assert source.startswith("package com.androidbuilder.app;\n")

    def test_binding_per_component(self, demo_project):
        source = source_generator.generate(demo_project)

        assert "        // Button component\n" in source
        assert "        Button button_1 = findViewById(R.id.button_1);" in source

    def test_bindings_in_order(self, login_project_data):
        source = source_generator.generate(ProjectRecord.model_validate(login_project_data))

        bound = re.findall(r"findViewById\(R\.id\.(\w+)\);", source)
        assert bound == ["textview_1", "edittext_2", "button_3", "imageview_4"]

    def test_empty_project_still_complete(self):
        source = source_generator.generate(ProjectRecord(id="1", name="Empty"))

        assert "private void initializeComponents() {" in source
        assert "R.id.main" in source
        assert source.count("{") == source.count("}")
        assert source.rstrip().endswith("}")
        assert re.findall(r"findViewById\(R\.id\.(\w+)\);", source) == []

    def test_braces_balanced_with_components(self, login_project_data):
        source = source_generator.generate(ProjectRecord.model_validate(login_project_data))

        assert source.count("{") == source.count("}")


# =============================================================================
# AndroidManifest.xml
# =============================================================================


class TestManifestGenerator:

    def test_theme_name_strips_whitespace(self):
        assert theme_style_name("My  Cool\tApp") == "Theme.MyCoolApp"

    def test_defaults(self, demo_project):
        manifest = manifest_generator.generate(demo_project)
        root = ET.fromstring(manifest.encode("utf-8"))

        assert root.get("package") == "com.androidbuilder.app"
        assert root.get(f"{ANDROID_NS}versionCode") == "1"
        assert root.get(f"{ANDROID_NS}versionName") == "1.0.0"

    def test_settings_applied(self, login_project_data):
        manifest = manifest_generator.generate(ProjectRecord.model_validate(login_project_data))
        root = ET.fromstring(manifest.encode("utf-8"))

        assert root.get("package") == "com.example.login"
        assert root.get(f"{ANDROID_NS}versionCode") == "7"
        assert root.get(f"{ANDROID_NS}versionName") == "2.1.0"

        application = root.find("application")
        assert application.get(f"{ANDROID_NS}theme") == "@style/Theme.LoginScreen"
        assert application.get(f"{ANDROID_NS}label") == "@string/app_name"

    def test_single_launcher_activity(self, demo_project):
        root = ET.fromstring(manifest_generator.generate(demo_project).encode("utf-8"))

        activities = root.findall("application/activity")
        assert len(activities) == 1
        assert activities[0].get(f"{ANDROID_NS}name") == ".MainActivity"
        assert activities[0].get(f"{ANDROID_NS}theme") == "@style/Theme.Demo.NoActionBar"

    def test_internet_permission(self, demo_project):
        root = ET.fromstring(manifest_generator.generate(demo_project).encode("utf-8"))

        permissions = [p.get(f"{ANDROID_NS}name") for p in root.findall("uses-permission")]
        assert permissions == ["android.permission.INTERNET"]


# =============================================================================
# build.gradle
# =============================================================================


class TestBuildConfigGenerator:

    def test_defaults(self):
        gradle = build_config_generator.generate(ProjectSettings())

        assert "namespace 'com.androidbuilder.app'" in gradle
        assert 'applicationId "com.androidbuilder.app"' in gradle
        assert "compileSdk 34" in gradle
        assert "targetSdk 34" in gradle
        assert "minSdk 21" in gradle
        assert "versionCode 1" in gradle
        assert 'versionName "1.0.0"' in gradle

    def test_settings_applied(self):
        gradle = build_config_generator.generate(ProjectSettings.model_validate({
            "targetSdk": "33",
            "minSdk": "24",
            "packageName": "com.example.login",
            "versionCode": "7",
            "versionName": "2.1.0",
        }))

        assert "compileSdk 33" in gradle
        assert "minSdk 24" in gradle
        assert 'applicationId "com.example.login"' in gradle
        assert "versionCode 7" in gradle
        assert 'versionName "2.1.0"' in gradle

    def test_fixed_dependencies(self):
        gradle = build_config_generator.generate(ProjectSettings())

        for dependency in filter(None, DEPENDENCIES):
            assert f"    {dependency}\n" in gradle
        assert gradle.count("{") == gradle.count("}")


# =============================================================================
# strings.xml
# =============================================================================


class TestResourceGenerator:

    def test_app_identity_entries(self):
        project = ProjectRecord(id="1", name="Demo", description="A demo app")

        strings = _strings(resource_generator.generate(project))

        assert strings == {"app_name": "Demo", "app_description": "A demo app"}

    def test_text_entry(self, demo_project):
        strings = _strings(resource_generator.generate(demo_project))

        assert strings["button_1_text"] == "Go"

    def test_text_takes_priority_over_hint(self, component):
        project = ProjectRecord.model_validate({
            "id": "1",
            "name": "Demo",
            "components": [component("EditText", text="Go", hint="ignored")],
        })

        document = resource_generator.generate(project)

        assert _strings(document)["edittext_1_text"] == "Go"
        assert "edittext_1_hint" not in document
        assert "ignored" not in document

    def test_hint_used_without_text(self, component):
        project = ProjectRecord.model_validate({
            "id": "1",
            "name": "Demo",
            "components": [component("EditText", hint="Email")],
        })

        assert _strings(resource_generator.generate(project))["edittext_1_hint"] == "Email"

    def test_empty_text_falls_through_to_hint(self, component):
        project = ProjectRecord.model_validate({
            "id": "1",
            "name": "Demo",
            "components": [component("EditText", text="", hint="Email")],
        })

        strings = _strings(resource_generator.generate(project))

        assert "edittext_1_text" not in strings
        assert strings["edittext_1_hint"] == "Email"

    def test_component_without_text_contributes_nothing(self, component):
        project = ProjectRecord.model_validate({
            "id": "1",
            "name": "Demo",
            "components": [
                component("ImageView", scaleType="center"),
                component("Button", text="Next"),
            ],
        })

        strings = _strings(resource_generator.generate(project))

        assert set(strings) == {"app_name", "app_description", "button_2_text"}

    def test_component_string_resource_none(self, component):
        project = ProjectRecord.model_validate({
            "id": "1", "name": "Demo", "components": [component("Switch", checked=True)],
        })

        assert component_string_resource(project.components[0], "switch_1") is None

    def test_unescaped_by_default(self):
        project = ProjectRecord(id="1", name="Fish & Chips")

        assert '<string name="app_name">Fish & Chips</string>' in resource_generator.generate(project)

    def test_escaped_when_enabled(self):
        project = ProjectRecord(id="1", name="Fish & Chips <3")

        document = resource_generator.generate(project, escape_values=True)

        assert _strings(document)["app_name"] == "Fish & Chips <3"


# =============================================================================
# README.md
# =============================================================================


class TestReadmeGenerator:

    def test_metadata(self, login_project_data):
        readme = readme_generator.generate(ProjectRecord.model_validate(login_project_data))

        assert readme.startswith("# Login Screen\n\nSign-in form\n")
        assert "- Package: com.example.login" in readme
        assert "- Target SDK: 33" in readme
        assert "- Min SDK: 24" in readme
        assert "- Components: 4" in readme

    def test_component_list_uses_display_names(self, login_project_data):
        readme = readme_generator.generate(ProjectRecord.model_validate(login_project_data))

        assert "- TextView (Text View)\n- EditText (Edit Text)\n- Button (Button)\n- ImageView (Image View)" in readme

    def test_display_name_defaults_to_kind(self, demo_project):
        readme = readme_generator.generate(demo_project)

        assert "- Button (Button)" in readme
        assert "- Components: 1" in readme
