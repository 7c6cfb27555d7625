"""
Manifest Generator - AndroidManifest.xml
"""
import re

from canvas_export.models.schemas import ProjectRecord

MANIFEST_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:tools="http://schemas.android.com/tools"
    package="{package_name}"
    android:versionCode="{version_code}"
    android:versionName="{version_name}">

    <uses-permission android:name="android.permission.INTERNET" />

    <application
        android:allowBackup="true"
        android:dataExtractionRules="@xml/data_extraction_rules"
        android:fullBackupContent="@xml/backup_rules"
        android:icon="@mipmap/ic_launcher"
        android:label="@string/app_name"
        android:theme="@style/{theme_name}"
        tools:targetApi="31">

        <activity
            android:name=".MainActivity"
            android:exported="true"
            android:theme="@style/{theme_name}.NoActionBar">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
    </application>

</manifest>"""


def theme_style_name(project_name: str) -> str:
    """``My Cool App`` -> ``Theme.MyCoolApp``"""
    return "Theme." + re.sub(r"\s+", "", project_name)


class ManifestGenerator:
    """Generates the application manifest"""

    def generate(self, project: ProjectRecord) -> str:
        settings = project.settings
        return MANIFEST_TEMPLATE.format(
            package_name=settings.resolved_package_name,
            version_code=settings.resolved_version_code,
            version_name=settings.resolved_version_name,
            theme_name=theme_style_name(project.name or ""),
        )


manifest_generator = ManifestGenerator()
