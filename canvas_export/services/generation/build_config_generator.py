"""
Build Config Generator - app/build.gradle

The dependency block is fixed. It is not derived from the widgets placed on
the canvas.
"""
from typing import List

from canvas_export.models.schemas import ProjectSettings

DEPENDENCIES: List[str] = [
    "implementation 'androidx.appcompat:appcompat:1.6.1'",
    "implementation 'com.google.android.material:material:1.11.0'",
    "implementation 'androidx.constraintlayout:constraintlayout:2.1.4'",
    "implementation 'androidx.core:core-ktx:1.12.0'",
    "implementation 'androidx.activity:activity:1.8.2'",
    "",
    "testImplementation 'junit:junit:4.13.2'",
    "androidTestImplementation 'androidx.test.ext:junit:1.1.5'",
    "androidTestImplementation 'androidx.test.espresso:espresso-core:3.5.1'",
]

BUILD_GRADLE_TEMPLATE = """plugins {{
    id 'com.android.application'
}}

android {{
    namespace '{package_name}'
    compileSdk {target_sdk}

    defaultConfig {{
        applicationId "{package_name}"
        minSdk {min_sdk}
        targetSdk {target_sdk}
        versionCode {version_code}
        versionName "{version_name}"

        testInstrumentationRunner "androidx.test.runner.AndroidJUnitRunner"
    }}

    buildTypes {{
        release {{
            minifyEnabled false
            proguardFiles getDefaultProguardFile('proguard-android-optimize.txt'), 'proguard-rules.pro'
        }}
    }}

    compileOptions {{
        sourceCompatibility JavaVersion.VERSION_1_8
        targetCompatibility JavaVersion.VERSION_1_8
    }}

    buildFeatures {{
        viewBinding true
    }}
}}

dependencies {{
{dependencies}
}}"""


class BuildConfigGenerator:
    """Generates the module-level Gradle build script"""

    def generate(self, settings: ProjectSettings) -> str:
        dependencies = "\n".join(
            f"    {line}" if line else "" for line in DEPENDENCIES
        )
        return BUILD_GRADLE_TEMPLATE.format(
            package_name=settings.resolved_package_name,
            target_sdk=settings.resolved_target_sdk,
            min_sdk=settings.resolved_min_sdk,
            version_code=settings.resolved_version_code,
            version_name=settings.resolved_version_name,
            dependencies=dependencies,
        )


build_config_generator = BuildConfigGenerator()
