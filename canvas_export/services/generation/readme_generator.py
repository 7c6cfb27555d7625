"""
Summary Generator - README.md
"""
from canvas_export.models.schemas import ProjectRecord


README_TEMPLATE = """# {name}

{description}

## Project Details
- Package: {package_name}
- Target SDK: {target_sdk}
- Min SDK: {min_sdk}
- Components: {component_count}

## Generated by AndroidBuilder AI
This project was created using AndroidBuilder AI - an AI-powered drag-and-drop Android app builder.

## Setup Instructions
1. Open this project in Android Studio
2. Sync project with Gradle files
3. Run the app on an emulator or device

## Components Used
{component_list}
"""


class ReadmeGenerator:
    """Human-readable summary of the exported project"""

    def generate(self, project: ProjectRecord) -> str:
        settings = project.settings
        component_list = "\n".join(
            f"- {component.kind} ({component.display_name})"
            for component in project.components
        )
        return README_TEMPLATE.format(
            name=project.name or "",
            description=project.description,
            package_name=settings.resolved_package_name,
            target_sdk=settings.resolved_target_sdk,
            min_sdk=settings.resolved_min_sdk,
            component_count=len(project.components),
            component_list=component_list,
        )


readme_generator = ReadmeGenerator()
