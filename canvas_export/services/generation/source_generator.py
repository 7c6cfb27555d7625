"""
Source Generator - MainActivity.java
"""
from typing import Optional, Sequence

from canvas_export.models.schemas import ProjectRecord
from canvas_export.services.generation.identifiers import assign_identifiers

BINDING_INDENT = "        "

MAIN_ACTIVITY_TEMPLATE = """package {package_name};

import android.os.Bundle;
import androidx.appcompat.app.AppCompatActivity;
import androidx.core.graphics.Insets;
import androidx.core.view.ViewCompat;
import androidx.core.view.WindowInsetsCompat;

public class MainActivity extends AppCompatActivity {{

    @Override
    protected void onCreate(Bundle savedInstanceState) {{
        super.onCreate(savedInstanceState);
        setContentView(R.layout.activity_main);

        // Handle window insets for edge-to-edge display
        ViewCompat.setOnApplyWindowInsetsListener(findViewById(R.id.main), (v, insets) -> {{
            Insets systemBars = insets.getInsets(WindowInsetsCompat.Type.systemBars());
            v.setPadding(systemBars.left, systemBars.top, systemBars.right, systemBars.bottom);
            return insets;
        }});

        // Initialize your UI components here
        initializeComponents();
    }}

    private void initializeComponents() {{
        // TODO: Add component initialization and event handling
{bindings}
    }}
}}"""


class SourceGenerator:
    """Generates the entry-point activity with one view binding per component"""

    def generate(self, project: ProjectRecord, identifiers: Optional[Sequence[str]] = None) -> str:
        if identifiers is None:
            identifiers = assign_identifiers(project.components)

        bindings = []
        for component, identifier in zip(project.components, identifiers):
            bindings.append(
                f"\n{BINDING_INDENT}// {component.kind} component\n"
                f"{BINDING_INDENT}{component.kind} {identifier} = findViewById(R.id.{identifier});"
            )

        return MAIN_ACTIVITY_TEMPLATE.format(
            package_name=project.settings.resolved_package_name,
            bindings="".join(bindings),
        )


source_generator = SourceGenerator()
