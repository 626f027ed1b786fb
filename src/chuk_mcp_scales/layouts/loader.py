"""
Layout loader - discovers and loads drill layouts.

Layouts can come from:
1. Built-in library (shipped with package)
2. Project layouts (user's project/layouts directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_scales.models.layout import DEFAULT_LAYOUT, ExerciseLayout

logger = logging.getLogger(__name__)


class LayoutLoader:
    """
    Discovers and loads layout definitions.

    Layouts are loaded from YAML files in the library and project directories.
    Project layouts override library layouts with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the layout loader.

        Args:
            library_path: Path to built-in layout library
            project_path: Path to project layouts directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ExerciseLayout] = {}

    def list_layouts(self) -> list[ExerciseLayout]:
        """
        List all available layouts, project layouts taking precedence.
        """
        layouts: dict[str, ExerciseLayout] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                layout = self._load_layout_file(path)
                if layout:
                    layouts[layout.name] = layout

        return list(layouts.values())

    def get_layout(self, name: str | None = None) -> ExerciseLayout | None:
        """
        Get a layout by name.

        Project layouts take precedence over library layouts. With no
        name the standard layout is returned.

        Args:
            name: Layout name

        Returns:
            ExerciseLayout if found, None otherwise
        """
        if not name:
            return self.get_layout(DEFAULT_LAYOUT.name) or DEFAULT_LAYOUT

        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                layout = self._load_layout_file(path)
                if layout:
                    self._cache[name] = layout
                    return layout

        return None

    def _load_layout_file(self, path: Path) -> ExerciseLayout | None:
        """Load a layout from a YAML file; unreadable files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning("Skipping layout %s: expected a mapping", path)
                return None
            data.setdefault("name", path.stem)
            return ExerciseLayout(**data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning("Skipping layout %s: %s", path, e)
            return None

    def clear_cache(self) -> None:
        """Clear the layout cache."""
        self._cache.clear()
