"""
Content loader utility for EchoPath.

Loads YAML lesson templates (alternative curriculum content) from disk.
"""

from pathlib import Path
from typing import Any

import yaml

from echopath.schemas import UnitTemplate

# Default content directory (relative to project root)
CONTENT_DIR = Path(__file__).parent.parent.parent / "content"


def load_lesson_templates(path: Path) -> list[UnitTemplate]:
    """
    Load unit templates from a YAML file.

    Expected layout:

        units:
          - title: My Animal Friend
            lessons:
              - name: Basic Actions
                motif: action
                levels:
                  - ["{Theme}"]
                  - ["Big", "{theme}"]

    Args:
        path: YAML file to read

    Returns:
        Validated UnitTemplate list, ready for build_curriculum()

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ValueError: If the content doesn't validate
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Lesson templates not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if not isinstance(data, dict) or not data.get("units"):
        raise ValueError(f"Lesson templates must define a non-empty 'units' list: {path}")

    return [UnitTemplate.model_validate(unit) for unit in data["units"]]


def get_available_content(content_dir: Path | None = None) -> list[str]:
    """
    List all available content files.

    Args:
        content_dir: Optional custom content directory

    Returns:
        List of content names (without .yaml extension)
    """
    dir_path = content_dir or CONTENT_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
