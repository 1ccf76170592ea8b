#!/usr/bin/env python3
"""
export_curriculum.py - Build the curriculum for a theme and write it as JSON.

Lets content authors check what a theme (and optionally a YAML content file)
turns into before it reaches players.

Usage:
  python scripts/export_curriculum.py --theme Cat
  python scripts/export_curriculum.py --theme Horse --templates content/first_words.yaml --output data/horse.json
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from echopath.classroom import build_curriculum
from echopath.config import load_settings
from echopath.utils import load_lesson_templates

logger = logging.getLogger(__name__)


def export_curriculum(theme: str, templates_path: Path | None, output: Path | None) -> str:
    """
    Build and serialize a curriculum.

    Args:
        theme: Animal name
        templates_path: Optional YAML content file
        output: Optional output file (stdout when None)

    Returns:
        The JSON text
    """
    templates = load_lesson_templates(templates_path) if templates_path else None
    curriculum = build_curriculum(theme, templates)
    text = curriculum.model_dump_json(indent=2)

    for unit in curriculum.units:
        logger.info(f"Unit: {unit.title}")
        for lesson in unit.lessons:
            lengths = [len(level.words) for level in lesson.levels]
            logger.info(f"  {lesson.name}: {len(lesson.levels)} levels, words per level {lengths}")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Saved curriculum to {output}")
    else:
        print(text)
    return text


def main():
    parser = argparse.ArgumentParser(
        description="Build the EchoPath curriculum for a theme and export it as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--theme", help="Animal name (default: settings default_theme)")
    parser.add_argument("--templates", type=Path, help="YAML lesson content file")
    parser.add_argument("--output", type=Path, help="Output JSON file (default: stdout)")
    args = parser.parse_args()

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
    theme = args.theme or settings.default_theme
    templates_path = args.templates or settings.lesson_templates_path

    try:
        export_curriculum(theme, templates_path, args.output)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Failed to export curriculum: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
