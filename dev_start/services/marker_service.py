"""Marker file detection shared by project-type, port and quick-start checks"""

from pathlib import Path
from typing import FrozenSet, List, Tuple, Union

from dev_start.constants import (
    COMPOSE_PORT,
    DEFAULT_PORTS,
    DJANGO_PORT,
    FLASK_PORT,
    NODE_PORT,
    WEB_FRAMEWORK_REQUIREMENT,
)
from dev_start.models.environment import Marker
from dev_start.logging_config import get_logger

logger = get_logger(__name__)

FILE_MARKERS: Tuple[Marker, ...] = tuple(m for m in Marker if m is not Marker.WEB_FRAMEWORK)

# Evaluated in this order; Python appears twice on purpose
PROJECT_TYPES: List[Tuple[Marker, str]] = [
    (Marker.MANAGE_PY, "Django"),
    (Marker.PACKAGE_JSON, "Node.js"),
    (Marker.REQUIREMENTS_TXT, "Python"),
    (Marker.PYPROJECT_TOML, "Python"),
    (Marker.DOCKERFILE, "Docker"),
    (Marker.DOCKER_COMPOSE, "Docker Compose"),
]

QUICK_START: List[Tuple[Marker, str, str]] = [
    (Marker.MANAGE_PY, "Django", "python manage.py runserver"),
    (Marker.PACKAGE_JSON, "Node.js", "npm install && npm start"),
    (Marker.REQUIREMENTS_TXT, "Python", "pip install -r requirements.txt"),
]


def _requirements_name_web_framework(requirements: Path) -> bool:
    """Check whether requirements.txt mentions the web framework."""
    try:
        text = requirements.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Could not read {requirements}: {e}")
        return False
    return WEB_FRAMEWORK_REQUIREMENT in text.lower()


def detect_project_markers(root_dir: Union[str, Path]) -> FrozenSet[Marker]:
    """Detect which marker files exist at the project root.

    Args:
        root_dir: Project root directory

    Returns:
        Set of markers present. Marker.WEB_FRAMEWORK is included when
        requirements.txt names the web framework or app.py/main.py exists.
    """
    root = Path(root_dir)
    found = {marker for marker in FILE_MARKERS if (root / marker.value).is_file()}

    if Marker.REQUIREMENTS_TXT in found and _requirements_name_web_framework(
        root / Marker.REQUIREMENTS_TXT.value
    ):
        found.add(Marker.WEB_FRAMEWORK)
    if Marker.APP_PY in found or Marker.MAIN_PY in found:
        found.add(Marker.WEB_FRAMEWORK)

    logger.debug(f"Markers in {root}: {sorted(m.value for m in found)}")
    return frozenset(found)


def detect_project_types(markers: FrozenSet[Marker]) -> List[str]:
    """Map markers to project type labels, keeping order and duplicates."""
    return [label for marker, label in PROJECT_TYPES if marker in markers]


def candidate_ports(markers: FrozenSet[Marker]) -> List[int]:
    """Choose which ports are worth probing for this project.

    Falls back to DEFAULT_PORTS when no framework marker is present, so the
    result is never empty.
    """
    ports = []
    if Marker.WEB_FRAMEWORK in markers:
        ports.append(FLASK_PORT)
    if Marker.PACKAGE_JSON in markers:
        ports.append(NODE_PORT)
    if Marker.MANAGE_PY in markers:
        ports.append(DJANGO_PORT)
    if Marker.DOCKER_COMPOSE in markers:
        ports.append(COMPOSE_PORT)
    return ports or list(DEFAULT_PORTS)


def quick_start_commands(markers: FrozenSet[Marker]) -> List[Tuple[str, str]]:
    """Return (label, command) pairs for the detected stacks, in fixed order."""
    return [(label, command) for marker, label, command in QUICK_START if marker in markers]
