"""Filesystem inspection: virtual environments, directory layout, env files"""

from pathlib import Path
from typing import List, Mapping, Tuple, Union

from dev_start.constants import (
    ENV_FILE,
    OPTIONAL_DIRECTORIES,
    STANDARD_DIRECTORIES,
    VENV_ACTIVATE_PATH,
    VIRTUAL_ENV_VAR,
)
from dev_start.models.environment import VenvDiscovery
from dev_start.logging_config import get_logger

logger = get_logger(__name__)


def find_virtualenvs(root_dir: Union[str, Path], environ: Mapping[str, str]) -> VenvDiscovery:
    """Find immediate subdirectories that contain an activation script.

    Args:
        root_dir: Project root directory
        environ: Process environment, consulted for an active virtualenv

    Returns:
        VenvDiscovery with candidate names in sorted order
    """
    root = Path(root_dir)
    try:
        children = sorted(p for p in root.iterdir() if p.is_dir())
    except OSError as e:
        logger.debug(f"Could not list {root}: {e}")
        children = []

    candidates = [child.name for child in children if (child / VENV_ACTIVATE_PATH).is_file()]
    active = environ.get(VIRTUAL_ENV_VAR) or None
    logger.debug(f"Virtualenv candidates: {candidates}, active: {active}")
    return VenvDiscovery(candidates=candidates, active=active)


def check_directories(root_dir: Union[str, Path]) -> Tuple[List[str], List[str], List[str]]:
    """Check the standard and optional directories.

    Returns:
        (present standard, present optional, missing standard), each in
        list order. Missing optional directories are not reported.
    """
    root = Path(root_dir)
    present = [name for name in STANDARD_DIRECTORIES if (root / name).is_dir()]
    optional = [name for name in OPTIONAL_DIRECTORIES if (root / name).is_dir()]
    missing = [name for name in STANDARD_DIRECTORIES if name not in present]
    return present, optional, missing


def has_env_file(root_dir: Union[str, Path]) -> bool:
    """Check whether the project root has a .env file."""
    return (Path(root_dir) / ENV_FILE).is_file()
