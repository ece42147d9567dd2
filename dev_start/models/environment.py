"""Environment inspection models and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class Marker(Enum):
    """Marker files whose presence hints at a project's technology stack."""
    MANAGE_PY = "manage.py"
    PACKAGE_JSON = "package.json"
    REQUIREMENTS_TXT = "requirements.txt"
    PYPROJECT_TOML = "pyproject.toml"
    DOCKERFILE = "Dockerfile"
    DOCKER_COMPOSE = "docker-compose.yml"
    APP_PY = "app.py"
    MAIN_PY = "main.py"
    # Not a file: requirements.txt names the web framework
    WEB_FRAMEWORK = "web-framework"


class VenvState(Enum):
    """Outcome of virtual environment discovery."""
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class VenvDiscovery:
    """Virtual environments found beside the project."""
    candidates: List[str] = field(default_factory=list)  # Directory names, sorted
    active: Optional[str] = None  # Value of VIRTUAL_ENV, if set

    @property
    def state(self) -> VenvState:
        if not self.candidates:
            return VenvState.NONE
        if len(self.candidates) == 1:
            return VenvState.SINGLE
        return VenvState.MULTIPLE


@dataclass(frozen=True)
class BusyPort:
    """A candidate port with a process listening on it."""
    port: int
    process: str

    def __str__(self) -> str:
        return f"{self.port}: {self.process}"
