"""Remediation command formatting."""

from typing import Iterable

from dev_start.constants import DEFAULT_VENV_NAME, VENV_ACTIVATE_PATH


def format_commit_push_command(remote_name: str = "origin") -> str:
    """
    Format the one-line command that commits everything and pushes.

    Example:
        'git add -A && git commit -m "WIP" && git push origin HEAD'
    """
    return f'git add -A && git commit -m "WIP" && git push {remote_name} HEAD'


def format_activate_command(venv_name: str) -> str:
    """Format the command that activates a virtual environment."""
    return f"source {venv_name}/{VENV_ACTIVATE_PATH}"


def format_create_venv_command(venv_name: str = DEFAULT_VENV_NAME) -> str:
    """Format the command that creates a virtual environment."""
    return f"python3 -m venv {venv_name}"


def format_mkdir_command(directories: Iterable[str]) -> str:
    """Format a single mkdir command for all given directories, in order."""
    return "mkdir -p " + " ".join(directories)


def format_kill_command() -> str:
    """
    Format the generic kill-by-port template.

    PORT is left for the user to substitute.
    """
    return "kill -9 $(lsof -ti:PORT)"


def format_port_list(ports: Iterable[int]) -> str:
    """Format ports as a comma separated list."""
    return ", ".join(str(port) for port in ports)
