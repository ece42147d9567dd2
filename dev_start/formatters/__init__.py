"""Formatting utilities for dev-start.

- commands: remediation command strings printed by the report
"""

from .commands import (
    format_commit_push_command,
    format_activate_command,
    format_create_venv_command,
    format_mkdir_command,
    format_kill_command,
    format_port_list,
)

__all__ = [
    "format_commit_push_command",
    "format_activate_command",
    "format_create_venv_command",
    "format_mkdir_command",
    "format_kill_command",
    "format_port_list",
]
