"""Development environment report"""

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

from rich.console import Console
from rich.markup import escape

from dev_start.config import Config
from dev_start.constants import (
    BANNER_TIME_FORMAT,
    DEFAULT_PORTS,
    ENV_FILE,
    INDENT,
    SYMBOL_ERROR,
    SYMBOL_FOLDER,
    SYMBOL_INFO,
    SYMBOL_OK,
    SYMBOL_PYTHON,
    SYMBOL_ROCKET,
    SYMBOL_SEARCH,
    SYMBOL_TIP,
    SYMBOL_WARNING,
)
from dev_start.exceptions import NotARepositoryError
from dev_start.formatters import (
    format_activate_command,
    format_commit_push_command,
    format_create_venv_command,
    format_kill_command,
    format_mkdir_command,
    format_port_list,
)
from dev_start.models.environment import VenvState
from dev_start.services.marker_service import (
    candidate_ports,
    detect_project_markers,
    detect_project_types,
    quick_start_commands,
)
from dev_start.services.port_service import LsofPortProbe, PortProbe, find_busy_ports
from dev_start.services.repository_service import (
    GitRepositoryStatusProvider,
    RepositoryStatusProvider,
)
from dev_start.services.workspace_service import (
    check_directories,
    find_virtualenvs,
    has_env_file,
)
from dev_start.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


class EnvironmentReporter:
    """Runs the environment checks in order and prints the report."""

    def __init__(
        self,
        root_dir: Union[str, Path],
        config: Union[Config, dict],
        repository: Optional[RepositoryStatusProvider] = None,
        port_probe: Optional[PortProbe] = None,
        output: Optional[Console] = None,
        environ: Optional[Mapping[str, str]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the reporter.

        Args:
            root_dir: Project root; every check is relative to it
            config: Configuration dict or Config object
            repository: Git status provider (defaults to GitPython)
            port_probe: Port probe (defaults to lsof)
            output: Console to print to (defaults to the module console)
            environ: Environment mapping (defaults to os.environ)
            clock: Source of the banner timestamp
        """
        self.root_dir = Path(root_dir)
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.verbose = self.config.verbose
        self.repository = repository or GitRepositoryStatusProvider(str(self.root_dir), self.config)
        self.port_probe = port_probe or LsofPortProbe(self.config)
        self.console = output or console
        self.environ = os.environ if environ is None else environ
        self.clock = clock

    def _print(self, message: str = "") -> None:
        """Print one report line without wrapping."""
        self.console.print(message, soft_wrap=True, highlight=False)

    def _detail(self, text: str) -> None:
        """Print an indented line of literal text."""
        self._print(f"{INDENT}{escape(text)}")

    def check_repository(self) -> None:
        """Ensure the project is inside a Git working tree.

        Raises:
            NotARepositoryError: After reporting, if it is not
        """
        logger.debug(f"Checking {self.root_dir} is a git work tree")
        if not self.repository.is_work_tree():
            self._print(f"[red]{SYMBOL_ERROR} Not a git repository[/red]")
            raise NotARepositoryError(str(self.root_dir))
        if self.verbose:
            name = self.repository.repository_name()
            self._print(f"{SYMBOL_FOLDER} Project: {escape(name)}")

    def check_git_status(self) -> None:
        """Report uncommitted changes, or how far behind the remote we are."""
        remote = self.config.remote_name
        if self.repository.is_dirty():
            self._print(f"[yellow]{SYMBOL_WARNING} Uncommitted changes[/yellow]")
            if self.verbose:
                for path in self.repository.changed_paths():
                    self._detail(path)
                self._print(f"{SYMBOL_TIP} Commit or stash your changes before starting new work")
            else:
                self._detail(format_commit_push_command(remote))
            return

        if self.verbose:
            self._print(f"[green]{SYMBOL_OK} Working tree clean[/green]")

        branch = self.repository.current_branch()
        if not branch or not self.config.fetch:
            logger.debug(f"Skipping remote check (branch={branch}, fetch={self.config.fetch})")
            return
        if not self.repository.fetch(branch):
            return

        behind = self.repository.commits_behind(branch)
        if behind > 0:
            self._print(
                f"[yellow]{SYMBOL_WARNING} Behind {escape(remote)}/{escape(branch)} "
                f"by {behind} commit(s)[/yellow]"
            )
            if self.verbose:
                self._print(f"{SYMBOL_TIP} Pull the latest changes before you start:")
            self._detail("git pull")
        elif self.verbose:
            self._print(f"[green]{SYMBOL_OK} Up to date with {escape(remote)}/{escape(branch)}[/green]")

    def check_virtualenv(self) -> None:
        """Report on virtual environments in the project root."""
        discovery = find_virtualenvs(self.root_dir, self.environ)
        state = discovery.state

        if state is VenvState.SINGLE:
            name = discovery.candidates[0]
            self._print(f"[green]{SYMBOL_OK} Virtual environment found: {escape(name)}[/green]")
            if not discovery.active:
                if self.verbose:
                    self._print(f"{SYMBOL_TIP} Activate it before installing dependencies:")
                    self._detail(format_activate_command(name))
                else:
                    self._print(f"{SYMBOL_PYTHON} Activate: {escape(format_activate_command(name))}")
            elif self.verbose:
                self._print(f"[green]{SYMBOL_OK} Active: {escape(discovery.active)}[/green]")

        elif state is VenvState.NONE:
            self._print(f"[yellow]{SYMBOL_WARNING} No virtual environment found[/yellow]")
            if self.verbose:
                self._print(f"{SYMBOL_TIP} Create one to keep dependencies isolated:")
                self._detail(format_create_venv_command())
            else:
                self._print(f"{SYMBOL_PYTHON} Create: {escape(format_create_venv_command())}")

        else:
            self._print(f"[yellow]{SYMBOL_WARNING} Multiple virtual environments found[/yellow]")
            if self.verbose:
                for name in discovery.candidates:
                    self._detail(f"- {name}")
                self._print(f"{SYMBOL_TIP} Keep only one virtual environment to avoid confusion")

    def check_structure(self) -> None:
        """Report on standard and optional directories."""
        present, optional, missing = check_directories(self.root_dir)
        if self.verbose:
            for name in present:
                self._print(f"[green]{SYMBOL_OK} {escape(name)}/[/green]")
            for name in optional:
                self._print(f"[green]{SYMBOL_OK} {escape(name)}/ (optional)[/green]")

        if not missing:
            return
        command = escape(format_mkdir_command(missing))
        if self.verbose:
            self._print(f"[yellow]{SYMBOL_WARNING} Missing directories: {escape(' '.join(missing))}[/yellow]")
            self._print(f"{SYMBOL_TIP} Create them with:")
            self._print(f"{INDENT}{command}")
        else:
            self._print(f"{SYMBOL_FOLDER} Create: {command}")

    def check_project_type(self) -> None:
        """Report detected project types (verbose only)."""
        if not self.verbose:
            return
        types = detect_project_types(detect_project_markers(self.root_dir))
        if types:
            self._print(f"{SYMBOL_SEARCH} Detected: {', '.join(types)}")
        else:
            self._print(f"{SYMBOL_SEARCH} Generic project (no framework markers found)")

    def check_ports(self) -> None:
        """Report busy development ports."""
        ports = candidate_ports(detect_project_markers(self.root_dir))
        logger.debug(f"Probing ports: {ports}")
        busy = find_busy_ports(ports, self.port_probe)

        if busy:
            self._print(f"[yellow]{SYMBOL_WARNING} Ports in use:[/yellow]")
            for entry in busy:
                self._detail(str(entry))
            if self.verbose:
                self._print(f"{SYMBOL_TIP} Stop those processes or run your server on another port")
            else:
                self._print(f"{INDENT}Kill: {escape(format_kill_command())}")
        elif self.verbose:
            self._print(f"[green]{SYMBOL_OK} Ports {format_port_list(DEFAULT_PORTS)} available[/green]")

    def check_env_file(self) -> None:
        """Report whether a .env file exists (verbose only)."""
        if not self.verbose:
            return
        if has_env_file(self.root_dir):
            self._print(f"[green]{SYMBOL_OK} {ENV_FILE} file found[/green]")
        else:
            self._print(f"{SYMBOL_INFO} No {ENV_FILE} file")

    def show_quick_start(self) -> None:
        """Print quick-start commands for the detected stacks."""
        commands = quick_start_commands(detect_project_markers(self.root_dir))

        if self.verbose:
            self._print(f"{SYMBOL_ROCKET} Quick start:")
            for label, command in commands:
                self._detail(f"{label}: {command}")
            self._detail("Check status: git status")
            self._detail("Leave venv: deactivate")
            return

        header_shown = False
        for label, command in commands:
            if not header_shown:
                self._print(f"{SYMBOL_ROCKET} Quick start:")
                header_shown = True
            self._detail(f"{label}: {command}")

    def run(self) -> int:
        """Run every check in order.

        Returns:
            Exit status: 1 if the project is not in a Git working tree, else 0
        """
        if self.verbose:
            timestamp = self.clock().strftime(BANNER_TIME_FORMAT)
            self._print(f"[bold]{SYMBOL_SEARCH} Dev environment check - {timestamp}[/bold]")

        try:
            self.check_repository()
        except NotARepositoryError as e:
            logger.debug(str(e))
            return 1

        self.check_git_status()
        self.check_virtualenv()
        self.check_structure()
        self.check_project_type()
        self.check_ports()
        self.check_env_file()
        self.show_quick_start()

        if self.verbose:
            self._print(f"[green]{SYMBOL_OK} Environment check complete[/green]")
        return 0
