"""Pytest fixtures for dev-start tests"""
import io
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import git
import pytest
from rich.console import Console

from dev_start.services.port_service import PortProbe
from dev_start.services.repository_service import RepositoryStatusProvider


class FakeRepository(RepositoryStatusProvider):
    """In-memory RepositoryStatusProvider."""

    def __init__(
        self,
        work_tree: bool = True,
        name: str = "project",
        changes: Optional[List[str]] = None,
        branch: Optional[str] = "main",
        fetch_ok: bool = True,
        behind: int = 0,
    ):
        self.work_tree = work_tree
        self.name = name
        self.changes = changes or []
        self.branch = branch
        self.fetch_ok = fetch_ok
        self.behind = behind
        self.calls: List[str] = []

    def is_work_tree(self) -> bool:
        self.calls.append("is_work_tree")
        return self.work_tree

    def repository_name(self) -> str:
        return self.name

    def is_dirty(self) -> bool:
        self.calls.append("is_dirty")
        return bool(self.changes)

    def changed_paths(self) -> List[str]:
        return list(self.changes)

    def current_branch(self) -> Optional[str]:
        return self.branch

    def fetch(self, branch: str) -> bool:
        self.calls.append(f"fetch {branch}")
        return self.fetch_ok

    def commits_behind(self, branch: str) -> int:
        return self.behind


class FakePortProbe(PortProbe):
    """PortProbe answering from a dict and remembering what was asked."""

    def __init__(self, listeners: Optional[Dict[int, str]] = None):
        self.listeners = listeners or {}
        self.probed: List[int] = []

    def listener(self, port: int) -> Optional[str]:
        self.probed.append(port)
        return self.listeners.get(port)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_dir(temp_dir):
    """An empty project directory."""
    path = temp_dir / "project"
    path.mkdir()
    return path


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'fetch': True,
        'fetch_timeout': 10.0,
        'probe_timeout': 5.0,
        'remote_name': 'origin',
    }


@pytest.fixture
def fake_repository():
    """A clean, up-to-date fake repository."""
    return FakeRepository()


@pytest.fixture
def fake_probe():
    """A port probe that finds every port free."""
    return FakePortProbe()


@pytest.fixture
def output():
    """A console that records plain text."""
    return Console(file=io.StringIO(), width=200, color_system=None, emoji=False)


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed timestamp."""
    return lambda: datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def make_reporter(project_dir, mock_config, fake_repository, fake_probe, output, fixed_clock):
    """Factory for reporters wired to fakes."""
    from dev_start.core.reporter import EnvironmentReporter

    def _make(verbose=False, repository=None, probe=None, environ=None, **overrides):
        config = dict(mock_config, verbose=verbose, **overrides)
        return EnvironmentReporter(
            project_dir,
            config,
            repository=repository or fake_repository,
            port_probe=probe or fake_probe,
            output=output,
            environ={} if environ is None else environ,
            clock=fixed_clock,
        )

    return _make


@pytest.fixture
def report_lines(output):
    """Return the lines printed to the recording console so far."""
    def _lines():
        return output.file.getvalue().splitlines()

    return _lines


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def cloned_repo(git_repo, temp_dir):
    """Clone of git_repo, with git_repo as its origin."""
    clone = git.Repo.clone_from(git_repo.working_dir, temp_dir / "clone")
    clone.config_writer().set_value("user", "name", "Test User").release()
    clone.config_writer().set_value("user", "email", "test@example.com").release()

    yield clone

    clone.close()
