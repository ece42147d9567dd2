"""Tests for filesystem inspection"""

from dev_start.models.environment import VenvState
from dev_start.services.workspace_service import (
    check_directories,
    find_virtualenvs,
    has_env_file,
)


def make_venv(root, name):
    (root / name / "bin").mkdir(parents=True)
    (root / name / "bin" / "activate").write_text("")


class TestFindVirtualenvs:
    """Test virtualenv discovery."""

    def test_none(self, project_dir):
        discovery = find_virtualenvs(project_dir, {})
        assert discovery.candidates == []
        assert discovery.state is VenvState.NONE

    def test_single(self, project_dir):
        make_venv(project_dir, "venv")
        (project_dir / "src").mkdir()
        discovery = find_virtualenvs(project_dir, {})
        assert discovery.candidates == ["venv"]
        assert discovery.state is VenvState.SINGLE
        assert discovery.active is None

    def test_multiple_sorted(self, project_dir):
        make_venv(project_dir, "venv")
        make_venv(project_dir, ".venv")
        make_venv(project_dir, "env")
        discovery = find_virtualenvs(project_dir, {})
        assert discovery.candidates == [".venv", "env", "venv"]
        assert discovery.state is VenvState.MULTIPLE

    def test_bin_without_activate_is_ignored(self, project_dir):
        (project_dir / "tools" / "bin").mkdir(parents=True)
        assert find_virtualenvs(project_dir, {}).candidates == []

    def test_nested_venv_is_ignored(self, project_dir):
        make_venv(project_dir / "backend", "venv")
        assert find_virtualenvs(project_dir, {}).candidates == []

    def test_active_from_environment(self, project_dir):
        discovery = find_virtualenvs(project_dir, {"VIRTUAL_ENV": "/tmp/venv"})
        assert discovery.active == "/tmp/venv"

    def test_empty_variable_is_inactive(self, project_dir):
        assert find_virtualenvs(project_dir, {"VIRTUAL_ENV": ""}).active is None

    def test_missing_root(self, temp_dir):
        assert find_virtualenvs(temp_dir / "missing", {}).candidates == []


class TestCheckDirectories:
    """Test directory presence."""

    def test_missing_in_list_order(self, project_dir):
        (project_dir / "src").mkdir()
        present, optional, missing = check_directories(project_dir)
        assert present == ["src"]
        assert optional == []
        assert missing == ["tests", "docs"]

    def test_optional_present(self, project_dir):
        (project_dir / "data").mkdir()
        (project_dir / "scripts").mkdir()
        _, optional, missing = check_directories(project_dir)
        assert optional == ["scripts", "data"]
        assert missing == ["src", "tests", "docs"]

    def test_file_is_not_a_directory(self, project_dir):
        (project_dir / "docs").write_text("")
        _, _, missing = check_directories(project_dir)
        assert "docs" in missing


class TestHasEnvFile:
    """Test .env detection."""

    def test_present(self, project_dir):
        (project_dir / ".env").write_text("")
        assert has_env_file(project_dir) is True

    def test_absent(self, project_dir):
        (project_dir / ".env.example").write_text("")
        assert has_env_file(project_dir) is False
