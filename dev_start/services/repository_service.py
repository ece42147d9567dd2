"""Git repository status queries"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union, TYPE_CHECKING

import git
from git.exc import GitError

from dev_start.exceptions import RepositoryQueryError
from dev_start.logging_config import get_logger

if TYPE_CHECKING:
    from dev_start.config import Config

logger = get_logger(__name__)


class RepositoryStatusProvider(ABC):
    """Read-only view of the version-control state of a project."""

    @abstractmethod
    def is_work_tree(self) -> bool:
        """Check whether the project is inside a working tree."""

    @abstractmethod
    def repository_name(self) -> str:
        """Base name of the working tree's top-level directory."""

    @abstractmethod
    def is_dirty(self) -> bool:
        """Check for uncommitted changes, untracked files included."""

    @abstractmethod
    def changed_paths(self) -> List[str]:
        """Short-format status lines for each changed path."""

    @abstractmethod
    def current_branch(self) -> Optional[str]:
        """Name of the checked-out branch, or None if unknown."""

    @abstractmethod
    def fetch(self, branch: str) -> bool:
        """Fetch the branch from the remote. Returns False on any failure."""

    @abstractmethod
    def commits_behind(self, branch: str) -> int:
        """Number of commits the local branch is behind its remote. 0 if unknown."""


class GitRepositoryStatusProvider(RepositoryStatusProvider):
    """RepositoryStatusProvider backed by the git binary through GitPython."""

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the provider.

        Args:
            repo_path: Path inside the project (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.remote_name = config.get('remote_name', 'origin')
        self.fetch_timeout = config.get('fetch_timeout', 10.0)

    def _get_repo(self) -> git.Repo:
        """Open the repository containing repo_path.

        Raises:
            RepositoryQueryError: If repo_path is not inside a repository
        """
        try:
            return git.Repo(self.repo_path, search_parent_directories=True)
        except GitError as e:
            raise RepositoryQueryError("open", str(e)) from e

    def is_work_tree(self) -> bool:
        try:
            repo = self._get_repo()
            return repo.git.rev_parse('--is-inside-work-tree') == 'true'
        except (RepositoryQueryError, GitError) as e:
            logger.debug(f"{self.repo_path} is not inside a work tree: {e}")
            return False

    def repository_name(self) -> str:
        repo = self._get_repo()
        return Path(repo.working_tree_dir).name

    def is_dirty(self) -> bool:
        repo = self._get_repo()
        try:
            return bool(repo.git.status('--porcelain').strip())
        except GitError as e:
            raise RepositoryQueryError("status", str(e)) from e

    def changed_paths(self) -> List[str]:
        repo = self._get_repo()
        try:
            output = repo.git.status('--short')
        except GitError as e:
            raise RepositoryQueryError("status", str(e)) from e
        return [line for line in output.splitlines() if line.strip()]

    def current_branch(self) -> Optional[str]:
        try:
            repo = self._get_repo()
            return repo.git.rev_parse('--abbrev-ref', 'HEAD')
        except (RepositoryQueryError, GitError) as e:
            logger.debug(f"Could not determine current branch: {e}")
            return None

    def fetch(self, branch: str) -> bool:
        try:
            repo = self._get_repo()
            logger.debug(f"Fetching {branch} from {self.remote_name}...")
            repo.git.fetch(
                '--quiet', self.remote_name, branch,
                kill_after_timeout=self.fetch_timeout,
            )
            return True
        except (RepositoryQueryError, GitError) as e:
            logger.debug(f"Fetch of {self.remote_name}/{branch} failed: {e}")
            return False

    def commits_behind(self, branch: str) -> int:
        try:
            repo = self._get_repo()
            count = repo.git.rev_list('--count', f"HEAD..{self.remote_name}/{branch}")
            return int(count.strip())
        except (RepositoryQueryError, GitError, ValueError) as e:
            logger.debug(f"Could not compare {branch} with {self.remote_name}: {e}")
            return 0
