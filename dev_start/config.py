"""Configuration handling for dev-start"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Config:
    """Immutable run configuration for dev-start, validated on creation."""

    # Report mode
    verbose: bool = False
    debug: bool = False

    # Remote sync check
    fetch: bool = True
    fetch_timeout: float = 10.0  # Seconds before the fetch is killed
    remote_name: str = "origin"

    # Port inspection
    probe_timeout: float = 5.0

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_fetch_timeout()
        self._validate_probe_timeout()
        self._validate_remote_name()

    def _validate_fetch_timeout(self):
        """Validate fetch_timeout is positive."""
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")

    def _validate_probe_timeout(self):
        """Validate probe_timeout is positive."""
        if self.probe_timeout <= 0:
            raise ValueError(f"probe_timeout must be positive, got {self.probe_timeout}")

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = set(cls.__dataclass_fields__)
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
