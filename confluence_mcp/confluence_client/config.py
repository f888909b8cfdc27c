"""Client settings loading and validation.

Settings are built once at startup and handed to the APIWrapper. Secrets
come from the environment (see auth.Authenticator); optional tuning values
come from a YAML file:

    timeout: 30            # seconds per request, omitted = no timeout
    max_pages: 100         # pagination safety cap, omitted = unlimited
    max_workers: 10        # parallel child fetches
    child_page_limit: 250  # page size for child listings
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from .auth import Authenticator
from .errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Connection and tuning settings for the Confluence client.

    Attributes:
        email: Atlassian account email
        api_token: Atlassian API token
        domain: Site host, e.g. "team.atlassian.net"
        timeout: Per-request timeout in seconds (None waits indefinitely)
        max_pages: Maximum pages one pagination traversal may fetch (None = no cap)
        max_workers: Thread count for concurrent child page fetches
        child_page_limit: Page size requested from child listing endpoints
    """
    email: str
    api_token: str
    domain: str
    timeout: Optional[float] = None
    max_pages: Optional[int] = None
    max_workers: int = 10
    child_page_limit: int = 250

    @property
    def base_url(self) -> str:
        """Origin all relative API paths are joined to."""
        domain = self.domain.rstrip('/')
        if domain.startswith('http://') or domain.startswith('https://'):
            return domain
        return f"https://{domain}"

    def __repr__(self) -> str:
        return (
            f"Settings(email={self.email!r}, api_token='***', domain={self.domain!r}, "
            f"timeout={self.timeout!r}, max_pages={self.max_pages!r}, "
            f"max_workers={self.max_workers!r}, child_page_limit={self.child_page_limit!r})"
        )


class SettingsLoader:
    """Loads optional tuning values from a YAML file.

    A missing file yields an empty mapping. Malformed YAML or values of the
    wrong type raise ConfigurationError.
    """

    # Allowed keys and the validator each value must satisfy
    _FIELDS = {
        'timeout': (lambda v: v is None or (isinstance(v, (int, float)) and v > 0), "a positive number"),
        'max_pages': (lambda v: v is None or (isinstance(v, int) and v > 0), "a positive integer"),
        'max_workers': (lambda v: isinstance(v, int) and v > 0, "a positive integer"),
        'child_page_limit': (lambda v: isinstance(v, int) and 0 < v <= 250, "an integer between 1 and 250"),
    }

    @classmethod
    def load(cls, config_path: str) -> Dict[str, Any]:
        """Load and validate tuning values from a YAML file.

        Args:
            config_path: Path to the YAML settings file

        Returns:
            Dict of validated setting overrides (may be empty)

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}")

        if not content.strip():
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config must be a YAML dictionary, got {type(data).__name__}"
            )

        return cls._validate(data)

    @classmethod
    def _validate(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        overrides = {}
        for key, value in data.items():
            if key not in cls._FIELDS:
                raise ConfigurationError(f"Unknown config key '{key}'")
            # bool is an int subclass
            check, expected = cls._FIELDS[key]
            if isinstance(value, bool) or not check(value):
                raise ConfigurationError(
                    f"Config key '{key}' must be {expected}, got {value!r}"
                )
            overrides[key] = value
        return overrides


def load_settings(
    config_path: Optional[str] = None,
    authenticator: Optional[Authenticator] = None,
) -> Settings:
    """Build Settings from the environment and an optional YAML file.

    Args:
        config_path: Optional path to a YAML tuning file
        authenticator: Credential source (defaults to a new Authenticator)

    Returns:
        Fully populated Settings

    Raises:
        ConfigurationError: If credentials are missing or the file is invalid
    """
    authenticator = authenticator or Authenticator()
    creds = authenticator.get_credentials()
    overrides = SettingsLoader.load(config_path) if config_path else {}
    return Settings(
        email=creds.email,
        api_token=creds.api_token,
        domain=creds.domain,
        **overrides,
    )
