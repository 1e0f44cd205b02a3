"""Configuration loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


@dataclass
class Config:
    """Process configuration (environment and command line)."""

    vault_path: Path = field(default_factory=Path.cwd)
    firecrawl_api_key: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    verbose: bool = False

    @property
    def transport(self) -> str:
        if self.firecrawl_api_key:
            return "firecrawl"
        return "http"

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.vault_path.is_dir():
            raise ConfigError(
                f"Vault path {self.vault_path} is not a directory. "
                "Pass --vault-path or set OBSIDIAN_VAULT_PATH."
            )
        if not self.user_agent.strip():
            raise ConfigError("GOODREADS_USER_AGENT cannot be blank.")


def load_config(
    vault_path: Optional[str] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    config = Config(
        vault_path=Path(vault_path) if vault_path else Path(
            os.getenv("OBSIDIAN_VAULT_PATH", str(Path.cwd()))
        ),
        firecrawl_api_key=os.getenv("FIRECRAWL_API_KEY", ""),
        user_agent=os.getenv("GOODREADS_USER_AGENT", DEFAULT_USER_AGENT),
        verbose=verbose,
    )

    config.validate()
    return config
