"""
Configuration management for Actor Search.

Loads configuration from environment variables and provides
a centralized Config dataclass for all settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    """Centralized, read-only configuration from environment variables."""

    # TMDB API
    api_key: str = ""
    base_url: str = "https://api.themoviedb.org/3"
    language: str = "en-US"

    # None means no timeout: a hanging upstream blocks the caller
    request_timeout: Optional[float] = None

    # Images
    image_base_url: str = "https://image.tmdb.org/t/p/w500"
    default_image: str = "assets/default.png"

    # Paths
    log_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # CORS settings
    allowed_origins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided,
                     looks for .env in monorepo root, then current directory.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If a numeric setting cannot be parsed.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            # Try monorepo root first (../../../.env from this file)
            root_env = Path(__file__).parent.parent.parent.parent / ".env"
            if root_env.exists():
                load_dotenv(root_env)
            else:
                load_dotenv()

        # A missing key is not fatal here; TMDB answers 401 and the
        # pipelines report it as an upstream error.
        api_key = os.getenv("API_KEY", "")

        base_url = os.getenv("BASE_URL", "https://api.themoviedb.org/3").rstrip("/")
        language = os.getenv("TMDB_LANGUAGE", "en-US")

        timeout_str = os.getenv("REQUEST_TIMEOUT", "").strip()
        try:
            request_timeout = float(timeout_str) if timeout_str else None
        except ValueError:
            raise ValueError(f"REQUEST_TIMEOUT must be a number, got {timeout_str!r}")

        image_base_url = os.getenv("IMAGE_BASE_URL", "https://image.tmdb.org/t/p/w500")
        default_image = os.getenv("DEFAULT_IMAGE", "assets/default.png")

        project_dir = Path(os.getenv("PROJECT_DIR", Path.cwd()))
        log_dir = Path(os.getenv("LOG_DIR", project_dir / "logs"))

        # API settings
        api_host = os.getenv("API_HOST", "0.0.0.0")
        port_str = os.getenv("API_PORT", "8000")
        try:
            api_port = int(port_str)
        except ValueError:
            raise ValueError(f"API_PORT must be an integer, got {port_str!r}")
        api_debug = os.getenv("API_DEBUG", "false").lower() == "true"

        origins_str = os.getenv("ALLOWED_ORIGINS", "")
        allowed_origins = [o.strip() for o in origins_str.split(",") if o.strip()]

        return cls(
            api_key=api_key,
            base_url=base_url,
            language=language,
            request_timeout=request_timeout,
            image_base_url=image_base_url,
            default_image=default_image,
            log_dir=log_dir,
            api_host=api_host,
            api_port=api_port,
            api_debug=api_debug,
            allowed_origins=allowed_origins,
        )

    def get_headers(self) -> dict:
        """Get headers for TMDB API requests."""
        return {
            "Accept": "application/json",
        }

    def image_url(self, profile_path: Optional[str]) -> str:
        """Resolve a profile path to a full image URL, or the default image."""
        if profile_path:
            return f"{self.image_base_url}{profile_path}"
        return self.default_image
