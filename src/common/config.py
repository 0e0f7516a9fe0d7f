"""
Configuration module

Settings are read from ``config/app_config.yaml`` and then overridden by
environment variables, which is how hosting platforms inject the port and
the Google OAuth credentials.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class GoogleConfig:
    """Google OAuth settings"""

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None
    token_url: str = "https://oauth2.googleapis.com/token"
    userinfo_url: str = "https://www.googleapis.com/oauth2/v2/userinfo"
    timeout_seconds: float = 10.0

    def is_complete(self) -> bool:
        """True when client id, secret and redirect URI are all set."""
        return all(
            isinstance(value, str) and value.strip()
            for value in (self.client_id, self.client_secret, self.redirect_uri)
        )


@dataclass
class Config:
    """Application settings"""

    server: ServerConfig = None  # type: ignore
    google: GoogleConfig = None  # type: ignore

    log_level: str = "INFO"
    log_file: str = "logs/diary_backend.log"

    def __post_init__(self):
        if self.server is None:
            self.server = ServerConfig()
        if self.google is None:
            self.google = GoogleConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Read settings from a YAML file.

        Args:
            config_path: path of the YAML file (defaults to config/app_config.yaml).
                A missing file yields the defaults.

        Returns:
            Config: settings instance
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {}) or {}
        google_data = yaml_data.get("google", {}) or {}
        log_data = yaml_data.get("log", {}) or {}

        defaults = GoogleConfig()
        return cls(
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=int(server_data.get("port", 3000)),
                cors_origins=list(server_data.get("cors_origins", ["*"])),
            ),
            google=GoogleConfig(
                client_id=google_data.get("client_id"),
                client_secret=google_data.get("client_secret"),
                redirect_uri=google_data.get("redirect_uri"),
                token_url=google_data.get("token_url", defaults.token_url),
                userinfo_url=google_data.get("userinfo_url", defaults.userinfo_url),
                timeout_seconds=float(
                    google_data.get("timeout_seconds", defaults.timeout_seconds)
                ),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/diary_backend.log"),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Read settings from environment variables only."""
        config = cls()
        config.apply_env(environ)
        return config

    @classmethod
    def load(
        cls,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """YAML settings with environment overrides applied on top."""
        config = cls.from_yaml(config_path)
        config.apply_env(environ)
        return config

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Override fields from environment variables that are set."""
        env = os.environ if environ is None else environ

        if env.get("HOST"):
            self.server.host = env["HOST"]
        if env.get("PORT"):
            self.server.port = int(env["PORT"])
        if env.get("CORS_ORIGINS"):
            origins = [o.strip() for o in env["CORS_ORIGINS"].split(",")]
            self.server.cors_origins = [o for o in origins if o]

        if env.get("GOOGLE_CLIENT_ID"):
            self.google.client_id = env["GOOGLE_CLIENT_ID"]
        if env.get("GOOGLE_CLIENT_SECRET"):
            self.google.client_secret = env["GOOGLE_CLIENT_SECRET"]
        if env.get("GOOGLE_REDIRECT_URI"):
            self.google.redirect_uri = env["GOOGLE_REDIRECT_URI"]

        if env.get("LOG_LEVEL"):
            self.log_level = env["LOG_LEVEL"]
        if env.get("LOG_FILE"):
            self.log_file = env["LOG_FILE"]
