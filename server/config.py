"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("firebase", "json")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    # "development" adds stack traces to 500 responses
    environment: str = "production"
    log_level: str = "INFO"

    # Data source: "firebase" | "json" | None (no user store)
    data_source: Optional[str] = None
    # When data_source=json: path to the users JSON file
    users_json_path: Optional[Path] = None
    # Database node holding user documents
    users_path: str = "users"

    # When data_source=firebase: service account file, or client email + private key
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None
    firebase_client_email: Optional[str] = None
    firebase_private_key: Optional[str] = None
    firebase_database_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or None
        if data_source and data_source not in DATA_SOURCES:
            data_source = None

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        private_key = os.getenv("FIREBASE_PRIVATE_KEY") or None
        if private_key:
            # Keys pasted into env files carry literal "\n" sequences
            private_key = private_key.replace("\\n", "\n")

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            environment=os.getenv("ENVIRONMENT", "production").strip().lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            data_source=data_source,
            users_json_path=_path_env("USERS_JSON_PATH", base_dir / "data" / "users.json"),
            users_path=os.getenv("USERS_PATH", "users").strip("/ ") or "users",
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            firebase_client_email=os.getenv("FIREBASE_CLIENT_EMAIL") or None,
            firebase_private_key=private_key,
            firebase_database_url=os.getenv("FIREBASE_DATABASE_URL") or None,
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def has_firebase_credentials(self) -> bool:
        return bool(
            self.firebase_credentials_path
            or (self.firebase_client_email and self.firebase_private_key)
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "firebase":
            if not self.has_firebase_credentials:
                errors.append(
                    "DATA_SOURCE=firebase needs FIREBASE_CREDENTIALS_PATH or "
                    "FIREBASE_CLIENT_EMAIL + FIREBASE_PRIVATE_KEY"
                )
            elif self.firebase_credentials_path and not Path(self.firebase_credentials_path).is_file():
                errors.append(f"Firebase credentials file not found: {self.firebase_credentials_path}")
            if not self.firebase_database_url:
                errors.append("DATA_SOURCE=firebase needs FIREBASE_DATABASE_URL")

        if self.data_source == "json" and not self.users_json_path:
            errors.append("DATA_SOURCE=json needs USERS_JSON_PATH")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
