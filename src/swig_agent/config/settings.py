"""
Swig Agent settings.

Values are resolved in this order, first hit wins:
- process environment (a ``.env.<env>`` file is loaded into it first)
- ``.env`` in the working directory
- ``config/<env>.yaml``
- ``config/default.yaml``
- field defaults below

Agent runtimes that expose their own ``get_setting(key)`` accessor use
``Settings.from_accessor`` instead.
"""

import os
from pathlib import Path
from typing import Any, Callable, Optional

import yaml
from dotenv import dotenv_values, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
SWIG_PROGRAM_ID = "swigypWHEksbC64pWKwah1WTeh9JXwx8H1rJHLdbQMB"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
COMMITMENTS = ("processed", "confirmed", "finalized")

# Keys read from the runtime settings accessor
RUNTIME_SETTING_KEYS = (
    "SOLANA_PRIVATE_KEY",
    "SOLANA_RPC_URL",
    "SOLANA_COMMITMENT",
    "SWIG_PROGRAM_ID",
    "SWIG_PROGRAM_ADAPTER",
    "SWIG_TRANSFERS_ENABLED",
    "SWIG_AUTHORITY_MANAGEMENT_ENABLED",
    "LOG_LEVEL",
)


class Settings(BaseSettings):
    """
    Swig Agent settings with environment variable support.

    The private key must come from the environment or the runtime
    accessor, never from a YAML file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "SwigAgent"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")

    # Signing key (base58 string or JSON byte array)
    SOLANA_PRIVATE_KEY: Optional[str] = Field(
        default=None,
        repr=False,
        description="Caller secret key",
    )

    # Solana / Blockchain
    SOLANA_RPC_URL: str = Field(default=DEFAULT_RPC_URL)
    SOLANA_COMMITMENT: str = Field(default="confirmed")
    SWIG_PROGRAM_ID: str = Field(default=SWIG_PROGRAM_ID)
    SWIG_PROGRAM_ADAPTER: Optional[str] = Field(
        default=None,
        description="'module:factory' path of the Swig SDK binding",
    )

    # Feature switches
    SWIG_TRANSFERS_ENABLED: bool = Field(
        default=True,
        description="Expose operations that move funds into or out of the wallet",
    )
    SWIG_AUTHORITY_MANAGEMENT_ENABLED: bool = Field(
        default=True,
        description="Expose add/remove authority operations",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[str] = Field(default=None)
    VERBOSE: int = Field(default=1, ge=0, le=3)

    @field_validator("SWIG_TRANSFERS_ENABLED", "SWIG_AUTHORITY_MANAGEMENT_ENABLED", mode="before")
    @classmethod
    def parse_feature_flag(cls, v: Any) -> Any:
        """Only the exact string 'true' enables a flag given as text."""
        if v is None:
            return True
        if isinstance(v, str):
            return v.strip() == "true"
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("SOLANA_COMMITMENT")
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        commitment = v.lower()
        if commitment not in COMMITMENTS:
            raise ValueError(
                f"SOLANA_COMMITMENT must be one of {', '.join(COMMITMENTS)}"
            )
        return commitment

    @classmethod
    def from_accessor(
        cls,
        get_setting: Callable[[str], Optional[Any]],
        **overrides: Any,
    ) -> "Settings":
        """
        Build settings from an agent runtime's settings accessor.

        Args:
            get_setting: Callable returning a setting value or None
            **overrides: Explicit values taking precedence over the accessor

        Returns:
            Settings instance
        """
        values = {}
        for key in RUNTIME_SETTING_KEYS:
            value = get_setting(key)
            if value is not None:
                values[key] = value
        values.update(overrides)
        return cls(**values)

    @property
    def has_signer(self) -> bool:
        """Whether signing key material is configured."""
        return bool(self.SOLANA_PRIVATE_KEY)


PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIR = PROJECT_ROOT / "config"

# Environment name -> (dotenv file, YAML overlay)
ENVIRONMENTS = {
    "production": (".env.production", "production.yaml"),
    "development": (".env.development", "development.yaml"),
    "test": (".env.test", "test.yaml"),
}


def _read_yaml(path: Path) -> dict:
    if not path.is_file():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Build settings from the dotenv file, YAML layers and the environment.

    Args:
        config_file: YAML overlay under ``config/`` (default: ``<env>.yaml``)
        env_file: dotenv file under the project root (default: ``.env.<env>``)
        env: Environment name (default: ``$ENV`` or "development")

    Returns:
        Settings instance

    Raises:
        ValidationError: If a value fails validation
    """
    environment = env or os.getenv("ENV", "development")
    dotenv_name, overlay_name = ENVIRONMENTS.get(
        environment, ENVIRONMENTS["development"]
    )

    dotenv_path = PROJECT_ROOT / (env_file or dotenv_name)
    if dotenv_path.is_file():
        load_dotenv(dotenv_path, override=True)

    layered = _read_yaml(CONFIG_DIR / "default.yaml")
    layered.update(_read_yaml(CONFIG_DIR / (config_file or overlay_name)))

    # Init kwargs outrank env vars and the .env file in pydantic-settings,
    # so YAML only supplies keys neither of them sets
    env_keys = set(os.environ) | set(dotenv_values(Settings.model_config["env_file"]))
    return Settings(
        **{key: value for key, value in layered.items() if key not in env_keys}
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Replace the process-wide settings (tests, embedding runtimes)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Drop the process-wide settings so the next access reloads them."""
    global _settings
    _settings = None
