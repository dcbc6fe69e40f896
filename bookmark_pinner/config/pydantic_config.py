"""
Pydantic-based configuration system for Bookmark Pinner.

Settings are read from an optional TOML or JSON file, with the Pinboard
API token falling back to the PINBOARD_API_TOKEN environment variable.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Type

import toml
from pydantic import (
    BaseModel,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)

DEFAULT_CONFIG_DIR = Path("~/.config/bookmark-pinner").expanduser()


class NetworkConfig(BaseModel):
    """Network settings for the page fetch and the Pinboard call."""

    timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Request timeout in seconds",
        json_schema_extra={
            "error_msg": "Timeout must be between 1 and 300 seconds. "
            "Recommended: 30 seconds."
        },
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates when fetching pages",
    )


class PinboardConfig(BaseModel):
    """Pinboard service settings with secure token handling."""

    api_token: Optional[SecretStr] = Field(
        default=None,
        description="Pinboard API token (username:HEX)",
        json_schema_extra={
            "error_msg": "Pinboard API token should look like 'username:HEX'. "
            "Find it at https://pinboard.in/settings/password."
        },
    )
    api_base_url: str = Field(
        default="https://api.pinboard.in/v1",
        description="Pinboard API base URL",
    )
    site_url: str = Field(
        default="https://pinboard.in",
        description="Pinboard website opened by the 'Open Pinboard' action",
    )

    @field_validator("api_token", mode="before")
    @classmethod
    def validate_api_token_format(cls, v):
        """Reject placeholder tokens and obviously malformed values."""
        if v is None or v == "":
            return None

        token = str(v)
        if token in ["your-pinboard-api-token-here", "username:TOKEN"]:
            raise ValueError(
                "Please replace the placeholder API token with your actual "
                "Pinboard API token."
            )
        if ":" not in token:
            raise ValueError(
                "Pinboard API tokens have the form 'username:HEX'."
            )
        return SecretStr(token)

    @field_validator("api_base_url", "site_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")


class ResolverConfig(BaseModel):
    """Source resolution settings."""

    use_selection: bool = Field(
        default=True,
        description="Try the current text selection before asking the browser",
    )
    osascript_path: str = Field(
        default="osascript",
        description="Path of the osascript binary used for browser automation",
    )


class PreferencesConfig(BaseModel):
    """Where the remembered checkbox values live."""

    path: Path = Field(
        default=DEFAULT_CONFIG_DIR / "preferences.json",
        description="Preference store file",
    )

    @field_validator("path", mode="before")
    @classmethod
    def expand_path(cls, v):
        return Path(v).expanduser()


class PinnerConfig(BaseModel):
    """Main configuration model."""

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    pinboard: PinboardConfig = Field(default_factory=PinboardConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    preferences: PreferencesConfig = Field(default_factory=PreferencesConfig)


# Models a ValidationError can be raised for, keyed by their error title
_CONFIG_MODELS = {
    model.__name__: model
    for model in (
        PinnerConfig,
        NetworkConfig,
        PinboardConfig,
        ResolverConfig,
        PreferencesConfig,
    )
}


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[PinnerConfig] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default configuration file paths to try."""
        return [
            DEFAULT_CONFIG_DIR / "config.toml",
            DEFAULT_CONFIG_DIR / "config.json",
            Path.cwd() / "bookmark_pinner.toml",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._load_api_token_from_env(config_data)

        try:
            self._config = PinnerConfig(**config_data)
        except ValidationError as e:
            raise ValueError(format_config_error(e))

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(
                2, "Configuration file not found", str(config_path)
            )

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ValueError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load configuration from {config_path}: {e}")

    def _load_api_token_from_env(self, config_data: Dict) -> None:
        """Load the API token from the environment as fallback."""
        pinboard = config_data.setdefault("pinboard", {})
        token = os.getenv("PINBOARD_API_TOKEN")
        if token and not pinboard.get("api_token"):
            pinboard["api_token"] = token

    @property
    def config(self) -> PinnerConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def get_api_token(self) -> Optional[str]:
        """Get the Pinboard API token, returning the actual secret value."""
        if self.config.pinboard.api_token:
            return self.config.pinboard.api_token.get_secret_value()
        return None

    def has_api_token(self) -> bool:
        return self.get_api_token() is not None

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "network": {"timeout": 30, "verify_ssl": True},
            "pinboard": {
                # Keep real tokens out of version control
                "api_token": "your-pinboard-api-token-here",
                "api_base_url": "https://api.pinboard.in/v1",
                "site_url": "https://pinboard.in",
            },
            "resolver": {"use_selection": True, "osascript_path": "osascript"},
            "preferences": {"path": str(DEFAULT_CONFIG_DIR / "preferences.json")},
        }

        if format.lower() not in ("toml", "json"):
            raise ValueError(f"Unsupported format: {format}")

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        else:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message with helpful guidance
        """
        error_messages = []
        model = _CONFIG_MODELS.get(error.title, PinnerConfig)

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            formatted_msg = ConfigurationErrorFormatter._format_by_error_type(
                location,
                error_detail["type"],
                error_detail,
                error_detail.get("input", "N/A"),
            )

            custom_msg = ConfigurationErrorFormatter._get_custom_error_message(
                model, error_detail["loc"]
            )
            if custom_msg:
                formatted_msg += f"\n  {custom_msg}"

            error_messages.append(formatted_msg)

        header = "Configuration Validation Failed:\n"
        separator = "\n" + "-" * 60 + "\n"
        footer = (
            "\n\nTips:\n"
            "- Check the configuration file format (TOML or JSON)\n"
            "- Verify the API token is not a placeholder value\n"
            "- Use 'bookmark-pinner --create-config' to generate a sample file"
        )

        return header + separator + "\n".join(error_messages) + footer

    @staticmethod
    def _get_custom_error_message(
        model: Type[BaseModel], location: tuple
    ) -> Optional[str]:
        """Find the ``error_msg`` declared on the field at ``location``."""
        field = None
        for part in location:
            fields = getattr(model, "model_fields", None)
            if not fields or part not in fields:
                return None
            field = fields[part]
            model = field.annotation

        if field is None or not isinstance(field.json_schema_extra, dict):
            return None
        return field.json_schema_extra.get("error_msg")

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return " -> ".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""
        if "api_token" in location:
            # never echo the token back
            input_value = "***"

        if error_type == "missing":
            return f"x {location}: Required field is missing"

        elif error_type == "value_error":
            msg = error_detail.get("msg", "Invalid value")
            return f"x {location}: {msg}"

        elif error_type in [
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ]:
            ctx = error_detail.get("ctx", {})
            limit = next(iter(ctx.values()), "limit")
            operator = {
                "greater_than_equal": ">=",
                "less_than_equal": "<=",
                "greater_than": ">",
                "less_than": "<",
            }[error_type]
            return f"x {location}: Value must be {operator} {limit} (got: {input_value})"

        msg = error_detail.get("msg", "Invalid configuration value")
        return f"x {location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            "Configuration File Not Found:\n"
            f"x Could not find configuration file: {error.filename}\n\n"
            "Solutions:\n"
            "- Create a configuration file using: bookmark-pinner --create-config\n"
            "- Omit --config to use the default configuration"
        )

    return f"Configuration Error:\nx {error}"
