"""Configuration management for grammarfix."""

import os
from pathlib import Path

import dotenv
import pydantic
from pydantic import BaseModel, Field

from grammarfix.errors import ConfigError
from grammarfix.features.llm_api import DEFAULT_TEXT_MODEL
from grammarfix.util.io import DEFAULT_SESSION_FILE
from grammarfix.util.logs import LogLevel


class AppConfig(BaseModel):
    """Main application configuration."""

    openai_api_key: str = Field(
        default="", description="OpenAI API key used by the suggestion provider"
    )

    model: str = Field(
        default=DEFAULT_TEXT_MODEL, description="OpenAI model used for grammar checks"
    )

    session_file: Path = Field(
        default=DEFAULT_SESSION_FILE,
        description="File holding the logged-in user record",
    )

    log_level: LogLevel = Field(default="INFO", description="Logging level")

    match_phrases: bool = Field(
        default=False,
        description="Also highlight multi-word corrections such as 'she go'",
    )

    def save_to_file(self, filepath: str | Path) -> None:
        """Save configuration to a JSON file."""
        with open(filepath, "w") as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def load_from_file(cls, filepath: str | Path) -> "AppConfig":
        """Load configuration from a JSON file."""
        with open(filepath, "r") as f:
            return cls.model_validate_json(f.read())

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "AppConfig":
        """Build the configuration from environment variables.

        A `.env` file is loaded first (without overriding variables that are
        already set). Recognised variables: OPENAI_API_KEY, GRAMMARFIX_MODEL,
        GRAMMARFIX_SESSION_FILE, GRAMMARFIX_LOG_LEVEL, GRAMMARFIX_MATCH_PHRASES.
        """
        dotenv.load_dotenv(dotenv_path)

        values = {}
        env_map = {
            "openai_api_key": "OPENAI_API_KEY",
            "model": "GRAMMARFIX_MODEL",
            "session_file": "GRAMMARFIX_SESSION_FILE",
            "log_level": "GRAMMARFIX_LOG_LEVEL",
            "match_phrases": "GRAMMARFIX_MATCH_PHRASES",
        }
        for field_name, var in env_map.items():
            value = os.environ.get(var)
            if value:
                values[field_name] = value
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        return cls.model_validate(values)

    @classmethod
    def load(
        cls, filepath: str | Path | None = None, dotenv_path: str | None = None
    ) -> "AppConfig":
        """Load the configuration from `filepath`, or from the environment.

        `.env` is loaded in both cases. A file without an API key takes
        OPENAI_API_KEY from the environment.

        Raises:
            ConfigError: If a value is invalid.
        """
        try:
            if not filepath:
                return cls.from_env(dotenv_path)
            dotenv.load_dotenv(dotenv_path)
            config = cls.load_from_file(filepath)
        except pydantic.ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(f"Invalid configuration: {details}") from e

        if not config.openai_api_key:
            config = config.model_copy(
                update={"openai_api_key": os.environ.get("OPENAI_API_KEY", "")}
            )
        return config
