"""Relevance configuration loader with validation."""

import hashlib
import time
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from src.config.constants import (
    COMPONENT_CONFIG,
    ERROR_TYPE_FILE_NOT_FOUND,
    ERROR_TYPE_FILE_READ,
    ERROR_TYPE_YAML_PARSE,
)
from src.config.schemas.relevance import RelevanceConfig


logger = structlog.get_logger()


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


class ConfigLoader:
    """Loads and validates relevance.yaml.

    Configuration is immutable once loaded.
    """

    def __init__(self) -> None:
        """Initialize the loader."""
        self._config: RelevanceConfig | None = None
        self._file_checksum: str | None = None
        self._validation_errors: list[dict[str, str]] = []
        self._validation_duration_ms: float = 0

    @property
    def config(self) -> RelevanceConfig | None:
        """Get the loaded configuration, if any."""
        return self._config

    @property
    def file_checksum(self) -> str | None:
        """Get SHA-256 checksum of the loaded file."""
        return self._file_checksum

    @property
    def validation_errors(self) -> list[dict[str, str]]:
        """Get validation errors if any."""
        return self._validation_errors.copy()

    @property
    def validation_duration_ms(self) -> float:
        """Get validation duration in milliseconds."""
        return self._validation_duration_ms

    def load(self, path: Path) -> RelevanceConfig:
        """Load and validate a configuration file.

        Args:
            path: Path to relevance.yaml.

        Returns:
            Validated RelevanceConfig.

        Raises:
            ConfigValidationError: If the file is missing or unreadable, is not valid
                YAML, or fails schema validation.
        """
        start_time = time.perf_counter()
        self._validation_errors = []
        log = logger.bind(component=COMPONENT_CONFIG, file_path=str(path))
        log.info("loading_config_file")

        try:
            content_bytes = path.read_bytes()
        except FileNotFoundError as e:
            self._fail("", str(e), ERROR_TYPE_FILE_NOT_FOUND, log)
            raise ConfigValidationError(self.validation_errors, str(path)) from e
        except OSError as e:
            self._fail("", str(e), ERROR_TYPE_FILE_READ, log)
            raise ConfigValidationError(self.validation_errors, str(path)) from e

        checksum = hashlib.sha256(content_bytes).hexdigest()

        try:
            data = yaml.safe_load(content_bytes.decode("utf-8")) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            self._fail("", str(e), ERROR_TYPE_YAML_PARSE, log)
            raise ConfigValidationError(self.validation_errors, str(path)) from e

        try:
            config = RelevanceConfig.model_validate(data)
        except ValidationError as e:
            for err in e.errors():
                self._validation_errors.append(
                    {
                        "loc": ".".join(str(loc) for loc in err["loc"]),
                        "msg": err["msg"],
                        "type": err["type"],
                    }
                )
            log.error(
                "config_validation_failed",
                validation_error_count=len(self._validation_errors),
                errors=self._validation_errors,
            )
            raise ConfigValidationError(self.validation_errors, str(path)) from e

        self._config = config
        self._file_checksum = checksum
        self._validation_duration_ms = (time.perf_counter() - start_time) * 1000

        log.info(
            "config_file_loaded",
            file_sha256=checksum,
            top_n=config.top_n,
            config_validation_duration_ms=self._validation_duration_ms,
        )
        return config

    def _fail(
        self,
        loc: str,
        message: str,
        error_type: str,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        """Record a non-schema failure."""
        self._validation_errors.append({"loc": loc, "msg": message, "type": error_type})
        log.error("config_load_failed", error_type=error_type, error=message)


def load_config(path: Path | None) -> RelevanceConfig:
    """Load a config file, or return defaults when no path is given.

    Args:
        path: Optional path to relevance.yaml.

    Returns:
        RelevanceConfig.
    """
    if path is None:
        return RelevanceConfig()
    return ConfigLoader().load(path)
