"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubeskew.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    MAX_CONCURRENT_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    TOPOLOGY_KEY_DEFAULT,
)
from kubeskew.constants.enums import OutputFormat
from kubeskew.utils.selector_parser import labels_to_selector, parse_label, parse_labels

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseModel):
    """Settings for one invocation, validated before any cluster access."""

    model_config = ConfigDict(populate_by_name=True)

    # Kubeconfig overrides
    context: str | None = None
    cluster: str | None = None
    user: str | None = None

    # Query scope
    namespace: str | None = None
    name: str | None = None
    selector: list[str] = Field(default_factory=list)  # KEY=VALUE items
    topology_key: str = TOPOLOGY_KEY_DEFAULT

    # Output and runtime
    output: OutputFormat = OutputFormat(OUTPUT_FORMAT_DEFAULT)
    log_level: str = LOG_LEVEL_DEFAULT
    max_concurrent: int = Field(default=MAX_CONCURRENT_DEFAULT, ge=1)

    @field_validator("topology_key")
    @classmethod
    def _validate_topology_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("topology key must not be empty")
        return value

    @field_validator("selector")
    @classmethod
    def _validate_selector(cls, value: list[str]) -> list[str]:
        for pair in value:
            parse_label(pair)
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        value = value.strip().upper() or LOG_LEVEL_DEFAULT
        if value not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return value

    @property
    def label_filter(self) -> dict[str, str]:
        return parse_labels(self.selector)

    @property
    def selector_string(self) -> str:
        """Selector items joined for ``kubectl -l`` in the order given."""
        return labels_to_selector(parse_label(pair) for pair in self.selector)
