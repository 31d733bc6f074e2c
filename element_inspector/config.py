import os
from dataclasses import dataclass, field
from typing import Optional

ENV_PREFIX = "ELEMENT_INSPECTOR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_NO_LIMIT_VALUES = {"", "none", "off"}


@dataclass
class InspectorConfig:
    """Configuration for element inspection."""
    component_timeout: Optional[float] = 5.0
    headless: bool = True
    highlight_duration_ms: int = 2000
    highlight_on_describe: bool = True
    host_components: frozenset[str] = field(default_factory=frozenset)
    log_level: str = "INFO"
    page_load_timeout: int = 10
    user_components: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.component_timeout is not None and self.component_timeout <= 0:
            raise ValueError("component_timeout must be positive or None")
        if self.highlight_duration_ms < 0:
            raise ValueError("highlight_duration_ms must not be negative")
        if self.page_load_timeout <= 0:
            raise ValueError("page_load_timeout must be positive")
        overlap = self.user_components & self.host_components
        if overlap:
            raise ValueError(f"Components listed as both user and host: {sorted(overlap)}")

    @classmethod
    def from_env(cls) -> "InspectorConfig":
        """Create configuration from ELEMENT_INSPECTOR_* environment variables."""
        defaults = cls()

        timeout = _env("COMPONENT_TIMEOUT")
        if timeout is None:
            component_timeout = defaults.component_timeout
        elif timeout.strip().lower() in _NO_LIMIT_VALUES:
            component_timeout = None
        else:
            component_timeout = _parse_number(float, "COMPONENT_TIMEOUT", timeout)

        return cls(
            component_timeout=component_timeout,
            headless=_parse_flag(_env("HEADLESS"), defaults.headless),
            highlight_duration_ms=_parse_number(
                int, "HIGHLIGHT_MS", _env("HIGHLIGHT_MS"), defaults.highlight_duration_ms
            ),
            highlight_on_describe=_parse_flag(
                _env("HIGHLIGHT_ON_DESCRIBE"), defaults.highlight_on_describe
            ),
            host_components=_parse_names(_env("HOST_COMPONENTS")),
            log_level=(_env("LOG_LEVEL") or defaults.log_level).upper(),
            page_load_timeout=_parse_number(
                int, "PAGE_LOAD_TIMEOUT", _env("PAGE_LOAD_TIMEOUT"), defaults.page_load_timeout
            ),
            user_components=_parse_names(_env("USER_COMPONENTS")),
        )


def _env(name: str) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + name)


def _parse_flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def _parse_names(value: Optional[str]) -> frozenset[str]:
    if not value:
        return frozenset()
    return frozenset(name.strip() for name in value.split(",") if name.strip())


def _parse_number(kind: type, name: str, value: Optional[str], default=None):
    if value is None or not value.strip():
        return default
    try:
        return kind(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {value!r}")
