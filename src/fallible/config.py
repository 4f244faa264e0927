from __future__ import annotations

import logging
from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env

from fallible.exceptions import ConfigError

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, object] = {
    "continuations": {
        "strict": False,
    },
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class Settings:
    strict_continuations: bool = False


_settings: Settings | None = None


def create_config(
    env_prefix: str = "FALLIBLE",
    defaults: dict[str, object] | None = None,
    *,
    strict: bool | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > defaults dict.

    Args:
        env_prefix: Prefix for environment variables.
        defaults: Default configuration values.
        strict: Override ``continuations.strict``.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_dict(defaults),
    ]
    if strict is not None:
        layers.insert(0, config_from_dict({"continuations": {"strict": strict}}))

    return ConfigurationSet(*layers)


def _parse_bool(key: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw != 0
    text = str(raw).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    raise ConfigError(key, raw)


def load_settings(cfg: ConfigurationSet | None = None) -> Settings:
    if cfg is None:
        cfg = create_config()
    settings = Settings(strict_continuations=_parse_bool("continuations.strict", cfg["continuations.strict"]))
    logger.debug("Loaded settings: %s", settings)
    return settings


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Install settings for the process, or clear them so the next read reloads."""
    global _settings
    _settings = settings
