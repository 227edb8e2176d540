"""Optional YAML configuration for the pdbflags CLI.

A config file is either passed explicitly (``--config PATH``) or picked up
from ``.pdbflags.yaml`` in the working directory. Example::

    format: json
    watch_warnings:
      - 4146   # unary minus applied to unsigned type
      - 4996   # deprecated function

An empty file yields the defaults. Unknown keys are logged and ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from pdbflags.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".pdbflags.yaml"
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")

_KNOWN_KEYS = frozenset({"format", "watch_warnings"})


@dataclass(frozen=True)
class PdbFlagsConfig:
    """Settings read from a pdbflags config file.

    Attributes:
        format: Default output format, ``"text"`` or ``"json"``.
        watch_warnings: Warning numbers ``check`` reports on when none are
            given on the command line.
    """

    format: str = "text"
    watch_warnings: tuple[int, ...] = ()


def load_config(path: Path | None = None) -> PdbFlagsConfig:
    """Load configuration from *path*, or from the default file if present.

    Args:
        path: Explicit config file. When None, ``.pdbflags.yaml`` in the
            current directory is used if it exists; otherwise defaults apply.

    Returns:
        The parsed configuration.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.is_file():
            return PdbFlagsConfig()
        path = candidate

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc

    return config_from_mapping(data, source=str(path))


def config_from_mapping(data: object, source: str = "<config>") -> PdbFlagsConfig:
    """Validate an already-loaded YAML document and build a config.

    Args:
        data: The result of ``yaml.safe_load`` (None for an empty document).
        source: Name used in error and log messages.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the document is not a mapping or a value is invalid.
    """
    if data is None:
        return PdbFlagsConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top level must be a mapping")

    for key in sorted(set(map(str, data)) - _KNOWN_KEYS):
        logger.warning("Ignoring unknown config key %r in %s", key, source)

    output_format = data.get("format", "text")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"{source}: format must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got {output_format!r}"
        )

    raw_warnings = data.get("watch_warnings") or []
    if not isinstance(raw_warnings, list):
        raise ConfigError(f"{source}: watch_warnings must be a list")

    watch: list[int] = []
    for item in raw_warnings:
        # bool is an int subclass; reject it explicitly.
        if isinstance(item, bool) or not isinstance(item, int) or item < 0:
            raise ConfigError(
                f"{source}: watch_warnings entries must be non-negative "
                f"integers, got {item!r}"
            )
        if item not in watch:
            watch.append(item)

    return PdbFlagsConfig(format=output_format, watch_warnings=tuple(watch))
