"""
YAML → typed equipment config loader.

Loads the default equipment from plates.yaml (bundled with the package) and
optionally merges user overrides from ~/.plate-math/plates.yaml, or from
the file named by $PLATE_MATH_CONFIG when that is set.

Usage:
    from plate_math.core.config_loader import load_inventory_config
    cfg = load_inventory_config()
    plates = determine_plates(100, cfg.handle, cfg.plates)

If the bundled YAML cannot be parsed a RuntimeError is raised.  If the user
override file exists but cannot be read or parsed, a warning is logged and
the file is ignored.  Sections missing from both files fall back to the
defaults in config.py.
"""

from __future__ import annotations

import importlib.resources
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..io.serializers import (
    ValidationError,
    as_number,
    bars_from_list,
    bars_from_mapping,
    plates_from_list,
    validate_non_negative,
    validate_positive,
)
from .config import (
    BUNDLED_CONFIG_NAME,
    CONFIG_ENV_VAR,
    DEFAULT_BARS,
    DEFAULT_DENOMINATIONS,
    DEFAULT_HANDLE_KG,
    DEFAULT_PLATES,
    USER_CONFIG_DIR,
)
from .models import Bar, Plate

logger = logging.getLogger(__name__)


@dataclass
class InventoryConfig:
    """Typed view of the merged equipment config."""

    handle: float = DEFAULT_HANDLE_KG
    plates: list[Plate] = field(default_factory=lambda: list(DEFAULT_PLATES))
    denominations: list[float] = field(default_factory=lambda: list(DEFAULT_DENOMINATIONS))
    bars: list[Bar] = field(default_factory=lambda: list(DEFAULT_BARS))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file cannot be parsed
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_bundled_config() -> dict[str, Any]:
    """
    Load the bundled plates.yaml; {} if the package ships none.

    The file is read inside the as_file() context so this also works when
    the package is imported from a zip archive.

    Raises:
        RuntimeError: If the bundled file exists but cannot be parsed
    """
    ref = importlib.resources.files("plate_math").joinpath(BUNDLED_CONFIG_NAME)
    if not ref.is_file():
        return {}
    try:
        with importlib.resources.as_file(ref) as path:
            return _load_yaml_file(path)
    except (OSError, yaml.YAMLError) as e:
        raise RuntimeError(f"plate-math: cannot load bundled {BUNDLED_CONFIG_NAME}: {e}") from e


def get_user_yaml_path() -> Path | None:
    """
    Return the user override file if it exists, else None.

    $PLATE_MATH_CONFIG takes precedence over ~/.plate-math/plates.yaml.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).expanduser()
        return p if p.exists() else None
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / USER_CONFIG_DIR / BUNDLED_CONFIG_NAME
    return p if p.exists() else None


def load_raw_config() -> dict[str, Any]:
    """
    Load and merge equipment configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/plate_math/plates.yaml
    2. User override ($PLATE_MATH_CONFIG or ~/.plate-math/plates.yaml)

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.

    Raises:
        RuntimeError: If the bundled file exists but cannot be parsed
    """
    config = load_bundled_config()

    user = get_user_yaml_path()
    if user is not None:
        try:
            user_cfg = _load_yaml_file(user)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring config override %s: %s", user, e)
            user_cfg = {}
        if user_cfg:
            logger.debug("Merging config override %s", user)
            config = _deep_merge(config, user_cfg)

    return config


def parse_inventory_config(raw: dict[str, Any]) -> InventoryConfig:
    """
    Convert a raw config dict into an InventoryConfig.

    Raises:
        ValidationError: If a present section is malformed
    """
    cfg = InventoryConfig()

    if "handle" in raw:
        handle = as_number(raw["handle"], "handle")
        cfg.handle = float(validate_non_negative(handle, "handle"))

    if "plates" in raw:
        cfg.plates = plates_from_list(raw["plates"], strict=True)

    if "denominations" in raw:
        denominations = raw["denominations"]
        if not isinstance(denominations, list):
            raise ValidationError("denominations must be a list")
        cfg.denominations = sorted(
            float(validate_positive(as_number(d, "denomination"), "denomination"))
            for d in denominations
        )

    if "bars" in raw:
        bars = raw["bars"]
        cfg.bars = bars_from_mapping(bars) if isinstance(bars, dict) else bars_from_list(bars)

    return cfg


def load_inventory_config() -> InventoryConfig:
    """Load, merge and validate the equipment configuration."""
    return parse_inventory_config(load_raw_config())
