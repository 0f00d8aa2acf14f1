"""
Configuration loading for FolioFlow.

Packaged defaults live in folioflow/config/defaults.yaml. A deployment can
override any key with its own YAML file, pointed to by FOLIOFLOW_CONFIG_PATH.
Later sources win: defaults -> override file -> explicit overrides dict.

Examples:
    >>> config = load_config()
    >>> config.layout.min_column_fragments
    10

    >>> load_config(overrides={"history": {"capacity": 10}}).history.capacity
    10
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()
DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"


def load_config(
    config_path: Optional[Path] = None, overrides: Optional[Dict[str, Any]] = None
) -> DictConfig:
    """
    Load the merged configuration.

    Args:
        config_path: Optional override YAML (defaults to FOLIOFLOW_CONFIG_PATH, if set)
        overrides: Optional dict merged last

    Returns:
        Read-only OmegaConf DictConfig
    """
    sources = [OmegaConf.load(DEFAULTS_PATH)]

    if config_path is None and os.getenv("FOLIOFLOW_CONFIG_PATH"):
        config_path = Path(os.getenv("FOLIOFLOW_CONFIG_PATH"))
    if config_path is not None:
        sources.append(OmegaConf.load(config_path))
    if overrides:
        sources.append(OmegaConf.create(overrides))

    merged = OmegaConf.merge(*sources)
    OmegaConf.set_readonly(merged, True)
    return merged


@lru_cache(maxsize=1)
def get_config() -> DictConfig:
    """Process-wide configuration, loaded once."""
    return load_config()


def config_section(name: str) -> Dict[str, Any]:
    """Return one top-level config block as a plain dict."""
    return OmegaConf.to_container(get_config()[name], resolve=True)
