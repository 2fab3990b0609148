# config.py
"""Scanner configuration loaded from YAML.

Example ``greenclaims.yaml``::

    max_input_chars: 10000
    context_chars: 50
    languages: [de, en]
    extra_terms_path: ./extra_terms.yaml

The file location defaults to the ``GREENCLAIMS_CONFIG`` environment
variable.  Without a file the defaults below apply.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .errors import ConfigError
from .terms import BANNED_TERMS, LANGUAGES, TermDefinition, load_terms_from_yaml

logger = logging.getLogger(__name__)

DEFAULT_MAX_INPUT_CHARS = 10000


@dataclass(frozen=True)
class ScannerConfig:
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS
    context_chars: int = 50
    languages: tuple[str, ...] = LANGUAGES
    extra_terms_path: Optional[str] = None


def _validate(data: dict) -> dict:
    known = {f.name for f in fields(ScannerConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    values = dict(data)
    for key in ("max_input_chars", "context_chars"):
        if key in values:
            value = values[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
    if "languages" in values:
        langs = values["languages"]
        if isinstance(langs, str):
            langs = [langs]
        if not isinstance(langs, list) or any(lang not in LANGUAGES for lang in langs):
            raise ConfigError(f"languages must be a list drawn from {LANGUAGES}, got {langs!r}")
        values["languages"] = tuple(langs)
    if values.get("extra_terms_path") is not None:
        values["extra_terms_path"] = str(values["extra_terms_path"])
    return values


def load_config(path: Optional[str] = None) -> ScannerConfig:
    """Read a :class:`ScannerConfig` from YAML, falling back to defaults."""
    path = path or os.getenv("GREENCLAIMS_CONFIG")
    if not path:
        return ScannerConfig()
    path = os.path.abspath(path)
    if not os.path.exists(path):
        logger.warning(f"Config file not found, using defaults: {path}")
        return ScannerConfig()

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    # relative term files are resolved against the config file
    extra = data.get("extra_terms_path")
    if extra and not os.path.isabs(str(extra)):
        data["extra_terms_path"] = os.path.join(os.path.dirname(path), str(extra))

    return ScannerConfig(**_validate(data))


def build_corpus(config: ScannerConfig) -> list[TermDefinition]:
    """Built-in terms restricted to ``config.languages`` plus any extra YAML terms."""
    wanted = set(config.languages)
    corpus = [t for t in BANNED_TERMS if t.language in wanted or t.language == "both"]
    if config.extra_terms_path:
        corpus.extend(load_terms_from_yaml(config.extra_terms_path))
    return corpus
