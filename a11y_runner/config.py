"""Configuration loading and validation.

A config source is a YAML/JSON file or a Python module exposing
``get_config()``. The module variant may return the mapping directly or an
awaitable that resolves to it. Validation happens here, before the run
touches the filesystem or the network.
"""
from __future__ import annotations

import importlib.util
import inspect
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .schema import A11yConfig, AuditOptions, TestDescriptor

DEFAULT_CONFIG_PATH = "a11y.config.yaml"


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    return value


def _load_module_config(path: Path) -> Any:
    spec = importlib.util.spec_from_file_location("a11y_user_config", path)
    if spec is None or spec.loader is None:
        raise ConfigError(f"Cannot import config module: {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    get_config = getattr(module, "get_config", None)
    if not callable(get_config):
        raise ConfigError(f"Config module {path} must define get_config()")
    return get_config()


async def resolve_config(path: str) -> Optional[Dict[str, Any]]:
    """Return the raw config mapping from ``path`` without validating it."""
    p = Path(path)
    if not p.is_file():
        raise ConfigError(f"Config file not found: {p}")
    suffix = p.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            return _expand_env(yaml.safe_load(p.read_text(encoding="utf-8")))
        if suffix == ".json":
            return _expand_env(json.loads(p.read_text(encoding="utf-8")))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot parse config file {p}: {e}") from e
    if suffix == ".py":
        raw = _load_module_config(p)
        if inspect.isawaitable(raw):
            raw = await raw
        return raw
    raise ConfigError(f"Unsupported config format: {p.suffix or p.name}")


def validate_config(raw: Optional[Dict[str, Any]]) -> A11yConfig:
    """Presence checks plus typed parsing. Raises ``ConfigError``."""
    if not raw or not isinstance(raw, dict):
        raise ConfigError("Missing config variables")
    tests = raw.get("tests")
    report_dir = raw.get("reportDir", raw.get("report_dir"))
    if tests is None or not report_dir:
        raise ConfigError("Missing config variables")
    if not isinstance(tests, list):
        raise ConfigError("Config 'tests' must be a list")
    if not all(isinstance(t, dict) and t.get("name") for t in tests):
        raise ConfigError("Config missing test name")

    try:
        return A11yConfig(
            defaults=AuditOptions.model_validate(raw.get("defaults") or {}),
            tests=[TestDescriptor.from_mapping(t) for t in tests],
            report_dir=str(report_dir),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


async def load_config(path: str = DEFAULT_CONFIG_PATH) -> A11yConfig:
    return validate_config(await resolve_config(path))


__all__ = ["DEFAULT_CONFIG_PATH", "load_config", "resolve_config", "validate_config"]
