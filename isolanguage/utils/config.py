"""Configuration: defaults <- .env / environment <- CLI options."""

from __future__ import annotations

import os
from typing import Any

from dotenv import find_dotenv, load_dotenv

from isolanguage.core.table import FAMILIES

CODE_FORMATS = ("code", "code_t", "code_b")

DEFAULTS: dict[str, Any] = {
    "code_format": "code",
    "family": None,  # None means every family
    "strict": False,
    "verbose": False,
}

ENV_MAP = {
    "ISOLANGUAGE_CODE_FORMAT": "code_format",
    "ISOLANGUAGE_FAMILY": "family",
    "ISOLANGUAGE_STRICT": "strict",
    "ISOLANGUAGE_VERBOSE": "verbose",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    if config["code_format"] not in CODE_FORMATS:
        raise ValueError(
            f"Invalid code_format: {config['code_format']}. "
            f"Expected one of: {', '.join(CODE_FORMATS)}"
        )
    if config["family"] is not None and config["family"] not in FAMILIES:
        raise ValueError(f"Unknown language family: {config['family']}")
    return config


def build_config(
    cli_args: dict[str, Any] | None = None,
    load_env_file: bool = True,
    env_file: str | None = None,
) -> dict[str, Any]:
    """Merge defaults <- env vars <- CLI args, then validate.

    The .env file is looked up from the working directory unless
    ``env_file`` names one. Variables already set in the environment win.
    """
    if load_env_file:
        load_dotenv(env_file or find_dotenv(usecwd=True))
    config = dict(DEFAULTS)

    for env_key, cfg_key in ENV_MAP.items():
        val = os.environ.get(env_key)
        if val is None:
            continue
        if cfg_key in ("strict", "verbose"):
            config[cfg_key] = _parse_bool(val)
        else:
            config[cfg_key] = val.strip() or None

    if cli_args:
        for key, val in cli_args.items():
            if val is not None:
                config[key] = val

    return validate_config(config)
