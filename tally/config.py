from __future__ import annotations
import logging
import os


_DEFAULT_LOG_LEVEL = 'WARNING'


def level_from_env(var: str, default: str) -> int:
    raw = os.environ.get(var, '').strip() or default
    level = logging.getLevelName(raw.upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.getLevelName(default)


def get_log_level() -> int:
    return level_from_env('TALLY_LOG_LEVEL', _DEFAULT_LOG_LEVEL)


def get_pprint_options() -> dict:
    # Lazy import to avoid circular imports
    from tally.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json
    raw = os.environ.get('TALLY_PPRINT_OPTIONS')
    if not raw:
        return dict(DEFAULT_OPTIONS)
    return load_options_from_json(raw)
