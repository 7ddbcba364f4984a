"""Utility functions for application configuration management.

Configuration is a single YAML document. Its location is read from the
`TINYLINKS_CONFIG` environment variable unless a path is passed explicitly;
when neither is available the built-in defaults are used. The document is
merged over `DEFAULT_CONFIG`, so a file only needs the keys it overrides:

    generator:
      strategy: random      # random | sequential
      length: 7             # random strategy only
      start: 100000         # sequential strategy only
    store:
      backend: memory       # memory | redis
      redis:
        host: localhost
        port: 6379
        db: 0
    service:
      max_attempts: 10

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key prefix for shared stores, or None if `APP_NAME` is not set.

    load_yaml(path: Path) -> dict
        Safely load a YAML file, {} for empty files.

    load_config(path: Path | str | None = None) -> dict
        Load the configuration document merged over the defaults.

Example:
    >>> from tinylinks.utils.config import load_config
    >>> config = load_config('config/local.yml')
    >>> config['generator']['strategy']
    'sequential'
"""

import os
import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from tinylinks.constants import ENV, CodeLength, Retry, Sequence


logger = logging.getLogger(__name__)


DEFAULT_CONFIG: dict[str, Any] = {
    'generator': {
        'strategy': 'random',
        'length': CodeLength.DEFAULT,
        'start': Sequence.START,
    },
    'store': {
        'backend': 'memory',
        'redis': {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        },
    },
    'service': {
        'max_attempts': Retry.MAX_ATTEMPTS,
    },
}


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for shared data stores

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'tinylinks'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'tinylinks:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file into a Python dictionary.

    Raises:
        FileNotFoundError:
            If the file does not exist.
    """
    if not path.is_file():
        raise FileNotFoundError(f'YAML not found: {path}')
    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return data or {}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        # An empty YAML section (`generator:`) loads as None and keeps the defaults
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | str | None = None) -> dict[str, Any]:
    """Load the application configuration merged over DEFAULT_CONFIG

    Args:
        path (Path | str | None):
            Path to a YAML document. Falls back to `TINYLINKS_CONFIG`, then
            to the built-in defaults.

    Returns:
        dict: the merged configuration (a fresh copy on every call).

    Raises:
        FileNotFoundError:
            If an explicit or environment-provided path does not exist.
    """
    path = path or os.environ.get(ENV.App.CONFIG_PATH)
    if not path:
        logger.debug('No configuration file provided, using defaults.')
        return copy.deepcopy(DEFAULT_CONFIG)

    document = load_yaml(Path(path))
    logger.debug('Loaded configuration file.', extra={'configPath': str(path), 'appEnv': app_env()})
    return _merge(DEFAULT_CONFIG, document)
