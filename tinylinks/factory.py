"""Assemble a URLShortenerService from a configuration document

This is the only place where concrete generator and store strategies are
picked; everything else receives them through constructor parameters.

Functions:
    build_generator(config) -> ShortCodeBaseGenerator
    build_dao(config) -> URLMappingBaseDAO
    build_service(config=None) -> URLShortenerService

Example:
    >>> from tinylinks.factory import build_service
    >>> service = build_service({'generator': {'strategy': 'sequential'}, 'store': {'backend': 'memory'}})
    >>> service.shorten_url('https://example.com')
    'Aa4'
"""

import logging
from typing import Any

from tinylinks.dao.base import URLMappingBaseDAO
from tinylinks.dao.memory import URLMappingMemoryDAO
from tinylinks.dao.redis import URLMappingRedisDAO
from tinylinks.exceptions import BadConfigurationError
from tinylinks.generators import ShortCodeBaseGenerator, RandomShortCodeGenerator, SequentialShortCodeGenerator
from tinylinks.service import URLShortenerService
from tinylinks.types import AppConfig
from tinylinks.utils.config import DEFAULT_CONFIG, app_prefix, load_config


logger = logging.getLogger(__name__)


def _section(config: AppConfig, name: str) -> dict[str, Any]:
    """Return config[name] over its defaults; an empty section means all defaults."""
    section = config.get(name)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise BadConfigurationError(f"Configuration section '{name}' must be a mapping (given value: {section!r}).")
    return {**DEFAULT_CONFIG[name], **section}


def build_generator(config: AppConfig) -> ShortCodeBaseGenerator:
    """Build the short code generator described by config['generator']

    Raises:
        BadConfigurationError:
            If the section is not a mapping, the strategy is unknown, or its
            parameters are invalid.
    """
    generator_config = _section(config, 'generator')
    strategy = generator_config['strategy']

    if strategy == 'random':
        return RandomShortCodeGenerator(length=generator_config['length'])
    elif strategy == 'sequential':
        return SequentialShortCodeGenerator(start=generator_config['start'])
    else:
        raise BadConfigurationError(f"Unknown generator strategy '{strategy}' (expected 'random' or 'sequential').")


def build_dao(config: AppConfig) -> URLMappingBaseDAO:
    """Build the mapping store described by config['store']

    The `store.redis` section is passed to URLMappingRedisDAO as redis.Redis
    connection parameters and keys are namespaced with app_prefix().

    Raises:
        BadConfigurationError:
            If a section is not a mapping or the backend is unknown.
        DataStoreError:
            If the Redis backend is selected but unreachable.
    """
    store_config = _section(config, 'store')
    backend = store_config['backend']

    if backend == 'memory':
        return URLMappingMemoryDAO()
    elif backend == 'redis':
        connection = store_config.get('redis') or {}
        if not isinstance(connection, dict):
            raise BadConfigurationError(f"Configuration section 'store.redis' must be a mapping (given value: {connection!r}).")
        return URLMappingRedisDAO(**connection, prefix=app_prefix())
    else:
        raise BadConfigurationError(f"Unknown store backend '{backend}' (expected 'memory' or 'redis').")


def build_service(config: AppConfig | None = None) -> URLShortenerService:
    """Build a URLShortenerService, loading the configuration file when none is given."""
    config = load_config() if config is None else config
    service_config = _section(config, 'service')

    service = URLShortenerService(
        dao=build_dao(config),
        generator=build_generator(config),
        max_attempts=service_config['max_attempts'],
    )
    logger.info(
        'Initialized URL shortener service.',
        extra={'generator': type(service.generator).__name__, 'store': type(service.dao).__name__},
    )
    return service
