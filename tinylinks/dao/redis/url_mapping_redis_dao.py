"""Data Access Object (DAO) implementation for URL mappings in Redis

This module provides a Redis-based implementation of URLMappingBaseDAO so that
several processes can share one mapping store.

Key layout (see RedisKeySchema):
    <prefix>:links:<shortcode>        HASH   {target, created_at, expires_at}
    <prefix>:targets:<xxh128(url)>    STRING <shortcode>
    <prefix>:links:index              SET    all stored short codes

Records are stored without a Redis TTL. Expired mappings must remain visible
to the service's collision check, exactly as in the in-memory store.

Classes:
    URLMappingRedisDAO:
        DAO for storing and retrieving URLMappingModel in a Redis datastore.

Example:
    >>> from tinylinks.models import URLMappingModel
    >>> from tinylinks.dao.redis import URLMappingRedisDAO

    >>> dao = URLMappingRedisDAO(prefix="tinylinks:dev")
    >>> dao.save(URLMappingModel(shortcode="abc123", target="https://example.com/page"))
    <URLMappingRedisDAO>

    >>> dao.find_by_shortcode("abc123").target
    'https://example.com/page'
    >>> dao.find_by_target("https://example.com/page").shortcode
    'abc123'
"""

from datetime import datetime
from typing import Any

import redis
from beartype import beartype

from tinylinks.models import URLMappingModel
from tinylinks.dao.base import URLMappingBaseDAO
from tinylinks.dao.exceptions import CorruptedRecordError
from tinylinks.dao.redis.redis_key_schema import RedisKeySchema
from tinylinks.dao.redis.helpers import handle_redis_connection_error


class URLMappingRedisDAO(URLMappingBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL mappings

    Attributes:
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
            Responses are always decoded to str.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        ping() -> bool:
            Check that Redis answers. Called once on construction.
            Raises DataStoreError if Redis is unreachable.

        save(mapping: URLMappingModel, **kwargs) -> URLMappingRedisDAO:
            Write the mapping hash, the URL index entry and the code index
            entry in one MULTI/EXEC transaction.
            Raises DataStoreError on connectivity issues with Redis.

        find_by_shortcode(shortcode: str, **kwargs) -> URLMappingModel | None:
            Load a mapping by short code, None if absent.

        find_by_target(target: str, **kwargs) -> URLMappingModel | None:
            Resolve the URL index to a short code and load its mapping.

        count(**kwargs) -> int:
            Number of stored short codes.
    """

    def __init__(self, client: redis.Redis | None = None, prefix: str | None = None, **connection: Any):
        """Attach to Redis, either through `client` or by opening a new connection

        Args:
            client (redis.Redis | None):
                Existing client. It must be created with decode_responses=True.
            prefix (str | None):
                Namespace for every key, e.g. 'tinylinks:prod'.
            **connection:
                redis.Redis parameters (host, port, db, username, password, ...)
                used when no client is given. Mirrors the `store.redis` config section.

        Raises:
            DataStoreError:
                If Redis does not answer the initial PING.
        """
        if client is None:
            client = redis.Redis(**{**connection, 'decode_responses': True})

        self.redis = client
        self.keys = RedisKeySchema(prefix=prefix)
        self.ping()

    @handle_redis_connection_error
    def ping(self) -> bool:
        return bool(self.redis.ping())

    @handle_redis_connection_error
    @beartype
    def save(self, mapping: URLMappingModel, **kwargs) -> 'URLMappingRedisDAO':
        """Insert a URL mapping into Redis

        NOTE: The three writes are executed as an atomic transaction to avoid a
              state where the short code resolves but the URL index does not
              (or the other way around):

              (process 1): URLMappingRedisDAO.save():
                           -> HSET <app>:links:<shortcode> target <url> ...
                           ... interruption
              (process 2): URLMappingRedisDAO.find_by_target(<url>):
                           -> GET <app>:targets:<digest>  => returns 'nil'
                           => a second short code gets minted for <url>
              (process 1): URLMappingRedisDAO.save() continued...:
                           -> SET <app>:targets:<digest> <shortcode>

        Args:
            mapping (URLMappingModel):
                The mapping to be stored. Overwrites existing keys.

        Returns:
            URLMappingRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        link_key = self.keys.link_key(mapping.shortcode)
        target_key = self.keys.target_key(mapping.target)
        index_key = self.keys.index_key()

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hset(link_key, mapping=self._serialize(mapping))
            pipe.set(target_key, mapping.shortcode)
            pipe.sadd(index_key, mapping.shortcode)
            pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    def find_by_shortcode(self, shortcode: str, **kwargs) -> URLMappingModel | None:
        """Retrieve a stored mapping by short code

        Returns:
            URLMappingModel | None:
                The mapping if found (expired or not), otherwise None.

        Raises:
            CorruptedRecordError:
                If the stored hash lacks fields or holds unparsable timestamps.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        record = self.redis.hgetall(self.keys.link_key(shortcode))
        if not record:
            return None
        return self._deserialize(shortcode, record)

    @handle_redis_connection_error
    @beartype
    def find_by_target(self, target: str, **kwargs) -> URLMappingModel | None:
        """Retrieve a stored mapping by long URL

        A mapping whose stored target differs from `target` (digest collision
        or a short code later re-saved for another URL) is treated as absent,
        as URLMappingBaseDAO requires.

        Raises:
            CorruptedRecordError:
                If the stored hash lacks fields or holds unparsable timestamps.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        shortcode = self.redis.get(self.keys.target_key(target))
        if shortcode is None:
            return None

        mapping = self.find_by_shortcode(shortcode)
        if mapping is None or mapping.target != target:
            return None
        return mapping

    @handle_redis_connection_error
    def count(self, **kwargs) -> int:
        return int(self.redis.scard(self.keys.index_key()))

    @staticmethod
    def _serialize(mapping: URLMappingModel) -> dict[str, str]:
        return {
            'target': mapping.target,
            'created_at': mapping.created_at.isoformat(),
            'expires_at': mapping.expires_at.isoformat() if mapping.expires_at is not None else '',
        }

    @staticmethod
    def _deserialize(shortcode: str, record: dict[str, str]) -> URLMappingModel:
        try:
            expires_at = record.get('expires_at') or None
            return URLMappingModel(
                shortcode=shortcode,
                target=record['target'],
                created_at=datetime.fromisoformat(record['created_at']),
                expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
            )
        except (KeyError, ValueError) as e:
            raise CorruptedRecordError(f"Stored mapping for short code '{shortcode}' is corrupted.") from e
