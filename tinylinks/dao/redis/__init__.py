from tinylinks.dao.redis.redis_key_schema import RedisKeySchema
from tinylinks.dao.redis.url_mapping_redis_dao import URLMappingRedisDAO


__all__ = [
    'RedisKeySchema',
    'URLMappingRedisDAO',
]
