from tinylinks.dao.base import URLMappingBaseDAO
from tinylinks.dao.memory import URLMappingMemoryDAO
from tinylinks.dao.redis import URLMappingRedisDAO


__all__ = [
    'URLMappingBaseDAO',
    'URLMappingMemoryDAO',
    'URLMappingRedisDAO',
]
