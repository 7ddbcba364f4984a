from tinylinks.dao.memory.url_mapping_memory_dao import URLMappingMemoryDAO


__all__ = ['URLMappingMemoryDAO']
