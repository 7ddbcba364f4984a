from tinylinks.models.url_mapping_model import URLMappingModel


__all__ = ['URLMappingModel']
