from tinylinks.utils.config import app_env, app_name, app_prefix, load_config, load_yaml
from tinylinks.utils.helpers import as_utc, utcnow
from tinylinks.utils.shortener import ALPHABET, BASE, encode_base62, decode_base62
from tinylinks.utils.validators import validate_url
from tinylinks.utils.logging import initialize_logging


__all__ = [
    'ALPHABET',
    'BASE',
    'encode_base62',
    'decode_base62',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'load_yaml',
    'as_utc',
    'utcnow',
    'validate_url',
    'initialize_logging',
]
