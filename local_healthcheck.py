"""Check that the Redis-backed mapping store works on your local machine

Connection details:
- redis: 127.0.0.1:6379

Shortens a URL through the full service stack (config/redis.yml) and resolves
it back. Expect to see the short code and the original URL printed in your
local console.
"""

from pathlib import Path

from tinylinks.factory import build_service
from tinylinks.utils import initialize_logging, load_config


def main():
    initialize_logging()
    service = build_service(load_config(Path(__file__).parent / 'config' / 'redis.yml'))

    shortcode = service.shorten_url('https://example.com/healthcheck')
    print(shortcode, '->', service.get_original_url(shortcode))


if __name__ == '__main__':
    main()
