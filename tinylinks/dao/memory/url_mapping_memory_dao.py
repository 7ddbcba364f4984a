"""In-process Data Access Object (DAO) for URL mappings

Stores URLMappingModel instances in two dictionaries (short code -> mapping,
long URL -> mapping) guarded by a single lock. Suitable for tests, local
development and single-process deployments; contents are lost on exit.

Classes:
    URLMappingMemoryDAO:
        Thread-safe, dual-indexed in-memory mapping store.

Example:
    >>> dao = URLMappingMemoryDAO()
    >>> dao.save(URLMappingModel(shortcode='abc123', target='https://example.com'))
    <URLMappingMemoryDAO>
    >>> dao.find_by_target('https://example.com').shortcode
    'abc123'
    >>> dao.count()
    1
"""

import threading

from beartype import beartype

from tinylinks.models import URLMappingModel
from tinylinks.dao.base import URLMappingBaseDAO


class URLMappingMemoryDAO(URLMappingBaseDAO):
    """Dictionary-backed URL mapping store

    Both indices are only ever touched while holding `_lock`, so a save() is
    visible to readers either completely or not at all.

    Methods:
        save(mapping: URLMappingModel, **kwargs) -> URLMappingMemoryDAO
        find_by_shortcode(shortcode: str, **kwargs) -> URLMappingModel | None
        find_by_target(target: str, **kwargs) -> URLMappingModel | None
        count(**kwargs) -> int
    """

    def __init__(self):
        self._by_shortcode: dict[str, URLMappingModel] = {}
        self._by_target: dict[str, URLMappingModel] = {}
        self._lock = threading.Lock()

    @beartype
    def save(self, mapping: URLMappingModel, **kwargs) -> 'URLMappingMemoryDAO':
        """Insert a mapping into both indices as a single critical section

        Any prior entry sharing the short code or the long URL is overwritten.
        Re-saving a short code for another URL unlinks the URL it pointed to.

        Example:
            >>> dao.save(URLMappingModel(shortcode='abc123', target='https://example.com'))
            <URLMappingMemoryDAO>
        """
        with self._lock:
            previous = self._by_shortcode.get(mapping.shortcode)
            if previous is not None and previous.target != mapping.target and self._by_target.get(previous.target) is previous:
                del self._by_target[previous.target]

            self._by_shortcode[mapping.shortcode] = mapping
            self._by_target[mapping.target] = mapping
        return self

    @beartype
    def find_by_shortcode(self, shortcode: str, **kwargs) -> URLMappingModel | None:
        with self._lock:
            return self._by_shortcode.get(shortcode)

    @beartype
    def find_by_target(self, target: str, **kwargs) -> URLMappingModel | None:
        with self._lock:
            return self._by_target.get(target)

    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._by_shortcode)
