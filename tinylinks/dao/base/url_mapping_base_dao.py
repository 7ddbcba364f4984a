"""Abstract base class for URL mapping data access objects (DAOs).

This class establishes a consistent contract for all mapping store
implementations, regardless of the underlying storage mechanism (in-process
dictionaries, Redis, ...). URLShortenerService depends on this contract only.

Responsibilities:
    - Keep two indices over the same URLMappingModel objects: by short code
      and by long URL.
    - Update both indices atomically on save(): no reader may observe one
      index updated without the other.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from tinylinks.models import URLMappingModel
        >>> from tinylinks.dao.memory import URLMappingMemoryDAO

        >>> dao = URLMappingMemoryDAO()
        >>> mapping = URLMappingModel(shortcode="a1b2c3", target="https://example.com/blog/article-123")
        >>> dao.save(mapping)
        <URLMappingMemoryDAO>

        >>> dao.find_by_shortcode("a1b2c3").target
        'https://example.com/blog/article-123'
        >>> dao.find_by_target("https://example.com/blog/article-123").shortcode
        'a1b2c3'
"""

from abc import ABC, abstractmethod

from tinylinks.models import URLMappingModel


class URLMappingBaseDAO(ABC):
    """Interface for URL mapping data access objects (DAOs).

    Methods:
        save(mapping: URLMappingModel, **kwargs) -> URLMappingBaseDAO:
            Insert a mapping into both indices atomically.
            Overwrites any prior mapping sharing the same short code or long URL.
            Raises DataStoreError on connection or write failure.

        find_by_shortcode(shortcode: str, **kwargs) -> URLMappingModel | None:
            Retrieve the most recently saved mapping for a short code.
            Returns None if not found. Expired mappings are returned as-is.

        find_by_target(target: str, **kwargs) -> URLMappingModel | None:
            Retrieve the most recently saved mapping for a long URL.
            Returns None if not found, or if that mapping's short code has since
            been saved again for a different URL (a short code belongs to one
            URL at a time). Expired mappings are returned as-is.

        count(**kwargs) -> int:
            Return the number of distinct short codes stored.

    NOTE:
        - Expiry is judged by the caller. Stores never evict or transition
          records, and provide no interface to delete them.
        - Overwrite decisions (e.g. replacing an expired mapping for the same
          URL) belong to the service layer.
    """

    @abstractmethod
    def save(self, mapping: URLMappingModel, **kwargs) -> 'URLMappingBaseDAO':
        """Insert a mapping into the short code and long URL indices.

        Args:
            mapping (URLMappingModel):
                The mapping to be stored.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLMappingBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_shortcode(self, shortcode: str, **kwargs) -> URLMappingModel | None:
        """Retrieve a mapping by its short code.

        Returns:
            URLMappingModel | None: The mapping if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_target(self, target: str, **kwargs) -> URLMappingModel | None:
        """Retrieve a mapping by its long URL.

        Returns:
            URLMappingModel | None: The mapping if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of distinct short codes in the data store.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
