"""URL shortening orchestration

URLShortenerService ties a short code generator to a mapping store:

    shorten_url(target):
        - Step 1: Validate the long URL (http/https scheme, non-empty host)
        - Step 2: Return the existing short code if the URL has an active mapping
        - Step 3: Generate candidate short codes until one is unused in the store,
                  up to `max_attempts` attempts (the first generation is attempt 1)
        - Step 4: Save the new mapping (atomic dual-index write) and return its code

    get_original_url(shortcode):
        - Return the long URL of an active mapping, None if absent or expired

Expiry is judged lazily at read time. Expired records stay in the store, keep
their short code reserved (collision checks see them) and free their long URL
for a new short code.

NOTE: Two concurrent shorten_url() calls for the same URL are not serialized.
      Both may pass the "no active mapping" check and mint distinct short codes;
      the last save wins the URL index and both codes keep resolving.

Example:
    >>> from tinylinks.dao.memory import URLMappingMemoryDAO
    >>> from tinylinks.generators import SequentialShortCodeGenerator
    >>> service = URLShortenerService(URLMappingMemoryDAO(), SequentialShortCodeGenerator())
    >>> service.shorten_url('https://example.com/article/123')
    'Aa4'
    >>> service.shorten_url('https://example.com/article/123')
    'Aa4'
    >>> service.get_original_url('Aa4')
    'https://example.com/article/123'
    >>> service.get_original_url('missing') is None
    True
"""

import logging
from datetime import datetime

from beartype import beartype

from tinylinks.constants import Retry
from tinylinks.dao.base import URLMappingBaseDAO
from tinylinks.exceptions import BadConfigurationError, ShortCodeGenerationExhaustedError
from tinylinks.generators.base import ShortCodeBaseGenerator
from tinylinks.models import URLMappingModel
from tinylinks.types import Clock
from tinylinks.utils.helpers import utcnow
from tinylinks.utils.validators import validate_url


logger = logging.getLogger(__name__)


class URLShortenerService:
    """Shorten long URLs and resolve short codes back to them.

    Attributes:
        dao (URLMappingBaseDAO):
            Mapping store holding both the short code and long URL indices.
        generator (ShortCodeBaseGenerator):
            Strategy producing candidate short codes.
        max_attempts (int):
            Total number of candidates tried before giving up.
        clock (Clock):
            Source of the current time, used for creation stamps and expiry checks.
    """

    def __init__(
        self,
        dao: URLMappingBaseDAO,
        generator: ShortCodeBaseGenerator,
        max_attempts: int = Retry.MAX_ATTEMPTS,
        clock: Clock | None = None,
    ):
        if not isinstance(max_attempts, int) or isinstance(max_attempts, bool) or max_attempts < 1:
            raise BadConfigurationError(f'max_attempts must be a positive integer (given value: {max_attempts!r}).')

        self.dao = dao
        self.generator = generator
        self.max_attempts = max_attempts
        self.clock = clock or utcnow

    @beartype
    def shorten_url(self, target: str | None, expires_at: datetime | None = None) -> str:
        """Return a short code for a long URL, minting one if needed

        Args:
            target (str | None):
                The long URL to shorten.
            expires_at (datetime | None):
                When the new mapping stops resolving. Ignored if the URL already
                has an active mapping. None means never.

        Returns:
            str: the active short code for `target`.

        Raises:
            InvalidURLError:
                If `target` is None, blank, not http(s), or has no host.
            ShortCodeGenerationExhaustedError:
                If every attempt produced a short code already in the store.
                Nothing is saved in that case.
            DataStoreError:
                If the underlying data store is unreachable.
        """
        validate_url(target)
        now = self.clock()

        existing = self.dao.find_by_target(target)
        if existing is not None and not existing.is_expired(now):
            logger.debug('Returning existing short code.', extra={'shortcode': existing.shortcode, 'target': target})
            return existing.shortcode

        if existing is not None:
            logger.debug('Existing mapping expired, minting a new short code.', extra={'expiredShortcode': existing.shortcode, 'target': target})

        shortcode = self._generate_unique_shortcode(target)

        mapping = URLMappingModel(shortcode=shortcode, target=target, created_at=now, expires_at=expires_at)
        self.dao.save(mapping)

        logger.info('Created short URL mapping.', extra={'shortcode': shortcode, 'target': target, 'expiresAt': expires_at})
        return shortcode

    def _generate_unique_shortcode(self, target: str) -> str:
        shortcode = self.generator.generate_shortcode(target)
        attempts = 1
        while self.dao.find_by_shortcode(shortcode) is not None:
            if attempts >= self.max_attempts:
                logger.warning('Short code generation exhausted.', extra={'attempts': attempts, 'target': target})
                raise ShortCodeGenerationExhaustedError(attempts)

            logger.debug('Short code collision, retrying.', extra={'shortcode': shortcode, 'attempt': attempts})
            shortcode = self.generator.generate_shortcode(target)
            attempts += 1
        return shortcode

    @beartype
    def get_mapping(self, shortcode: str | None) -> URLMappingModel | None:
        """Return the active mapping for a short code

        Returns:
            URLMappingModel | None:
                None if the short code is blank, unknown, or its mapping expired.
        """
        if not shortcode:
            return None

        mapping = self.dao.find_by_shortcode(shortcode)
        if mapping is None:
            logger.debug('Short code not found.', extra={'shortcode': shortcode})
            return None
        if mapping.is_expired(self.clock()):
            logger.debug('Short code expired.', extra={'shortcode': shortcode, 'expiresAt': mapping.expires_at})
            return None
        return mapping

    @beartype
    def get_original_url(self, shortcode: str | None) -> str | None:
        """Resolve a short code to its long URL

        Returns:
            str | None: the long URL, None if absent or expired.

        Example:
            >>> service.get_original_url('abc123')
            'https://example.com'
        """
        mapping = self.get_mapping(shortcode)
        return None if mapping is None else mapping.target
