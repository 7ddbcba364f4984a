"""Input validation for long URLs

Functions:
    validate_url(url) -> str:
        Return the URL unchanged if it is an absolute http(s) URL with a host.
        Raise InvalidURLError otherwise.

Example:
    >>> validate_url('https://example.com/page')
    'https://example.com/page'
    >>> validate_url('ftp://example.com/file')
    Traceback (most recent call last):
        ...
    tinylinks.exceptions.InvalidURLError: Only HTTP and HTTPS URLs are supported (given URL: ftp://example.com/file).
"""

import urllib.parse

from tinylinks.exceptions import InvalidURLError


ALLOWED_SCHEMES = frozenset({'http', 'https'})


def validate_url(url: str | None) -> str:
    """Validate a long URL before it is shortened

    Args:
        url (str | None):
            Candidate long URL.

    Returns:
        str: the URL as given.

    Raises:
        InvalidURLError:
            If the URL is None, blank, unparsable (including a bad port), not
            http(s), or has no host.
    """
    if url is None or not isinstance(url, str) or not url.strip():
        raise InvalidURLError('URL must not be None or empty.')

    try:
        components = urllib.parse.urlparse(url)
        hostname = components.hostname
        components.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as e:
        raise InvalidURLError(f'Invalid URL: {url}') from e

    if components.scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError(f'Only HTTP and HTTPS URLs are supported (given URL: {url}).')
    if not hostname or not hostname.strip():
        raise InvalidURLError(f'URL must have a valid host (given URL: {url}).')
    return url
