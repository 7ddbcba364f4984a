"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    CorruptedRecordError:
        Raised when a stored record cannot be decoded into a URLMappingModel.

Lookups that find nothing are not errors: DAOs return None.

Example:
    >>> from tinylinks.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't connect to Redis at localhost:6379/0.")
    Traceback (most recent call last):
        ...
    tinylinks.dao.exceptions.DataStoreError: Can't connect to Redis at localhost:6379/0.
"""

from tinylinks.exceptions import TinyLinksError


class DAOError(TinyLinksError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    error_code = 'dao:data_store_error'
    http_status = 503


class CorruptedRecordError(DAOError):
    """Exception raised when a stored record is missing fields or holds unparsable values."""

    error_code = 'dao:corrupted_record_error'
