"""Unit tests for the URLMappingMemoryDAO

Test coverage includes:

1. Save and lookup
   - Saved mappings are retrievable by short code and by long URL.
   - Unknown keys resolve to None.
   - save() returns the DAO for chaining.

2. Overwrite semantics
   - Saving a mapping with an existing short code or URL replaces the entry.
   - Re-saving a short code for another URL unlinks the URL it pointed to.
   - Expired mappings are returned as-is (expiry is judged by callers).

3. Type checking
   - Invalid argument types raise BeartypeCallHintParamViolation.

4. Concurrency
   - 20 threads x 100 saves: every code and every URL resolves to its exact pair.
   - Readers never observe a save applied to only one index.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, UTC

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from tinylinks.dao.base import URLMappingBaseDAO
from tinylinks.dao.memory import URLMappingMemoryDAO
from tinylinks.models import URLMappingModel


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao():
    return URLMappingMemoryDAO()


@pytest.fixture
def mapping():
    return URLMappingModel(shortcode='abc123', target='https://example.com/test')


# -------------------------------
# 1. Save and lookup
# -------------------------------


def test_save_and_find(dao, mapping):
    assert isinstance(dao, URLMappingBaseDAO)
    assert dao.save(mapping) is dao

    assert dao.find_by_shortcode('abc123') is mapping
    assert dao.find_by_target('https://example.com/test') is mapping
    assert dao.count() == 1


def test_find_unknown_keys_returns_none(dao, mapping):
    dao.save(mapping)
    assert dao.find_by_shortcode('zzz999') is None
    assert dao.find_by_target('https://example.com/other') is None


def test_empty_store(dao):
    assert dao.count() == 0
    assert dao.find_by_shortcode('abc123') is None
    assert repr(dao) == '<URLMappingMemoryDAO>'


# -------------------------------
# 2. Overwrite semantics
# -------------------------------


def test_save_overwrites_same_target(dao, mapping):
    replacement = URLMappingModel(shortcode='def456', target=mapping.target)
    dao.save(mapping).save(replacement)

    assert dao.find_by_target(mapping.target) is replacement
    # The old code keeps resolving to its own record
    assert dao.find_by_shortcode('abc123') is mapping
    assert dao.count() == 2


def test_save_overwrites_same_shortcode(dao, mapping):
    replacement = URLMappingModel(shortcode=mapping.shortcode, target='https://example.com/new')
    dao.save(mapping).save(replacement)

    assert dao.find_by_shortcode('abc123') is replacement
    assert dao.count() == 1


def test_resaved_shortcode_unlinks_previous_target(dao, mapping):
    replacement = URLMappingModel(shortcode=mapping.shortcode, target='https://example.com/new')
    dao.save(mapping).save(replacement)

    # Same answer as the Redis store: the code now belongs to the new URL only
    assert dao.find_by_target(mapping.target) is None
    assert dao.find_by_target('https://example.com/new') is replacement


def test_resaved_shortcode_keeps_newer_target_entry(dao, mapping):
    newer = URLMappingModel(shortcode='def456', target=mapping.target)
    moved = URLMappingModel(shortcode=mapping.shortcode, target='https://example.com/moved')
    dao.save(mapping).save(newer).save(moved)

    assert dao.find_by_target(mapping.target) is newer


def test_expired_mapping_is_returned(dao):
    expired = URLMappingModel(shortcode='old123', target='https://example.com/old', expires_at=datetime(2000, 1, 1, tzinfo=UTC))
    dao.save(expired)

    assert dao.find_by_shortcode('old123') is expired
    assert dao.find_by_target('https://example.com/old') is expired


# -------------------------------
# 3. Type checking
# -------------------------------


def test_save_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.save('https://example.com/notamodel')


def test_find_invalid_type(dao):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.find_by_shortcode(12345)
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.find_by_target(None)


# -------------------------------
# 4. Concurrency
# -------------------------------


def test_concurrent_saves_keep_indices_consistent(dao):
    threads, per_thread = 20, 100

    def save_batch(thread_id):
        for i in range(per_thread):
            dao.save(URLMappingModel(shortcode=f'code-{thread_id}-{i}', target=f'https://example.com/{thread_id}/{i}'))

    with ThreadPoolExecutor(max_workers=threads) as executor:
        list(executor.map(save_batch, range(threads)))

    assert dao.count() == threads * per_thread
    for thread_id in range(threads):
        for i in range(per_thread):
            code, url = f'code-{thread_id}-{i}', f'https://example.com/{thread_id}/{i}'
            assert dao.find_by_shortcode(code).target == url
            assert dao.find_by_target(url).shortcode == code


def test_readers_never_observe_half_applied_save(dao):
    """A code visible in one index must already be visible in the other."""
    total = 2000
    done = threading.Event()
    violations = []

    def writer():
        for i in range(total):
            dao.save(URLMappingModel(shortcode=f'code-{i}', target=f'https://example.com/{i}'))
        done.set()

    def reader():
        while not done.is_set():
            for i in range(0, total, 37):
                by_code = dao.find_by_shortcode(f'code-{i}')
                if by_code is not None and dao.find_by_target(by_code.target) is None:
                    violations.append(i)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    writer()
    for thread in readers:
        thread.join()

    assert violations == []
