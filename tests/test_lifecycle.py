import os

import pytest

from ttakit.lifecycle import (
    FOREVER,
    AccessError,
    MemoryRegistry,
    save_current_progress,
)


@pytest.fixture
def registry():
    return MemoryRegistry()


def test_alloc_and_access_returns_value(registry):
    block = registry.alloc([1, 2, 3], FOREVER, 5)
    assert registry.access(block, 10) == [1, 2, 3]
    assert block.access_count == 1
    assert block.pin_count == 1
    assert block.created_tick == 5
    assert block.expires_tick is None


def test_len_and_usage_track_blocks(registry):
    first = registry.alloc(b"abc")
    second = registry.alloc(b"defgh")
    assert len(registry) == 2
    assert registry.usage == first.size + second.size
    registry.free(first)
    assert len(registry) == 1
    assert registry.usage == second.size
    registry.free(second)
    assert registry.usage == 0


def test_expired_block_raises(registry):
    block = registry.alloc("x", 10, 100)
    assert registry.access(block, 110) == "x"
    with pytest.raises(AccessError):
        registry.access(block, 111)


def test_direct_access_disallowed(registry):
    block = registry.alloc("hidden", allow_direct=False)
    with pytest.raises(AccessError):
        registry.access(block, 0)


def test_freed_block_raises(registry):
    block = registry.alloc("gone")
    registry.free(block)
    assert block.freed
    with pytest.raises(AccessError):
        registry.access(block, 0)


def test_double_free_is_harmless(registry):
    block = registry.alloc("twice")
    registry.free(block)
    registry.free(block)
    assert registry.usage == 0
    assert len(registry) == 0


def test_negative_lifetime_rejected(registry):
    with pytest.raises(ValueError):
        registry.alloc("x", -1, 0)


def test_inspect_dirty_finds_expired(registry):
    short = registry.alloc("short", 5, 0)
    registry.alloc("long", 100, 0)
    registry.alloc("forever")
    assert registry.inspect_dirty(6) == [short]
    assert registry.inspect_dirty(5) == []


def test_inspect_dirty_finds_abnormal_access(registry):
    block = registry.alloc("busy")
    block.access_count = 1_000_001
    assert registry.inspect_dirty(0) == [block]


def test_autoclean_frees_dirty(registry):
    short = registry.alloc("short", 1, 0)
    keep = registry.alloc("keep")
    assert registry.autoclean(10) == 1
    assert short.freed
    assert not keep.freed
    assert len(registry) == 1
    assert registry.autoclean_and_inspect(10) == []


def test_realloc_keeps_flags_and_frees_old(registry):
    old = registry.alloc("old", allow_direct=False)
    new = registry.realloc(old, "new", FOREVER, 3)
    assert old.freed
    assert new.allow_direct_access is False
    assert new.value == "new"
    assert len(registry) == 1


def test_realloc_none_allocates(registry):
    block = registry.realloc(None, "fresh")
    assert registry.access(block, 0) == "fresh"


def test_realloc_freed_block_raises(registry):
    block = registry.alloc("x")
    registry.free(block)
    with pytest.raises(AccessError):
        registry.realloc(block, "y")


def test_save_current_progress_writes_atomically(tmp_path):
    target = tmp_path / "state.bin"
    save_current_progress(target, b"progress")
    assert target.read_bytes() == b"progress"
    assert not os.path.exists(f"{target}.tmp")
    save_current_progress(target, b"more")
    assert target.read_bytes() == b"more"


def test_save_current_progress_missing_dir(tmp_path):
    target = tmp_path / "missing" / "state.bin"
    with pytest.raises(OSError):
        save_current_progress(target, b"data")