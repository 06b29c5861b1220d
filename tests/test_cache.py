import json

import pytest

from vaultscan.cache import Cache, CacheMatch


@pytest.fixture
def sample_match():
    return CacheMatch(
        provider="OpenAI API Key",
        line_number=1,
        key_masked="sk-proj-12...9012",
        hardcoded=True,
        key_hash="hash-of-key",
    )


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("OPENAI_KEY=placeholder\n")
    return path


def test_round_trip_through_disk(tmp_path, env_file, sample_match):
    cache = Cache.load(tmp_path)
    cache.store(env_file, "content-hash", [sample_match])
    cache.save()

    reloaded = Cache.load(tmp_path)
    assert reloaded.get_matches_with_hash(env_file, "content-hash") == [sample_match]


def test_changed_hash_misses(tmp_path, env_file, sample_match):
    cache = Cache.load(tmp_path)
    cache.store(env_file, "content-hash", [sample_match])
    assert cache.get_matches_with_hash(env_file, "other-hash") is None


def test_unknown_file_misses(tmp_path, env_file):
    cache = Cache.load(tmp_path)
    assert cache.get_matches_with_hash(env_file, "content-hash") is None


def test_store_replaces_previous_entry(tmp_path, env_file, sample_match):
    cache = Cache.load(tmp_path)
    cache.store(env_file, "first", [sample_match])
    cache.store(env_file, "second", [])
    assert cache.get_matches_with_hash(env_file, "first") is None
    assert cache.get_matches_with_hash(env_file, "second") == []


def test_save_without_changes_writes_nothing(tmp_path):
    cache = Cache.load(tmp_path)
    cache.save()
    assert not (tmp_path / ".vault-cache").exists()


def test_index_layout(tmp_path, env_file, sample_match):
    cache = Cache.load(tmp_path)
    cache.store(env_file, "content-hash", [sample_match])
    cache.save()

    index_path = tmp_path / ".vault-cache" / "index.json"
    data = json.loads(index_path.read_text())
    entry = data["entries"][".env"]
    info = env_file.stat()
    assert entry["content_hash"] == "content-hash"
    assert entry["size_bytes"] == info.st_size
    assert entry["mtime_secs"] == int(info.st_mtime)
    assert entry["matches"][0]["key_masked"] == sample_match.key_masked
    assert not (tmp_path / ".vault-cache" / "index.json.tmp").exists()


def test_corrupt_index_loads_empty(tmp_path, env_file, sample_match):
    cache_dir = tmp_path / ".vault-cache"
    cache_dir.mkdir()
    (cache_dir / "index.json").write_text("{not json")

    cache = Cache.load(tmp_path)
    assert cache.get_matches_with_hash(env_file, "content-hash") is None

    cache.store(env_file, "content-hash", [sample_match])
    cache.save()
    assert Cache.load(tmp_path).get_matches_with_hash(env_file, "content-hash") == [
        sample_match
    ]


def test_index_with_wrong_types_loads_empty(tmp_path, env_file):
    cache_dir = tmp_path / ".vault-cache"
    cache_dir.mkdir()
    bad = {
        "version": 0,
        "entries": {
            ".env": {
                "mtime_secs": "soon",
                "size_bytes": 1,
                "content_hash": "content-hash",
                "matches": [],
            }
        },
    }
    (cache_dir / "index.json").write_text(json.dumps(bad))
    assert Cache.load(tmp_path).get_matches_with_hash(env_file, "content-hash") is None


def test_missing_file_signature_is_zero(tmp_path):
    ghost = tmp_path / "gone.txt"
    cache = Cache.load(tmp_path)
    cache.store(ghost, "content-hash", [])
    cache.save()
    data = json.loads((tmp_path / ".vault-cache" / "index.json").read_text())
    entry = data["entries"]["gone.txt"]
    assert (entry["mtime_secs"], entry["size_bytes"]) == (0, 0)