import pytest

from pimatch import CompressionConfig, DigitDictionary, Raw, default_engine
from pimatch.engine import IndexedSearchStage, ScanSearchStage, matchable_run_length
from pimatch.validation import validate_config


def test_default_engine_search_stage(pi_prefix):
    assert isinstance(default_engine(pi_prefix, CompressionConfig()).search, ScanSearchStage)
    engine = default_engine(pi_prefix, CompressionConfig(search_mode="index"))
    assert isinstance(engine.search, IndexedSearchStage)
    assert engine.search.name == "index"


def test_rejects_bad_index_key_length(pi_prefix):
    with pytest.raises(ValueError):
        default_engine(pi_prefix, CompressionConfig(search_mode="index", index_key_length=0))


def test_matchable_run_length():
    data = b"\x12\x34\x99\xab\x11"
    assert matchable_run_length(data, 0, 10) == 3
    assert matchable_run_length(data, 0, 2) == 2
    assert matchable_run_length(data, 3, 10) == 0
    assert matchable_run_length(data, 4, 10) == 1


def test_pruning_skips_lookups(pi_prefix):
    engine = default_engine(pi_prefix, CompressionConfig())
    assert engine.compress_bytes(b"\xff") == [Raw(b"\xff")]
    assert engine.last_lookups == 0

    unpruned = default_engine(pi_prefix, CompressionConfig(prune_candidates=False))
    assert unpruned.compress_bytes(b"\xff\xff") == [Raw(b"\xff"), Raw(b"\xff")]
    assert unpruned.last_lookups == 3


def test_run_capped_by_dictionary_length():
    engine = default_engine(DigitDictionary("123"), CompressionConfig())
    engine.compress_bytes(b"\x12\x12\x12")
    # One candidate per position: only single bytes fit in three digits.
    assert engine.last_lookups == 3


def test_config_warnings():
    assert validate_config(CompressionConfig()) == []
    fields = [w.field for w in validate_config(CompressionConfig(coalesce_raw=True))]
    assert fields == ["coalesce_raw"]
    long_keys = CompressionConfig(search_mode="index", index_key_length=9)
    assert [w.field for w in validate_config(long_keys)] == ["index_key_length"]


def test_long_index_keys_warn(pi_prefix):
    with pytest.warns(RuntimeWarning):
        default_engine(pi_prefix, CompressionConfig(search_mode="index", index_key_length=9))
