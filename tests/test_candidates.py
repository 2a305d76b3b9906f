import queue
from pathlib import Path

from unkr.cache import prepare_cache_args
from unkr.candidates import clue_is_in_string, consume_candidates, find_candidates
from unkr.models import Cryptor, CryptorKind


def test_clue_is_in_string():
    assert clue_is_in_string("STRING", ["IN"]) == ["IN was found in STRING"]


def test_clue_missing():
    assert clue_is_in_string("STRING", ["XX"]) == []


def test_find_candidates_joins_strings():
    assert find_candidates(["STR", "ING"], ["IN", "XX"]) == ["IN was found in STRING"]


def test_consume_candidates_records_hits(tmp_path):
    args = prepare_cache_args(str(tmp_path), "GNIRTS", ["IN"])
    candidates: queue.Queue = queue.Queue()
    messages: queue.Queue = queue.Queue()
    results: set = set()
    reverse = [Cryptor(CryptorKind.REVERSE)]
    candidates.put((["STRING"], ["IN"], reverse))
    candidates.put((["NOTHING HERE"], ["XYZ"], reverse))
    candidates.put(None)

    consume_candidates(candidates, args, results, messages)

    assert len(results) == 1
    assert messages.qsize() == 1
    assert "IN was found in STRING" in messages.get()
    hits = Path(args.path, args.md5_string, args.md5_clues, "hits")
    lines = hits.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("IN was found in STRING;")


def test_consume_candidates_without_hits(tmp_path):
    args = prepare_cache_args(str(tmp_path), "ABC", ["ZZ"])
    candidates: queue.Queue = queue.Queue()
    messages: queue.Queue = queue.Queue()
    results: set = set()
    candidates.put((["ABC"], ["ZZ"], [Cryptor(CryptorKind.JOIN)]))
    candidates.put(None)
    consume_candidates(candidates, args, results, messages)
    assert results == set()
    assert messages.empty()
    assert not Path(args.path, args.md5_string, args.md5_clues, "hits").exists()