"""On-disk record of finished combinations, partial work and hits."""

from __future__ import annotations

import csv
import hashlib
import io
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from unkr.mapper import hit_to_string, partial_to_string, string_to_partial
from unkr.models import CacheArgs, DoneLine, HitLine, PartialLine

logger = logging.getLogger(__name__)

_DONE = "done"
_HITS = "hits"
_PARTIALS = "partials"


def _hash(text: str) -> str:
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def _directory(cache_args: CacheArgs) -> Path:
    return Path(cache_args.path, cache_args.md5_string, cache_args.md5_clues)


def _ensure_file(cache_args: CacheArgs, name: str) -> Path:
    folder = _directory(cache_args)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / name
    path.touch(exist_ok=True)
    return path


def unique_sorted_clues(clues: Iterable[str]) -> str:
    """Return the distinct clues, sorted and separated by spaces."""
    return " ".join(sorted(set(clues)))


def prepare_cache_args(path: str, text: str, clues: Iterable[str]) -> CacheArgs:
    """Locate the cache of ``text`` and ``clues`` under ``path``."""
    return CacheArgs(
        path=path,
        md5_string=_hash(text),
        md5_clues=_hash(unique_sorted_clues(clues)),
    )


def push_line(directory: str | Path, file_name: str, line: str) -> None:
    """Append ``line`` to ``directory/file_name``, creating both if needed."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    with (folder / file_name).open("a", encoding="utf-8") as file:
        file.write(f"{line}\n")


def _done_from_row(row: Sequence[str]) -> DoneLine:
    if len(row) not in (1, 2):
        raise ValueError(f"Failed to deserialize element. {list(row)!r}")
    args = row[1] if len(row) == 2 and row[1] else None
    return DoneLine(combinations=row[0], args=args)


def get_done_cache(cache_args: CacheArgs) -> set[DoneLine]:
    """Load every finished combination recorded for ``cache_args``."""
    logger.info("Loading done cache")
    path = _ensure_file(cache_args, _DONE)
    with path.open(newline="", encoding="utf-8") as file:
        try:
            cache = {
                _done_from_row(row) for row in csv.reader(file, delimiter=";") if row
            }
        except csv.Error as error:
            raise ValueError(f"Failed to deserialize element. {error}") from error
    logger.info("Done cache loaded")
    return cache


def get_partial_cache(cache_args: CacheArgs) -> set[PartialLine]:
    """Load every partial line recorded for ``cache_args``."""
    logger.info("Loading partial cache")
    path = _ensure_file(cache_args, _PARTIALS)
    cache: set[PartialLine] = set()
    with path.open(encoding="utf-8") as file:
        for line in file:
            cache.update(string_to_partial(line.rstrip("\n")))
    logger.info("Partial cache ready")
    return cache


def push_hit(cache_args: CacheArgs, hit_line: HitLine) -> None:
    """Record a hit."""
    push_line(_directory(cache_args), _HITS, hit_to_string(hit_line))


def push_done(done_line: DoneLine, cache_args: CacheArgs) -> None:
    """Record a finished combination."""
    buffer = io.StringIO()
    csv.writer(buffer, delimiter=";", lineterminator="\n").writerow(
        [done_line.combinations, done_line.args or ""]
    )
    push_line(_directory(cache_args), _DONE, buffer.getvalue().strip())


def push_partial(partial_line: PartialLine, cache_args: CacheArgs) -> None:
    """Record a first step whose remaining steps have all been tried."""
    push_line(_directory(cache_args), _PARTIALS, partial_to_string(partial_line))