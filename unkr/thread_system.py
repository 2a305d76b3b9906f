"""Sharing the brute force work between threads and recording progress."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Union

from unkr.brute_force_state import (
    apply_decrypt,
    get_cryptor,
    increase_state,
    loop_decrypt,
    start_state,
)
from unkr.cache import (
    get_done_cache,
    get_partial_cache,
    prepare_cache_args,
    push_done,
    push_partial,
)
from unkr.candidates import consume_candidates
from unkr.mapper import to_done, to_partial
from unkr.models import (
    BruteForceCryptor,
    BruteForceKind,
    BruteForceState,
    CacheArgs,
    Cryptor,
    DoneLine,
    PartialLine,
)


@dataclass(frozen=True)
class ThreadWork:
    """The parameters a thread is at, and the combinations still to try."""

    current_head: BruteForceState
    current_tail: tuple[BruteForceCryptor, ...]
    current_combination: DoneLine
    remaining_combinations: tuple[tuple[BruteForceCryptor, ...], ...]
    clues: tuple[str, ...]
    strings: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_tail", tuple(self.current_tail))
        object.__setattr__(
            self,
            "remaining_combinations",
            tuple(tuple(c) for c in self.remaining_combinations),
        )
        object.__setattr__(self, "clues", tuple(self.clues))
        object.__setattr__(self, "strings", tuple(self.strings))


@dataclass
class ThreadsStatuses:
    """Per thread: the combination in progress and the combinations finished."""

    workload: dict[int, tuple[DoneLine | None, tuple[DoneLine, ...]]] = field(
        default_factory=dict
    )


@dataclass(frozen=True)
class Doing:
    thread_number: int
    done_line: DoneLine


@dataclass(frozen=True)
class Done:
    thread_number: int
    done_line: DoneLine


@dataclass(frozen=True)
class DonePartial:
    partial_line: PartialLine


ThreadStatus = Union[Doing, Done, DonePartial]


def _work_for(
    combination: Sequence[BruteForceCryptor],
    remaining: Sequence[Sequence[BruteForceCryptor]],
    clues: Iterable[str],
    strings: Iterable[str],
) -> ThreadWork:
    head, *tail = combination
    return ThreadWork(
        current_head=start_state(head),
        current_tail=tuple(tail),
        current_combination=to_done(combination),
        remaining_combinations=tuple(tuple(c) for c in remaining),
        clues=tuple(clues),
        strings=tuple(strings),
    )


def start_thread_work(
    combinations: Sequence[Sequence[BruteForceCryptor]],
    clues: Iterable[str],
    strings: Iterable[str],
) -> ThreadWork | None:
    """Start on the last combination; None when there is nothing to do."""
    if not combinations or not combinations[-1]:
        return None
    return _work_for(combinations[-1], combinations[:-1], clues, strings)


def increase_combination(
    remaining_combinations: Sequence[Sequence[BruteForceCryptor]],
    clues: Iterable[str],
    strings: Iterable[str],
) -> ThreadWork | None:
    """Move to the last remaining combination, or None when none is left."""
    if not remaining_combinations:
        return None
    combination = remaining_combinations[-1]
    if not combination:
        raise ValueError("cannot brute force an empty combination")
    return _work_for(combination, remaining_combinations[:-1], clues, strings)


def increase_thread_work(work: ThreadWork) -> ThreadWork | None:
    """Advance the head parameters, or move to the next combination."""
    head = increase_state(work.current_head, work.strings)
    if head is not None:
        return replace(work, current_head=head)
    return increase_combination(work.remaining_combinations, work.clues, work.strings)


def apply_state(
    status: ThreadStatus, statuses: ThreadsStatuses
) -> tuple[ThreadsStatuses, DoneLine | None, PartialLine | None]:
    """Record a thread's report.

    Returns the new statuses, the combination every thread has finished if
    this report completes it, and the partial line to record if any.
    """
    workload = dict(statuses.workload)
    match status:
        case Doing(thread_number=number, done_line=line):
            _, finished = workload.get(number, (None, ()))
            workload[number] = (line, finished)
            return ThreadsStatuses(workload), None, None
        case Done(thread_number=number, done_line=line):
            _, finished = workload.get(number, (None, ()))
            workload[number] = (None, (*finished, line))
            everyone = all(line in done for _, done in workload.values())
            return ThreadsStatuses(workload), line if everyone else None, None
        case DonePartial(partial_line=partial):
            return statuses, None, partial
    raise TypeError(f"unknown thread status {status!r}")


def _skip_done(work: ThreadWork | None, done_cache: set[DoneLine]) -> ThreadWork | None:
    while work is not None and work.current_combination in done_cache:
        print(repr(work.current_combination))
        work = increase_combination(work.remaining_combinations, work.clues, work.strings)
    return work


def _iter_work(first: ThreadWork, done_cache: set[DoneLine]) -> Iterator[ThreadWork]:
    work = _skip_done(first, done_cache)
    while work is not None:
        yield work
        work = _skip_done(increase_thread_work(work), done_cache)


def _describe_state(state: BruteForceState) -> str:
    args: Any = state.args
    match state.kind:
        case BruteForceKind.VIGENERE | BruteForceKind.PERMUTE:
            return repr(args.args)
        case BruteForceKind.CUT | BruteForceKind.CAESAR | BruteForceKind.TRANSPOSE:
            return str(args.number)
        case BruteForceKind.SWAP:
            return str(list(args.order))
        case BruteForceKind.ENIGMA | BruteForceKind.REUSE:
            return repr(args)
    return state.kind.value


def _run_worker(
    number: int,
    thread_count: int,
    first: ThreadWork,
    candidate_queue: queue.Queue[Any],
    messages: queue.Queue[Any],
    status_queue: queue.Queue[Any],
    done_cache: set[DoneLine],
    partial_cache: set[PartialLine],
    intermediate_steps: bool,
) -> None:
    def emit(strings: list[str], clues: Sequence[str], cryptors: list[Cryptor]) -> None:
        candidate_queue.put((strings, list(clues), cryptors))

    previous = first
    for step, work in enumerate(_iter_work(first, done_cache), start=1):
        if work.current_combination != previous.current_combination:
            status_queue.put(Done(number, previous.current_combination))
            status_queue.put(Doing(number, work.current_combination))
        previous = work
        if step % thread_count != number:
            continue
        head_cryptor = get_cryptor(work.current_head, [])
        partial = to_partial(head_cryptor, work.current_tail)
        if partial in partial_cache:
            continue
        messages.put(
            f"thread_{number:02}: {step:04} ({_describe_state(work.current_head)})"
        )
        decrypted = apply_decrypt(work.current_head, work.strings, [])
        if decrypted:
            acc = [head_cryptor]
            if not work.current_tail or intermediate_steps:
                emit(decrypted, work.clues, list(acc))
            loop_decrypt(
                acc, work.current_tail, decrypted, work.clues, emit, intermediate_steps
            )
        status_queue.put(DonePartial(partial))
    status_queue.put(Done(number, previous.current_combination))


def _consume_statuses(status_queue: queue.Queue[Any], cache_args: CacheArgs) -> None:
    statuses = ThreadsStatuses()
    while (status := status_queue.get()) is not None:
        statuses, done, partial = apply_state(status, statuses)
        if done is not None:
            push_done(done, cache_args)
        if partial is not None:
            push_partial(partial, cache_args)


def _print_messages(messages: queue.Queue[Any]) -> None:
    while (message := messages.get()) is not None:
        print(message)


def _spawn(target: Any, *args: Any) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def start(
    text: str,
    thread_count: int,
    combinations: Sequence[Sequence[BruteForceCryptor]],
    clues: Sequence[str],
    cache_name: str,
    intermediate_steps: bool,
) -> set[str]:
    """Try every combination on ``text`` with ``thread_count`` threads.

    Returns the descriptions of the step lists that revealed a clue.
    """
    strings = [text]
    thread_work = start_thread_work(combinations, clues, strings)
    if thread_work is None:
        raise ValueError("Nothing to do.")
    cache_args = prepare_cache_args(cache_name, text, clues)
    results: set[str] = set()
    messages: queue.Queue[Any] = queue.Queue()
    candidate_queue: queue.Queue[Any] = queue.Queue()
    status_queue: queue.Queue[Any] = queue.Queue()

    printer = _spawn(_print_messages, messages)
    candidates = _spawn(consume_candidates, candidate_queue, cache_args, results, messages)
    done_cache = get_done_cache(cache_args)
    partial_cache = get_partial_cache(cache_args)

    workers = []
    for number in range(thread_count):
        status_queue.put(Doing(number, thread_work.current_combination))
        workers.append(
            _spawn(
                _run_worker,
                number,
                thread_count,
                thread_work,
                candidate_queue,
                messages,
                status_queue,
                done_cache,
                partial_cache,
                intermediate_steps,
            )
        )
    recorder = _spawn(_consume_statuses, status_queue, cache_args)

    for worker in workers:
        worker.join()
    status_queue.put(None)
    recorder.join()
    candidate_queue.put(None)
    candidates.join()
    messages.put(None)
    printer.join()
    return results