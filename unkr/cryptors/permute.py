"""Letter-pair substitution."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from unkr.cryptors.char_utils import pairs_to_vec, vec_to_pairs
from unkr.fuzzer import fuzz_next_string_ruled
from unkr.models import CLIPermuteArgs, PermuteArgs, PermuteBruteForceState


def init() -> PermuteArgs:
    """Return the empty substitution."""
    return PermuteArgs()


def next_args(state: PermuteBruteForceState) -> PermuteArgs | None:
    """Return the next set of disjoint, ordered letter pairs, or None."""
    current = "".join(pairs_to_vec(state.args.permutations))
    following = fuzz_next_string_ruled(
        current, state.brute_force_args.max_permutations, 27, True, True, True
    )
    if following is None:
        return None
    permutations = dict(vec_to_pairs(following))
    return PermuteArgs(
        permutations=permutations,
        reversed_permutations={b: a for a, b in permutations.items()},
    )


def decrypt_string(
    text: str,
    permutations: Mapping[str, str],
    reversed_permutations: Mapping[str, str],
) -> str:
    """Swap each letter found in either mapping."""
    return "".join(permutations.get(c, reversed_permutations.get(c, c)) for c in text)


def decrypt(strings: Iterable[str], args: PermuteArgs) -> list[str]:
    """Apply the substitution to each string."""
    return [
        decrypt_string(s, args.permutations, args.reversed_permutations)
        for s in strings
    ]


def cli_decrypt(strings: Iterable[str], args: CLIPermuteArgs) -> list[str]:
    """Apply a substitution given as a list of pairs."""
    return decrypt(
        strings,
        PermuteArgs(
            permutations=dict(args.permutations),
            reversed_permutations={b: a for a, b in args.permutations},
        ),
    )