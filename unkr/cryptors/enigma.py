"""Three-rotor Enigma machine: settings enumeration and encryption."""

from __future__ import annotations

from collections.abc import Iterable

from unkr.cryptors.char_utils import char_position_base, get_alphabet, vec_to_pairs
from unkr.cryptors.rotors import (
    EnigmaArgs,
    Reflector,
    Rotor,
    char_to_reflector,
    char_to_rotor,
    get_notches,
    get_reflector,
    get_reversed_rotor,
    get_rotor,
    reflector_to_char,
    rotor_to_char,
)
from unkr.fuzzer import fuzz_next_string_bases

_ALPHABET = get_alphabet()
_ROTOR_BASE = len(Rotor) + 1
_REFLECTOR_BASE = len(Reflector) + 1
_BASES = (_REFLECTOR_BASE, _ROTOR_BASE, 27, _ROTOR_BASE, 27, _ROTOR_BASE, 27)


def init() -> EnigmaArgs:
    """Return the first settings of the enumeration."""
    return EnigmaArgs(
        reflector=Reflector.B,
        l_rotor=(Rotor.I, 0),
        m_rotor=(Rotor.I, 0),
        r_rotor=(Rotor.I, 0),
    )


def args_to_string(args: EnigmaArgs) -> str:
    """Encode settings as letters: reflector, then rotor and position per slot."""
    slots = [args.l_rotor, args.m_rotor, args.r_rotor]
    if args.l0_rotor is not None:
        slots.append(args.l0_rotor)
    return reflector_to_char(args.reflector) + "".join(
        rotor_to_char(rotor) + _ALPHABET[position] for rotor, position in slots
    )


def _rotor(c: str) -> Rotor:
    rotor = char_to_rotor(c)
    if rotor is None:
        raise ValueError(f"could not read {c!r} as a rotor")
    return rotor


def string_to_args(text: str) -> EnigmaArgs:
    """Decode settings written by :func:`args_to_string`."""
    if len(text) < 7:
        raise ValueError(f"enigma settings too short: {text!r}")
    reflector = char_to_reflector(text[0])
    if reflector is None:
        raise ValueError(f"could not read {text[0]!r} as a reflector")
    slots = [
        (_rotor(rotor), char_position_base(position))
        for rotor, position in vec_to_pairs(text[1:])
    ]
    return EnigmaArgs(
        reflector=reflector,
        l0_rotor=slots[3] if len(slots) > 3 else None,
        l_rotor=slots[0],
        m_rotor=slots[1],
        r_rotor=slots[2],
    )


def next_args(args: EnigmaArgs) -> EnigmaArgs | None:
    """Return the settings that follow ``args``, or None after the last one."""
    following = fuzz_next_string_bases(args_to_string(args), _BASES)
    return None if following is None else string_to_args(following)


def increment_rotors_m3(args: EnigmaArgs) -> EnigmaArgs:
    """Step the rotors once, with the middle rotor's double step."""
    l_rotor, l_pos = args.l_rotor
    m_rotor, m_pos = args.m_rotor
    r_rotor, r_pos = args.r_rotor
    r_notches = get_notches(r_rotor)
    m_notches = get_notches(m_rotor)
    # The left rotor is checked against the right rotor's notches.
    l_notches = get_notches(r_rotor)
    new_m = (m_pos + 1) % 26 if r_pos in r_notches or m_pos in m_notches else m_pos
    new_l = (l_pos + 1) % 26 if m_pos in m_notches or l_pos in l_notches else l_pos
    return EnigmaArgs(
        reflector=args.reflector,
        l_rotor=(l_rotor, new_l),
        m_rotor=(m_rotor, new_m),
        r_rotor=(r_rotor, (r_pos + 1) % 26),
    )


def pass_through_rotors_m3(char: str, args: EnigmaArgs) -> tuple[str, EnigmaArgs]:
    """Encrypt one letter and return it with the stepped settings."""
    stepped = increment_rotors_m3(args)
    l_rotor, l_pos = stepped.l_rotor
    m_rotor, m_pos = stepped.m_rotor
    r_rotor, r_pos = stepped.r_rotor
    path = (
        (get_rotor(r_rotor), r_pos),
        (get_rotor(m_rotor), m_pos),
        (get_rotor(l_rotor), l_pos),
        (get_reflector(stepped.reflector), 0),
        (get_reversed_rotor(l_rotor), l_pos),
        (get_reversed_rotor(m_rotor), m_pos),
        (get_reversed_rotor(r_rotor), r_pos),
    )
    value = char_position_base(char)
    for table, offset in path:
        value += table[(value + offset) % 26]
    return _ALPHABET[value % 26], stepped


def encrypt_string(text: str, args: EnigmaArgs) -> str:
    """Encrypt ``text`` starting from ``args``."""
    letters = []
    current = args
    for c in text:
        letter, current = pass_through_rotors_m3(c, current)
        letters.append(letter)
    return "".join(letters)


def encrypt(strings: Iterable[str], args: EnigmaArgs) -> list[str]:
    """Encrypt each string independently from the same settings."""
    return [encrypt_string(s, args) for s in strings]


def decrypt(strings: Iterable[str], args: EnigmaArgs) -> list[str]:
    """Decrypt each string; the machine is its own inverse."""
    return [encrypt_string(s, args) for s in strings]