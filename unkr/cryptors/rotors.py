"""Enigma rotors, reflectors and their wiring tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Rotor(Enum):
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"
    VII = "VII"
    VIII = "VIII"


class Reflector(Enum):
    B = "B"
    C = "C"


@dataclass(frozen=True, kw_only=True)
class EnigmaArgs:
    """Machine settings: reflector and (rotor, position) for each slot."""

    reflector: Reflector
    l0_rotor: tuple[Rotor, int] | None = None
    l_rotor: tuple[Rotor, int]
    m_rotor: tuple[Rotor, int]
    r_rotor: tuple[Rotor, int]


_ROTOR_CHARS = dict(zip(Rotor, "ABCDEFGH"))
_CHAR_ROTORS = {c: r for r, c in _ROTOR_CHARS.items()}
_REFLECTOR_CHARS = {Reflector.B: "A", Reflector.C: "B"}
_CHAR_REFLECTORS = {c: r for r, c in _REFLECTOR_CHARS.items()}

_NOTCHES = {
    Rotor.I: (16,),
    Rotor.II: (5,),
    Rotor.III: (22,),
    Rotor.IV: (10,),
    Rotor.V: (26,),
    Rotor.VI: (26, 13),
    Rotor.VII: (26, 13),
    Rotor.VIII: (26, 13),
}

# Forward offsets: position p maps to p + offset[p].
_ROTORS = {
    Rotor.I: (4, 9, 10, 2, 7, 1, 23, 9, 13, 16, 3, 8, 2, 9, 10, 18, 7, 3, 0, 22, 6, 13, 5, 20, 4, 10),
    Rotor.II: (0, 8, 1, 7, 14, 3, 11, 13, 15, 18, 1, 22, 10, 6, 24, 13, 0, 15, 7, 20, 21, 3, 9, 24, 16, 5),
    Rotor.III: (1, 2, 3, 4, 5, 6, 22, 8, 9, 10, 13, 10, 13, 0, 10, 15, 18, 5, 14, 7, 16, 17, 24, 21, 18, 15),
    Rotor.IV: (4, 17, 12, 18, 11, 20, 3, 19, 16, 7, 10, 23, 5, 20, 9, 22, 23, 14, 1, 13, 16, 8, 6, 15, 24, 2),
    Rotor.V: (21, 24, 25, 14, 2, 3, 13, 17, 12, 6, 8, 18, 1, 20, 23, 8, 10, 5, 20, 16, 22, 19, 9, 7, 4, 11),
    Rotor.VI: (9, 14, 4, 18, 10, 15, 6, 24, 16, 7, 17, 19, 1, 20, 11, 2, 13, 19, 8, 25, 3, 16, 12, 5, 21, 23),
    Rotor.VII: (13, 24, 7, 4, 2, 12, 22, 16, 4, 15, 8, 11, 15, 1, 6, 16, 10, 17, 3, 18, 21, 9, 14, 19, 5, 20),
    Rotor.VIII: (5, 9, 14, 4, 15, 6, 17, 7, 20, 18, 25, 7, 3, 16, 11, 2, 10, 21, 12, 3, 19, 13, 24, 1, 8, 22),
}

# Offsets for the return path through each rotor.
_REVERSED_ROTORS = {
    Rotor.I: (20, 21, 22, 3, 22, 24, 25, 8, 13, 16, 17, 19, 16, 23, 24, 4, 17, 6, 0, 18, 23, 13, 17, 19, 16, 10),
    Rotor.II: (0, 8, 13, 25, 21, 17, 11, 4, 23, 18, 19, 25, 2, 6, 10, 5, 0, 15, 12, 20, 13, 2, 16, 11, 23, 19),
    Rotor.III: (19, 25, 4, 24, 11, 23, 12, 22, 8, 21, 10, 20, 9, 0, 11, 18, 8, 17, 5, 16, 2, 16, 21, 13, 16, 13),
    Rotor.IV: (7, 24, 20, 18, 22, 12, 13, 6, 3, 23, 10, 4, 11, 3, 14, 15, 19, 21, 9, 25, 16, 8, 2, 17, 10, 6),
    Rotor.V: (16, 1, 22, 8, 19, 17, 24, 6, 23, 10, 15, 3, 6, 25, 7, 20, 4, 12, 18, 13, 14, 5, 21, 18, 9, 2),
    Rotor.VI: (18, 9, 21, 13, 7, 2, 22, 6, 14, 17, 7, 10, 20, 25, 16, 12, 19, 24, 1, 5, 11, 8, 3, 23, 10, 15),
    Rotor.VII: (16, 11, 4, 21, 17, 10, 24, 22, 9, 19, 12, 8, 22, 13, 25, 5, 7, 14, 18, 6, 20, 23, 15, 10, 11, 2),
    Rotor.VIII: (16, 8, 6, 10, 14, 21, 18, 22, 13, 1, 17, 20, 5, 7, 19, 23, 12, 24, 19, 11, 2, 4, 23, 9, 25, 15),
}

_REFLECTORS = {
    Reflector.B: (24, 16, 18, 4, 12, 13, 5, 22, 7, 14, 3, 21, 2, 23, 24, 19, 14, 10, 13, 6, 8, 1, 25, 12, 2, 20),
    Reflector.C: (5, 20, 13, 6, 4, 21, 8, 17, 22, 20, 7, 14, 11, 9, 18, 13, 3, 19, 2, 23, 24, 6, 17, 15, 9, 12),
}


def rotor_to_char(rotor: Rotor) -> str:
    """Return the letter that encodes ``rotor`` in settings strings."""
    return _ROTOR_CHARS[rotor]


def char_to_rotor(c: str) -> Rotor | None:
    """Return the rotor encoded by ``c``, or None."""
    return _CHAR_ROTORS.get(c)


def reflector_to_char(reflector: Reflector) -> str:
    """Return the letter that encodes ``reflector`` in settings strings."""
    return _REFLECTOR_CHARS[reflector]


def char_to_reflector(c: str) -> Reflector | None:
    """Return the reflector encoded by ``c``, or None."""
    return _CHAR_REFLECTORS.get(c)


def get_notches(rotor: Rotor) -> tuple[int, ...]:
    """Return the positions at which ``rotor`` steps its neighbour."""
    return _NOTCHES[rotor]


def get_rotor(rotor: Rotor) -> tuple[int, ...]:
    """Return the forward offsets of ``rotor``."""
    return _ROTORS[rotor]


def get_reversed_rotor(rotor: Rotor) -> tuple[int, ...]:
    """Return the return-path offsets of ``rotor``."""
    return _REVERSED_ROTORS[rotor]


def get_reflector(reflector: Reflector) -> tuple[int, ...]:
    """Return the offsets of ``reflector``."""
    return _REFLECTORS[reflector]