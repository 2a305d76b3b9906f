# unkr

Encrypt, decrypt and brute-force old-school ciphers.

- Chain classical cryptors (Vigenere, transposition, cut, join, reverse,
  Atbash, swap, letter permutation, index crypt, Enigma M3) and apply them
  to text.
- Brute-force a ciphertext when part of the clear text is known: every
  combination of cryptors and every setting of each one is tried, and any
  result containing one of the clues is reported.
- Progress is cached on disk, so an interrupted search skips what it has
  already finished.

The package depends on nothing beyond the standard library.

## Cryptor steps

A pipeline is a list of steps. Each step is a cryptor name, optionally
followed by its arguments separated by colons. Names are case-insensitive.

| Step                       | Meaning                                          |
|----------------------------|--------------------------------------------------|
| `vigenere:KEY:ALPHABET`    | Vigenere with a key and an alphabet prefix       |
| `transpose:N`              | columnar transposition over N columns            |
| `cut:N`                    | split each string after N characters (encrypt); join the strings (decrypt) |
| `join`                     | concatenate all strings                          |
| `reverse`                  | reverse each string                              |
| `atbash`                   | mirror the alphabet                              |
| `swap:2:0:1`               | reorder the strings                              |
| `permute:A:B:C:D`          | exchange letter pairs                            |
| `colors:ABC`               | highlight the given letters with terminal colour codes |
| `indexcrypt:LETTERS`       | index-based substitution                         |
| `enigma:B::I:0:II:0:III:0` | Enigma M3: reflector (`B` or `C`), an empty field or a fourth rotor, then rotor and position for the left, middle and right slots |

Steps are read with `unkr.parser.read_parameters`, which raises
`unkr.parser.ParseError` for anything it cannot read. The Caesar shift is
not a pipeline step; use `unkr.cryptors.caesar` directly.

## Encrypting and decrypting

```python
from unkr.pipeline import decrypt, encrypt

encrypt(["ABCDEF"], ["transpose:2"])
# ['ACE', 'BDF']

decrypt(
    ["EMUFPHZLRFAXYUSDJKZLDKRNSHGNFIVJYQTQUXQBQVYUVLLTREVJYQTMKYRDMFD"],
    ["vigenere:PALIMPSEST:KRYPTOS"],
)
# ['BETWEENSUBTLESHADINGANDTHEABSENCEOFLIGHTLIESTHENUANCEOFIQLUSION']
```

Empty strings are dropped from the result. `print_encrypt` and
`print_decrypt` take the same arguments and print each resulting line.

Individual cryptors live in `unkr.cryptors` (`caesar`, `vigenere`,
`transpose`, `swap`, `permute`, `indexcrypt`, `enigma`, and `simple` for
`atbash`, `cut`, `join` and `reverse`) and take their argument objects from
`unkr.models`, for example:

```python
from unkr.cryptors import caesar
from unkr.models import NumberArgs

caesar.decrypt(["YVIORM"], NumberArgs(number=1))
# ['ZWJPSN']
```

## Brute-forcing

```python
from unkr.brute_force import brute_force_decrypt, brute_force_unique_combination

# Try every useful combination of up to 3 of the listed cryptors.
hits = brute_force_decrypt(
    "ILBDARKFH",
    ["HELLOTEST"],
    3,
    ["transpose", "reverse", "join"],
    4,
    "cache",
)

# Try a single fixed combination, checking the intermediate steps too.
hits = brute_force_unique_combination(
    "ILBDARKFH",
    ["HELLOTEST"],
    ["enigma"],
    4,
    "cache",
    True,
)
```

Both run the work on the given number of threads and return the set of step
lists (as text) that revealed a clue. Combinations that cannot be useful,
such as starting with `join` or repeating `reverse`, are left out by
`brute_force.skip_combination`.

Brute-force decryptors are `vigenere`, `cut`, `transpose`, `reverse`,
`atbash`, `swap`, `join`, `permute`, `enigma` and `reuse`. Some take
arguments: `vigenere:ALPHABET_DEPTH:KEY_DEPTH` bounds the lengths of
alphabets and keys tried, `permute:MAX` bounds the number of letters
swapped, and `reuse:Permute` re-applies the cryptor of that name chosen
earlier in the chain.

Hits and progress lines are printed as they come, and hits are appended to a
`hits` file under the cache directory, in a folder named by the MD5 of the
ciphertext and of the sorted, distinct clues. Combinations every thread has
finished are recorded in `done`, and finished first steps in `partials`;
both are skipped on the next run.

## Fuzzing helpers

`unkr.fuzzer.iter_fuzz(start, len_max, 27, rules)` yields every string after
`start` up to `len_max` letters in order (`A` … `ZZ` for length 2 from an
empty start), optionally restricted by the rules `UniqueLetters`,
`EvenCount` and `SortedLettersByPair`; `fuzz_from` prints them.
`unkr.combinator.combine_elements` returns every ordered pick of 1 to
`picks` indexes, used to build cryptor combinations.

## What it does not do

There is no command-line program: everything is used from Python. Progress
is printed as plain lines; there is no full-screen terminal display.