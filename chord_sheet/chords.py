"""Chord symbol parsing and transposition.

Chord cells are parsed with a permissive pattern (root, accidentals, any
suffix, optional slash bass) so that unusual suffixes survive
transposition untouched. The song key is held to a stricter standard and
validated with pychord.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pychord import Chord as PyChord

CHROMATIC_PITCH_CLASSES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)  # fmt: skip

# Natural note name to pitch class (0-11, where C=0)
LETTER_TO_PC: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

CHORD_RE = re.compile(r"^([A-G])([#b]*)([^/]*)(?:/([A-G])([#b]*))?$")

INVALID_MARK = "!"


@dataclass(frozen=True)
class ChordSymbol:
    """A parsed chord symbol.

    Parameters
    ----------
    root : int
        Root pitch class (0-11).
    suffix : str
        Everything between the root and the slash bass, kept verbatim.
    bass : int | None
        Bass pitch class for slash chords.
    """

    root: int
    suffix: str
    bass: int | None = None

    def transpose(self, semitones: int) -> ChordSymbol:
        return ChordSymbol(
            root=(self.root + semitones) % 12,
            suffix=self.suffix,
            bass=None if self.bass is None else (self.bass + semitones) % 12,
        )

    def __str__(self) -> str:
        result = CHROMATIC_PITCH_CLASSES[self.root] + self.suffix
        if self.bass is not None:
            result = f"{result}/{CHROMATIC_PITCH_CLASSES[self.bass]}"
        return result


def _pitch(letter: str, accidentals: str) -> int:
    offset = accidentals.count("#") - accidentals.count("b")
    return (LETTER_TO_PC[letter] + offset) % 12


def parse_chord(text: str) -> ChordSymbol | None:
    """Parse a chord symbol, or return None if it is not one.

    Examples
    --------
    >>> parse_chord("Bbm7/F")
    ChordSymbol(root=10, suffix='m7', bass=5)
    >>> parse_chord("Hello") is None
    True
    """
    match = CHORD_RE.match(text.strip())
    if not match:
        return None
    root_letter, root_acc, suffix, bass_letter, bass_acc = match.groups()
    return ChordSymbol(
        root=_pitch(root_letter, root_acc),
        suffix=suffix,
        bass=_pitch(bass_letter, bass_acc or "") if bass_letter else None,
    )


def transpose(chord: str, semitones: int) -> str:
    """Transpose a chord symbol by a number of semitones.

    Parameters
    ----------
    chord : str
        Chord symbol (e.g., "Am7", "Bb/D").
    semitones : int
        Signed shift.

    Returns
    -------
    str
        The transposed symbol, spelled with sharps.

    Raises
    ------
    ValueError
        If ``semitones`` is not an integer or ``chord`` is not a chord.

    Examples
    --------
    >>> transpose("Am7", 3)
    'Cm7'
    >>> transpose("Bb/D", -1)
    'A/C#'
    """
    if isinstance(semitones, bool) or not isinstance(semitones, int):
        msg = "Invalid argument: semitones must be an integer"
        raise ValueError(msg)
    parsed = parse_chord(chord)
    if parsed is None:
        msg = f'Chord "{chord}" is not syntactically valid'
        raise ValueError(msg)
    return str(parsed.transpose(semitones))


def semitone_distance(from_chord: str, to_chord: str) -> int | None:
    """Upward distance (0-11) between the roots of two chords.

    Examples
    --------
    >>> semitone_distance("C", "A")
    9
    >>> semitone_distance("C", "?") is None
    True
    """
    source = parse_chord(from_chord)
    target = parse_chord(to_chord)
    if source is None or target is None:
        return None
    return (target.root - source.root) % 12


def parse_key(text: str) -> int | None:
    """Root pitch class of a song key, or None if the key is not a real chord.

    Unlike :func:`parse_chord`, the quality must be one pychord knows.

    Examples
    --------
    >>> parse_key("F#m")
    6
    >>> parse_key("Cxyz") is None
    True
    """
    text = text.strip()
    if not text:
        return None
    try:
        chord = PyChord(text)
    except ValueError:
        return None
    parsed = parse_chord(chord.root)
    return None if parsed is None else parsed.root


def mark_as_invalid(value: object) -> str:
    """Prefix a cell text with the invalid marker, once."""
    text = str(value)
    return text if text.startswith(INVALID_MARK) else INVALID_MARK + text
