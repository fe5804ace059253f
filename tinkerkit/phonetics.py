"""Pronouncing dictionaries and splitting words into per-sound spellings.

The word dictionary maps a word to its sounds, one line per word:
``word SOUND SOUND ... # comment``.

The spelling dictionary maps a sound to the ways it can be written, one
line per sound: ``SOUND = spelling spelling ...``. A sound written
``SOUND @ OTHER`` is treated as the same sound as ``OTHER``.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Mapping, Optional, Sequence

WordDict = dict[str, list[str]]
AltDict = dict[str, list[str]]

SPELLINGS_MARKER = "="
ALIAS_MARKER = "@"
COMMENT_MARKER = "#"


def load_word_dict(path: str | Path) -> WordDict:
    """Load words and their sounds; anything after a ``#`` is ignored."""
    dictionary: WordDict = {}
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            tokens = line.split()
            if not tokens:
                continue
            word, *rest = tokens
            sounds = []
            for token in rest:
                if token == COMMENT_MARKER:
                    break
                sounds.append(token)
            dictionary[word] = sounds
    return dictionary


def load_alt_dict(path: str | Path) -> AltDict:
    """Load sounds and their spellings.

    Each entry keeps its marker (``=`` or ``@``) first; the spellings after
    it are ordered shortest first, keeping file order among equal lengths.
    """
    alt_dict: AltDict = {}
    with open(path, encoding="utf-8", errors="replace") as handle:
        for number, line in enumerate(handle, start=1):
            tokens = line.split()
            if not tokens:
                continue
            sound, *rest = tokens
            if not rest:
                raise ValueError(f"line {number}: sound {sound!r} has no marker")
            marker, *spellings = rest
            alt_dict[sound] = [marker, *sorted(spellings, key=len)]
    return alt_dict


def merge_similar_sounds(word_dict: Mapping[str, Sequence[str]], alt_dict: Mapping[str, Sequence[str]]) -> WordDict:
    """Return a copy of ``word_dict`` with aliased sounds replaced by the
    sound they point to."""

    def resolve(sound: str) -> str:
        entry = alt_dict.get(sound)
        if entry and entry[0] == ALIAS_MARKER and len(entry) > 1:
            return entry[1]
        return sound

    return {word: [resolve(sound) for sound in sounds] for word, sounds in word_dict.items()}


def pronunciation(word: str, word_dict: Mapping[str, Sequence[str]]) -> list[str]:
    """Return the sounds of ``word``; raise KeyError when it is unknown."""
    try:
        return list(word_dict[word])
    except KeyError:
        raise KeyError(f"word not found in dictionary: {word!r}") from None


def random_entry(
    word_dict: Mapping[str, Sequence[str]], rng: Optional[random.Random] = None
) -> tuple[str, list[str]]:
    """Pick a word and its sounds uniformly at random."""
    if not word_dict:
        raise ValueError("the dictionary is empty")
    rng = rng or random.Random()
    word, sounds = rng.choice(list(word_dict.items()))
    return word, list(sounds)


def disassemble(
    word: str,
    word_dict: Mapping[str, Sequence[str]],
    alt_dict: Mapping[str, Sequence[str]],
) -> list[str]:
    """Split ``word`` into one spelling per sound of its pronunciation.

    Sounds are matched in order. A spelling at the start of what is left is
    preferred; otherwise the first spelling found further on is taken and the
    skipped letters are joined to the previous spelling. Letters left after
    the last sound join the last spelling. Sounds that found no spelling
    leave empty strings at the end, so the result is always as long as the
    pronunciation.
    """
    sounds = pronunciation(word, word_dict)
    remaining = word
    parts: list[str] = []
    last = len(sounds) - 1

    for position, sound in enumerate(sounds):
        spellings = list(alt_dict.get(sound, ()))
        found = False

        for spelling in spellings:
            if spelling == SPELLINGS_MARKER:
                continue
            if remaining.startswith(spelling):
                parts.append(spelling)
                remaining = remaining[len(spelling):]
                found = True
                break

        if not found:
            for spelling in spellings:
                if spelling == SPELLINGS_MARKER:
                    continue
                index = remaining.find(spelling)
                if index == -1:
                    continue
                skipped = remaining[:index]
                if parts:
                    parts[-1] += skipped
                    parts.append(spelling)
                else:
                    parts.append(skipped + spelling)
                remaining = remaining[index + len(spelling):]
                found = True
                break

        if remaining and position == last:
            if parts:
                parts[-1] += remaining
            else:
                parts.append(remaining)
            remaining = ""

    parts.extend([""] * (len(sounds) - len(parts)))
    return parts