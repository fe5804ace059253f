"""Respell a word using other words' spellings of the same sounds."""

from __future__ import annotations

import argparse
import random
from collections import Counter
from typing import Mapping, Optional, Sequence

from tinkerkit.phonetics import (
    disassemble,
    load_alt_dict,
    load_word_dict,
    merge_similar_sounds,
    pronunciation,
)


def find_alternative_spelling(
    word: str,
    word_dict: Mapping[str, Sequence[str]],
    alt_dict: Mapping[str, Sequence[str]],
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Return new spellings for the sounds of ``word``, in pronunciation order.

    For every sound a dictionary word is drawn at random whose complete
    split spells that sound differently from ``word``. A drawn word supplies
    at most one spelling, so a sound whose only source word was already used
    is left out. Raises KeyError for an unknown word and LookupError when
    some sound has no other spelling anywhere in the dictionary.
    """
    rng = rng or random.Random()
    sounds = pronunciation(word, word_dict)
    original = disassemble(word, word_dict, alt_dict)
    counts = Counter(sounds)
    chosen_words: dict[str, list[str]] = {sound: [] for sound in sounds}
    candidates: list[tuple[str, str, str]] = []
    complete_splits: dict[str, Optional[list[str]]] = {}
    entries = list(word_dict)

    def complete_split(other: str) -> Optional[list[str]]:
        if other not in complete_splits:
            parts = disassemble(other, word_dict, alt_dict)
            complete_splits[other] = parts if parts and parts[-1] else None
        return complete_splits[other]

    for sound, spelled in zip(sounds, original):
        if len(chosen_words[sound]) >= counts[sound]:
            continue
        order = entries[:]
        rng.shuffle(order)
        for other in order:
            parts = complete_split(other)
            if parts is None:
                continue
            match = next(
                (
                    part
                    for other_sound, part in zip(word_dict[other], parts)
                    if other_sound == sound and part != spelled
                ),
                None,
            )
            if match is not None:
                chosen_words[sound].append(other)
                candidates.append((sound, match, other))
                break
        else:
            raise LookupError(f"no other spelling found for sound {sound!r}")

    used: set[str] = set()
    result: list[str] = []
    for sound in sounds:
        for candidate_sound, spelling, other in candidates:
            if candidate_sound == sound and spelling and other not in used:
                result.append(spelling)
                used.add(other)
                break
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="respelling", description="Respell a word with other words' spellings."
    )
    parser.add_argument("word", nargs="?", help="word to respell")
    parser.add_argument("--words", default="cmudict.txt", help="pronouncing dictionary")
    parser.add_argument("--spellings", default="altdict.txt", help="sound spelling dictionary")
    parser.add_argument("--seed", type=int, help="seed for the random choices")
    args = parser.parse_args(argv)

    word_dict = load_word_dict(args.words)
    print("Dictionary loaded successfully")
    alt_dict = load_alt_dict(args.spellings)
    print("Alternative dictionary loaded successfully")
    word_dict = merge_similar_sounds(word_dict, alt_dict)
    print("Word dictionary updated successfully")

    word = args.word if args.word is not None else input("Enter a word: ").strip()
    word = word.lower()
    print(f"Finding alternative spellings for: {word}")
    try:
        sounds = pronunciation(word, word_dict)
    except KeyError:
        print("Word not found in dictionary")
        return 1
    counts = Counter(sounds)
    print(
        "Pronunciation and occurrences: "
        + "".join(f"{sound}({counts[sound]}) " for sound in sounds)
    )
    print("Disassembled Word: " + " ".join(disassemble(word, word_dict, alt_dict)))

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        spellings = find_alternative_spelling(word, word_dict, alt_dict, rng)
    except LookupError as error:
        print(f"Error: {error}")
        return 1
    print("New Spellings: " + " ".join(spellings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())