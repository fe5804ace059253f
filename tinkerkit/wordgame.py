"""Pick words for a letter-fragment game that rewards using every letter."""

from __future__ import annotations

import argparse
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

DEFAULT_COLOR = "\033[0m"
SUBSTRING_COLOR = "\033[1;33m"
NEW_CHAR_COLOR = "\033[1;36m"
BACKGROUND_COLOR = "\u001B[40m"


def read_words(path: str | Path) -> set[str]:
    """Read whitespace-separated words, lower-cased, dropping any word with a
    character that is not an ASCII letter."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return {
        token.lower()
        for token in text.split()
        if token.isascii() and token.isalpha()
    }


def score_word(word: str, used: Iterable[str]) -> int:
    """Count the distinct letters of ``word`` not yet used."""
    return len(set(word) - set(used))


def find_best_word(fragment: str, words: Iterable[str], used: Iterable[str]) -> Optional[str]:
    """Return the word containing ``fragment`` that adds the most new letters.

    The first word with the highest score wins; None when no word matches.
    """
    used_letters = set(used)
    best: Optional[str] = None
    best_score = -1
    for word in words:
        if fragment in word:
            score = score_word(word, used_letters)
            if score > best_score:
                best, best_score = word, score
    return best


@dataclass
class LetterTracker:
    """Letters used so far in the current round of the alphabet."""

    used: set[str] = field(default_factory=set)

    def use(self, word: str) -> list[str]:
        """Mark the letters of ``word`` used; return the new ones in order."""
        new_letters = []
        for letter in word:
            if letter not in self.used:
                self.used.add(letter)
                new_letters.append(letter)
        return new_letters

    def unused(self) -> list[str]:
        """Return the letters a-z not yet used, in order."""
        return [letter for letter in string.ascii_lowercase if letter not in self.used]

    def reset(self) -> None:
        """Start a fresh round of the alphabet."""
        self.used.clear()


def format_word(word: str, fragment: str, new_letters: Sequence[str]) -> str:
    """Render a found word with the fragment and new letters highlighted."""
    remaining = list(new_letters)
    parts = [f"Word found (+{len(new_letters)}): {BACKGROUND_COLOR}"]
    i = 0
    while i < len(word):
        if fragment and word.startswith(fragment, i):
            parts.append(SUBSTRING_COLOR + fragment)
            i += len(fragment)
            continue
        letter = word[i]
        if letter in remaining:
            parts.append(NEW_CHAR_COLOR + letter)
            remaining = [other for other in remaining if other != letter]
        else:
            parts.append(DEFAULT_COLOR + BACKGROUND_COLOR + letter)
        i += 1
    parts.append(DEFAULT_COLOR)
    return "".join(parts)


def _fragments() -> Iterable[str]:
    while True:
        try:
            line = input("Enter a substring: ")
        except EOFError:
            return
        yield from line.split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordgame", description="Suggest words that use the most new letters."
    )
    parser.add_argument("words", nargs="?", default="words.txt", help="word list file")
    args = parser.parse_args(argv)

    try:
        words = read_words(args.words)
    except OSError:
        print(f"Error: Could not open file: {args.words}")
        return 1
    print(f"Total words read: {len(words)}")

    tracker = LetterTracker()
    for fragment in _fragments():
        word = find_best_word(fragment, words, tracker.used)
        new_letters = tracker.use(word) if word else []
        if word:
            print(format_word(word, fragment, new_letters))
        else:
            print("No word found containing the given substring.")
        print("Differences: " + "".join(f"{letter} " for letter in new_letters))
        unused = tracker.unused()
        print("Unused letters:" + "".join(f"{letter} " for letter in unused))
        if not unused:
            print("All letters used. Starting again.")
            tracker.reset()

    print("Exiting program.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())