"""Rank songs by pairwise preference with Elo ratings kept in a CSV file."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

LINK_PREFIX = "https://youtu.be/"
PICK_COUNT = 5
DEFAULT_K = 100.0
ELO_SCALE = 480.0


@dataclass
class Song:
    """A song with its rating; songs are equal when name, artist and link match."""

    name: str = "UNNAMED"
    artist: str = "UNSPECIFIED"
    elo: float = field(default=100.0, compare=False)
    pulls: int = field(default=0, compare=False)
    link: str = "UNSPECIFIED"

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.name, self.artist, self.link)

    def describe(self) -> str:
        """Return a readable line naming the song and its link."""
        return f"{self.name} by {self.artist}. Link: {LINK_PREFIX}{self.link}/"

    def to_csv(self) -> str:
        """Return the song as one CSV line without a line break."""
        return f"{self.name},{self.artist},{self.elo:g},{self.pulls},{self.link}"


def rescore(
    a: Song, a_score: float, b: Song, b_score: float, k: float = DEFAULT_K
) -> tuple[float, float]:
    """Update both songs' ratings after a comparison, in place.

    Scores are 1 for the preferred song and 0 for the other. Ratings never
    drop below zero and each song's pull count goes up by one. Returns the
    expected scores of ``a`` and ``b`` before the update.
    """
    expected_a = 1 / (1 + 10 ** ((b.elo - a.elo) / ELO_SCALE))
    expected_b = 1 / (1 + 10 ** ((a.elo - b.elo) / ELO_SCALE))
    a.elo = max(0.0, a.elo + k * (a_score - expected_a))
    b.elo = max(0.0, b.elo + k * (b_score - expected_b))
    a.pulls += 1
    b.pulls += 1
    return expected_a, expected_b


def _parse_line(line: str, number: int) -> Song:
    parts = line.split(",")
    if len(parts) < 5:
        raise ValueError(f"line {number}: expected name,artist,elo,pulls,link")
    name, artist, elo, pulls, link = parts[:5]
    try:
        return Song(name, artist, float(elo), int(pulls), link)
    except ValueError:
        raise ValueError(f"line {number}: bad elo or pull count") from None


def read_songs(path: str | Path) -> list[Song]:
    """Read songs from a CSV file of name,artist,elo,pulls,link lines."""
    songs = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            line = line.rstrip("\r\n")
            if line.strip():
                songs.append(_parse_line(line, number))
    return songs


def write_songs(songs: Iterable[Song], path: str | Path) -> None:
    """Write songs to a CSV file, one per line."""
    Path(path).write_text("".join(song.to_csv() + "\n" for song in songs), encoding="utf-8")


def remove_duplicates(songs: Iterable[Song]) -> list[Song]:
    """Drop repeated songs, keeping the copy with the most pulls in the place
    where the song first appeared."""
    unique: dict[tuple[str, str, str], Song] = {}
    for song in songs:
        kept = unique.get(song.key)
        if kept is None or song.pulls > kept.pulls:
            unique[song.key] = song
    return list(unique.values())


def find_link_duplicates(songs: Sequence[Song]) -> list[Song]:
    """Return pairs of songs with the same name and artist but different links."""
    found = []
    for i, first in enumerate(songs):
        for second in songs[i + 1:]:
            if (
                first.name == second.name
                and first.artist == second.artist
                and first.link != second.link
            ):
                found.extend((first, second))
    return found


def merge_new_songs(songs: Iterable[Song], new_songs: Iterable[Song]) -> list[Song]:
    """Add the new songs that are not already known, then drop duplicates."""
    merged = list(songs)
    known = {song.key for song in merged}
    merged.extend(song for song in new_songs if song.key not in known)
    return remove_duplicates(merged)


def pick_pair(songs: Sequence[Song], rng: Optional[random.Random] = None) -> tuple[Song, Song]:
    """Draw five different songs at random and return the two least pulled.

    Among equal pull counts the earlier draw comes first.
    """
    if len({song.key for song in songs}) < PICK_COUNT:
        raise ValueError(f"at least {PICK_COUNT} different songs are needed")
    rng = rng or random.Random()
    picked: list[Song] = []
    while len(picked) < PICK_COUNT:
        song = rng.choice(songs)
        if song not in picked:
            picked.append(song)
    picked.sort(key=lambda song: song.pulls)
    return picked[0], picked[1]


def _ask_choice(ask: Callable[[str], str]) -> int:
    answer = ask("")
    while True:
        try:
            choice = int(answer.strip())
        except ValueError:
            choice = 0
        if choice in (1, 2, -1):
            return choice
        answer = ask("Invalid choice. Please pick 1 or 2 or -1 to quit\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="songs", description="Rate songs two at a time.")
    parser.add_argument("--songs", default="songs.csv", help="song ratings file")
    parser.add_argument("--sorted", default="sorted_ratings.csv", help="file for the final ranking")
    args = parser.parse_args(argv)

    try:
        songs = remove_duplicates(read_songs(args.songs))
    except OSError:
        print(f"Could not open {args.songs}")
        return 1

    rng = random.Random()
    while True:
        a, b = pick_pair(songs, rng)
        print("\nWhich song do you like more?\tOr -1 to quit")
        print(f"1. {a.describe()}")
        print(f"2. {b.describe()}")
        try:
            choice = _ask_choice(input)
        except EOFError:
            choice = -1
        if choice == -1:
            break
        old_a, old_b = a.elo, b.elo
        expected_a, expected_b = rescore(a, float(choice == 1), b, float(choice == 2))
        print(f"{a.name} elo = {old_a:g}->{a.elo:g} and {b.name} elo = {old_b:g}->{b.elo:g}")
        print(f"{a.name} chance = {expected_a * 100:g}% and {b.name} chance = {expected_b * 100:g}%")
        write_songs(songs, args.songs)

    write_songs(sorted(songs, key=lambda song: song.elo, reverse=True), args.sorted)
    return 0


def update_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="songs-update", description="Add new songs to the ratings file."
    )
    parser.add_argument("--songs", default="songs.csv", help="song ratings file")
    parser.add_argument("--new", default="new_songs.csv", help="file of songs to add")
    parser.add_argument("--same", default="same_songs.csv", help="file for link duplicates")
    args = parser.parse_args(argv)

    try:
        songs = read_songs(args.songs) if Path(args.songs).exists() else []
        new_songs = read_songs(args.new)
    except OSError as error:
        print(f"Could not open file: {error.filename}")
        return 1
    print(f"New songs size: {len(new_songs)}")
    print("Inserting new songs...")
    songs = merge_new_songs(songs, new_songs)
    write_songs(songs, args.songs)
    print(f"Finished songs size: {len(songs)}")

    print("Songs with same artist and title but different links: ")
    same = find_link_duplicates(songs)
    for song in same:
        print(f"\t{song.name} by {song.artist} with link {LINK_PREFIX}{song.link}/")
    write_songs(
        (Song(s.name, s.artist, s.elo, s.pulls, f"{LINK_PREFIX}{s.link}/") for s in same),
        args.same,
    )
    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())