# tinkerkit

A collection of small puzzle helpers, number games and text tools. Each
module can be imported as a library and most of them also have a command.
The package needs nothing beyond the standard library.

Install with the test extra to run the test suite:

    pip install .[test]
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `tinkerkit-magic-square [SIZE]` | Builds a magic square of the given size (Siamese for odd sizes, Strachey for sizes 4k + 2 from 6 up, the alternating pattern otherwise), prints it with its row, column and diagonal sums and writes it to a CSV file (`--csv`, default `test.csv`). `--pattern` shows the alternation pattern instead; `--search` fills grids at random until one is magic. Asks for the size when none is given. |
| `tinkerkit-combination` | Finds the lowest sum of the required numbers plus a subset of supplementary numbers that leaves a chosen remainder for a modulus. Options: `--required`, `--supplementary`, `--modulo`, `--modulus`. |
| `tinkerkit-wordgame [WORDS]` | Word-fragment helper: for each fragment typed, suggests the word containing it that uses the most letters not yet played, and tracks the alphabet until every letter has been used, then starts again. Reads a word list (default `words.txt`). |
| `tinkerkit-hashi [BOARD]` | Shows a bridges (hashi) board, either a sample or one read from a file, and the board helpers at work on it. |
| `tinkerkit-dragonsroll` | A dice-and-betting game for several players at one terminal (`--players`, `--sides`, or asked for). |
| `tinkerkit-calc [EXPRESSION]` | Evaluates an expression of single digits with `+ - * /` and parentheses; division truncates toward zero. |
| `tinkerkit-dart` | Computes when and where a dart thrown from below the xz-plane crosses it (`--position`, `--direction`, `--speed`, or asked for). |
| `tinkerkit-respell [WORD]` | Finds alternative spellings of a word's sounds from a pronouncing dictionary (`--words`, default `cmudict.txt`) and a table of sound spellings (`--spellings`, default `altdict.txt`); `--seed` makes the choice repeatable. |
| `tinkerkit-day1 [INPUT]` | Prints the total distance and the similarity score for two columns of numbers (default `input.txt`). |
| `tinkerkit-day2 [INPUT]` | Counts safe reports, with and without removing one level (default `input.txt`). |
| `tinkerkit-songs` | Ranks songs by Elo rating through repeated head-to-head choices, saving the ratings file (`--songs`, default `songs.csv`) after each choice and the final ranking to `--sorted` (default `sorted_ratings.csv`) when you quit with `-1`. |
| `tinkerkit-songs-update` | Merges new songs (`--new`, default `new_songs.csv`) into the song list, removes duplicates and writes songs that share a title and artist but have different links to `--same` (default `same_songs.csv`). |

## Library use

```python
from tinkerkit.magicsquare import generate, is_magic
from tinkerkit.calcstack import evaluate
from tinkerkit.combination import find_lowest_combination

square = generate(6)
assert is_magic(square)

evaluate("2 * (3 + 4)")  # 14

find_lowest_combination([408], [1527, 1938, 587, 595, 2379, 639, 5895], 0, 25)
```

Other modules:

- `tinkerkit.magicsquare` — also `siamese()`, `strachey()`,
  `doubly_even()`, `alternator()`, `alternator_grid()`, `random_grid()`,
  `search_random_magic()`, `format_square()`, `write_csv()`.
- `tinkerkit.combination` — also `subset_sum()`.
- `tinkerkit.wordgame` — `LetterTracker`, `read_words()`, `score_word()`,
  `find_best_word()`, `format_word()`.
- `tinkerkit.hashi` — `Tile`, `Direction`, `parse_board()`,
  `format_board()`, `next_non_blank()`, `next_island()`,
  `adjacent_islands()`, `adjacent_tiles()`, `fill_line()`,
  `island_remaining_value()`, `available_bridges()`.
- `tinkerkit.dragonsroll` — `Player` and `Game`.
- `tinkerkit.calcstack` — `evaluate()`, `precedence()`, `apply_operation()`.
- `tinkerkit.dart` — `Point`, `time_to_plane()`, `position_at()`.
- `tinkerkit.phonetics` — `load_word_dict()`, `load_alt_dict()`,
  `merge_similar_sounds()`, `pronunciation()`, `random_entry()`,
  `disassemble()`.
- `tinkerkit.respelling` — `find_alternative_spelling()`.
- `tinkerkit.songs` — `Song`, `rescore()`, `read_songs()`, `write_songs()`,
  `remove_duplicates()`, `find_link_duplicates()`, `merge_new_songs()`,
  `pick_pair()`.
- `tinkerkit.aoc_day1` — `parse_pairs()`, `total_distance()`,
  `similarity_score()`.
- `tinkerkit.aoc_day2` — `parse_reports()`, `is_safe()`,
  `is_safe_dampened()`, `count_safe()`.

Functions that draw random numbers take an `rng` argument, so passing a
seeded `random.Random` gives repeatable results.

## What it does not do

- `tinkerkit.hashi` offers board helpers only; it does not solve a bridges
  puzzle.
- There is no solver for the calendar tiling puzzle and no tool for summing
  `mul(X,Y)` instructions.