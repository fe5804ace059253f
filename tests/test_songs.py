import random

import pytest

from tinkerkit.songs import (
    Song,
    find_link_duplicates,
    main,
    merge_new_songs,
    pick_pair,
    read_songs,
    remove_duplicates,
    rescore,
    update_main,
    write_songs,
)


def _songs(count):
    return [Song(f"Song{i}", f"Artist{i}", 100.0, 0, f"link{i}") for i in range(count)]


def test_defaults_match_source():
    song = Song()
    assert song.to_csv() == "UNNAMED,UNSPECIFIED,100,0,UNSPECIFIED"


def test_equality_ignores_rating():
    assert Song("A", "B", 10.0, 1, "x") == Song("A", "B", 500.0, 9, "x")
    assert not Song("A", "B", 10.0, 1, "x") == Song("A", "B", 10.0, 1, "y")


def test_describe():
    assert Song("Tune", "Band", link="abc").describe() == "Tune by Band. Link: https://youtu.be/abc/"


def test_rescore_conserves_total_and_counts_pulls():
    a, b = Song("A", elo=120.0), Song("B", elo=90.0)
    expected_a, expected_b = rescore(a, 1.0, b, 0.0)
    assert expected_a + expected_b == pytest.approx(1.0)
    assert expected_a > expected_b
    assert a.elo + b.elo == pytest.approx(210.0)
    assert a.elo > 120.0 and b.elo < 90.0
    assert (a.pulls, b.pulls) == (1, 1)


def test_rescore_equal_ratings_expect_half():
    a, b = Song("A"), Song("B")
    expected_a, expected_b = rescore(a, 0.0, b, 1.0)
    assert expected_a == pytest.approx(0.5)
    assert expected_b == pytest.approx(0.5)
    assert b.elo - 100.0 == pytest.approx(100.0 - a.elo)


def test_rescore_clamps_at_zero():
    a, b = Song("A", elo=5.0), Song("B", elo=5.0)
    rescore(a, 0.0, b, 1.0, k=1000.0)
    assert a.elo == 0.0


def test_write_read_round_trip(tmp_path):
    songs = [Song("A", "B", 123.5, 3, "x"), Song("C", "D", 0.0, 0, "y")]
    path = tmp_path / "songs.csv"
    write_songs(songs, path)
    loaded = read_songs(path)
    assert loaded == songs
    assert [(s.elo, s.pulls) for s in loaded] == [(123.5, 3), (0.0, 0)]


def test_read_rejects_malformed(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("only,two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_songs(path)


def test_remove_duplicates_keeps_most_pulled():
    first = Song("A", "B", 100.0, 1, "x")
    better = Song("A", "B", 150.0, 4, "x")
    other = Song("C", "D", 100.0, 0, "y")
    result = remove_duplicates([first, other, better])
    assert result == [first, other]
    assert result[0].pulls == 4
    assert result[0].elo == 150.0


def test_find_link_duplicates():
    a = Song("A", "B", link="x")
    b = Song("A", "B", link="y")
    c = Song("C", "B", link="z")
    assert find_link_duplicates([a, c, b]) == [a, b]
    assert find_link_duplicates([a, c]) == []


def test_merge_new_songs_skips_known():
    known = Song("A", "B", 140.0, 2, "x")
    incoming = [Song("A", "B", 100.0, 0, "x"), Song("C", "D", link="y")]
    merged = merge_new_songs([known], incoming)
    assert merged == [known, incoming[1]]
    assert merged[0].elo == 140.0


def test_pick_pair_returns_least_pulled():
    songs = _songs(8)
    for i, song in enumerate(songs):
        song.pulls = i
    a, b = pick_pair(songs, random.Random(3))
    assert a != b
    assert a.pulls <= b.pulls
    assert a in songs and b in songs


def test_pick_pair_needs_five_songs():
    with pytest.raises(ValueError):
        pick_pair(_songs(4), random.Random(0))


def test_main_rates_and_sorts(tmp_path, monkeypatch):
    songs_path = tmp_path / "songs.csv"
    sorted_path = tmp_path / "sorted.csv"
    write_songs(_songs(5), songs_path)
    answers = iter(["1", "-1"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--songs", str(songs_path), "--sorted", str(sorted_path)]) == 0
    saved = read_songs(songs_path)
    assert sum(song.pulls for song in saved) == 2
    ranked = read_songs(sorted_path)
    elos = [song.elo for song in ranked]
    assert elos == sorted(elos, reverse=True)
    assert elos[0] > 100.0


def test_update_main_merges(tmp_path):
    songs_path = tmp_path / "songs.csv"
    new_path = tmp_path / "new.csv"
    same_path = tmp_path / "same.csv"
    write_songs([Song("A", "B", 120.0, 1, "x")], songs_path)
    write_songs([Song("A", "B", link="x"), Song("A", "B", link="y")], new_path)
    code = update_main(["--songs", str(songs_path), "--new", str(new_path), "--same", str(same_path)])
    assert code == 0
    merged = read_songs(songs_path)
    assert [s.link for s in merged] == ["x", "y"]
    same = read_songs(same_path)
    assert [s.link for s in same] == ["https://youtu.be/x/", "https://youtu.be/y/"]