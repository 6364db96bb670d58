import pytest

from goveelink.scenes import sort_and_dedup_scenes


def test_empty_input_gives_empty_list():
    assert sort_and_dedup_scenes([]) == []


def test_sorts_ignoring_case():
    result = sort_and_dedup_scenes(["Sunset", "aurora", "Morning"])
    assert result == ["aurora", "Morning", "Sunset"]


def test_removes_exact_duplicates():
    result = sort_and_dedup_scenes(["Party", "Candle", "Party", "Candle"])
    assert result == ["Candle", "Party"]


def test_case_variants_are_kept_in_original_order():
    assert sort_and_dedup_scenes(["b", "a", "B", "a"]) == ["a", "b", "B"]
    assert sort_and_dedup_scenes(["B", "b"]) == ["B", "b"]


def test_only_adjacent_identical_names_are_merged():
    # Stable sort keeps a, A, a in input order; no two neighbours are identical.
    assert sort_and_dedup_scenes(["a", "A", "a"]) == ["a", "A", "a"]


def test_accepts_any_iterable_and_leaves_input_untouched():
    original = ["Zebra", "apple", "zebra", "Apple"]
    snapshot = list(original)
    result = sort_and_dedup_scenes(iter(original))
    assert original == snapshot
    assert result == ["apple", "Apple", "Zebra", "zebra"]


@pytest.mark.parametrize(
    "scenes",
    [
        ["Forest", "ocean", "Ocean", "forest", "Rainbow", "rainbow", "Rainbow"],
        ["x", "x", "x"],
        ["Glow", "glow", "GLOW", "Fire", "fire"],
    ],
)
def test_result_is_sorted_and_has_no_adjacent_duplicates(scenes):
    result = sort_and_dedup_scenes(scenes)
    keys = [name.lower() for name in result]
    assert keys == sorted(keys)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == set(scenes)


def test_idempotent():
    scenes = ["Music", "movie", "Movie", "music", "Music"]
    once = sort_and_dedup_scenes(scenes)
    assert sort_and_dedup_scenes(once) == once