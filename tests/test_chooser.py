from itertools import islice

import pytest

from tinkerbox.chooser import (
    BoolStats,
    DeterministicBoolChooser,
    DeterministicChooser,
    RawDeterministicChooser,
    main,
)


def test_counts_add_up_to_draws():
    raw = RawDeterministicChooser([5.0, 3.0, 2.0])
    list(islice(raw, 37))
    assert sum(s.count for s in raw.stats()) == 37


def test_single_item_always_chosen():
    chooser = DeterministicChooser([("only", 5.0)])
    assert set(islice(chooser, 10)) == {"only"}


def test_zero_weight_never_chosen():
    chooser = DeterministicChooser([(True, 0.0), (False, 0.0001)])
    assert list(islice(chooser, 20)) == [False] * 20


def test_equal_weights_stay_balanced():
    chooser = DeterministicChooser([("a", 1.0), ("b", 1.0)])
    for _ in range(10):
        next(chooser)
        counts = [s.count for _, s in chooser.stats()]
        assert abs(counts[0] - counts[1]) <= 1
    counts = [s.count for _, s in chooser.stats()]
    assert counts[0] == counts[1]


def test_ties_go_to_last_item():
    chooser = DeterministicChooser([("a", 1.0), ("b", 1.0)])
    assert next(chooser) == "b"


def test_ratios_follow_weights():
    weights = [5.0, 3.0, 2.0]
    chooser = DeterministicChooser(zip("abc", weights))
    list(islice(chooser, 100))
    total = sum(weights)
    for (_, stats), weight in zip(chooser.stats(), weights):
        assert abs(stats.count / 100 - weight / total) < 0.05
        assert stats.weight == weight


def test_stats_keep_values_in_order():
    chooser = DeterministicChooser([("x", 1.0), ("y", 2.0)])
    assert [value for value, _ in chooser.stats()] == ["x", "y"]


def test_bool_chooser_ratio():
    chooser = DeterministicBoolChooser(0.25)
    values = list(islice(chooser, 20))
    stats = chooser.stats()
    assert stats.total == 20
    assert stats.trues == values.count(True)
    assert abs(stats.trues / stats.total - 0.25) <= 0.1


def test_bool_chooser_initial_stats():
    assert DeterministicBoolChooser(0.5).stats() == BoolStats(trues=0, total=0)


@pytest.mark.parametrize("weights", [[-1.0, 2.0], [0.0, 0.0], [], [float("nan")]])
def test_invalid_weights(weights):
    with pytest.raises(ValueError):
        RawDeterministicChooser(weights)


def test_bool_chooser_out_of_range():
    with pytest.raises(ValueError):
        DeterministicBoolChooser(1.5)


def test_main(capsys):
    assert main(["--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "0.25" in lines