import pytest

from spbench.validation import UnpackingReport, check_unpacked_paths, validate, validate_verbose


GRAPH = [
    [(1, 5), (2, 9)],
    [(2, 3)],
    [],
]


def test_validate_equal():
    assert validate([1, 2, None], [1, 2, None]) is True


def test_validate_mismatch():
    assert validate([1, 2, 3], [1, 7, 3]) is False


def test_validate_ignores_extra_values_in_second():
    assert validate([1, 2], [1, 2, 99]) is True


def test_validate_second_too_short():
    with pytest.raises(ValueError):
        validate([1, 2, 3], [1, 2])


def test_validate_verbose_reports_mismatches(capsys):
    assert validate_verbose([1, 2, 3], [4, 2, 6]) is True
    out = capsys.readouterr().out
    assert "Found mismatch at trip 0" in out
    assert "Found mismatch at trip 2" in out
    assert "Found mismatch at trip 1" not in out
    assert out.strip().endswith("Mismatches: 2")


def test_validate_verbose_second_too_short():
    with pytest.raises(ValueError):
        validate_verbose([1], [])


def _finder(results):
    return lambda source, target: results[(source, target)]


def test_all_paths_valid():
    finder = _finder({(0, 2): (8, [(0, 1, 5), (1, 2, 3)]), (2, 0): (None, [])})
    report = check_unpacked_paths([(0, 2), (2, 0)], finder, GRAPH)
    assert report.path_mismatches == 0
    assert report.distance_sum_mismatches == 0
    assert report.messages == []


def test_wrong_edge_weight_counted(capsys):
    finder = _finder({(0, 2): (8, [(0, 1, 6), (1, 2, 2)])})
    report = check_unpacked_paths([(0, 2)], finder, GRAPH)
    assert report.path_mismatches == 2
    assert report.distance_sum_mismatches == 0
    assert "actual length is 5" in capsys.readouterr().out


def test_missing_edge_stops_path_check():
    finder = _finder({(0, 2): (8, [(1, 0, 5), (0, 2, 1)])})
    report = check_unpacked_paths([(0, 2)], finder, GRAPH)
    assert report.path_mismatches == 1
    assert "doesn't exist" in report.messages[0]


def test_distance_sum_mismatch():
    finder = _finder({(0, 2): (9, [(0, 1, 5), (1, 2, 3)])})
    report = check_unpacked_paths([(0, 2)], finder, GRAPH)
    assert report.path_mismatches == 0
    assert report.distance_sum_mismatches == 1


def test_unreachable_skips_sum_check():
    finder = _finder({(1, 0): (None, [(1, 2, 3)])})
    report = check_unpacked_paths([(1, 0)], finder, GRAPH)
    assert report.distance_sum_mismatches == 0


def test_empty_report_percentages_and_summary():
    report = UnpackingReport(trips=0)
    assert report.path_mismatch_percent == report.distance_sum_mismatch_percent == 0.0
    assert report.summary().startswith("Finished paths validation.")