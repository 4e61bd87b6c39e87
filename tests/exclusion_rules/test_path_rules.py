import os

from dir2summary.exclusion_rules.path_rules import PathExclusionRules


def test_excludes_by_absolute_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    rules = PathExclusionRules([tmp_path / "summary.txt"])

    assert rules.exclude("summary.txt")
    assert rules.exclude("./summary.txt")
    assert rules.exclude(os.path.join(str(tmp_path), "summary.txt"))
    assert not rules.exclude("docs/summary.txt")


def test_trailing_slash_is_ignored(tmp_path):
    rules = PathExclusionRules([tmp_path / "out"])
    assert rules.exclude(str(tmp_path / "out") + "/")


def test_empty_set_excludes_nothing():
    rules = PathExclusionRules([])
    assert not rules.exclude("/")
    assert not rules.exclude("anything")
