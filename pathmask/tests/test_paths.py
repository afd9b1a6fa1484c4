import pytest

from pathmask.core.paths import PathNormalizer, RuleSet, normalize_path


@pytest.mark.parametrize(
    "path,expected",
    [
        ("$", "$"),
        ("$.name", "$.name"),
        ("$[0]", "$[]"),
        ("$.jobs[12].name", "$.jobs[].name"),
        ("$.matrix[0][3]", "$.matrix[][]"),
        ("$.items[]", "$.items[]"),
        ("$.weird[x]", "$.weird[x]"),
        ("$.neg[-1]", "$.neg[-1]"),
    ],
)
def test_normalize_path_collapses_indices(path, expected) -> None:
    assert normalize_path(path) == expected


def test_normalize_path_is_idempotent() -> None:
    normalizer = PathNormalizer()
    for path in ["$.a[1].b[22][3]", "$.plain", "$[7]"]:
        once = normalizer(path)
        assert normalizer(once) == once


def test_rule_set_collapses_duplicates() -> None:
    rules = RuleSet(["$.a", "$.a", "$.b[]"])
    assert len(rules) == 2
    assert list(rules) == ["$.a", "$.b[]"]


def test_rule_set_requires_exact_match() -> None:
    rules = RuleSet(["$.a.b"])
    assert rules.matches("$.a.b")
    assert not rules.matches("$.a.bb")
    assert not rules.matches("$.a")
    assert not rules.matches("$.a.b.c")


def test_rule_set_ignores_concrete_index() -> None:
    rules = RuleSet(["$.items[]"])
    assert rules.matches("$.items[0]")
    assert rules.matches("$.items[5]")
    assert not rules.matches("$.items")


def test_rule_set_contains_checks_canonical_form_only() -> None:
    rules = RuleSet(["$.someField[].subField"])
    assert rules.contains("$.someField[].subField")
    assert not rules.contains("$.someField[2].subField")
    assert "$.someField[].subField" in rules
