"""Tests for config loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from pointwise.config import CheckConfig, MatcherName, load_config


def _example_configs() -> list[Path]:
    repo_root = Path(__file__).resolve().parents[1]
    examples_dir = repo_root / "examples"
    return sorted(p for p in examples_dir.glob("*.yaml") if p.is_file())


def test_load_minimal_config(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: bounded
            pointwise: lt
            actual: [1, 2]
            expected: [2, 3]
    """)
    cfg = load_config(path)
    assert len(cfg.checks) == 1
    check = cfg.checks[0]
    assert check.name == "bounded"
    assert check.pointwise is MatcherName.LT
    assert check.actual == [1, 2]
    assert check.expected == [2, 3]
    assert check.negate is False
    assert check.weight == 1.0


def test_load_config_with_negate_and_weight(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: differs
            pointwise: eq
            actual: [1]
            expected: [2]
            negate: true
            weight: 2.5
    """)
    check = load_config(path).checks[0]
    assert check.negate is True
    assert check.weight == 2.5


def test_empty_file_is_rejected(tmp_yaml):
    path = tmp_yaml("")
    with pytest.raises(ValidationError):
        load_config(path)


def test_empty_checks_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks: []
    """)
    with pytest.raises(ValidationError, match="must not be empty"):
        load_config(path)


def test_unknown_matcher_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: bad
            pointwise: approx
            actual: [1]
            expected: [1]
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_extra_keys_rejected():
    with pytest.raises(ValidationError):
        CheckConfig(name="x", pointwise="eq", actual=[], expected=[], extra=1)


def test_duplicate_names_rejected(tmp_yaml):
    path = tmp_yaml("""\
        checks:
          - name: same
            pointwise: eq
            actual: [1]
            expected: [1]
          - name: same
            pointwise: eq
            actual: [2]
            expected: [2]
    """)
    with pytest.raises(ValidationError, match="Duplicate check name"):
        load_config(path)


def test_comma_in_name_rejected():
    with pytest.raises(ValidationError, match="comma"):
        CheckConfig(name="a,b", pointwise="eq", actual=[], expected=[])


def test_negative_weight_rejected():
    with pytest.raises(ValidationError, match="negative"):
        CheckConfig(name="a", pointwise="eq", actual=[], expected=[], weight=-1)


@pytest.mark.parametrize("path", _example_configs(), ids=lambda p: p.name)
def test_example_configs_load(path):
    cfg = load_config(path)
    assert cfg.checks
