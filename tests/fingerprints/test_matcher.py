from __future__ import annotations

import pytest

from src.fingerprint_clock.fingerprint_clock.fingerprints.matcher import TemplateMatcher
from tests.fakes import make_template


def test_identical_templates_score_100():
    a = make_template([1, 2, 3, 250])

    result = TemplateMatcher().compare(a, a)

    assert result.matched is True
    assert result.score == 100


def test_exact_match_ignores_threshold():
    a = make_template([9, 9, 9])
    b = make_template([9, 9, 9])

    result = TemplateMatcher(threshold=100).compare(a, b)

    assert result.matched is True
    assert result.score == 100


def test_within_tolerance_at_every_position_matches():
    result = TemplateMatcher().compare(make_template([10, 20, 30]), make_template([12, 18, 33]))

    assert result.matched is True
    assert result.score == 100


def test_exactly_seventy_percent_is_not_a_match():
    a = make_template([100] * 10)
    b = make_template([100] * 7 + [110] * 3)

    result = TemplateMatcher().compare(a, b)

    assert result.score == pytest.approx(70.0)
    assert result.matched is False


def test_above_threshold_matches():
    a = make_template([100] * 10)
    b = make_template([100] * 8 + [0] * 2)

    result = TemplateMatcher().compare(a, b)

    assert result.score == pytest.approx(80.0)
    assert result.matched is True


def test_tolerance_boundary_is_inclusive():
    matcher = TemplateMatcher()

    assert matcher.compare(make_template([0, 250]), make_template([5, 255])).score == 100
    assert matcher.compare(make_template([0, 250]), make_template([6, 255])).score == pytest.approx(50.0)


def test_bytes_compared_unsigned():
    # 0 vs 255 would be within tolerance if bytes were read as signed (-1)
    result = TemplateMatcher().compare(make_template([0, 7]), make_template([255, 7]))

    assert result.score == pytest.approx(50.0)


def test_compares_common_prefix_only():
    a = make_template([10, 20, 30, 40])
    b = make_template([10, 20])

    result = TemplateMatcher().compare(a, b)

    assert result.score == 100
    assert result.matched is True


@pytest.mark.parametrize("a,b", [([], [1, 2, 3]), ([1, 2], [])])
def test_empty_payload_scores_zero(a, b):
    result = TemplateMatcher().compare(make_template(a), make_template(b))

    assert result.matched is False
    assert result.score == 0


def test_score_is_symmetric():
    matcher = TemplateMatcher()
    a = make_template([0, 50, 100, 150, 200, 250, 3])
    b = make_template([4, 57, 99, 140, 201, 10])

    assert matcher.compare(a, b).score == matcher.compare(b, a).score
    assert matcher.compare(a, b).matched == matcher.compare(b, a).matched


def test_format_is_not_compared():
    from dataclasses import replace

    from src.fingerprint_clock.fingerprint_clock.core.enums import TemplateFormat

    a = make_template([1, 2, 3])
    b = replace(a, format=TemplateFormat.WSQ)

    assert TemplateMatcher().compare(a, b).score == 100
