"""Tests for page/limit parsing and paging metadata."""

from unittest.mock import MagicMock

import pytest

from ats.crud.pagination import Paging, paginate, paging_meta, parse_int, resolve_paging


class TestParseInt:
    """Tests for parse_int."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12", 12),
            ("  7 ", 7),
            ("-3", -3),
            ("+4", 4),
            ("5abc", 5),
            ("007", 7),
            ("99999999999999999999999", 10**18),
            ("-" + "9" * 5000, -(10**18)),
            ("abc", None),
            ("", None),
            (None, None),
            (9, 9),
        ],
    )
    def test_parse_int(self, raw, expected):
        assert parse_int(raw) == expected

    def test_booleans_are_not_integers(self):
        assert parse_int(True) is None


class TestResolvePaging:
    """Tests for resolve_paging clamps and fallbacks."""

    def test_defaults_when_absent(self):
        paging = resolve_paging(None, None, default_limit=10, max_limit=100)
        assert paging == Paging(page=1, limit=10)
        assert paging.skip == 0

    def test_page_floored_at_one(self):
        assert resolve_paging("-2", None, 10, 100).page == 1
        assert resolve_paging("0", None, 10, 100).page == 1
        assert resolve_paging("junk", None, 10, 100).page == 1

    def test_limit_zero_falls_back_to_default(self):
        assert resolve_paging(None, "0", 10, 100).limit == 10

    def test_non_numeric_limit_falls_back_to_default(self):
        assert resolve_paging(None, "lots", 25, 100).limit == 25

    def test_limit_clamped_to_maximum(self):
        assert resolve_paging(None, "1000", 10, 100).limit == 100

    def test_negative_limit_clamped_to_one(self):
        assert resolve_paging(None, "-5", 10, 100).limit == 1

    @pytest.mark.parametrize("max_limit", [1, 5, 50, 100])
    def test_limit_always_within_bounds(self, max_limit):
        for raw in ("-100", "0", "1", "3", "99", "1000", "x", None):
            limit = resolve_paging(None, raw, default_limit=1, max_limit=max_limit).limit
            assert 1 <= limit <= max_limit

    def test_skip_offset(self):
        assert resolve_paging("3", "20", 10, 100).skip == 40

    def test_oversized_page_is_clamped(self):
        paging = resolve_paging("99999999999999999999999", "10", 10, 100)
        assert paging.page > 1
        assert paging.skip <= 2**53 - 1


class TestPagingMeta:
    """Tests for paging_meta."""

    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (95, 7, 14)],
    )
    def test_total_pages_is_ceiling(self, total, limit, pages):
        meta = paging_meta(total, Paging(page=1, limit=limit))
        assert meta == {"total": total, "page": 1, "limit": limit, "totalPages": pages}


class TestPaginate:
    """Tests for paginate."""

    def test_count_uses_same_filter(self):
        repo = MagicMock()
        repo.find_many.return_value = [{"id": "a"}]
        repo.count.return_value = 12

        result = paginate(repo, Paging(page=2, limit=5), [("id", "desc")], where={"x": 1})

        repo.find_many.assert_called_once_with(
            skip=5, take=5, order_by=[("id", "desc")], where={"x": 1}
        )
        repo.count.assert_called_once_with(where={"x": 1})
        assert result["paging"]["totalPages"] == 3
        assert result["data"] == [{"id": "a"}]
