# backend/tests/test_pagination.py

import pytest

from core.config import Settings
from core.pagination import build_meta, offset_for, page_numbers, resolve_page_size


class TestPageNumbers:

    @pytest.mark.parametrize("current,total,expected", [
        (5, 10, [1, None, 4, 5, 6, None, 10]),
        (1, 1, [1]),
        (1, 5, [1, 2, None, 5]),
        (4, 10, [1, 2, 3, 4, 5, None, 10]),
        (3, 5, [1, 2, 3, 4, 5]),
        (1, 0, []),
    ])
    def test_window(self, current, total, expected):
        assert page_numbers(current, total) == expected


class TestBuildMeta:

    def test_middle_page(self):
        meta = build_meta(page=2, per_page=10, total=35)

        assert meta.total_pages == 4
        assert meta.has_next is True
        assert meta.has_prev is True

    def test_empty_result(self):
        meta = build_meta(page=1, per_page=20, total=0)

        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_prev is False
        assert meta.pages == []

    def test_offset(self):
        assert offset_for(1, 20) == 0
        assert offset_for(3, 20) == 40


class TestResolvePageSize:

    @pytest.fixture
    def settings(self) -> Settings:
        return Settings(default_page_size=5, max_page_size=10)

    def test_default_from_settings(self, settings):
        assert resolve_page_size(None, settings) == 5

    def test_capped_at_max(self, settings):
        assert resolve_page_size(7, settings) == 7
        assert resolve_page_size(500, settings) == 10
