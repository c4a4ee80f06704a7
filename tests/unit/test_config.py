"""Tests for CompareConfig."""

from __future__ import annotations

import os

import pytest

from ivc.config import DEFAULT_EXTENSION, DEFAULT_TOLERANCE, CompareConfig


class TestFromDirectory:
    def test_roots_under_directory(self) -> None:
        cfg = CompareConfig.from_directory("images")
        assert cfg.original_dir == os.path.join("images", "original")
        assert cfg.latest_dir == os.path.join("images", "latest")

    def test_defaults(self) -> None:
        cfg = CompareConfig.from_directory()
        assert cfg.tolerance == DEFAULT_TOLERANCE
        assert cfg.extension == DEFAULT_EXTENSION
        assert cfg.max_workers >= 1
        assert cfg.fail_fast is True

    def test_overrides_pass_through(self) -> None:
        cfg = CompareConfig.from_directory("x", tolerance=0.0, max_workers=3, fail_fast=False)
        assert (cfg.tolerance, cfg.max_workers, cfg.fail_fast) == (0.0, 3, False)


class TestValidation:
    @pytest.mark.parametrize("tolerance", [0.0, 5.0, 100.0])
    def test_tolerance_bounds_inclusive(self, tolerance: float) -> None:
        assert CompareConfig("a", "b", tolerance=tolerance).tolerance == tolerance

    @pytest.mark.parametrize("tolerance", [-0.1, 100.5])
    def test_tolerance_out_of_range(self, tolerance: float) -> None:
        with pytest.raises(ValueError, match="tolerance"):
            CompareConfig("a", "b", tolerance=tolerance)

    def test_leading_dot_stripped(self) -> None:
        assert CompareConfig("a", "b", extension=".bmp").extension == "bmp"

    def test_empty_extension(self) -> None:
        with pytest.raises(ValueError, match="extension"):
            CompareConfig("a", "b", extension=".")

    def test_workers_positive(self) -> None:
        with pytest.raises(ValueError, match="max_workers"):
            CompareConfig("a", "b", max_workers=0)

    def test_timeout_positive_or_none(self) -> None:
        assert CompareConfig("a", "b", timeout_s=None).timeout_s is None
        with pytest.raises(ValueError, match="timeout_s"):
            CompareConfig("a", "b", timeout_s=0)
