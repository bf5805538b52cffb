"""Tests for relnotes.display — rich console summary."""

from __future__ import annotations

from unittest.mock import patch

from rich.console import Console

from relnotes.display import display_summary
from relnotes.models import ReleaseSet


def _capture(release_set: ReleaseSet) -> str:
    console = Console(record=True, width=120)
    with patch("relnotes.display._console", console):
        display_summary(release_set)
    return console.export_text()


class TestDisplaySummary:
    """display_summary prints a version table and a totals panel."""

    def test_empty_release_set(self) -> None:
        output = _capture(ReleaseSet())
        assert "No versions to display." in output

    def test_versions_in_render_order(self, sample_release_set: ReleaseSet) -> None:
        output = _capture(sample_release_set)
        assert output.index("2.1.0") < output.index("1.2.0") < output.index("1.0.0")

    def test_group_labels_listed(self, sample_release_set: ReleaseSet) -> None:
        output = _capture(sample_release_set)
        assert "Misc, Fix" in output
        assert "Feature, Fix" in output

    def test_totals_panel(self, sample_release_set: ReleaseSet) -> None:
        output = _capture(sample_release_set)
        assert "3 version(s), 6 entries" in output
        assert "Feature: 3" in output
        assert "Fix: 2" in output
        assert "Misc: 1" in output
        assert "Suffix: present" in output
