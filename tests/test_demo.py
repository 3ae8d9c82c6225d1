"""
Tests for the demonstration harness and level printer.
"""

import logging

from demo import main, print_level, run_demo


class TestDemo:
    """Tests for the scripted demonstration."""

    def test_run_demo_output(self, caplog):
        """Test the lines emitted by the demo."""
        lines = []
        with caplog.at_level(logging.ERROR):
            tree = run_demo(sink=lines.append)

        assert lines == [
            "Before balance:",
            "TEN", "THREE", "ONE", "FIVE", "TWO", "SEVEN",
            "After balance:",
            "FIVE", "TWO", "TEN", "ONE", "THREE", "SEVEN",
            "Size: 6",
            "TEN",
            "Error: min() called on an empty table",
        ]
        assert tree.size() == 6
        assert "Empty table check" in caplog.text

    def test_print_level(self, sample_tree):
        """Test the level printer feeds values to the sink."""
        lines = []
        print_level(sample_tree, 3, lines.append)

        assert lines == ["THREE", "ONE", "FIVE", "TWO", "SEVEN"]

    def test_print_level_missing_key(self, sample_tree):
        """Test the level printer on a missing key prints nothing."""
        lines = []
        print_level(sample_tree, 4, lines.append)

        assert lines == []

    def test_main_prints(self, capsys, monkeypatch):
        """Test the entry point writes to stdout."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        main()

        out = capsys.readouterr().out
        assert out.startswith("Before balance:\nTEN\n")
        assert "Size: 6\n" in out
