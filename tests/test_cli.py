"""Tests for the command line entry point."""

from datebook.__main__ import main


class TestMain:
    def test_weekly(self, capsys):
        code = main(["2025-06-16", "--on", "Monday", "--for", "4", "weeks", "--format", "%D %{yyyy-MM-dd}"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            "1st 2025-06-16",
            "2nd 2025-06-23",
            "3rd 2025-06-30",
            "4th 2025-07-07",
        ]

    def test_until(self, capsys):
        code = main(["2025-06-16", "--until", "2025-06-18"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["2025-06-16", "2025-06-17", "2025-06-18"]

    def test_every_other_week(self, capsys):
        code = main(["2025-06-16", "--on", "Monday", "--every-week", "2", "--for", "2", "times", "--format", "%w"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["1", "3"]

    def test_invalid_start(self, capsys):
        assert main(["2025-02-30"]) == 2
        assert "Invalid start date" in capsys.readouterr().err

    def test_iteration_cap(self, capsys):
        code = main(["2025-06-16", "--nth", "6", "--max-iterations", "100"])
        assert code == 2
        assert "Gave up after 100" in capsys.readouterr().err
