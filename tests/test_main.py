"""
Tests for the command line entry point.
"""

import main


class TestMain:
    """Argument parsing and startup failures."""

    def test_defaults(self):
        args = main._parse_args([])
        assert args.path == "testdata.csv"
        assert args.output == "output.csv"
        assert args.gui is False
        assert args.log_level == "WARNING"

    def test_missing_file_exits_with_error(self, tmp_path, capsys):
        code = main.main([str(tmp_path / "missing.csv"), "--log-level", "ERROR"])
        assert code == 1
        assert "Error leyendo el archivo CSV" in capsys.readouterr().out
