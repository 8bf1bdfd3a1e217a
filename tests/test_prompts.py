import pytest

from tictactoe.ui.prompts import parse_command


class TestParseCommand:
    @pytest.mark.parametrize("raw,index", [("1", 0), ("5", 4), (" 9 ", 8)])
    def test_moves(self, raw, index):
        assert parse_command(raw) == ("move", index)

    @pytest.mark.parametrize("raw", ["q", "Quit", "EXIT "])
    def test_quit(self, raw):
        assert parse_command(raw) == ("quit", None)

    @pytest.mark.parametrize("raw", ["r", "reset", " R"])
    def test_reset(self, raw):
        assert parse_command(raw) == ("reset", None)

    @pytest.mark.parametrize("raw", ["0", "10", "abc", "", "-1"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_command(raw)
