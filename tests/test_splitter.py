import pytest

from slayshell.splitter import remove_quotes, split_quoted


def test_split_on_spaces_drops_empty_pieces():
    assert split_quoted("echo  hello   world", " ", False) == ["echo", "hello", "world"]


def test_quoted_separator_is_kept_inside_piece():
    assert split_quoted('echo "a b" c', " ", False) == ["echo", '"a b"', "c"]


def test_quoted_piece_with_removal():
    assert split_quoted('echo "a b" c', " ", True) == ["echo", "a b", "c"]


def test_pipe_split_keeps_quoted_pipe():
    assert split_quoted('echo "a|b" | wc', "|", False) == ['echo "a|b" ', " wc"]


def test_single_quotes_protect_separator():
    assert split_quoted("echo 'x y'", " ", True) == ["echo", "x y"]


def test_unclosed_quote_runs_to_end():
    assert split_quoted('echo "a b', " ", False) == ["echo", '"a b']


@pytest.mark.parametrize("text", ["", "   ", "|||"])
def test_nothing_but_separators_gives_no_pieces(text):
    sep = "|" if "|" in text else " "
    assert split_quoted(text, sep, False) == []


def test_none_gives_empty_list():
    assert split_quoted(None, " ", True) == []


@pytest.mark.parametrize(
    "text",
    ["ls -l | grep x | wc", "a ' b ' c", 'x "y z" w', "   lead trail   "],
)
def test_pieces_are_nonempty_and_come_from_text(text):
    pieces = split_quoted(text, " ", False)
    assert all(pieces)
    position = 0
    for piece in pieces:
        found = text.find(piece, position)
        assert found >= position
        position = found + len(piece)


def test_remove_quotes_double():
    assert remove_quotes('"hello"') == "hello"


def test_remove_quotes_keeps_other_quote_kind_inside():
    assert remove_quotes("'\"x\"'") == '"x"'
    assert remove_quotes("\"it's\"") == "it's"


def test_remove_quotes_none():
    assert remove_quotes(None) is None


def test_remove_quotes_without_quotes_is_identity():
    assert remove_quotes("plain text") == "plain text"


def test_remove_quotes_adjacent_sections():
    assert remove_quotes("a'b'\"c\"d") == "abcd"