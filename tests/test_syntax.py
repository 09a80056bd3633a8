import pytest

from slayshell.syntax import QuoteTracker, ShellSyntaxError, check_syntax


@pytest.mark.parametrize(
    "line, token",
    [
        ("ls | | wc", "|"),
        ("ls || wc", "|"),
        ("echo >>> f", ">"),
        ("cat <<< f", "<"),
        ("cat < < f", "<"),
        ("ls > | wc", "|"),
        ("cat < > f", ">"),
    ],
)
def test_operator_errors_report_offending_char(line, token):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(line)
    assert info.value.token == token


@pytest.mark.parametrize(
    "line, token",
    [
        ("cat <", "<"),
        ("echo hi >", ">"),
        ("echo hi >> ", ">"),
        ("ls |", "|"),
        ("| ls", "|"),
    ],
)
def test_dangling_operators(line, token):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(line)
    assert info.value.token == token


@pytest.mark.parametrize("line", ["echo 'abc", 'echo "abc', "echo \"it's"])
def test_unclosed_quotes(line):
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax(line)
    assert info.value.token == "' or \""


def test_error_message_names_token():
    with pytest.raises(ShellSyntaxError, match="syntax error near <"):
        check_syntax("cat <")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        check_syntax("ls |")


def test_feed_reports_quoted_characters():
    tracker = QuoteTracker()
    assert [tracker.feed(c) for c in '"a"b'] == [False, False, True, True]


def test_single_quote_inside_double_does_not_toggle():
    tracker = QuoteTracker()
    tracker.feed('"')
    assert tracker.feed("'") is False
    assert tracker.single_quoted is False
    assert tracker.double_quoted is True


def test_operators_inside_quotes_are_not_counted():
    tracker = QuoteTracker()
    for char in "'<>|'":
        tracker.feed(char)
    assert (tracker.less, tracker.greater, tracker.pipes) == (0, 0, 0)


def test_feed_counts_operators():
    tracker = QuoteTracker()
    for char in "<<":
        tracker.feed(char)
    assert tracker.less == 2
    assert tracker.other == 0


def test_word_clears_pipe_count():
    tracker = QuoteTracker()
    tracker.feed("|")
    assert tracker.pipes == 1
    tracker.feed("a")
    assert tracker.pipes == 0
    assert tracker.other == 1


def test_reset_restores_defaults():
    tracker = QuoteTracker()
    for char in "ab < '":
        tracker.feed(char)
    tracker.reset()
    assert tracker == QuoteTracker()


def test_quoted_operators_do_not_raise_but_trailing_pipe_does():
    with pytest.raises(ShellSyntaxError) as info:
        check_syntax("echo '| < >' |")
    assert info.value.token == "|"