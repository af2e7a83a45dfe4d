"""Tests for Inkling utility modules."""

import logging


class TestGetLogger:
    def test_prefix_added(self) -> None:
        from inkling.utils.logger import get_logger

        assert get_logger("mymodule").name == "inkling.mymodule"

    def test_prefix_not_doubled(self) -> None:
        from inkling.utils.logger import get_logger

        assert get_logger("inkling.parser").name == "inkling.parser"
        assert get_logger("inkling").name == "inkling"

    def test_returns_stdlib_logger(self) -> None:
        from inkling.utils.logger import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_library_adds_no_handlers(self) -> None:
        import inkling  # noqa: F401

        assert logging.getLogger("inkling").handlers == []


class TestEscapeHtml:
    def test_special_characters(self) -> None:
        from inkling.utils.text import escape_html

        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_single_quote_untouched(self) -> None:
        from inkling.utils.text import escape_html

        assert escape_html("it's") == "it's"

    def test_plain_text_untouched(self) -> None:
        from inkling.utils.text import escape_html

        assert escape_html("plain") == "plain"


class TestCharsets:
    def test_delimiters(self) -> None:
        from inkling.charsets import DELIMITERS, is_delimiter

        assert DELIMITERS == frozenset("*_~")
        assert is_delimiter("~")
        assert not is_delimiter("-")

    def test_whitespace(self) -> None:
        from inkling.charsets import is_whitespace

        for char in " \t\n\r\v\f\x85\u00a0\u2003\u2028\u2029\u3000":
            assert is_whitespace(char), repr(char)
        assert not is_whitespace("a")
        assert not is_whitespace("\u200b")  # zero width space is Cf

    def test_boundary(self) -> None:
        from inkling.charsets import is_boundary

        for char in " \n.,!?;:*_-()[]{}«»“”~":
            assert is_boundary(char), repr(char)
        for char in "a1$+<>=^`|Z":
            assert not is_boundary(char), repr(char)
