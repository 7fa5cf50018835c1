"""Unit tests for bundled_assets.properties module.

Tests cover separators, comments, continuations, escapes and encodings.
"""

import pytest

from bundled_assets import properties


class TestSeparators:
    """Tests for key/value separation."""

    def test_equals_colon_and_whitespace(self) -> None:
        """All three separator styles are accepted."""
        table = properties.loads("a=1\nb:2\nc 3\n")
        assert table == {"a": "1", "b": "2", "c": "3"}

    def test_whitespace_around_separator(self) -> None:
        """Whitespace around the separator is dropped, trailing whitespace kept."""
        table = properties.loads("key  =  value \n")
        assert table == {"key": "value "}

    def test_key_without_value(self) -> None:
        """A lone key maps to the empty string."""
        assert properties.loads("flag\n") == {"flag": ""}

    def test_escaped_separator_in_key(self) -> None:
        """Escaped separators are part of the key."""
        assert properties.loads("a\\=b=c\n") == {"a=b": "c"}

    def test_value_may_contain_separators(self) -> None:
        """Only the first separator splits."""
        assert properties.loads("url=http://x/?a=b\n") == {"url": "http://x/?a=b"}

    def test_later_duplicate_wins(self) -> None:
        """Repeated keys keep the last value."""
        assert properties.loads("k=1\nk=2\n") == {"k": "2"}


class TestComments:
    """Tests for comments and blank lines."""

    def test_hash_and_bang_comments(self) -> None:
        """Lines starting with # or ! are ignored."""
        table = properties.loads("# comment\n  ! another\n\nk=v\n")
        assert table == {"k": "v"}


class TestContinuations:
    """Tests for backslash line continuation."""

    def test_continuation_drops_leading_whitespace(self) -> None:
        """The next line's indentation is not part of the value."""
        table = properties.loads("fruits=apple, \\\n    banana\n")
        assert table == {"fruits": "apple, banana"}

    def test_escaped_backslash_is_not_continuation(self) -> None:
        """An even number of trailing backslashes ends the line."""
        table = properties.loads("path=C:\\\\\nnext=1\n")
        assert table == {"path": "C:\\", "next": "1"}


class TestEscapes:
    """Tests for escape sequences."""

    def test_unicode_escape(self) -> None:
        """\\uXXXX decodes to the code point."""
        assert properties.loads("de=Gr\\u00fc\\u00dfe\n") == {"de": "Grüße"}

    def test_control_escapes(self) -> None:
        """\\t and \\n become tab and newline."""
        assert properties.loads("k=a\\tb\\nc\n") == {"k": "a\tb\nc"}

    def test_malformed_unicode_escape(self) -> None:
        """A truncated \\u escape raises ValueError."""
        with pytest.raises(ValueError):
            properties.loads("k=\\u12\n")


class TestEncodings:
    """Tests for byte input."""

    def test_utf8_bytes(self) -> None:
        """UTF-8 input is decoded as such."""
        assert properties.loads("k=Grüße\n".encode()) == {"k": "Grüße"}

    def test_latin1_fallback(self) -> None:
        """Invalid UTF-8 falls back to ISO-8859-1."""
        assert properties.loads("k=Grüße\n".encode("iso-8859-1")) == {"k": "Grüße"}

    def test_bom_is_stripped(self) -> None:
        """A leading byte order mark does not end up in the first key."""
        assert properties.loads("\ufeffk=v\n".encode()) == {"k": "v"}
