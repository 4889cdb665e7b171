"""Tests for bemtree utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger()."""

    def test_prefixes_name(self) -> None:
        from bemtree.utils.logger import get_logger

        assert get_logger("mymodule").name == "bemtree.mymodule"

    def test_keeps_namespaced_name(self) -> None:
        from bemtree.utils.logger import get_logger

        assert get_logger("bemtree.builder").name == "bemtree.builder"
        assert get_logger("bemtree").name == "bemtree"

    def test_does_not_match_prefix_lookalikes(self) -> None:
        from bemtree.utils.logger import get_logger

        assert get_logger("bemtreex").name == "bemtree.bemtreex"

    def test_returns_stdlib_logger(self) -> None:
        from bemtree.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_library_installs_no_handlers(self) -> None:
        import bemtree  # noqa: F401

        assert logging.getLogger("bemtree").handlers == []


class TestStringBuilder:
    """Tests for the line-oriented StringBuilder."""

    def test_indented_lines(self) -> None:
        from bemtree.stringbuilder import StringBuilder

        sb = StringBuilder(indent="  ")
        sb.line("a {", 0).line("b", 1).line("}", 0)
        assert sb.build() == "a {\n  b\n}\n"

    def test_blank_line(self) -> None:
        from bemtree.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.line("a").blank().line("b")
        assert sb.build() == "a\n\nb\n"

    def test_empty_line_keeps_indent(self) -> None:
        from bemtree.stringbuilder import StringBuilder

        assert StringBuilder().line("", 2).build() == "\t\t\n"

    def test_len_and_bool(self) -> None:
        from bemtree.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert not sb
        assert len(sb) == 0
        sb.line("x")
        assert sb
        assert len(sb) == 1
        assert StringBuilder().build() == ""
