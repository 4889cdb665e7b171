"""Tests for class attribute extraction."""

from bemtree.extractor import extract_classes, iter_class_attributes


class TestExtractClasses:
    """Tests for extract_classes()."""

    def test_html_class_attribute(self) -> None:
        assert extract_classes('<div class="card"></div>') == ["card"]

    def test_jsx_class_name_attribute(self) -> None:
        assert extract_classes('<div className="card"></div>') == ["card"]

    def test_splits_on_whitespace(self) -> None:
        """Every word in the value becomes one class name."""
        text = '<div class="card  card--wide\tcard__body\n card__title"></div>'
        assert extract_classes(text) == ["card", "card--wide", "card__body", "card__title"]

    def test_source_order_across_attributes(self) -> None:
        text = """
        <div className="app">
          <div className="app__header"></div>
          <h1 class='app__heading--h1 title'>Hello</h1>
        </div>
        """
        assert extract_classes(text) == ["app", "app__header", "app__heading--h1", "title"]

    def test_single_quotes(self) -> None:
        assert extract_classes("<p class='note note--info'>") == ["note", "note--info"]

    def test_closing_quote_must_match_opening(self) -> None:
        """The other quote character is part of the value."""
        assert extract_classes("""<p class="it's fine">""") == ["it's", "fine"]
        assert extract_classes("""<p class='say "hi"'>""") == ["say", '"hi"']

    def test_whitespace_around_equals(self) -> None:
        assert extract_classes('<p class = "a b">') == ["a", "b"]

    def test_other_attributes_ignored(self) -> None:
        text = '<a id="link" href="/x" title="class" data-role="card">'
        assert extract_classes(text) == []

    def test_attribute_must_stand_alone(self) -> None:
        text = '<div data-class="a" subclass="b" :class="c" v-bind.class="d" class="e">'
        assert extract_classes(text) == ["e"]

    def test_empty_value(self) -> None:
        assert extract_classes('<div class=""></div>') == []
        assert extract_classes('<div class="   "></div>') == []

    def test_no_attributes(self) -> None:
        assert extract_classes("") == []
        assert extract_classes("plain text, no markup") == []

    def test_malformed_markup_still_scanned(self) -> None:
        """Well-formedness is never checked."""
        assert extract_classes('<div class="a"<<< <p className="b"') == ["a", "b"]

    def test_duplicates_preserved(self) -> None:
        """Deduplication is the builder's job."""
        text = '<i class="icon"></i><i class="icon"></i>'
        assert extract_classes(text) == ["icon", "icon"]


class TestIterClassAttributes:
    """Tests for iter_class_attributes()."""

    def test_yields_raw_values(self) -> None:
        text = """<div class="a  b"><span className='c'></span></div>"""
        assert list(iter_class_attributes(text)) == ["a  b", "c"]

    def test_yields_empty_values(self) -> None:
        assert list(iter_class_attributes('<div class="">')) == [""]
