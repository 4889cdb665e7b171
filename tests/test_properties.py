"""Property-based tests for the bemtree pipeline using Hypothesis.

Invariants that must hold for any input:
1. The extractor yields one token per word in every class attribute
2. Building is idempotent under repetition of the token sequence
3. Siblings never share a name
4. Rendered braces always balance
5. Well-formed tokens split back into exactly their parts
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from bemtree import generate
from bemtree.builder import build_forest, build_forest_from_classes
from bemtree.extractor import extract_classes
from bemtree.nodes import SelectorNode
from bemtree.renderers.scss import ScssRenderer
from bemtree.tokenizer import split_class_name

names = st.from_regex(r"[a-zA-Z0-9]{1,5}(-[a-zA-Z0-9]{1,3}){0,2}", fullmatch=True)


@st.composite
def bem_classes(draw: st.DrawFn) -> tuple[str, str, str | None, str | None]:
    block = draw(names)
    element = draw(st.one_of(st.none(), names.map(lambda n: f"__{n}")))
    modifier = draw(st.one_of(st.none(), names.map(lambda n: f"--{n}")))
    return f"{block}{element or ''}{modifier or ''}", block, element, modifier


class_tokens = st.one_of(
    bem_classes().map(lambda t: t[0]),
    st.text(alphabet="ab_-1", min_size=1, max_size=8),
)


def _assert_unique_siblings(node: SelectorNode) -> None:
    child_names = [child.name for child in node.children]
    assert len(child_names) == len(set(child_names))
    for child in node.children:
        _assert_unique_siblings(child)


class TestExtractorProperties:
    """Word counts and order are preserved."""

    @given(
        attributes=st.lists(st.lists(class_tokens, max_size=4), max_size=5),
        attr_name=st.sampled_from(["class", "className"]),
        quote=st.sampled_from(['"', "'"]),
    )
    @settings(max_examples=100)
    def test_one_token_per_word(self, attributes: list[list[str]], attr_name: str, quote: str) -> None:
        markup = "".join(
            f"<div {attr_name}={quote}{' '.join(words)}{quote}></div>\n" for words in attributes
        )
        expected = [word for words in attributes for word in words]
        assert extract_classes(markup) == expected


class TestTokenizerProperties:
    """Splitting well-formed tokens."""

    @given(bem_classes())
    @settings(max_examples=200)
    def test_well_formed_tokens_split_into_their_parts(
        self, case: tuple[str, str, str | None, str | None]
    ) -> None:
        token, block, element, modifier = case
        for strict in (False, True):
            parts = split_class_name(token, strict=strict)
            assert (parts.block, parts.element, parts.modifier) == (block, element, modifier)

    @given(st.text(max_size=20))
    @settings(max_examples=200)
    def test_never_raises_and_spans_are_substrings(self, token: str) -> None:
        parts = split_class_name(token)
        if parts.block is None:
            return
        assert token.startswith(parts.block)
        if parts.element is not None:
            assert parts.element in token
            assert parts.element.startswith("__")
        if parts.modifier is not None:
            assert token.endswith(parts.modifier)
            assert parts.modifier.startswith("--")


class TestBuilderProperties:
    """Forest invariants."""

    @given(st.lists(class_tokens, max_size=20))
    @settings(max_examples=100)
    def test_idempotent(self, tokens: list[str]) -> None:
        components = [split_class_name(token) for token in tokens]
        assert build_forest(components + components) == build_forest(components)

    @given(st.lists(class_tokens, max_size=20), st.booleans())
    @settings(max_examples=100)
    def test_unique_siblings(self, tokens: list[str], sort_children: bool) -> None:
        forest = build_forest_from_classes(tokens, sort_children=sort_children)
        for root in forest:
            _assert_unique_siblings(root)
        assert len(forest.blocks) == len(set(forest.blocks))

    @given(st.lists(class_tokens, max_size=20))
    @settings(max_examples=100)
    def test_modifiers_precede_elements_at_block_level(self, tokens: list[str]) -> None:
        for root in build_forest_from_classes(tokens):
            kinds = [child.is_modifier for child in root.children]
            assert kinds == sorted(kinds, reverse=True)


class TestRendererProperties:
    """Output shape."""

    @given(st.lists(class_tokens, max_size=20))
    @settings(max_examples=100)
    def test_braces_balance(self, tokens: list[str]) -> None:
        scss = ScssRenderer().render(build_forest_from_classes(tokens))
        depth = 0
        for char in scss:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                assert depth >= 0
        assert depth == 0

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_generate_total_on_any_text(self, text: str) -> None:
        assert isinstance(generate(text), str)
