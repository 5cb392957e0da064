"""Property-based tests for rendering.

Uses hypothesis to verify invariants that must hold for all inputs:

- Text that cannot form a tag renders unchanged
- Output without ``{{`` is a fixed point of render
- Substituted values are emitted verbatim, never scanned for tags
- Arbitrary input never raises
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from curly import render

from .strategies import (
    arbitrary_template_source,
    brace_text,
    identifier,
    json_values,
    plain_text,
    template_fragment,
    text_context,
)


class TestRenderProperties:
    """Invariants of render over generated templates and contexts."""

    @given(source=brace_text, context=json_values)
    @settings(max_examples=200)
    def test_literal_text_unchanged(self, source: str, context: object) -> None:
        assert render(source, context) == source

    @given(source=template_fragment, context=text_context)
    @settings(max_examples=200)
    def test_result_without_tags_is_fixed_point(
        self, source: str, context: dict[str, str]
    ) -> None:
        once = render(source, context)
        if "{{" not in once:
            assert render(once, context) == once

    @given(name=identifier, value=st.text(max_size=40))
    @settings(max_examples=200)
    def test_value_emitted_verbatim(self, name: str, value: str) -> None:
        assert render("<{{" + name + "}}>", {name: value}) == f"<{value}>"

    @given(name=identifier, inner=identifier)
    @settings(max_examples=100)
    def test_tag_shaped_value_not_rescanned(self, name: str, inner: str) -> None:
        value = "{{" + inner + "}}"
        context = {inner: "expanded", name: value}
        assert render("{{" + name + "}}", context) == value

    @given(prefix=plain_text, name=identifier)
    @settings(max_examples=100)
    def test_unterminated_tail_verbatim(self, prefix: str, name: str) -> None:
        source = prefix + "{{" + name
        assert render(source, {name: "x"}) == source

    @given(items=st.lists(plain_text, max_size=8))
    @settings(max_examples=100)
    def test_each_concatenates_in_order(self, items: list[str]) -> None:
        context = {"items": [{"v": item} for item in items]}
        assert render("{{#each items}}{{v}}{{/each}}", context) == "".join(items)

    @given(source=arbitrary_template_source, context=json_values)
    @settings(max_examples=300)
    def test_no_unhandled_crash(self, source: str, context: object) -> None:
        assert isinstance(render(source, context), str)
