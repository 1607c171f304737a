from __future__ import annotations

import xml.etree.ElementTree as ET

import html5lib
import pytest

from diffviewer import (
    DiffConfig,
    DiffViewer,
    InvalidInputError,
    StyleOverrideError,
    UnknownLineError,
    render_diff,
)
from diffviewer.styles import DEFAULT_STYLES, compute_styles


def _parse(html: str) -> ET.Element:
    root = ET.Element("root")
    for child in html5lib.parseFragment(html, treebuilder="etree",
                                        namespaceHTMLElements=False):
        root.append(child)
    return root


def _classes(el: ET.Element) -> list[str]:
    return (el.get("class") or "").split()


def _gutters(root: ET.Element) -> dict[str, ET.Element]:
    return {td.get("data-line-id"): td for td in root.iter("td") if td.get("data-line-id")}


def _text(el: ET.Element) -> str:
    return "".join(el.itertext())


def test_split_view_renders_numbered_gutters():
    out = render_diff("a\nb", "a\nc")
    root = _parse(out)
    assert set(_gutters(root)) == {"L-1", "R-1", "L-2", "R-2"}
    assert len(list(root.iter("tr"))) == 2
    table = next(root.iter("table"))
    assert "diff-container" in _classes(table)
    assert "split-view" in _classes(table)


def test_modified_line_highlights_words_per_side():
    root = _parse(render_diff("foo bar", "foo baz"))
    removed = [_text(s) for s in root.iter("span") if "word-removed" in _classes(s)]
    added = [_text(s) for s in root.iter("span") if "word-added" in _classes(s)]
    assert removed == ["bar"]
    assert added == ["baz"]


def test_insertion_renders_empty_left_side():
    root = _parse(render_diff("a", "a\nb"))
    last_row = list(root.iter("tr"))[-1]
    cells = list(last_row.iter("td"))
    assert "empty-gutter" in _classes(cells[0])
    assert cells[3].get("data-line-id") == "R-2"
    assert "diff-added" in _classes(cells[3])


def test_unified_view_has_two_gutters_per_row():
    out = render_diff("foo bar", "foo baz", split_view=False)
    root = _parse(out)
    rows = list(root.iter("tr"))
    assert len(rows) == 2
    first_cells = list(rows[0].iter("td"))
    assert first_cells[0].get("data-line-id") == "L-1"
    assert "empty-gutter" in _classes(first_cells[1])
    assert "inline-view" in _classes(next(root.iter("table")))


def test_markers_for_changed_lines():
    root = _parse(render_diff("x", "y", split_view=False))
    markers = [_text(td).strip() for td in root.iter("td") if "marker" in _classes(td)]
    assert markers == ["-", "+"]


def test_text_is_escaped():
    out = render_diff("<b>x</b>", "<b>y</b>")
    assert "<b>" not in out
    assert "&lt;" in out


def test_highlight_lines_marks_matching_rows():
    viewer = DiffViewer("a\nb", "a\nb", highlight_lines=["L-2"])
    gutters = _gutters(_parse(viewer.render()))
    assert "highlighted-gutter" in _classes(gutters["L-2"])
    assert "highlighted-gutter" in _classes(gutters["R-2"])
    assert "highlighted-gutter" not in _classes(gutters["L-1"])


def test_highlight_lines_do_not_change_rows():
    plain = DiffViewer("a\nb", "a\nc").rows()
    highlighted = DiffViewer("a\nb", "a\nc", highlight_lines=["R-2"]).rows()
    assert plain == highlighted


def test_render_content_hook_output_is_embedded():
    viewer = DiffViewer("a", "a", render_content=lambda source: "<em>%s</em>" % source)
    out = viewer.render()
    root = _parse(out)
    assert [_text(em) for em in root.iter("em")] == ["a", "a"]


def test_style_overrides_replace_class_names():
    out = DiffViewer("a", "b", styles={"word_removed": "gone"}).render()
    root = _parse(out)
    assert any("gone" in _classes(s) for s in root.iter("span"))
    assert not any("word-removed" in _classes(s) for s in root.iter("span"))


def test_unknown_style_override_is_rejected():
    with pytest.raises(StyleOverrideError):
        DiffViewer("a", "b", styles={"nope": "x"}).render()


def test_compute_styles_is_memoized_on_last_value():
    compute_styles.cache_clear()
    first = compute_styles({"line": "row"})
    assert compute_styles({"line": "row"}) is first
    assert compute_styles({"line": "other"}) is not first
    assert dict(compute_styles(None)) == DEFAULT_STYLES


def test_compute_styles_recomputes_after_in_place_change():
    compute_styles.cache_clear()
    overrides = {"line": "row"}
    assert compute_styles(overrides)["line"] == "row"
    overrides["line"] = "other"
    assert compute_styles(overrides)["line"] == "other"


def test_computed_styles_are_read_only():
    compute_styles.cache_clear()
    styles = compute_styles({"line": "row"})
    with pytest.raises(TypeError):
        styles["line"] = "broken"
    assert compute_styles({"line": "row"})["line"] == "row"


def test_click_line_number_forwards_to_callback():
    clicks = []
    viewer = DiffViewer("a", "a\nb", on_line_number_click=clicks.append)
    viewer.click_line_number("R-2")
    assert clicks == ["R-2"]
    gutters = _gutters(_parse(viewer.render()))
    assert "clickable-gutter" in _classes(gutters["R-2"])


def test_click_on_unknown_line_id():
    viewer = DiffViewer("a", "a\nb", on_line_number_click=lambda line_id: None)
    with pytest.raises(UnknownLineError):
        viewer.click_line_number("L-2")


def test_click_without_callback_is_noop():
    assert DiffViewer("a", "a").click_line_number("L-1") is None


def test_custom_line_prefixes():
    config = DiffConfig(left_line_prefix="old", right_line_prefix="new")
    viewer = DiffViewer("a", "a", config=config)
    assert viewer.line_ids() == ["old-1", "new-1"]
    assert DiffConfig.left_line_prefix == "L"


def test_viewer_does_not_mutate_passed_config():
    config = DiffConfig()
    DiffViewer("a", "b", split_view=False, word_diff=False, config=config)
    assert config.split_view is True
    assert config.word_diff is True


def test_unknown_config_option():
    with pytest.raises(TypeError):
        DiffConfig(colour="red")


def test_viewer_rejects_non_string_values():
    with pytest.raises(InvalidInputError):
        DiffViewer("a", None)


def test_render_is_repeatable():
    viewer = DiffViewer("one\ntwo", "one\n2\nthree")
    assert viewer.render() == viewer.render()


def test_empty_inputs_render_empty_table():
    root = _parse(render_diff("", ""))
    assert list(root.iter("tr")) == []
    assert len(list(root.iter("table"))) == 1
