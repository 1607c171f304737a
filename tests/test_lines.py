from diffviewer.lines import construct_lines


def test_single_newline_yields_no_lines():
    assert construct_lines("\n") == []


def test_trailing_terminator_is_dropped():
    assert construct_lines("a\nb\n") == ["a", "b"]


def test_leading_terminator_is_dropped():
    # Hunk that starts right after the previous hunk's last line.
    assert construct_lines("\nb\nc") == ["b", "c"]


def test_both_edge_terminators_are_dropped():
    assert construct_lines("\nthree\n") == ["three"]


def test_text_without_newline_is_one_line():
    assert construct_lines("foo bar") == ["foo bar"]


def test_blank_block_keeps_all_but_final_piece():
    assert construct_lines("\n\n") == ["", ""]
    assert construct_lines("\n\n\n") == ["", "", ""]


def test_inner_blank_lines_survive():
    assert construct_lines("a\n\nb\n") == ["a", "", "b"]


def test_empty_value_yields_no_lines():
    assert construct_lines("") == []


def test_input_is_not_mutated():
    value = "\nx\n"
    construct_lines(value)
    assert value == "\nx\n"
