from diag_extract.anchor_locator import locate_anchor
from diag_extract.balanced_scan import find_balanced_end


def test_locate_anchor_finds_brace_after_keyword() -> None:
    text = 'noise { "x": 0 } Diagnostics: {"a": 1}'
    anchor = locate_anchor(text, "Diagnostics")

    assert anchor is not None
    assert anchor.keyword_index == text.index("Diagnostics")
    assert anchor.brace_index == text.index('{"a"')
    assert anchor.keyword_end == anchor.keyword_index + len("Diagnostics")


def test_locate_anchor_missing_keyword_or_brace() -> None:
    assert locate_anchor("no marker here {}", "Diagnostics") is None
    assert locate_anchor("{} Diagnostics without object", "Diagnostics") is None
    assert locate_anchor("", "Diagnostics") is None


def test_locate_anchor_respects_start_offset() -> None:
    text = "Diagnostics {1} Diagnostics {2}"
    anchor = locate_anchor(text, "Diagnostics", start=1)

    assert anchor is not None
    assert anchor.keyword_index == text.rindex("Diagnostics")
    assert anchor.brace_index == text.rindex("{")


def test_find_balanced_end_nested() -> None:
    text = '{"a":{"b":1}} tail'
    assert find_balanced_end(text, 0) == len('{"a":{"b":1}}') - 1


def test_find_balanced_end_unterminated() -> None:
    assert find_balanced_end('{"a":{"b":1}', 0) is None


def test_find_balanced_end_counts_braces_inside_strings() -> None:
    text = '{"a":"}"}'
    assert find_balanced_end(text, 0) == text.index("}")
