from skinfetch.name_tag import extract_name_tag, find_name_tag


def test_extract_name_tag_basic():
    assert extract_name_tag("Name Tag: ''hello''") == "hello"


def test_extract_name_tag_with_surrounding_text():
    assert extract_name_tag("Warning ... Name Tag: ''my gun'' ... more") == "my gun"


def test_extract_name_tag_unicode():
    warning = "Name Tag: ''你不需要登顶 在山脚我也爱你''"
    assert extract_name_tag(warning) == "你不需要登顶 在山脚我也爱你"


def test_extract_name_tag_stops_at_next_delimiter():
    assert extract_name_tag("Name Tag: ''first'' and ''second''") == "first"


def test_extract_name_tag_missing_prefix_is_none():
    assert extract_name_tag("This item has been renamed") is None
    assert extract_name_tag("") is None


def test_extract_name_tag_missing_closing_delimiter_is_none():
    assert extract_name_tag("Name Tag: ''unterminated") is None


def test_extract_blank_name_tag_is_empty_string():
    assert extract_name_tag("Name Tag: ''''") == ""


def test_find_name_tag_scans_warnings_in_order():
    warnings = ["Trade hold", "Name Tag: ''one''", "Name Tag: ''two''"]
    assert find_name_tag(warnings) == "one"
    assert find_name_tag(["Trade hold"]) is None
    assert find_name_tag(None) is None
