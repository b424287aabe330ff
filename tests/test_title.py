from transcript_ingestor.extraction.title import UNKNOWN_TITLE, extract_title


def test_site_suffix_is_removed():
    assert extract_title("<html><title>Some Video - YouTube</title></html>") == "Some Video"


def test_missing_title_returns_unknown():
    assert extract_title("<html><head></head></html>") == UNKNOWN_TITLE == "Unknown Title"


def test_entities_are_decoded_including_quotes():
    page = "<title>Tom &amp; Jerry &quot;Live&quot; &#39;96 - YouTube</title>"
    assert extract_title(page) == "Tom & Jerry \"Live\" '96"


def test_suffix_removed_anywhere_in_title():
    assert extract_title("<title>A - YouTube review - YouTube</title>") == "A review"


def test_first_title_element_wins():
    page = "<title>First</title><svg><title>Second</title></svg>"
    assert extract_title(page) == "First"


def test_title_spanning_lines_is_not_matched():
    assert extract_title("<title>Line one\nline two</title>") == UNKNOWN_TITLE


def test_empty_title():
    assert extract_title("<title></title>") == ""
