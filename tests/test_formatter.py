from tests.conftest import EN_PAYLOAD
from transcript_ingestor.extraction.formatter import format_transcript


def test_blank_segments_dropped_and_entities_decoded():
    payload = '<transcript><text start="0">Hello &amp; world</text><text start="1">  </text></transcript>'
    assert format_transcript(payload) == "Hello & world"


def test_xml_declaration_wrapper_and_nested_markup():
    assert format_transcript(EN_PAYLOAD) == "Hello & welcome\nit's great"


def test_segments_keep_source_order():
    payload = "".join(f'<text start="{i}">line {i}</text>' for i in range(4))
    assert format_transcript(payload).splitlines() == ["line 0", "line 1", "line 2", "line 3"]


def test_inner_whitespace_is_kept_outer_trimmed():
    payload = '<text start="0">  padded  </text><text start="1">next</text>'
    assert format_transcript(payload) == "padded  \nnext"


def test_encoded_markup_survives_as_text():
    payload = '<text start="0">&lt;3 &gt; hate</text>'
    assert format_transcript(payload) == "<3 > hate"


def test_empty_and_markup_only_payloads():
    assert format_transcript("") == ""
    assert format_transcript('<?xml version="1.0" encoding="utf-8" ?><transcript></transcript>') == ""


def test_unterminated_segment_is_still_read():
    assert format_transcript('<transcript><text start="0">cut off') == "cut off"
