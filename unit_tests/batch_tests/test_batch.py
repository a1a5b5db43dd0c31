import io

import pytest

from url_ipv4.batch import ParseOutcome, ParseStatistics, classify, classify_lines


def test_classify_valid_and_invalid():
    ok = classify("127.1")
    assert ok.ok
    assert ok.value == 0x7F000001
    assert str(ok.address) == "127.0.0.1"

    bad = classify("1.2.3.4.5")
    assert not bad.ok
    assert bad.value is None
    assert bad.address is None


def test_render_styles():
    outcome = classify("0xff.1")
    assert outcome.render("dotted") == "255.0.0.1"
    assert outcome.render("int") == str(0xFF000001)
    assert outcome.render("hex") == "0xff000001"
    assert outcome.format("hex") == "0xff.1\t0xff000001"
    assert ParseOutcome("nope").format() == "nope\tinvalid"


def test_render_rejects_unknown_style():
    with pytest.raises(ValueError):
        classify("1.1.1.1").render("octal")


def test_classify_lines_skips_blank_and_comments_and_counts():
    text = io.StringIO("# header\n127.1\n\n  10.0.0.1  \n1..2\n0x\n")
    stats = ParseStatistics()
    outcomes = list(classify_lines(text, stats))

    assert [o.text for o in outcomes] == ["127.1", "10.0.0.1", "1..2", "0x"]
    assert [o.ok for o in outcomes] == [True, True, False, False]
    assert stats.total_count == 4
    assert stats.valid_count == 2
    assert stats.invalid_count == 2
    assert stats.skipped_count == 2
    assert stats.valid_ratio == 0.5
    assert stats.summary()["valid ratio"] == 0.5


def test_empty_statistics():
    stats = ParseStatistics()
    assert stats.valid_ratio == 0.0
    assert list(classify_lines([], stats)) == []
