from sheetscore.catalog import resolve_ranges
from sheetscore.sections import UNKNOWN_SECTION, resolve_section

RANGES = resolve_ranges("SSC_CGL_MAINS")


def test_boundaries_map_to_their_sections():
    assert resolve_section(1, RANGES).part == "A"
    assert resolve_section(30, RANGES).part == "A"
    assert resolve_section(31, RANGES).part == "B"
    assert resolve_section(150, RANGES).subject == "Computer Knowledge"


def test_marking_rule_comes_from_range():
    section = resolve_section(110, RANGES)
    assert (section.correct_marks, section.negative_marks, section.is_mapped) == (3, 0.5, True)


def test_out_of_range_returns_unknown(caplog):
    with caplog.at_level("WARNING"):
        assert resolve_section(151, RANGES) is UNKNOWN_SECTION
    assert "outside every section range" in caplog.text
    assert resolve_section(0, RANGES).is_mapped is False
    assert resolve_section(1, ()).subject == "Unknown"
