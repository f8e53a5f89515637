from bs4 import BeautifulSoup

from sheetscore.extractors import candidate_response, get_extractor
from sheetscore.extractors.candidate_response import infer_chosen_from_correct
from sheetscore.models import Dialect

BASE = "https://rrb.digialm.com"


def _extract(html):
    return candidate_response.extract_questions(BeautifulSoup(html, "html.parser"), BASE)


def test_registry_returns_colour_extractor():
    assert get_extractor(Dialect.VIEW_CANDIDATE_RESPONSE) is candidate_response.extract_questions


def test_red_and_green_rows(build_response_sheet, build_response_question):
    (q,) = _extract(build_response_sheet([build_response_question(4, chosen=1, correct=3)]))

    assert q.section_local_number == 4
    assert q.chosen_option == 1
    assert q.correct_option == 3
    assert q.chosen_option_inferred is False
    assert q.question_text == "Question text 4"
    assert [o.text for o in q.options] == ["Option 1 of 4", "Option 2 of 4", "Option 3 of 4", "Option 4 of 4"]
    assert [o.is_chosen for o in q.options] == [True, False, False, False]
    assert [o.is_correct for o in q.options] == [False, False, True, False]


def test_yellow_marks_correct_option(build_response_sheet, build_response_question):
    (q,) = _extract(build_response_sheet([
        build_response_question(1, chosen=2, correct=4, correct_colour="yellow"),
    ]))
    assert (q.chosen_option, q.correct_option) == (2, 4)


def test_no_red_row_assumes_correct_option_chosen(build_response_sheet, build_response_question):
    (q,) = _extract(build_response_sheet([build_response_question(1, chosen=None, correct=2)]))

    assert q.chosen_option == 2
    assert q.chosen_option_inferred is True
    assert q.options[1].is_chosen


def test_no_green_row_leaves_correct_option_empty(build_response_sheet, build_response_question):
    (q,) = _extract(build_response_sheet([build_response_question(1, chosen=3, correct=None)]))

    assert q.correct_option is None
    assert q.chosen_option == 3
    assert q.chosen_option_inferred is False


def test_question_header_variants_and_cell_colours():
    html = (
        "<table>"
        "<tr><td>Q.12</td></tr>"
        '<tr><td style="background-color: red">1. a</td></tr>'
        '<tr><td style="background: lightgreen">2. b</td></tr>'
        "<tr><td>Q. No. 13</td></tr>"
        '<tr><td bgcolor="green">1. c</td></tr>'
        "</table>"
    )
    first, second = _extract(html)

    assert (first.section_local_number, first.chosen_option, first.correct_option) == (12, 1, 2)
    assert (second.sequential_number, second.section_local_number) == (2, 13)


def test_option_rows_capped_at_five():
    rows = "".join(f"<tr><td>{n}. opt</td></tr>" for n in range(1, 8))
    (q,) = _extract(f"<table><tr><td>Q. No: 1</td></tr>{rows}</table>")
    assert [o.option_number for o in q.options] == [1, 2, 3, 4, 5]


def test_consuming_stops_at_first_non_option_row():
    html = (
        "<table><tr><td>Q. No: 1</td></tr><tr><td>1. a</td></tr>"
        "<tr><td>Section break</td></tr><tr><td>2. b</td></tr></table>"
    )
    (q,) = _extract(html)
    assert [o.option_number for o in q.options] == [1]


def test_sequential_numbers_across_sections(build_response_sheet, build_response_question):
    blocks = [build_response_question(n, chosen=1, correct=1) for n in (1, 2, 1)]
    questions = _extract(build_response_sheet(blocks))

    assert [q.sequential_number for q in questions] == [1, 2, 3]
    assert [q.section_local_number for q in questions] == [1, 2, 1]


def test_option_images_resolved():
    html = (
        "<table><tr><td>Q. No: 1</td><td><img src=\"/q/1_EN.png\"></td></tr>"
        '<tr bgcolor="green"><td>1.</td><td><img src="o1.png"></td></tr></table>'
    )
    (q,) = _extract(html)
    assert q.image_url == "https://rrb.digialm.com/q/1_EN.png"
    assert q.options[0].image_url == "https://rrb.digialm.com/o1.png"


def test_infer_chosen_from_correct():
    assert infer_chosen_from_correct(None, 3) == (3, True)
    assert infer_chosen_from_correct(2, 3) == (2, False)
    assert infer_chosen_from_correct(None, None) == (None, False)


def test_garbage_yields_no_questions():
    assert _extract("<table><tr><td>hello</td></tr></table>") == []


def test_headers_without_option_rows_are_skipped(build_response_sheet, build_response_question):
    questions = _extract(build_response_sheet([
        build_response_question(1, chosen=1, correct=1),
        "<tr><td>Q. No: 2</td></tr><tr><td>Section break</td></tr>",
        build_response_question(3, chosen=2, correct=1),
    ]))

    assert [q.sequential_number for q in questions] == [1, 2]
    assert [q.section_local_number for q in questions] == [1, 3]


def test_glyph_images_are_not_content():
    html = (
        '<table><tr><td>Q. No: 1</td><td><img src="tick.png"><img src="/q/1_EN.png"></td></tr>'
        '<tr bgcolor="green"><td>1.</td><td><img src="images/cross.gif"></td></tr>'
        '<tr><td>2.</td><td><img src="right.png"><img name="o2" src="o2.png"></td></tr></table>'
    )
    (q,) = _extract(html)

    assert q.image_url == "https://rrb.digialm.com/q/1_EN.png"
    assert q.options[0].image_url is None
    assert q.options[1].image_url == "https://rrb.digialm.com/o2.png"
