from sheetscore.detect import detect_format
from sheetscore.models import Dialect


def test_assessment_table_sheet(cgl_sheet):
    assert detect_format(cgl_sheet) == Dialect.ASSESSMENT_TABLE


def test_colour_coded_sheet(build_response_sheet, build_response_question):
    html = build_response_sheet([build_response_question(1, chosen=2, correct=3)])
    assert detect_format(html) == Dialect.VIEW_CANDIDATE_RESPONSE


def test_css_background_counts_as_colour():
    html = '<table><tr><td>Q.1</td></tr><tr style="background-color: Yellow"><td>1. a</td></tr></table>'
    assert detect_format(html) == Dialect.VIEW_CANDIDATE_RESPONSE


def test_colour_without_question_rows_is_not_enough():
    assert detect_format('<table><tr bgcolor="red"><td>x</td></tr></table>') == Dialect.ASSESSMENT_TABLE


def test_unknown_markup_defaults_to_assessment_table():
    assert detect_format("<p>hello</p>") == Dialect.ASSESSMENT_TABLE
