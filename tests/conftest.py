import pytest

ASSET_PREFIX = "/per/g27/pub/2207/touchstone/"

CANDIDATE_TABLE = """
<table>
  <tr><td>Roll No.</td><td>2201012345</td></tr>
  <tr><td>Candidate Name :</td><td> Jane Doe </td></tr>
  <tr><td>Venue Name</td><td>iON Digital Zone, Delhi</td></tr>
  <tr><td>Exam Date</td><td>18/01/2025</td></tr>
  <tr><td>Exam Time</td><td>9:00 AM - 11:15 AM</td></tr>
  <tr><td>Subject</td><td>Combined Graduate Level Examination Tier II</td></tr>
</table>
"""


def assessment_question(local_no, chosen=None, correct=None, options=4, status=None,
                        image="AssessmentQPHTMLMode1/q{n}_HI.jpg"):
    """One ``td.rw`` cell of the tabular response sheet."""
    option_rows = []
    for n in range(1, options + 1):
        cls = "rightAns" if n == correct else "wrngAns"
        glyph = '<img src="tick.png" />' if n == correct else '<img src="cross.png" />'
        option_rows.append(
            f'<tr><td class="{cls}">{n}. <img name="opt{n}" src="AssessmentQPHTMLMode1/o{local_no}_{n}.jpg" />'
            f"{glyph}</td></tr>"
        )
    if status is None:
        status = "Answered" if chosen else "Not Answered"
    return (
        '<td class="rw"><table class="questionRowTbl">'
        f'<tr><td class="bold" valign="top">Q.{local_no}</td>'
        f'<td class="bold" style="text-align: left;"><img src="{image.format(n=local_no)}" /></td></tr>'
        + "".join(option_rows)
        + '</table><table class="menu-tbl">'
        f"<tr><td>Status :</td><td>{status}</td></tr>"
        f"<tr><td>Chosen Option :</td><td>{chosen if chosen else '--'}</td></tr>"
        "</table></td>"
    )


def assessment_sheet(cells, candidate=True):
    rows = "".join(f"<tr>{c}</tr>" for c in cells)
    return (
        "<html><body>"
        f'<img src="{ASSET_PREFIX}logo.png" />'
        + (CANDIDATE_TABLE if candidate else "")
        + f'<table class="main">{rows}</table>'
        "</body></html>"
    )


def response_question(local_no, chosen=None, correct=None, options=4, correct_colour="green"):
    """Header row plus option rows of the colour-coded response sheet."""
    rows = [f"<tr><td>Q. No: {local_no}</td><td>Question text {local_no}</td></tr>"]
    for n in range(1, options + 1):
        if n == correct:
            attr = f' bgcolor="{correct_colour}"'
        elif n == chosen:
            attr = ' bgcolor="red"'
        else:
            attr = ""
        rows.append(f"<tr{attr}><td>{n}. Option {n} of {local_no}</td></tr>")
    return "".join(rows)


def response_sheet(blocks, candidate=True):
    return (
        "<html><body>"
        + (CANDIDATE_TABLE if candidate else "")
        + "<table>" + "".join(blocks) + "</table>"
        "</body></html>"
    )


@pytest.fixture
def build_assessment_question():
    return assessment_question


@pytest.fixture
def build_assessment_sheet():
    return assessment_sheet


@pytest.fixture
def build_response_question():
    return response_question


@pytest.fixture
def build_response_sheet():
    return response_sheet


@pytest.fixture
def cgl_sheet():
    """Four questions of SSC CGL Tier-II: correct, wrong, unattempted, bonus."""
    return assessment_sheet([
        assessment_question(1, chosen=2, correct=2),
        assessment_question(2, chosen=1, correct=3),
        assessment_question(3, chosen=None, correct=4),
        assessment_question(4, chosen=2, correct=None),
    ])
