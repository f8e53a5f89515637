import logging
import re
from typing import Dict, Optional

from bs4 import BeautifulSoup

from sheetscore.models import CandidateInfo

logger = logging.getLogger(__name__)

LABEL_SYNONYMS = {
    "roll no": "roll_number",
    "roll no.": "roll_number",
    "roll number": "roll_number",
    "rollno": "roll_number",
    "candidate name": "candidate_name",
    "candidate's name": "candidate_name",
    "name of the candidate": "candidate_name",
    "name": "candidate_name",
    "registration number": "registration_number",
    "registration no": "registration_number",
    "registration no.": "registration_number",
    "application no": "registration_number",
    "application no.": "registration_number",
    "application number": "registration_number",
    "community": "community",
    "category": "community",
    "venue name": "venue_name",
    "test center name": "venue_name",
    "test centre name": "venue_name",
    "exam centre name": "venue_name",
    "exam center name": "venue_name",
    "exam date": "exam_date",
    "test date": "exam_date",
    "date of exam": "exam_date",
    "exam time": "shift",
    "test time": "shift",
    "shift": "shift",
    "exam shift": "shift",
    "subject": "subject",
    "exam name": "subject",
}


def normalize_label(text: str) -> str:
    label = re.sub(r"\s+", " ", text).strip()
    return label.rstrip(":").strip().lower()


def extract_candidate_info(soup: BeautifulSoup) -> Optional[CandidateInfo]:
    for table in soup.find_all("table"):
        info: Dict[str, str] = {}
        for row in table.find_all("tr"):
            cols = row.find_all(["td", "th"], recursive=False)
            if len(cols) < 2:
                continue
            field = LABEL_SYNONYMS.get(normalize_label(cols[0].get_text(" ", strip=True)))
            if field and field not in info:
                info[field] = cols[1].get_text(" ", strip=True)
        if info.get("roll_number") or info.get("candidate_name"):
            return CandidateInfo(**info)
    logger.info("No candidate information table found")
    return None
