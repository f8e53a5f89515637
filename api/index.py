import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from sheetscore import catalog, config
from sheetscore.errors import ScorecardError
from sheetscore.fetch import fetch_response_sheet
from sheetscore.service import analyze

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("sheetscore.api")

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AnalyzeInput(BaseModel):
    url: Optional[str] = None
    html: Optional[str] = None
    exam_id: Optional[str] = None


class FetchInput(BaseModel):
    url: str


@app.get("/")
async def health(): return {"status": "Live"}


@app.get("/exams")
async def list_exams():
    return {
        "categories": [c.model_dump() for c in catalog.EXAM_CATEGORIES],
        "exams": [
            {"id": e.id, "name": e.name, "category": e.category,
             "total_questions": e.total_questions, "max_marks": e.max_marks}
            for e in catalog.EXAM_CONFIGS
        ],
        "default": config.DEFAULT_EXAM_ID,
    }


@app.post("/fetch")
def fetch_sheet(data: FetchInput):
    return fetch_response_sheet(data.url).model_dump()


@app.post("/analyze")
def analyze_sheet(data: AnalyzeInput):
    try:
        scorecard = analyze(url=data.url, html=data.html, exam_id=data.exam_id)
    except ScorecardError as e:
        logger.info("Analysis failed: %s", e)
        return {"status": "error", "message": str(e)}
    return {"status": "success", "scorecard": scorecard.model_dump(mode="json")}
