import os

# --- ENGINE ---
DEFAULT_EXAM_ID = os.environ.get("SHEETSCORE_DEFAULT_EXAM", "SSC_CGL_MAINS")
SCORE_PRECISION = int(os.environ.get("SHEETSCORE_SCORE_PRECISION", "2"))

SSC_HOST = os.environ.get("SHEETSCORE_SSC_HOST", "https://ssc.digialm.com")
RRB_HOST = os.environ.get("SHEETSCORE_RRB_HOST", "https://rrb.digialm.com")
RRB_DOMAIN = "rrb.digialm.com"

# --- FETCHING ---
FETCH_TIMEOUT = float(os.environ.get("SHEETSCORE_FETCH_TIMEOUT", "20"))
MIN_BODY_LENGTH = 100
MIN_PART_LENGTH = 200
MAX_PARTS = int(os.environ.get("SHEETSCORE_MAX_PARTS", "5"))
PART_SEPARATOR = "\n<!-- PART_SEPARATOR -->\n"

# --- WEB ---
LOG_LEVEL = os.environ.get("SHEETSCORE_LOG_LEVEL", "INFO").upper()
ALLOWED_ORIGINS = [o.strip() for o in os.environ.get("SHEETSCORE_ALLOWED_ORIGINS", "*").split(",") if o.strip()]
