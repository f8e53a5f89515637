import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from sheetscore import config
from sheetscore.errors import InvalidRequestError, ScorecardError
from sheetscore.service import analyze

app = Flask(__name__)
CORS(app, origins=config.ALLOWED_ORIGINS) # Enables cross-origin requests
logger = logging.getLogger("sheetscore.app")


@app.route('/calculate', methods=['POST'])
def process_data():
    data = request.get_json(silent=True) or {}

    try:
        if not isinstance(data, dict):
            raise InvalidRequestError("Request body must be a JSON object")
        scorecard = analyze(url=data.get("url"), html=data.get("html"), exam_id=data.get("exam_id"))
    except ScorecardError as e:
        logger.info("Analysis failed: %s", e)
        return jsonify({"status": "error", "message": str(e)})

    return jsonify({
        "status": "success",
        "total": scorecard.total_score,
        "scorecard": scorecard.model_dump(mode="json"),
    })


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    app.run()
