"""
Flask REST API for the seat assistant.

Thin HTTP surface over SeatAssistantService: the page-side collaborators
(scraper, speech capture, seat clicker) post their data here as JSON.
"""
import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request
from pydantic import BaseModel, Field, ValidationError
from werkzeug.exceptions import HTTPException

from .config import SeatAssistantConfig
from .config_loader import load_config_from_env
from .exceptions import SeatDataError
from .models import ReferencePoint, WeightVector
from .ranking import rank_seats
from .service import SeatAssistantService
from .utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


class PointBody(BaseModel):
    x: float
    y: float

    def to_reference(self) -> ReferencePoint:
        return ReferencePoint(self.x, self.y)


class SeatsBody(BaseModel):
    seats: List[Dict[str, Any]] = Field(description="Raw seat records from the scraper")
    reference: Optional[PointBody] = Field(default=None, description="Stage anchor")


class RankBody(SeatsBody):
    weights: Optional[Dict[str, Any]] = Field(default=None, description="Criterion weights")
    n: Optional[int] = Field(default=None, ge=0, description="Return only the best n seats")


class UtteranceBody(BaseModel):
    text: str = Field(max_length=500, description="Final transcript or typed text")
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class WeightsBody(BaseModel):
    weights: Dict[str, float]


def _reference(body: SeatsBody) -> Optional[ReferencePoint]:
    return body.reference.to_reference() if body.reference else None


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise SeatDataError("Request body must be a JSON object.")
    return data


def create_app(
    config: Optional[SeatAssistantConfig] = None,
    service: Optional[SeatAssistantService] = None,
) -> Flask:
    """
    Application factory.

    :param config: Configuration (defaults if omitted and no service is given)
    :param service: Pre-wired service, e.g. with a seat selector injected
    :return: Flask app
    """
    service = service or SeatAssistantService(config)
    app = Flask(__name__)
    app.extensions["seat_assistant"] = service

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        details = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        logger.warning(f"Request validation failed: {details}")
        return jsonify({"error": "Invalid request body", "details": details}), 400

    @app.errorhandler(SeatDataError)
    def handle_seat_data_error(e: SeatDataError):
        logger.warning(f"Seat data error: {str(e)}")
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.error(f"Unhandled API error: {str(e)}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/rank", methods=["POST"])
    def rank():
        """Stateless ranking: seats + weights + reference -> ordered seats."""
        body = RankBody.model_validate(_json_body())
        seats = service.parser.parse(body.seats)
        ranked = rank_seats(
            seats,
            WeightVector.from_mapping(body.weights) if body.weights is not None else None,
            _reference(body),
            default_reference=service.config.default_reference,
        )
        if body.n is not None:
            ranked = ranked[:body.n]
        return jsonify({"seats": [r.to_dict() for r in ranked]})

    @app.route("/api/sessions/<session_id>/seats", methods=["POST"])
    def load_seats(session_id: str):
        body = SeatsBody.model_validate(_json_body())
        response = service.load_seats(session_id, body.seats, _reference(body))
        return jsonify(response.to_dict())

    @app.route("/api/sessions/<session_id>/recommendations", methods=["GET"])
    def recommendations(session_id: str):
        n = request.args.get("n", type=int)
        return jsonify(service.recommend(session_id, n).to_dict())

    @app.route("/api/sessions/<session_id>/utterances", methods=["POST"])
    def utterance(session_id: str):
        body = UtteranceBody.model_validate(_json_body())
        logger.info(f"Utterance - Session: {session_id}, Text: '{body.text}'")
        response = service.handle_utterance(session_id, body.text, body.confidence)
        return jsonify(response.to_dict())

    @app.route("/api/sessions/<session_id>/weights", methods=["PUT"])
    def weights(session_id: str):
        body = WeightsBody.model_validate(_json_body())
        return jsonify(service.set_weights(session_id, body.weights).to_dict())

    @app.route("/api/sessions/<session_id>", methods=["DELETE"])
    def end_session(session_id: str):
        service.end_session(session_id)
        return jsonify({"status": "success", "message": "Session cleared"})

    return app


def main() -> None:
    """Run the development server with configuration from the environment."""
    config = load_config_from_env()
    configure_logging(config.log_level)
    app = create_app(config)
    port = int(os.getenv("PORT", 5000))
    logger.info(f"Starting seat assistant API on port {port}")
    app.run(host="0.0.0.0", port=port, debug=False)


if __name__ == "__main__":
    main()
