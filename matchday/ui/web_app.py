"""
Web application module for the Matchday rotation manager.

This module contains the Flask web server that serves the HTML interface
and provides JSON API endpoints for attendance, member administration and
the quarter-by-quarter lineup generator.
"""
import logging
import os
from functools import wraps
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..models import AgeGroup, Position
from ..services import (
    MemberNotFoundError, MemberValidationError, ServiceFactory, StorageBackend
)
from ..services import stats_service
from ..utils import today_iso
from ..utils.constants import (
    AGE_GROUPS, DEFAULT_ACCESS_CODE, DEFAULT_HOST, DEFAULT_PORT, PITCHES, POS_SHORT_TO_FULL
)

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Builds the services through the factory and keeps the single active
    session, the club data and the access gate together.
    """

    def __init__(self, storage: Optional[StorageBackend] = None,
                 access_code: str = DEFAULT_ACCESS_CODE,
                 initial_members: Optional[List[Dict[str, Any]]] = None):
        self.service_factory = ServiceFactory(
            storage=storage, access_code=access_code, initial_members=initial_members
        )

        services = self.service_factory.create_complete_service_suite()
        self.club_state = services['state']
        self.persistence_service = services['persistence']
        self.member_service = services['members']
        self.session = services['session']
        self.access_gate = services['access']

    def save(self) -> None:
        self.persistence_service.save_state(self.club_state)


def _json_body() -> Dict[str, Any]:
    """Parse the request body, treating an empty or non-JSON body as ``{}``."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def create_app(storage: Optional[StorageBackend] = None,
               access_code: Optional[str] = None,
               initial_members: Optional[List[Dict[str, Any]]] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        storage: Storage backend for club data (in-memory when omitted)
        access_code: Shared secret for the coach areas; falls back to the
            ``MATCHDAY_ACCESS_CODE`` environment variable, then the default
        initial_members: Roster to start from when storage holds none

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    code = access_code or os.environ.get("MATCHDAY_ACCESS_CODE", DEFAULT_ACCESS_CODE)
    app_state = WebAppState(storage=storage, access_code=code, initial_members=initial_members)
    app.extensions["matchday"] = app_state

    def coach_only(view):
        """Reject the request with 403 while the coach areas are locked."""
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not app_state.access_gate.unlocked:
                return _error("Coach access required", 403)
            return view(*args, **kwargs)
        return wrapper

    @app.errorhandler(MemberValidationError)
    def handle_validation_error(e):
        return _error(str(e), 400)

    @app.errorhandler(MemberNotFoundError)
    def handle_not_found(e):
        return _error(str(e), 404)

    @app.errorhandler(ValueError)
    def handle_value_error(e):
        return _error(str(e), 400)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s", request.path)
        return _error(str(e), 500)

    # ==================== Reference Data ==================== #

    @app.route("/api/config", methods=["GET"])
    def get_config():
        """Positions, age groups and pitches for the forms."""
        return jsonify({
            "success": True,
            "positions": [p.value for p in Position],
            "position_labels": {p.value: POS_SHORT_TO_FULL[p.value] for p in Position},
            "age_groups": AGE_GROUPS,
            "pitches": PITCHES,
            "squad_capacity": app_state.session.capacity,
            "today": today_iso(),
        })

    # ==================== Access Gate ==================== #

    @app.route("/api/access/unlock", methods=["POST"])
    def unlock():
        data = _json_body()
        if app_state.access_gate.unlock(data.get("code", "")):
            return jsonify({"success": True, "unlocked": True})
        return jsonify({"success": False, "unlocked": False, "error": "Wrong access code"}), 401

    @app.route("/api/access/lock", methods=["POST"])
    def lock():
        app_state.access_gate.lock()
        return jsonify({"success": True, "unlocked": False})

    # ==================== Attendance & Members ==================== #

    @app.route("/api/attendance", methods=["POST"])
    def register_attendance():
        """Check a member in for a date and pitch."""
        data = _json_body()
        record = app_state.member_service.register_attendance(
            app_state.club_state,
            name=str(data.get("name", "")),
            age_group=AgeGroup.parse(data.get("age_group", AgeGroup.THIRTIES.value)),
            position=Position.parse(data.get("position", Position.MIDFIELDER.value)),
            session_date=str(data.get("date") or today_iso()),
            pitch=str(data.get("pitch") or PITCHES[0]),
        )
        app_state.save()
        member = app_state.club_state.members[record.player_id]
        return jsonify({
            "success": True,
            "message": f"{member.name} checked in at {record.pitch}",
            "record": record.to_dict(),
            "member": member.to_dict(),
        }), 201

    @app.route("/api/members", methods=["GET"])
    def get_members():
        members = stats_service.search(app_state.club_state.members.values(), request.args.get("q", ""))
        return jsonify({
            "success": True,
            "members": [_member_dict(m) for m in members],
            "count": len(members),
        })

    @app.route("/api/members/leaderboard", methods=["GET"])
    def get_leaderboard():
        """Lifetime attendance ranking."""
        ranked = stats_service.attendance_leaderboard(app_state.club_state)
        return jsonify({
            "success": True,
            "members": [
                {"rank": i + 1, **m.to_dict()} for i, m in enumerate(ranked)
            ],
            "total_attendance": stats_service.total_attendance(app_state.club_state),
        })

    @app.route("/api/members/attendees", methods=["GET"])
    def get_attendees():
        """Members present on a date, with the position breakdown."""
        session_date = request.args.get("date") or today_iso()
        attendees = stats_service.attendees_on(app_state.club_state, session_date)
        listed = stats_service.search(attendees, request.args.get("q", ""))
        return jsonify({
            "success": True,
            "date": session_date,
            "members": [_member_dict(m) for m in listed],
            "positions": stats_service.position_distribution(attendees),
            "count": len(attendees),
        })

    @app.route("/api/members/<player_id>/skill", methods=["PUT"])
    @coach_only
    def update_skill(player_id: str):
        data = _json_body()
        if "skill_score" not in data:
            return _error("skill_score is required", 400)
        member = app_state.member_service.update_skill(
            app_state.club_state, player_id, data["skill_score"]
        )
        app_state.save()
        return jsonify({"success": True, "member": _member_dict(member)})

    @app.route("/api/members/<player_id>/position", methods=["PUT"])
    @coach_only
    def update_member_position(player_id: str):
        data = _json_body()
        member = app_state.member_service.update_position(
            app_state.club_state, player_id, Position.parse(data.get("position"))
        )
        app_state.save()
        return jsonify({"success": True, "member": _member_dict(member)})

    # ==================== Session & Lineups ==================== #

    def _session_payload() -> dict:
        session = app_state.session
        return {
            "success": True,
            "session": session.to_dict(),
            "attendees": session.overview(app_state.club_state),
        }

    def _lineup_payload(outcome):
        if not outcome.success:
            return _error(outcome.error, 400)
        return jsonify({"success": True, "lineup": outcome.teams.to_dict()})

    @app.route("/api/session", methods=["GET"])
    @coach_only
    def get_session():
        return jsonify(_session_payload())

    @app.route("/api/session", methods=["POST"])
    @coach_only
    def change_session():
        """Switch the active date and pitch."""
        data = _json_body()
        session_date = str(data.get("date") or app_state.session.session_date)
        pitch = str(data.get("pitch") or app_state.session.pitch)
        app_state.session.change_venue(session_date, pitch)
        return jsonify(_session_payload())

    @app.route("/api/session/squad", methods=["GET"])
    @coach_only
    def get_squad():
        squad = app_state.session.squad(app_state.club_state)
        return jsonify({
            "success": True,
            "squad": [p.to_dict() for p in squad],
            "count": len(squad),
            "capacity": app_state.session.capacity,
        })

    @app.route("/api/session/exclusions/<player_id>", methods=["POST"])
    @coach_only
    def toggle_exclusion(player_id: str):
        excluded = app_state.session.toggle_exclusion(player_id)
        return jsonify({"success": True, "player_id": player_id, "excluded": excluded})

    @app.route("/api/session/lineup", methods=["POST"])
    @coach_only
    def generate_lineup():
        return _lineup_payload(app_state.session.generate_lineup(app_state.club_state))

    @app.route("/api/session/lineup/move", methods=["POST"])
    @coach_only
    def move_player():
        data = _json_body()
        return _lineup_payload(app_state.session.move_player(str(data.get("player_id", ""))))

    @app.route("/api/session/lineup/position", methods=["POST"])
    @coach_only
    def update_lineup_position():
        data = _json_body()
        position = Position.parse(data.get("position"))
        return _lineup_payload(
            app_state.session.update_position(str(data.get("player_id", "")), position)
        )

    @app.route("/api/session/confirm", methods=["POST"])
    @coach_only
    def confirm_match():
        record = app_state.session.confirm()
        if record is None:
            return _error("No lineup to confirm", 400)
        return jsonify({
            "success": True,
            "message": f"Match {record.match_number} recorded",
            "match": record.to_dict(),
        })

    @app.route("/api/session/reset", methods=["POST"])
    @coach_only
    def reset_session():
        app_state.session.reset()
        return jsonify(_session_payload())

    return app


def _member_dict(member) -> dict:
    data = member.to_dict()
    data["skill_tier"] = stats_service.skill_tier(member.skill_score)
    return data


def run_web_app(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT,
                storage: Optional[StorageBackend] = None,
                initial_members: Optional[List[Dict[str, Any]]] = None) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        storage: Storage backend for club data
        initial_members: Roster to start from when storage holds none
    """
    app = create_app(storage=storage, initial_members=initial_members)
    logger.info("Serving on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=False)
