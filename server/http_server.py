#!/usr/bin/env python3
"""
HTTP Server for the lift dispatch service
Exposes the lift bank and hall call list as a JSON API
"""
from flask import Flask, jsonify, request
from flask_cors import CORS

from config import DispatchConfig, ServerConfig
from dispatcher import (
    CallRequestDeduplicator,
    InvalidActionError,
    InvalidCallRequestError,
    InvalidQueryError,
    Lift,
    LiftAction,
    LiftFilterCriterion,
    LiftRegistry,
    LiftRequest,
    LiftService,
)


def build_services(config: DispatchConfig):
    """Create the lift service and hall call store from configuration"""
    registry = LiftRegistry(
        Lift(id=lift.id, level=lift.level) for lift in config.lift_bank.lifts
    )
    return LiftService(registry), CallRequestDeduplicator()


def not_found():
    return jsonify({}), 404


def bad_request(error):
    print(f"[Server] Rejected payload: {error}")
    return jsonify({}), 400


def create_app(lift_service: LiftService, call_requests: CallRequestDeduplicator) -> Flask:
    """
    Build the Flask application around existing services

    Args:
        lift_service: Lift state machine (owns the lift registry)
        call_requests: Hall call store
    """
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    @app.errorhandler(404)
    def handle_not_found(error):
        # Unmatched URLs (e.g. non-numeric lift ids) answer like unknown lifts
        return not_found()

    @app.route('/api/v1/lifts', methods=['GET'])
    def list_lifts():
        """
        List lifts, optionally filtered
        Query params:
            - floor: exact level
            - min_floor / max_floor: inclusive bounds on level
            - direction: UP, DOWN or IDLE
        """
        try:
            criterion = LiftFilterCriterion.from_query(request.args)
        except InvalidQueryError as e:
            return bad_request(e)
        lifts = lift_service.get_all_lifts_matching(criterion)
        return jsonify({'lifts': [lift.to_small_dict() for lift in lifts]})

    @app.route('/api/v1/lifts/<int(signed=True):lift_id>', methods=['GET'])
    def get_lift(lift_id):
        """Get one lift with its direction and pending stops"""
        lift = lift_service.get_lift(lift_id)
        if lift is None:
            return not_found()
        return jsonify(lift.to_dict())

    @app.route('/api/v1/lifts/<int(signed=True):lift_id>', methods=['POST'])
    def post_lift_action(lift_id):
        """Apply a lift-move, door-open or add-destination action"""
        if lift_service.get_lift(lift_id) is None:
            return not_found()
        try:
            action = LiftAction.from_dict(request.get_json(silent=True))
        except InvalidActionError as e:
            return bad_request(e)
        lift = lift_service.apply_action(lift_id, action)
        if lift is None:
            return not_found()
        return jsonify(lift.to_dict())

    @app.route('/api/v1/lift-requests', methods=['GET'])
    def list_lift_requests():
        """List pending hall calls in the order they were made"""
        return jsonify([r.to_dict() for r in call_requests.list()])

    @app.route('/api/v1/lift-requests', methods=['POST'])
    def post_lift_request():
        """Register a hall call; changed is False when it was already pending"""
        try:
            lift_request = LiftRequest.from_dict(request.get_json(silent=True))
        except InvalidCallRequestError as e:
            return bad_request(e)
        changed = call_requests.add(lift_request)
        return jsonify({'changed': changed})

    @app.route('/api/status')
    def status():
        """Server status endpoint"""
        return jsonify({
            'status': 'ok',
            'server': 'Lift Dispatch HTTP Server',
            'version': '1.0',
            'lifts': lift_service.lift_count()
        })

    return app


def run_server(config: DispatchConfig = None):
    """Run the Flask server"""
    config = config or DispatchConfig()
    lift_service, call_requests = build_services(config)
    app = create_app(lift_service, call_requests)

    host, port = config.server.host, config.server.port
    print(f"Starting HTTP server on http://{host}:{port}")
    print("API endpoints:")
    print("  - GET  /api/v1/lifts?floor=&min_floor=&max_floor=&direction=")
    print("  - GET  /api/v1/lifts/<id>")
    print("  - POST /api/v1/lifts/<id>")
    print("  - GET  /api/v1/lift-requests")
    print("  - POST /api/v1/lift-requests")
    print("  - GET  /api/status")

    app.run(host=host, port=port, debug=config.server.debug, threaded=True)


if __name__ == '__main__':
    run_server(DispatchConfig(server=ServerConfig(debug=True)))
