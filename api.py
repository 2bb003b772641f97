"""
Flask REST API for DeskCalc
Exposes one calculator instance and the stateless helpers as JSON endpoints
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import config
import constants
import converter
import financial
import stats_helpers
from dispatcher import ActionDispatcher
from errors import CalculatorError, InvalidNumber, UnknownFunction
from graph_generator import GraphGenerator
from validation import parse_number


def _json_body():
    """The request body as a JSON object (missing or malformed bodies read as {})"""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidNumber("Request body must be a JSON object")
    return payload


def create_app(dispatcher=None):
    """Build the API around a single dispatcher (one calculator per app)"""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    dispatcher = dispatcher if dispatcher is not None else ActionDispatcher()
    graph_generator = GraphGenerator(dispatcher.engine.history)
    app.config['DISPATCHER'] = dispatcher

    @app.errorhandler(CalculatorError)
    def handle_calculator_error(error):
        app.logger.info("Calculator error: %s (%s)", error.message, error.kind)
        return jsonify({'success': False, 'error': error.to_dict()}), 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        app.logger.exception("Unhandled API error")
        return jsonify({'success': False, 'error': str(error)}), 500

    @app.route('/api')
    def api_info():
        """API information"""
        return jsonify({
            'success': True,
            'data': {
                'name': config.APP_NAME,
                'version': config.VERSION,
                'endpoints': sorted(
                    rule.rule for rule in app.url_map.iter_rules() if rule.rule.startswith('/api')
                ),
            }
        })

    @app.route('/api/state')
    def get_state():
        """Current display, pending expression, memory flag and history"""
        return jsonify({'success': True, 'data': dispatcher.snapshot()})

    @app.route('/api/action', methods=['POST'])
    def post_action():
        """Run one calculator action: {"action": "digit", "value": "5"}"""
        payload = _json_body()
        action = payload.get('action')
        if not action:
            raise UnknownFunction("Missing action")
        state = dispatcher.dispatch(action, payload.get('value'))
        return jsonify({'success': True, 'data': state})

    @app.route('/api/key', methods=['POST'])
    def post_key():
        """Feed a keyboard key: {"key": "Enter"}"""
        payload = _json_body()
        handled = dispatcher.handle_key(str(payload.get('key', '')))
        return jsonify({'success': True, 'handled': handled, 'data': dispatcher.snapshot()})

    @app.route('/api/history', methods=['GET'])
    def get_history():
        """Get calculation history"""
        limit = request.args.get('limit', type=int)
        history = dispatcher.engine.get_history(limit)
        return jsonify({'success': True, 'data': history, 'count': len(history)})

    @app.route('/api/history', methods=['DELETE'])
    def delete_history():
        """Clear calculation history"""
        dispatcher.dispatch('clear_history')
        return jsonify({'success': True, 'data': [], 'count': 0})

    @app.route('/api/units')
    def get_unit_categories():
        return jsonify({'success': True, 'data': converter.CATEGORIES})

    @app.route('/api/units/<category>')
    def get_units(category):
        return jsonify({'success': True, 'data': converter.list_units(category)})

    @app.route('/api/convert')
    def get_conversion():
        """Convert ?value=&category=&from=&to="""
        value = request.args.get('value', '')
        category = request.args.get('category', '')
        from_unit = request.args.get('from', '')
        to_unit = request.args.get('to', '')
        result = converter.convert(value, category, from_unit, to_unit)
        return jsonify({
            'success': True,
            'data': {
                'value': parse_number(value),
                'category': category,
                'from': from_unit,
                'to': to_unit,
                'result': result,
            }
        })

    @app.route('/api/constants')
    def get_constants():
        return jsonify({'success': True, 'data': constants.list_constants()})

    @app.route('/api/constants/<key>')
    def get_constant(key):
        return jsonify({'success': True, 'data': constants.get_constant(key)})

    @app.route('/api/financial/<formula>', methods=['POST'])
    def post_financial(formula):
        """Evaluate a financial formula with keyword arguments from the body"""
        func = financial.FORMULAS.get(formula)
        if func is None:
            raise UnknownFunction(f"Unknown formula: {formula}")
        params = _json_body()
        try:
            result = func(**params)
        except TypeError as e:
            return jsonify({'success': False, 'error': {'kind': 'InvalidArguments', 'message': str(e)}}), 400
        return jsonify({'success': True, 'data': result})

    @app.route('/api/statistics', methods=['POST'])
    def post_statistics():
        """Summary statistics: {"values": [...], "sample": false}"""
        payload = _json_body()
        values = payload.get('values') or []
        if not isinstance(values, list):
            raise InvalidNumber("Values must be a list")
        result = stats_helpers.summary(values, sample=bool(payload.get('sample', False)))
        return jsonify({'success': True, 'data': result})

    @app.route('/api/graphs/history')
    def get_history_graph_data():
        return jsonify({'success': True, 'data': graph_generator.history_series()})

    @app.route('/api/graphs/function/<name>')
    def get_function_graph_data(name):
        start = request.args.get('start', type=float)
        stop = request.args.get('stop', type=float)
        points = request.args.get('points', type=int)
        series = graph_generator.function_series(name, start, stop, points)
        return jsonify({'success': True, 'data': series})

    return app


def main():
    app = create_app()
    print("\n" + "="*60)
    print("DeskCalc API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)


if __name__ == '__main__':
    main()
