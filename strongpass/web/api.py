import logging

from flask import Flask, jsonify, request

from strongpass.config import check_length, default_options, load_config
from strongpass.errors import GenerationError
from strongpass.generator import GenerationOptions, generate
from strongpass.report import evaluate

logger = logging.getLogger(__name__)

FLAGS = ("lower", "upper", "digits", "symbols")


def bad_request(message):
    return jsonify({"error": "bad_request", "message": message}), 400


def create_app(config=None):
    app = Flask(__name__)
    cfg = config if config is not None else load_config()

    @app.route('/')
    def home():
        return jsonify({
            "message": "StrongPass API is running"
        })

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return bad_request("Request body must be a JSON object.")
        for flag in FLAGS:
            if flag in data and not isinstance(data[flag], bool):
                return bad_request(f"'{flag}' must be true or false.")
        length = data.get('length', cfg["default_length"])
        defaults = default_options(cfg)
        options = GenerationOptions(
            use_lower=data.get('lower', defaults.use_lower),
            use_upper=data.get('upper', defaults.use_upper),
            use_digits=data.get('digits', defaults.use_digits),
            use_symbols=data.get('symbols', defaults.use_symbols),
        )
        try:
            check_length(length, cfg)
            password = generate(length, options)
        except GenerationError as e:
            logger.debug("generate rejected: %s", e.code)
            return jsonify({'error': e.code, 'message': str(e)}), 400
        return jsonify({'password': password, 'report': evaluate(password).to_dict()})

    @app.route('/score', methods=['POST'])
    def score_route():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return bad_request("Request body must be a JSON object.")
        password = data.get('password')
        if not isinstance(password, str) or not password:
            return jsonify({'error': 'missing_password', 'message': 'No password to evaluate.'}), 400
        return jsonify(evaluate(password).to_dict())

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
