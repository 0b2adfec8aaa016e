import logging

from flask import Flask, request, jsonify, render_template
from flask_cors import CORS

# --- CONFIG & CORE IMPORTS ---
from config.settings import Config
from config.security import SecurityConfig, sanitize_input, add_security_headers
from core.input_validator import InvalidInput
from core.calculator import (
    calculate, UNIT_SYSTEMS, GENDERS, GOALS, ACTIVITY_MULTIPLIERS, ACTIVITY_DESCRIPTIONS
)

# Helpers
from core.response_formatter import format_result, format_error, GOAL_LABELS

logging.basicConfig(level=Config.LOG_LEVEL)
logger = logging.getLogger(__name__)

FORM_FIELDS = ['unit', 'weight', 'height', 'feet', 'inches', 'age', 'gender', 'activity_level', 'goal']

app = Flask(__name__)
app.config['SECRET_KEY'] = SecurityConfig.SECRET_KEY
CORS(app, origins=SecurityConfig.ALLOWED_ORIGINS)

for problem in SecurityConfig.validate():
    logger.warning(problem)


@app.after_request
def apply_security_headers(response):
    return add_security_headers(response)


# --- ROUTES ---
@app.route('/')
def calculator_page():
    return render_template('calculator.html', app_name=Config.APP_NAME, default_unit=Config.DEFAULT_UNIT)


@app.route('/health')
def health():
    return jsonify({"status": "ok"})


# --- API ENDPOINTS ---
@app.route('/options')
def options():
    """Fixed choice lists the form uses to build its selects."""
    return jsonify({
        "units": list(UNIT_SYSTEMS),
        "genders": list(GENDERS),
        "activity_levels": [
            {"value": level, "label": ACTIVITY_DESCRIPTIONS[level], "multiplier": factor}
            for level, factor in ACTIVITY_MULTIPLIERS.items()
        ],
        "goals": [{"value": goal, "label": GOAL_LABELS[goal]} for goal in GOALS],
    })


@app.route('/calculate', methods=['POST'])
def calculate_endpoint():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        inputs = {k: sanitize_input(data.get(k)) for k in FORM_FIELDS}
        result = calculate(inputs)
    except InvalidInput as e:
        logger.info(f"Rejected calculation: {e.message}")
        return jsonify({"success": False, "error": e.to_dict(), "html": format_error(e)}), 400
    except Exception:
        logger.exception("Calculation failed")
        return jsonify({"success": False, "error": {"title": "Error", "description": "Server error"}}), 500

    return jsonify({"success": True, "result": result, "html": format_result(result)})


if __name__ == '__main__':
    app.run(debug=SecurityConfig.DEBUG, port=Config.PORT)
