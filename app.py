# Standard library imports
from datetime import datetime
import logging
import os
import sys

# Third-party imports
from flask import Flask, Response, request, jsonify
from werkzeug.exceptions import HTTPException

# Local/application imports
from cupviz.core.config import HOST, LOG_DIR, LOG_LEVEL, PORT
from cupviz.core.customization import state_from_item, state_from_query
from cupviz.core.geometry import compute_outline, viewport
from cupviz.core.renderer import render_drink
from cupviz.core.state import CustomizationState
from cupviz.utils.svg import to_svg

# Configure logging
os.makedirs(LOG_DIR, exist_ok=True)
log_filename = os.path.join(LOG_DIR, f"cupviz_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(log_filename),
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)
logger.info("=== Cup Visualization Service Starting ===")

app = Flask(__name__)

def build_payload(state: CustomizationState) -> dict:
    """Primitives plus the viewport they are laid out in"""
    width, height = viewport(compute_outline(state.size))
    return {
        'size': state.size.value,
        'viewport': {'width': width, 'height': height},
        'primitives': [primitive.to_dict() for primitive in render_drink(state)]
    }

def error_response(message: str, status: int):
    return jsonify({'error': message}), status

@app.route('/cup', methods=['GET'])
def cup_json():
    """Render the cup from query parameters"""
    try:
        state = state_from_query(request.args, request.args.getlist('topping'))
    except ValueError as e:
        logger.info(f"Rejected cup request: {e}")
        return error_response(str(e), 400)
    return jsonify(build_payload(state))

@app.route('/cup', methods=['POST'])
def cup_from_item():
    """Render the cup for a customized cart item"""
    item = request.get_json(silent=True)
    if item is None:
        return error_response("Expected a JSON body", 400)
    try:
        state = state_from_item(item)
    except ValueError as e:
        logger.info(f"Rejected customized item: {e}")
        return error_response(str(e), 400)
    return jsonify(build_payload(state))

@app.route('/cup.svg', methods=['GET'])
def cup_svg():
    """Render the cup as an SVG document"""
    try:
        state = state_from_query(request.args, request.args.getlist('topping'))
    except ValueError as e:
        logger.info(f"Rejected cup request: {e}")
        return error_response(str(e), 400)
    svg = to_svg(render_drink(state), viewport(compute_outline(state.size)))
    return Response(svg, mimetype='image/svg+xml')

@app.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return e
    logger.error(f"Error rendering cup: {str(e)}", exc_info=True)
    return error_response("Sorry, something went wrong rendering the drink.", 500)

@app.route('/health')
def health_check():
    return 'OK', 200

if __name__ == '__main__':
    logger.info(f"Starting server on {HOST}:{PORT}")
    app.run(host=HOST, port=PORT)
