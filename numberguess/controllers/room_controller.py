"""
Room Controller

Handles the read-only HTTP endpoints for server health and room listing.
"""

from flask import Blueprint, request, jsonify
from ..services.session_coordinator import get_session_coordinator
from ..utils.game_logger import game_logger

room_bp = Blueprint('rooms', __name__)


@room_bp.route('/health', methods=['GET'])
def health():
    """Report that the server is up and how many rooms are open."""
    coordinator = get_session_coordinator()
    if not coordinator:
        return jsonify({
            'success': False,
            'error': 'Session coordinator unavailable'
        }), 500

    return jsonify({
        'success': True,
        'status': 'ok',
        'rooms': coordinator.room_count()
    })


@room_bp.route('/rooms', methods=['GET'])
def list_rooms():
    """List public summaries of all open rooms."""
    try:
        coordinator = get_session_coordinator()
        if not coordinator:
            return jsonify({
                'success': False,
                'error': 'Session coordinator unavailable'
            }), 500

        response_data = {
            'success': True,
            'rooms': coordinator.room_summaries()
        }
        game_logger.log_server_response(request, 'list_rooms', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'list_rooms')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'list_rooms', False, error_response)
        return jsonify(error_response), 500
