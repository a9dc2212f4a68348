from flask import Blueprint, jsonify
from dice_table import get_coordinator

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the dice table server!'})

@main.route('/api/roles')
def list_roles():
    """The fixed role set. Clients must offer exactly these names."""
    return jsonify({'roles': list(get_coordinator().roles)})

@main.route('/api/session')
def session_state():
    return jsonify(get_coordinator().snapshot())
