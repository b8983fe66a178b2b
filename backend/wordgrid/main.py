from flask import Blueprint, jsonify
from wordgrid import get_store

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the word grid game server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'games': len(get_store())})
