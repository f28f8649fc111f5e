from flask import Blueprint, request, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the tic-tac-toe game server!'})

@main.route('/echo', methods=['POST'])
def echo():
    return request.get_data(), 200, {'Content-Type': request.content_type or 'text/plain'}
