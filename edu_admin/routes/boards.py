# edu_admin/routes/boards.py
"""
Маршруты экзаменационных досок
Список, просмотр, создание, изменение и удаление досок
"""
from flask import Blueprint, jsonify, current_app
from marshmallow import ValidationError

from edu_admin.routes.common import json_payload, invalid_data, not_found
from edu_admin.schemas import board_schema, boards_schema
from edu_admin.storage import get_storage

# Создание Blueprint для маршрутов досок
bp = Blueprint('boards', __name__)


@bp.route('', methods=['GET'])
def list_boards():
    """Все доски, новые первыми"""
    return jsonify(boards_schema.dump(get_storage().get_all_boards()))


@bp.route('/<int:board_id>', methods=['GET'])
def get_board(board_id):
    board = get_storage().get_board(board_id)
    if board is None:
        return not_found('Board')
    return jsonify(board_schema.dump(board))


@bp.route('', methods=['POST'])
def create_board():
    """Создание доски из JSON"""
    try:
        data = board_schema.load(json_payload())
    except ValidationError as e:
        return invalid_data('board', e)

    board = get_storage().create_board(data)
    current_app.logger.info("Created board %s (%s)", board['id'], board['name'])
    return jsonify(board_schema.dump(board)), 201


@bp.route('/<int:board_id>', methods=['PUT'])
def update_board(board_id):
    """Частичное изменение доски: меняются только переданные поля"""
    try:
        data = board_schema.load(json_payload(), partial=True)
    except ValidationError as e:
        return invalid_data('board', e)

    board = get_storage().update_board(board_id, data)
    if board is None:
        return not_found('Board')
    return jsonify(board_schema.dump(board))


@bp.route('/<int:board_id>', methods=['DELETE'])
def delete_board(board_id):
    # Предметы удалённой доски не удаляются и продолжают ссылаться на её id
    if not get_storage().delete_board(board_id):
        return not_found('Board')
    return '', 204
