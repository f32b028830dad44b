# edu_admin/routes/subjects.py
"""
Маршруты предметов
Поддерживается фильтр ?boardId=
"""
from flask import Blueprint, jsonify, current_app
from marshmallow import ValidationError

from edu_admin.routes.common import positive_int_arg, json_payload, invalid_data, not_found
from edu_admin.schemas import subject_schema, subjects_schema
from edu_admin.storage import get_storage

# Создание Blueprint для маршрутов предметов
bp = Blueprint('subjects', __name__)


@bp.route('', methods=['GET'])
def list_subjects():
    storage = get_storage()
    board_id = positive_int_arg('boardId')

    if board_id:
        subjects = storage.get_subjects_by_board(board_id)
    else:
        subjects = storage.get_all_subjects()
    return jsonify(subjects_schema.dump(subjects))


@bp.route('/<int:subject_id>', methods=['GET'])
def get_subject(subject_id):
    subject = get_storage().get_subject(subject_id)
    if subject is None:
        return not_found('Subject')
    return jsonify(subject_schema.dump(subject))


@bp.route('', methods=['POST'])
def create_subject():
    # Существование доски boardId не проверяется
    try:
        data = subject_schema.load(json_payload())
    except ValidationError as e:
        return invalid_data('subject', e)

    subject = get_storage().create_subject(data)
    current_app.logger.info("Created subject %s for board %s", subject['id'], subject['board_id'])
    return jsonify(subject_schema.dump(subject)), 201


@bp.route('/<int:subject_id>', methods=['PUT'])
def update_subject(subject_id):
    try:
        data = subject_schema.load(json_payload(), partial=True)
    except ValidationError as e:
        return invalid_data('subject', e)

    subject = get_storage().update_subject(subject_id, data)
    if subject is None:
        return not_found('Subject')
    return jsonify(subject_schema.dump(subject))


@bp.route('/<int:subject_id>', methods=['DELETE'])
def delete_subject(subject_id):
    if not get_storage().delete_subject(subject_id):
        return not_found('Subject')
    return '', 204
