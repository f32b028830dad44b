# edu_admin/routes/notes.py
"""
Маршруты заметок
Просмотр заметки по id увеличивает счётчик просмотров
"""
from flask import Blueprint, jsonify
from marshmallow import ValidationError

from edu_admin.routes.common import positive_int_arg, json_payload, invalid_data, not_found
from edu_admin.schemas import note_schema, notes_schema
from edu_admin.storage import get_storage
from edu_admin.utils.auth import acting_user_id

# Создание Blueprint для маршрутов заметок
bp = Blueprint('notes', __name__)


@bp.route('', methods=['GET'])
def list_notes():
    storage = get_storage()
    subject_id = positive_int_arg('subjectId')
    board_id = positive_int_arg('boardId')

    if subject_id:
        notes = storage.get_notes_by_subject(subject_id)
    elif board_id:
        notes = storage.get_notes_by_board(board_id)
    else:
        notes = storage.get_all_notes()
    return jsonify(notes_schema.dump(notes))


@bp.route('/<int:note_id>', methods=['GET'])
def get_note(note_id):
    """Заметка с уже учтённым текущим просмотром"""
    storage = get_storage()
    if not storage.increment_note_views(note_id):
        return not_found('Note')

    note = storage.get_note(note_id)
    if note is None:
        # удалена между инкрементом и чтением
        return not_found('Note')
    return jsonify(note_schema.dump(note))


@bp.route('', methods=['POST'])
def create_note():
    payload = dict(json_payload(), createdBy=acting_user_id())
    try:
        data = note_schema.load(payload)
    except ValidationError as e:
        return invalid_data('note', e)

    note = get_storage().create_note(data)
    return jsonify(note_schema.dump(note)), 201


@bp.route('/<int:note_id>', methods=['PUT'])
def update_note(note_id):
    try:
        data = note_schema.load(json_payload(), partial=True)
    except ValidationError as e:
        return invalid_data('note', e)

    note = get_storage().update_note(note_id, data)
    if note is None:
        return not_found('Note')
    return jsonify(note_schema.dump(note))


@bp.route('/<int:note_id>', methods=['DELETE'])
def delete_note(note_id):
    if not get_storage().delete_note(note_id):
        return not_found('Note')
    return '', 204
