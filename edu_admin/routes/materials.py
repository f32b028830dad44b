# edu_admin/routes/materials.py
"""
Маршруты учебных материалов
Создание материала - загрузка одного файла (multipart, поле file)
Поддерживаются фильтры ?subjectId= и ?boardId=
"""
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from edu_admin.routes.common import positive_int_arg, json_payload, form_int, invalid_data, not_found
from edu_admin.schemas import material_schema, materials_schema
from edu_admin.storage import get_storage
from edu_admin.utils.auth import acting_user_id
from edu_admin.utils.uploads import save_upload, discard_upload

# Создание Blueprint для маршрутов материалов
bp = Blueprint('materials', __name__)


@bp.route('', methods=['GET'])
def list_materials():
    """Материалы с фильтром: subjectId важнее boardId"""
    storage = get_storage()
    subject_id = positive_int_arg('subjectId')
    board_id = positive_int_arg('boardId')

    if subject_id:
        materials = storage.get_materials_by_subject(subject_id)
    elif board_id:
        materials = storage.get_materials_by_board(board_id)
    else:
        materials = storage.get_all_materials()
    return jsonify(materials_schema.dump(materials))


@bp.route('/<int:material_id>', methods=['GET'])
def get_material(material_id):
    material = get_storage().get_material(material_id)
    if material is None:
        return not_found('Material')
    return jsonify(material_schema.dump(material))


@bp.route('', methods=['POST'])
def create_material():
    """
    Загрузка материала

    Файл проверяется и сохраняется первым; если поля формы не прошли
    валидацию, сохранённый файл удаляется и запись не создаётся.
    """
    upload = save_upload(request.files)

    payload = {
        'title': request.form.get('title'),
        'description': request.form.get('description'),
        'fileName': upload.original_file_name,
        'fileSize': upload.size_bytes,
        'fileType': upload.mime_type,
        'subjectId': form_int('subjectId'),
        'boardId': form_int('boardId'),
        'uploadedBy': acting_user_id(),
    }

    try:
        data = material_schema.load(payload)
        material = get_storage().create_material(data)
    except ValidationError as e:
        discard_upload(upload)
        return invalid_data('material', e)
    except Exception:
        discard_upload(upload)
        raise

    current_app.logger.info("Uploaded material %s: %s (%d bytes)",
                            material['id'], material['file_name'], material['file_size'])
    return jsonify(material_schema.dump(material)), 201


@bp.route('/<int:material_id>', methods=['PUT'])
def update_material(material_id):
    """Изменение метаданных материала (JSON), файл не заменяется"""
    try:
        data = material_schema.load(json_payload(), partial=True)
    except ValidationError as e:
        return invalid_data('material', e)

    material = get_storage().update_material(material_id, data)
    if material is None:
        return not_found('Material')
    return jsonify(material_schema.dump(material))


@bp.route('/<int:material_id>', methods=['DELETE'])
def delete_material(material_id):
    if not get_storage().delete_material(material_id):
        return not_found('Material')
    return '', 204
