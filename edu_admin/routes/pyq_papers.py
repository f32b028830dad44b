# edu_admin/routes/pyq_papers.py
"""
Маршруты экзаменационных билетов прошлых лет (PYQ)
Создание - загрузка файла (multipart) с данными экзамена
Фильтры: ?subjectId=, ?boardId=, ?year= (применяется первый заданный)
"""
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from edu_admin.routes.common import positive_int_arg, json_payload, form_int, invalid_data, not_found
from edu_admin.schemas import pyq_paper_schema, pyq_papers_schema
from edu_admin.storage import get_storage
from edu_admin.utils.auth import acting_user_id
from edu_admin.utils.uploads import save_upload, discard_upload

# Создание Blueprint для маршрутов билетов
bp = Blueprint('pyq_papers', __name__)


@bp.route('', methods=['GET'])
def list_pyq_papers():
    storage = get_storage()
    subject_id = positive_int_arg('subjectId')
    board_id = positive_int_arg('boardId')
    year = positive_int_arg('year')

    if subject_id:
        papers = storage.get_pyq_papers_by_subject(subject_id)
    elif board_id:
        papers = storage.get_pyq_papers_by_board(board_id)
    elif year:
        papers = storage.get_pyq_papers_by_year(year)
    else:
        papers = storage.get_all_pyq_papers()
    return jsonify(pyq_papers_schema.dump(papers))


@bp.route('/<int:paper_id>', methods=['GET'])
def get_pyq_paper(paper_id):
    paper = get_storage().get_pyq_paper(paper_id)
    if paper is None:
        return not_found('PYQ paper')
    return jsonify(pyq_paper_schema.dump(paper))


@bp.route('', methods=['POST'])
def create_pyq_paper():
    """
    Загрузка билета

    hasSolutions / hasAnswerKey приходят строками "true" / "false",
    duration и totalQuestions могут быть пустыми.
    """
    upload = save_upload(request.files)

    payload = {
        'title': request.form.get('title'),
        'year': form_int('year'),
        'fileName': upload.original_file_name,
        'fileSize': upload.size_bytes,
        'subjectId': form_int('subjectId'),
        'boardId': form_int('boardId'),
        'hasSolutions': request.form.get('hasSolutions') == 'true',
        'hasAnswerKey': request.form.get('hasAnswerKey') == 'true',
        'uploadedBy': acting_user_id(),
    }
    for field in ('duration', 'totalQuestions'):
        if field in request.form:
            payload[field] = form_int(field)

    try:
        data = pyq_paper_schema.load(payload)
        paper = get_storage().create_pyq_paper(data)
    except ValidationError as e:
        discard_upload(upload)
        return invalid_data('PYQ paper', e)
    except Exception:
        discard_upload(upload)
        raise

    current_app.logger.info("Uploaded PYQ paper %s: %s (%s)", paper['id'], paper['title'], paper['year'])
    return jsonify(pyq_paper_schema.dump(paper)), 201


@bp.route('/<int:paper_id>', methods=['PUT'])
def update_pyq_paper(paper_id):
    """Изменение данных билета (JSON), файл не заменяется"""
    try:
        data = pyq_paper_schema.load(json_payload(), partial=True)
    except ValidationError as e:
        return invalid_data('PYQ paper', e)

    paper = get_storage().update_pyq_paper(paper_id, data)
    if paper is None:
        return not_found('PYQ paper')
    return jsonify(pyq_paper_schema.dump(paper))


@bp.route('/<int:paper_id>', methods=['DELETE'])
def delete_pyq_paper(paper_id):
    if not get_storage().delete_pyq_paper(paper_id):
        return not_found('PYQ paper')
    return '', 204
