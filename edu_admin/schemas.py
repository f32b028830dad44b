# edu_admin/schemas.py
"""
Схемы валидации и сериализации сущностей (marshmallow)

Одна схема на сущность используется в обе стороны:
  - load(payload) проверяет данные клиента и возвращает запись с ключами snake_case;
  - load(payload, partial=True) проверяет частичное обновление (все поля необязательны);
  - dump(record) готовит JSON с ключами camelCase.

Поля, которые назначает сервер (id, createdAt, views), помечены dump_only
и при загрузке отбрасываются вместе с прочими неизвестными ключами.
"""
from datetime import date

from marshmallow import Schema, fields, validate, validates, pre_load, ValidationError, EXCLUDE

from edu_admin.models.board import BOARD_TYPES
from edu_admin.storage.base import MAX_RECORD_ID

MIN_PYQ_YEAR = 1990


class BaseSchema(Schema):
    """Общие настройки: неизвестные ключи молча отбрасываются"""

    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(dump_only=True)
    created_at = fields.DateTime(dump_only=True, data_key='createdAt')


def _int_field(minimum, **kwargs):
    # strict: дробные числа и строки не приводятся к целому
    return fields.Integer(strict=True, validate=validate.Range(min=minimum, max=MAX_RECORD_ID), **kwargs)


def _id_field(data_key):
    return _int_field(1, required=True, data_key=data_key)


class UserSchema(Schema):
    """Пользователь наружу отдаётся без хэша пароля"""

    id = fields.Integer(dump_only=True)
    username = fields.String(required=True, validate=validate.Length(min=1))


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, validate=validate.Length(min=1), load_only=True)


class BoardSchema(BaseSchema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(allow_none=True)
    type = fields.String(required=True, validate=validate.OneOf(BOARD_TYPES))
    is_active = fields.Boolean(data_key='isActive', load_default=True)


class SubjectSchema(BaseSchema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(allow_none=True)
    board_id = _id_field('boardId')
    is_active = fields.Boolean(data_key='isActive', load_default=True)


class MaterialSchema(BaseSchema):
    title = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(allow_none=True)
    file_name = fields.String(required=True, data_key='fileName', validate=validate.Length(min=1))
    file_size = _int_field(0, required=True, data_key='fileSize')
    file_type = fields.String(required=True, data_key='fileType', validate=validate.Length(min=1))
    subject_id = _id_field('subjectId')
    board_id = _id_field('boardId')
    uploaded_by = _id_field('uploadedBy')


class NoteSchema(BaseSchema):
    title = fields.String(required=True, validate=validate.Length(min=1))
    content = fields.String(required=True)
    subject_id = _id_field('subjectId')
    board_id = _id_field('boardId')
    views = fields.Integer(dump_only=True)
    created_by = _id_field('createdBy')


class PyqPaperSchema(BaseSchema):
    title = fields.String(required=True, validate=validate.Length(min=1))
    year = fields.Integer(required=True, strict=True)
    file_name = fields.String(required=True, data_key='fileName', validate=validate.Length(min=1))
    file_size = _int_field(0, required=True, data_key='fileSize')
    duration = _int_field(1, allow_none=True)
    total_questions = _int_field(1, allow_none=True, data_key='totalQuestions')
    subject_id = _id_field('subjectId')
    board_id = _id_field('boardId')
    has_solutions = fields.Boolean(data_key='hasSolutions', load_default=False)
    has_answer_key = fields.Boolean(data_key='hasAnswerKey', load_default=False)
    uploaded_by = _id_field('uploadedBy')

    @pre_load
    def blank_optional_numbers(self, data, **kwargs):
        # multipart-формы присылают пустую строку вместо отсутствующего значения
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in ('duration', 'totalQuestions'):
            if data.get(key) == '':
                data[key] = None
        return data

    @validates('year')
    def validate_year(self, value, **kwargs):
        if value < MIN_PYQ_YEAR:
            raise ValidationError(f'Year must be {MIN_PYQ_YEAR} or later.')
        if value > date.today().year:
            raise ValidationError('Year cannot be in the future.')


user_schema = UserSchema()
login_schema = LoginSchema()
board_schema = BoardSchema()
boards_schema = BoardSchema(many=True)
subject_schema = SubjectSchema()
subjects_schema = SubjectSchema(many=True)
material_schema = MaterialSchema()
materials_schema = MaterialSchema(many=True)
note_schema = NoteSchema()
notes_schema = NoteSchema(many=True)
pyq_paper_schema = PyqPaperSchema()
pyq_papers_schema = PyqPaperSchema(many=True)
