"""
Validation tests for the marshmallow schemas
"""
from datetime import date, datetime

import pytest
from marshmallow import ValidationError

from edu_admin.schemas import (
    board_schema, subject_schema, material_schema, note_schema, pyq_paper_schema, user_schema
)


class TestBoardSchema:

    def test_valid_board(self):
        data = board_schema.load({'name': 'CBSE', 'type': 'secondary'})
        assert data == {'name': 'CBSE', 'type': 'secondary', 'is_active': True}

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError) as excinfo:
            board_schema.load({'description': 'no name'})
        assert set(excinfo.value.messages) == {'name', 'type'}

    def test_invalid_type(self):
        with pytest.raises(ValidationError) as excinfo:
            board_schema.load({'name': 'X', 'type': 'university'})
        assert 'type' in excinfo.value.messages

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            board_schema.load({'name': '', 'type': 'secondary'})
        assert 'name' in excinfo.value.messages

    def test_server_fields_dropped(self):
        data = board_schema.load({
            'id': 7, 'createdAt': '2020-01-01T00:00:00', 'name': 'CBSE',
            'type': 'secondary', 'isActive': False, 'extra': 'ignored',
        })
        assert data == {'name': 'CBSE', 'type': 'secondary', 'is_active': False}

    def test_partial_skips_defaults(self):
        assert board_schema.load({'name': 'Renamed'}, partial=True) == {'name': 'Renamed'}

    def test_partial_keeps_constraints(self):
        with pytest.raises(ValidationError) as excinfo:
            board_schema.load({'type': 'unknown'}, partial=True)
        assert list(excinfo.value.messages) == ['type']

    def test_dump_camel_case(self):
        created = datetime(2024, 5, 1, 12, 30)
        dumped = board_schema.dump({
            'id': 1, 'name': 'CBSE', 'description': None, 'type': 'secondary',
            'is_active': True, 'created_at': created,
        })
        assert dumped == {
            'id': 1, 'createdAt': created.isoformat(), 'name': 'CBSE',
            'description': None, 'type': 'secondary', 'isActive': True,
        }


class TestSubjectSchema:

    def test_board_id_integer(self):
        data = subject_schema.load({'name': 'Math', 'boardId': 3})
        assert data['board_id'] == 3

    @pytest.mark.parametrize('board_id', [1.9, 2.0, '3', 2 ** 63])
    def test_board_id_must_be_whole_number(self, board_id):
        """Дробные числа, строки и значения вне INTEGER не округляются"""
        with pytest.raises(ValidationError) as excinfo:
            subject_schema.load({'name': 'Math', 'boardId': board_id})
        assert list(excinfo.value.messages) == ['boardId']

    def test_board_id_must_be_positive(self):
        with pytest.raises(ValidationError) as excinfo:
            subject_schema.load({'name': 'Math', 'boardId': 0})
        assert 'boardId' in excinfo.value.messages


class TestMaterialSchema:

    def test_all_fields_reported(self):
        with pytest.raises(ValidationError) as excinfo:
            material_schema.load({})
        assert set(excinfo.value.messages) == {
            'title', 'fileName', 'fileSize', 'fileType', 'subjectId', 'boardId', 'uploadedBy'
        }


class TestNoteSchema:

    def test_views_not_loadable(self):
        data = note_schema.load({
            'title': 'T', 'content': '<b>x</b>', 'subjectId': 1, 'boardId': 1,
            'createdBy': 1, 'views': 100,
        })
        assert 'views' not in data

    def test_views_dumped(self):
        assert note_schema.dump({'id': 1, 'views': 3})['views'] == 3


class TestPyqPaperSchema:

    def payload(self, **overrides):
        data = {
            'title': 'Physics 2020', 'year': 2020, 'fileName': 'p.pdf', 'fileSize': 10,
            'subjectId': 2, 'boardId': 1, 'uploadedBy': 1,
        }
        data.update(overrides)
        return data

    def test_defaults(self):
        data = pyq_paper_schema.load(self.payload())
        assert data['year'] == 2020
        assert data['has_solutions'] is False
        assert data['has_answer_key'] is False
        assert 'duration' not in data

    def test_blank_optional_numbers_become_none(self):
        data = pyq_paper_schema.load(self.payload(duration='', totalQuestions=''))
        assert data['duration'] is None
        assert data['total_questions'] is None

    def test_string_booleans(self):
        data = pyq_paper_schema.load(self.payload(hasSolutions='true', hasAnswerKey='false'))
        assert data['has_solutions'] is True
        assert data['has_answer_key'] is False

    @pytest.mark.parametrize('year', [1989, date.today().year + 1])
    def test_year_out_of_range(self, year):
        with pytest.raises(ValidationError) as excinfo:
            pyq_paper_schema.load(self.payload(year=year))
        assert 'year' in excinfo.value.messages

    def test_current_year_allowed(self):
        assert pyq_paper_schema.load(self.payload(year=date.today().year))['year'] == date.today().year


class TestUserSchema:

    def test_password_hash_never_dumped(self):
        dumped = user_schema.dump({'id': 1, 'username': 'admin', 'password_hash': 'pbkdf2:...'})
        assert dumped == {'id': 1, 'username': 'admin'}


class TestStrictNumbers:

    @pytest.mark.parametrize('field', ['year', 'fileSize', 'duration', 'totalQuestions'])
    def test_float_rejected(self, field):
        payload = TestPyqPaperSchema().payload(**{field: 120.5})
        with pytest.raises(ValidationError) as excinfo:
            pyq_paper_schema.load(payload)
        assert field in excinfo.value.messages

    def test_float_rejected_in_partial_update(self):
        with pytest.raises(ValidationError) as excinfo:
            material_schema.load({'subjectId': 4.2}, partial=True)
        assert 'subjectId' in excinfo.value.messages
