"""
Storage contract tests
Every test in the parametrised classes runs against MemStorage and SqlStorage
"""
import pytest
from flask import Flask

from edu_admin.storage import DuplicateUsername, MemStorage, create_storage


def board_data(**overrides):
    data = {'name': 'CBSE', 'description': None, 'type': 'secondary', 'is_active': True}
    data.update(overrides)
    return data


def subject_data(board_id, **overrides):
    data = {'name': 'Math', 'description': None, 'board_id': board_id, 'is_active': True}
    data.update(overrides)
    return data


def material_data(**overrides):
    data = {
        'title': 'Algebra notes', 'description': 'Chapter 1',
        'file_name': 'algebra.pdf', 'file_size': 1024, 'file_type': 'application/pdf',
        'subject_id': 2, 'board_id': 1, 'uploaded_by': 1,
    }
    data.update(overrides)
    return data


def note_data(**overrides):
    data = {'title': 'Limits', 'content': '<p>lim</p>', 'subject_id': 2, 'board_id': 1, 'created_by': 1}
    data.update(overrides)
    return data


def pyq_data(**overrides):
    data = {
        'title': 'Physics 2020', 'year': 2020, 'file_name': 'phy.pdf', 'file_size': 2048,
        'duration': 180, 'total_questions': 90, 'subject_id': 2, 'board_id': 1,
        'has_solutions': True, 'has_answer_key': False, 'uploaded_by': 1,
    }
    data.update(overrides)
    return data


# ============================================================================
# CRUD CONTRACT
# ============================================================================

class TestCreateAndGet:
    """create followed by get returns the input plus id and created_at"""

    @pytest.mark.parametrize('create, get, make', [
        ('create_board', 'get_board', board_data),
        ('create_subject', 'get_subject', lambda: subject_data(1)),
        ('create_material', 'get_material', material_data),
        ('create_note', 'get_note', note_data),
        ('create_pyq_paper', 'get_pyq_paper', pyq_data),
    ])
    def test_round_trip(self, storage, create, get, make):
        data = make()
        created = getattr(storage, create)(data)

        assert created['id'] >= 1
        assert created['created_at'] is not None
        assert {key: created[key] for key in data} == data
        assert getattr(storage, get)(created['id']) == created

    def test_ids_are_unique_and_increasing(self, storage):
        first = storage.create_board(board_data(name='A'))
        second = storage.create_board(board_data(name='B'))
        assert second['id'] > first['id']

    def test_note_views_start_at_zero(self, storage):
        note = storage.create_note(note_data())
        assert note['views'] == 0

    def test_server_fields_cannot_be_supplied(self, storage):
        note = storage.create_note(dict(note_data(), id=999, views=50))
        assert note['id'] != 999
        assert note['views'] == 0

    def test_boolean_defaults(self, storage):
        board = storage.create_board({'name': 'NEET', 'type': 'competitive'})
        paper = storage.create_pyq_paper({
            key: value for key, value in pyq_data().items()
            if key not in ('has_solutions', 'has_answer_key', 'duration', 'total_questions')
        })
        assert board['is_active'] is True
        assert board['description'] is None
        assert paper['has_solutions'] is False
        assert paper['has_answer_key'] is False
        assert paper['duration'] is None

    def test_get_missing_returns_none(self, storage):
        assert storage.get_board(12345) is None
        assert storage.get_note(12345) is None
        assert storage.get_pyq_paper(12345) is None


class TestUpdate:
    """update changes only the supplied fields"""

    def test_partial_update(self, storage):
        board = storage.create_board(board_data(description='old'))
        updated = storage.update_board(board['id'], {'name': 'CBSE Class 12'})

        assert updated['name'] == 'CBSE Class 12'
        assert updated['description'] == 'old'
        assert updated['type'] == board['type']
        assert updated['created_at'] == board['created_at']
        assert storage.get_board(board['id']) == updated

    def test_update_does_not_touch_server_fields(self, storage):
        note = storage.create_note(note_data())
        storage.increment_note_views(note['id'])
        updated = storage.update_note(note['id'], {'title': 'Derivatives', 'views': 0, 'id': 77})

        assert updated['id'] == note['id']
        assert updated['views'] == 1
        assert updated['created_at'] == note['created_at']

    def test_update_missing_returns_none(self, storage):
        assert storage.update_subject(999, {'name': 'x'}) is None
        assert storage.update_material(999, {'title': 'x'}) is None
        assert storage.update_pyq_paper(999, {'title': 'x'}) is None

    def test_returned_records_are_copies(self, storage):
        board = storage.create_board(board_data())
        board['name'] = 'changed outside'
        assert storage.get_board(board['id'])['name'] == 'CBSE'


class TestDelete:

    def test_delete_existing(self, storage):
        material = storage.create_material(material_data())
        assert storage.delete_material(material['id']) is True
        assert storage.get_material(material['id']) is None

    def test_delete_missing(self, storage):
        assert storage.delete_board(4242) is False
        assert storage.delete_note(4242) is False

    def test_ids_beyond_integer_range(self, storage):
        huge = 2 ** 70
        assert storage.get_board(huge) is None
        assert storage.update_subject(huge, {'name': 'x'}) is None
        assert storage.delete_material(huge) is False
        assert storage.increment_note_views(huge) is False
        assert storage.get_user(huge) is None
        assert storage.get_subjects_by_board(huge) == []

    def test_delete_twice(self, storage):
        paper = storage.create_pyq_paper(pyq_data())
        assert storage.delete_pyq_paper(paper['id']) is True
        assert storage.delete_pyq_paper(paper['id']) is False

    def test_board_delete_leaves_subjects(self, storage):
        """No cascade: subjects keep pointing at the deleted board"""
        board = storage.create_board(board_data())
        subject = storage.create_subject(subject_data(board['id']))

        assert storage.delete_board(board['id']) is True
        assert storage.get_subject(subject['id']) == subject
        assert storage.get_subjects_by_board(board['id']) == [subject]


class TestNoteViews:

    def test_increment_by_one(self, storage):
        note = storage.create_note(note_data())
        for _ in range(5):
            assert storage.increment_note_views(note['id']) is True
        assert storage.get_note(note['id'])['views'] == 5

    def test_increment_missing(self, storage):
        assert storage.increment_note_views(31337) is False


# ============================================================================
# FILTERING AND ORDERING
# ============================================================================

class TestFiltering:

    def test_subjects_by_board(self, storage):
        math = storage.create_subject(subject_data(1, name='Math'))
        storage.create_subject(subject_data(2, name='Physics'))
        chemistry = storage.create_subject(subject_data(1, name='Chemistry'))

        assert storage.get_subjects_by_board(1) == [chemistry, math]
        assert storage.get_subjects_by_board(3) == []

    def test_list_all_newest_first(self, storage):
        boards = [storage.create_board(board_data(name=name)) for name in ('A', 'B', 'C')]
        assert [b['id'] for b in storage.get_all_boards()] == [b['id'] for b in reversed(boards)]

    def test_materials_by_subject_and_board(self, storage):
        a = storage.create_material(material_data(subject_id=10, board_id=1))
        b = storage.create_material(material_data(subject_id=11, board_id=1))
        storage.create_material(material_data(subject_id=12, board_id=2))

        assert storage.get_materials_by_subject(10) == [a]
        assert storage.get_materials_by_board(1) == [b, a]

    def test_notes_by_subject_and_board(self, storage):
        a = storage.create_note(note_data(subject_id=5, board_id=3))
        b = storage.create_note(note_data(subject_id=6, board_id=3))

        assert storage.get_notes_by_subject(6) == [b]
        assert storage.get_notes_by_board(3) == [b, a]
        assert len(storage.get_all_notes()) == 2

    def test_pyq_papers_by_year(self, storage):
        old = storage.create_pyq_paper(pyq_data(year=2019))
        new = storage.create_pyq_paper(pyq_data(year=2021, board_id=4))

        assert storage.get_pyq_papers_by_year(2019) == [old]
        assert storage.get_pyq_papers_by_board(4) == [new]
        assert storage.get_pyq_papers_by_subject(2) == [new, old]


# ============================================================================
# DASHBOARD, USERS, SEEDING
# ============================================================================

class TestDashboardStats:

    def test_counts(self, storage):
        storage.create_board(board_data())
        storage.create_board(board_data(name='JEE'))
        storage.create_material(material_data())
        storage.create_note(note_data())

        stats = storage.get_dashboard_stats()
        assert stats == {
            'total_students': 2847,
            'total_boards': 2,
            'total_materials': 1,
            'total_pyq_papers': 0,
        }

    def test_counts_follow_deletes(self, storage):
        paper = storage.create_pyq_paper(pyq_data())
        storage.delete_pyq_paper(paper['id'])
        assert storage.get_dashboard_stats()['total_pyq_papers'] == 0


class TestUsers:

    def test_admin_seeded_with_hashed_password(self, storage):
        admin = storage.get_user_by_username('admin')
        assert admin is not None
        assert admin['password_hash'] != 'admin123'
        assert storage.get_user(admin['id']) == admin

    def test_verify_user(self, storage):
        assert storage.verify_user('admin', 'admin123')['username'] == 'admin'
        assert storage.verify_user('admin', 'wrong') is None
        assert storage.verify_user('nobody', 'admin123') is None

    def test_create_user(self, storage):
        user = storage.create_user('editor', 's3cret')
        assert storage.get_user_by_username('editor')['id'] == user['id']
        assert storage.verify_user('editor', 's3cret') is not None

    def test_duplicate_username_rejected(self, storage):
        with pytest.raises(DuplicateUsername):
            storage.create_user('admin', 'another')

        assert storage.verify_user('admin', 'another') is None
        assert storage.verify_user('admin', 'admin123') is not None

    def test_store_usable_after_duplicate(self, storage):
        with pytest.raises(DuplicateUsername):
            storage.create_user('admin', 'another')
        assert storage.create_user('editor', 'pass')['username'] == 'editor'


class TestSeeding:

    def test_seed_is_idempotent(self, storage):
        storage.seed_defaults('admin', 'admin123', demo_data=True)
        storage.seed_defaults('admin', 'admin123', demo_data=True)

        assert [b['name'] for b in storage.get_all_boards()] == ['NEET', 'JEE Main', 'CBSE Class 12']
        assert len(storage.get_all_subjects()) == 3

    def test_demo_subjects_reference_their_board(self, storage):
        storage.seed_defaults('admin', 'admin123', demo_data=True)
        cbse = [b for b in storage.get_all_boards() if b['name'] == 'CBSE Class 12'][0]
        assert [s['name'] for s in storage.get_subjects_by_board(cbse['id'])] == ['Mathematics']


# ============================================================================
# IN-MEMORY SPECIFICS
# ============================================================================

class TestMemStorage:
    """Id allocation of the in-memory store"""

    def test_content_ids_shared_across_tables(self):
        storage = MemStorage()
        board = storage.create_board({'name': 'CBSE', 'type': 'secondary'})
        subject = storage.create_subject({'name': 'Math', 'board_id': board['id']})

        assert board['id'] == 1
        assert subject['id'] == 2
        assert storage.get_subjects_by_board(1) == [subject]

        assert storage.delete_board(1) is True
        assert storage.get_subject(2) == subject

    def test_users_have_their_own_sequence(self):
        storage = MemStorage()
        storage.seed_defaults('admin', 'admin123')
        board = storage.create_board({'name': 'CBSE', 'type': 'secondary'})

        assert storage.get_user_by_username('admin')['id'] == 1
        assert board['id'] == 1

    def test_ids_never_reused(self):
        storage = MemStorage()
        first = storage.create_board({'name': 'A', 'type': 'secondary'})
        storage.delete_board(first['id'])
        second = storage.create_board({'name': 'B', 'type': 'secondary'})
        assert second['id'] > first['id']

    def test_stores_are_independent(self):
        one, two = MemStorage(), MemStorage()
        one.create_board({'name': 'A', 'type': 'secondary'})
        assert two.create_board({'name': 'B', 'type': 'secondary'})['id'] == 1


class TestCreateStorage:

    def test_unknown_backend(self):
        app = Flask(__name__)
        app.config['STORAGE_BACKEND'] = 'redis'
        with pytest.raises(ValueError):
            create_storage(app)

    def test_memory_backend(self):
        app = Flask(__name__)
        app.config['STORAGE_BACKEND'] = 'memory'
        app.config['TOTAL_STUDENTS_PLACEHOLDER'] = 10
        storage = create_storage(app)
        assert isinstance(storage, MemStorage)
        assert storage.get_dashboard_stats()['total_students'] == 10
