# edu_admin/storage/sql.py
"""
Хранилище на реляционной базе данных (Flask-SQLAlchemy)

Идентификаторы назначает СУБД. Каждый изменяющий вызов завершается
собственным commit, при ошибке сессия откатывается.
"""
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from edu_admin import db
from edu_admin.models import User, Board, Subject, Material, Note, PyqPaper
from edu_admin.storage.base import Storage, DuplicateUsername, MAX_RECORD_ID

# Эти поля назначает только хранилище
PROTECTED_FIELDS = frozenset({'id', 'created_at', 'views'})


def _fits(value):
    """Целое значение помещается в INTEGER базы данных"""
    return -MAX_RECORD_ID - 1 <= value <= MAX_RECORD_ID


class SqlStorage(Storage):
    """Реализация хранилища поверх моделей SQLAlchemy"""

    # === Общие операции ===

    def _list(self, model, **filters):
        # Значение вне диапазона колонки не совпадёт ни с одной записью
        if not all(_fits(value) for value in filters.values()):
            return []
        query = model.query.filter_by(**filters)
        query = query.order_by(desc(model.created_at), desc(model.id))
        return [row.to_dict() for row in query.all()]

    def _get(self, model, row_id):
        if not _fits(row_id):
            return None
        row = db.session.get(model, row_id)
        return row.to_dict() if row is not None else None

    def _create(self, model, data):
        row = model(**{key: value for key, value in data.items() if key not in PROTECTED_FIELDS})
        db.session.add(row)
        self._commit()
        return row.to_dict()

    def _update(self, model, row_id, data):
        if not _fits(row_id):
            return None
        row = db.session.get(model, row_id)
        if row is None:
            return None
        for key, value in data.items():
            if key not in PROTECTED_FIELDS:
                setattr(row, key, value)
        self._commit()
        return row.to_dict()

    def _delete(self, model, row_id):
        if not _fits(row_id):
            return False
        row = db.session.get(model, row_id)
        if row is None:
            return False
        db.session.delete(row)
        self._commit()
        return True

    def _commit(self):
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    # === Пользователи ===

    def get_user(self, user_id):
        return self._get(User, user_id)

    def get_user_by_username(self, username):
        user = User.query.filter_by(username=username).first()
        return user.to_dict() if user else None

    def create_user(self, username, password):
        user = User(username=username)
        user.set_password(password)
        db.session.add(user)
        try:
            self._commit()
        except IntegrityError as e:
            raise DuplicateUsername(username) from e
        return user.to_dict()

    def verify_user(self, username, password):
        user = User.query.filter_by(username=username).first()
        if user and user.check_password(password):
            return user.to_dict()
        return None

    # === Доски ===

    def get_all_boards(self):
        return self._list(Board)

    def get_board(self, board_id):
        return self._get(Board, board_id)

    def create_board(self, data):
        return self._create(Board, data)

    def update_board(self, board_id, data):
        return self._update(Board, board_id, data)

    def delete_board(self, board_id):
        return self._delete(Board, board_id)

    # === Предметы ===

    def get_all_subjects(self):
        return self._list(Subject)

    def get_subjects_by_board(self, board_id):
        return self._list(Subject, board_id=board_id)

    def get_subject(self, subject_id):
        return self._get(Subject, subject_id)

    def create_subject(self, data):
        return self._create(Subject, data)

    def update_subject(self, subject_id, data):
        return self._update(Subject, subject_id, data)

    def delete_subject(self, subject_id):
        return self._delete(Subject, subject_id)

    # === Материалы ===

    def get_all_materials(self):
        return self._list(Material)

    def get_materials_by_subject(self, subject_id):
        return self._list(Material, subject_id=subject_id)

    def get_materials_by_board(self, board_id):
        return self._list(Material, board_id=board_id)

    def get_material(self, material_id):
        return self._get(Material, material_id)

    def create_material(self, data):
        return self._create(Material, data)

    def update_material(self, material_id, data):
        return self._update(Material, material_id, data)

    def delete_material(self, material_id):
        return self._delete(Material, material_id)

    # === Заметки ===

    def get_all_notes(self):
        return self._list(Note)

    def get_notes_by_subject(self, subject_id):
        return self._list(Note, subject_id=subject_id)

    def get_notes_by_board(self, board_id):
        return self._list(Note, board_id=board_id)

    def get_note(self, note_id):
        return self._get(Note, note_id)

    def create_note(self, data):
        return self._create(Note, data)

    def update_note(self, note_id, data):
        return self._update(Note, note_id, data)

    def delete_note(self, note_id):
        return self._delete(Note, note_id)

    def increment_note_views(self, note_id):
        if not _fits(note_id):
            return False
        # Один UPDATE, без чтения-изменения-записи на стороне приложения
        updated = Note.query.filter_by(id=note_id).update(
            {Note.views: Note.views + 1}, synchronize_session='fetch'
        )
        self._commit()
        return updated > 0

    # === Билеты прошлых лет ===

    def get_all_pyq_papers(self):
        return self._list(PyqPaper)

    def get_pyq_papers_by_subject(self, subject_id):
        return self._list(PyqPaper, subject_id=subject_id)

    def get_pyq_papers_by_board(self, board_id):
        return self._list(PyqPaper, board_id=board_id)

    def get_pyq_papers_by_year(self, year):
        return self._list(PyqPaper, year=year)

    def get_pyq_paper(self, paper_id):
        return self._get(PyqPaper, paper_id)

    def create_pyq_paper(self, data):
        return self._create(PyqPaper, data)

    def update_pyq_paper(self, paper_id, data):
        return self._update(PyqPaper, paper_id, data)

    def delete_pyq_paper(self, paper_id):
        return self._delete(PyqPaper, paper_id)

    # === Аналитика ===

    def get_dashboard_stats(self):
        return {
            'total_students': self.total_students,
            'total_boards': Board.query.count(),
            'total_materials': Material.query.count(),
            'total_pyq_papers': PyqPaper.query.count(),
        }
