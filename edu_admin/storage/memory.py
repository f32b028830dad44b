# edu_admin/storage/memory.py
"""
Хранилище в памяти (разработка, демонстрация, тесты)

Каждая таблица - словарь id -> запись. Словарь сохраняет порядок вставки,
а id и created_at назначаются при вставке, поэтому обратный порядок обхода
совпадает с сортировкой по created_at по убыванию.
"""
from datetime import datetime
import itertools
import threading

from werkzeug.security import generate_password_hash, check_password_hash

from edu_admin.storage.base import Storage, DuplicateUsername

# Эти поля назначает только хранилище
PROTECTED_FIELDS = frozenset({'id', 'created_at', 'views'})


class _Table:
    """Таблица записей одной сущности"""

    def __init__(self, allocator):
        self._rows = {}
        self._allocator = allocator

    def __len__(self):
        return len(self._rows)

    def select(self, **filters):
        rows = reversed(list(self._rows.values()))
        return [dict(row) for row in rows
                if all(row.get(key) == value for key, value in filters.items())]

    def get(self, row_id):
        row = self._rows.get(row_id)
        return dict(row) if row is not None else None

    def insert(self, data, **defaults):
        row = dict(defaults)
        row.update({key: value for key, value in data.items() if key not in PROTECTED_FIELDS})
        row['id'] = next(self._allocator)
        row['created_at'] = datetime.utcnow()
        self._rows[row['id']] = row
        return dict(row)

    def update(self, row_id, data):
        row = self._rows.get(row_id)
        if row is None:
            return None
        row.update({key: value for key, value in data.items() if key not in PROTECTED_FIELDS})
        return dict(row)

    def delete(self, row_id):
        return self._rows.pop(row_id, None) is not None

    def increment(self, row_id, field):
        row = self._rows.get(row_id)
        if row is None:
            return False
        row[field] += 1
        return True

    def find(self, **filters):
        for row in self._rows.values():
            if all(row.get(key) == value for key, value in filters.items()):
                return dict(row)
        return None


class MemStorage(Storage):
    """
    Хранилище на словарях

    Все таблицы контента используют один счётчик идентификаторов на экземпляр
    хранилища (монотонный и уникальный в пределах его жизни), пользователи -
    отдельный. Изменения выполняются под блокировкой.
    """

    def __init__(self, total_students=0):
        super().__init__(total_students=total_students)
        self._lock = threading.RLock()
        content_ids = itertools.count(1)
        self.users = _Table(itertools.count(1))
        self.boards = _Table(content_ids)
        self.subjects = _Table(content_ids)
        self.materials = _Table(content_ids)
        self.notes = _Table(content_ids)
        self.pyq_papers = _Table(content_ids)

    # === Пользователи ===

    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_username(self, username):
        return self.users.find(username=username)

    def create_user(self, username, password):
        with self._lock:
            if self.users.find(username=username) is not None:
                raise DuplicateUsername(username)
            return self.users.insert({
                'username': username,
                'password_hash': generate_password_hash(password),
            })

    def verify_user(self, username, password):
        user = self.get_user_by_username(username)
        if user and check_password_hash(user['password_hash'], password):
            return user
        return None

    # === Доски ===

    def get_all_boards(self):
        return self.boards.select()

    def get_board(self, board_id):
        return self.boards.get(board_id)

    def create_board(self, data):
        with self._lock:
            return self.boards.insert(data, description=None, is_active=True)

    def update_board(self, board_id, data):
        with self._lock:
            return self.boards.update(board_id, data)

    def delete_board(self, board_id):
        with self._lock:
            return self.boards.delete(board_id)

    # === Предметы ===

    def get_all_subjects(self):
        return self.subjects.select()

    def get_subjects_by_board(self, board_id):
        return self.subjects.select(board_id=board_id)

    def get_subject(self, subject_id):
        return self.subjects.get(subject_id)

    def create_subject(self, data):
        with self._lock:
            return self.subjects.insert(data, description=None, is_active=True)

    def update_subject(self, subject_id, data):
        with self._lock:
            return self.subjects.update(subject_id, data)

    def delete_subject(self, subject_id):
        with self._lock:
            return self.subjects.delete(subject_id)

    # === Материалы ===

    def get_all_materials(self):
        return self.materials.select()

    def get_materials_by_subject(self, subject_id):
        return self.materials.select(subject_id=subject_id)

    def get_materials_by_board(self, board_id):
        return self.materials.select(board_id=board_id)

    def get_material(self, material_id):
        return self.materials.get(material_id)

    def create_material(self, data):
        with self._lock:
            return self.materials.insert(data, description=None)

    def update_material(self, material_id, data):
        with self._lock:
            return self.materials.update(material_id, data)

    def delete_material(self, material_id):
        with self._lock:
            return self.materials.delete(material_id)

    # === Заметки ===

    def get_all_notes(self):
        return self.notes.select()

    def get_notes_by_subject(self, subject_id):
        return self.notes.select(subject_id=subject_id)

    def get_notes_by_board(self, board_id):
        return self.notes.select(board_id=board_id)

    def get_note(self, note_id):
        return self.notes.get(note_id)

    def create_note(self, data):
        with self._lock:
            # views из данных клиента отбрасывается, счётчик начинается с нуля
            return self.notes.insert(data, views=0)

    def update_note(self, note_id, data):
        with self._lock:
            return self.notes.update(note_id, data)

    def delete_note(self, note_id):
        with self._lock:
            return self.notes.delete(note_id)

    def increment_note_views(self, note_id):
        with self._lock:
            return self.notes.increment(note_id, 'views')

    # === Билеты прошлых лет ===

    def get_all_pyq_papers(self):
        return self.pyq_papers.select()

    def get_pyq_papers_by_subject(self, subject_id):
        return self.pyq_papers.select(subject_id=subject_id)

    def get_pyq_papers_by_board(self, board_id):
        return self.pyq_papers.select(board_id=board_id)

    def get_pyq_papers_by_year(self, year):
        return self.pyq_papers.select(year=year)

    def get_pyq_paper(self, paper_id):
        return self.pyq_papers.get(paper_id)

    def create_pyq_paper(self, data):
        with self._lock:
            return self.pyq_papers.insert(
                data,
                duration=None,
                total_questions=None,
                has_solutions=False,
                has_answer_key=False,
            )

    def update_pyq_paper(self, paper_id, data):
        with self._lock:
            return self.pyq_papers.update(paper_id, data)

    def delete_pyq_paper(self, paper_id):
        with self._lock:
            return self.pyq_papers.delete(paper_id)

    # === Аналитика ===

    def get_dashboard_stats(self):
        with self._lock:
            return {
                'total_students': self.total_students,
                'total_boards': len(self.boards),
                'total_materials': len(self.materials),
                'total_pyq_papers': len(self.pyq_papers),
            }
