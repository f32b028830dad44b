# edu_admin/storage/base.py
"""
Интерфейс хранилища учебного контента

Хранилище - единственная точка доступа к данным. Все реализации возвращают
записи в виде словарей с ключами snake_case. Отсутствие записи сообщается
значением None (get/update) или False (delete), а не исключением.
"""
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)

# Наибольший id, который помещается в INTEGER базы данных (знаковое 64-битное)
MAX_RECORD_ID = 2 ** 63 - 1


class DuplicateUsername(Exception):
    """Пользователь с таким логином уже существует"""


# Демонстрационные данные: доски и по одному предмету на каждую
DEMO_BOARDS = [
    {
        'board': {'name': 'CBSE Class 12', 'description': 'Central Board of Secondary Education',
                  'type': 'secondary', 'is_active': True},
        'subject': {'name': 'Mathematics',
                    'description': 'Advanced mathematics covering calculus, algebra, and trigonometry'},
    },
    {
        'board': {'name': 'JEE Main', 'description': 'Joint Entrance Examination Main',
                  'type': 'competitive', 'is_active': True},
        'subject': {'name': 'Physics',
                    'description': 'Fundamental physics concepts including mechanics, thermodynamics, and optics'},
    },
    {
        'board': {'name': 'NEET', 'description': 'National Eligibility cum Entrance Test',
                  'type': 'competitive', 'is_active': True},
        'subject': {'name': 'Biology',
                    'description': 'Comprehensive biology covering botany, zoology, and human physiology'},
    },
]


class Storage(ABC):
    """
    Базовый класс хранилища

    Args:
        total_students (int): Значение-заглушка для счётчика учеников на дашборде
    """

    def __init__(self, total_students=0):
        self.total_students = total_students

    # === Пользователи ===

    @abstractmethod
    def get_user(self, user_id):
        ...

    @abstractmethod
    def get_user_by_username(self, username):
        ...

    @abstractmethod
    def create_user(self, username, password):
        """
        Создание пользователя; пароль сохраняется только в виде солёного хэша

        Raises:
            DuplicateUsername: Логин уже занят
        """

    @abstractmethod
    def verify_user(self, username, password):
        """
        Проверка учётных данных

        Returns:
            dict: Запись пользователя или None, если логин/пароль не подошли
        """

    # === Доски ===

    @abstractmethod
    def get_all_boards(self):
        ...

    @abstractmethod
    def get_board(self, board_id):
        ...

    @abstractmethod
    def create_board(self, data):
        ...

    @abstractmethod
    def update_board(self, board_id, data):
        ...

    @abstractmethod
    def delete_board(self, board_id):
        ...

    # === Предметы ===

    @abstractmethod
    def get_all_subjects(self):
        ...

    @abstractmethod
    def get_subjects_by_board(self, board_id):
        ...

    @abstractmethod
    def get_subject(self, subject_id):
        ...

    @abstractmethod
    def create_subject(self, data):
        ...

    @abstractmethod
    def update_subject(self, subject_id, data):
        ...

    @abstractmethod
    def delete_subject(self, subject_id):
        ...

    # === Материалы ===

    @abstractmethod
    def get_all_materials(self):
        ...

    @abstractmethod
    def get_materials_by_subject(self, subject_id):
        ...

    @abstractmethod
    def get_materials_by_board(self, board_id):
        ...

    @abstractmethod
    def get_material(self, material_id):
        ...

    @abstractmethod
    def create_material(self, data):
        ...

    @abstractmethod
    def update_material(self, material_id, data):
        ...

    @abstractmethod
    def delete_material(self, material_id):
        ...

    # === Заметки ===

    @abstractmethod
    def get_all_notes(self):
        ...

    @abstractmethod
    def get_notes_by_subject(self, subject_id):
        ...

    @abstractmethod
    def get_notes_by_board(self, board_id):
        ...

    @abstractmethod
    def get_note(self, note_id):
        ...

    @abstractmethod
    def create_note(self, data):
        ...

    @abstractmethod
    def update_note(self, note_id, data):
        ...

    @abstractmethod
    def delete_note(self, note_id):
        ...

    @abstractmethod
    def increment_note_views(self, note_id):
        """
        Увеличение счётчика просмотров заметки на 1

        Returns:
            bool: True если заметка найдена, False если её нет
        """

    # === Билеты прошлых лет ===

    @abstractmethod
    def get_all_pyq_papers(self):
        ...

    @abstractmethod
    def get_pyq_papers_by_subject(self, subject_id):
        ...

    @abstractmethod
    def get_pyq_papers_by_board(self, board_id):
        ...

    @abstractmethod
    def get_pyq_papers_by_year(self, year):
        ...

    @abstractmethod
    def get_pyq_paper(self, paper_id):
        ...

    @abstractmethod
    def create_pyq_paper(self, data):
        ...

    @abstractmethod
    def update_pyq_paper(self, paper_id, data):
        ...

    @abstractmethod
    def delete_pyq_paper(self, paper_id):
        ...

    # === Аналитика ===

    @abstractmethod
    def get_dashboard_stats(self):
        """
        Сводка для дашборда

        Returns:
            dict: total_students, total_boards, total_materials, total_pyq_papers
        """

    # === Начальные данные ===

    def seed_defaults(self, admin_username, admin_password, demo_data=False):
        """
        Создание администратора и (по желанию) демонстрационных досок

        Повторный вызов ничего не дублирует: администратор создаётся только если
        его нет, демо-данные - только в пустое хранилище.

        Args:
            admin_username (str): Логин администратора
            admin_password (str): Пароль администратора (будет захэширован)
            demo_data (bool): Создавать ли демонстрационные доски и предметы
        """
        if self.get_user_by_username(admin_username) is None:
            self.create_user(admin_username, admin_password)
            logger.info("Created default admin user: %s", admin_username)

        if not demo_data or self.get_all_boards():
            return

        for item in DEMO_BOARDS:
            board = self.create_board(dict(item['board']))
            self.create_subject(dict(item['subject'], board_id=board['id'], is_active=True))
        logger.info("Seeded %d demo boards", len(DEMO_BOARDS))
