# edu_admin/models/__init__.py
"""
Инициализация моделей данных приложения
Объединение всех моделей в одном месте
"""
# Импорт всех моделей
from .user import User
from .board import Board
from .subject import Subject
from .material import Material
from .note import Note
from .pyq_paper import PyqPaper

__all__ = ['User', 'Board', 'Subject', 'Material', 'Note', 'PyqPaper']
