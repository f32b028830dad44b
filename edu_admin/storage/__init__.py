# edu_admin/storage/__init__.py
"""
Инициализация хранилища
Выбор реализации по настройке STORAGE_BACKEND при создании приложения
"""
from flask import current_app

from .base import Storage, DuplicateUsername, MAX_RECORD_ID
from .memory import MemStorage

STORAGE_BACKENDS = ('memory', 'sql')


def create_storage(app):
    """
    Создание хранилища по конфигурации приложения

    Args:
        app: Экземпляр Flask-приложения

    Returns:
        Storage: MemStorage или SqlStorage
    """
    backend = app.config.get('STORAGE_BACKEND', 'sql')
    total_students = app.config.get('TOTAL_STUDENTS_PLACEHOLDER', 0)

    if backend == 'memory':
        return MemStorage(total_students=total_students)
    if backend == 'sql':
        from .sql import SqlStorage
        return SqlStorage(total_students=total_students)
    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}, expected one of {STORAGE_BACKENDS}")


def get_storage():
    """Хранилище текущего приложения"""
    return current_app.extensions['storage']


__all__ = ['Storage', 'DuplicateUsername', 'MAX_RECORD_ID', 'MemStorage', 'create_storage', 'get_storage']
