# edu_admin/utils/auth.py
"""
Утилиты аутентификации: обёртка записи пользователя для Flask-Login
и определение пользователя, от имени которого создаются записи
"""
from flask import current_app
from flask_login import UserMixin, current_user

from edu_admin.storage import get_storage


class AdminUser(UserMixin):
    """
    Пользователь Flask-Login поверх записи хранилища

    Args:
        record (dict): Запись пользователя (id, username, password_hash)
    """

    def __init__(self, record):
        self.id = record['id']
        self.username = record['username']

    def __repr__(self):
        return f'<AdminUser {self.username}>'


def acting_user_id():
    """
    ID пользователя для полей uploadedBy / createdBy

    Returns:
        int: ID вошедшего пользователя, иначе ID администратора по умолчанию
    """
    if current_user.is_authenticated:
        return current_user.id

    admin = get_storage().get_user_by_username(current_app.config['ADMIN_USERNAME'])
    if admin is None:
        raise LookupError("Default admin user is missing")
    return admin['id']
