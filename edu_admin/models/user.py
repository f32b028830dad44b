# edu_admin/models/user.py
"""
Модель пользователя панели администратора
Используется единственный администратор, создаваемый при запуске
"""
from edu_admin import db
from edu_admin.models.mixins import RecordMixin
from sqlalchemy import String, Integer
from werkzeug.security import generate_password_hash, check_password_hash

class User(RecordMixin, db.Model):
    """
    Модель пользователя системы

    Attributes:
        id (int): Уникальный идентификатор пользователя
        username (str): Логин пользователя (уникальный)
        password_hash (str): Солёный хэш пароля (werkzeug)
    """

    __tablename__ = 'users'

    id = db.Column(Integer, primary_key=True)
    username = db.Column(String(120), unique=True, nullable=False)
    password_hash = db.Column(String(255), nullable=False)

    def __repr__(self):
        return f'<User {self.username}>'

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
