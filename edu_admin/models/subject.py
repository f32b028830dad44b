# edu_admin/models/subject.py
"""
Модель предмета
Предмет относится к одной доске, ссылка board_id не проверяется базой
"""
from edu_admin import db
from edu_admin.models.mixins import RecordMixin
from datetime import datetime
from sqlalchemy import Integer, Text, Boolean, DateTime

class Subject(RecordMixin, db.Model):
    """
    Модель предмета

    Attributes:
        id (int): Уникальный идентификатор предмета
        name (str): Название предмета
        description (str): Описание
        board_id (int): ID доски (без внешнего ключа)
        is_active (bool): Активен ли предмет
        created_at (datetime): Дата создания
    """

    __tablename__ = 'subjects'

    id = db.Column(Integer, primary_key=True)
    name = db.Column(Text, nullable=False)
    description = db.Column(Text)
    board_id = db.Column(Integer, nullable=False, index=True)
    is_active = db.Column(Boolean, nullable=False, default=True)
    created_at = db.Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Subject {self.name} board_id={self.board_id}>'
