# edu_admin/models/board.py
"""
Модель экзаменационной доски (board)
Доска объединяет предметы, материалы, заметки и экзаменационные билеты
"""
from edu_admin import db
from edu_admin.models.mixins import RecordMixin
from datetime import datetime
from sqlalchemy import String, Integer, Text, Boolean, DateTime

BOARD_TYPES = ('secondary', 'competitive', 'professional')

class Board(RecordMixin, db.Model):
    """
    Модель доски

    Attributes:
        id (int): Уникальный идентификатор доски
        name (str): Название (например, "CBSE Class 12")
        description (str): Описание
        type (str): Тип доски ('secondary', 'competitive', 'professional')
        is_active (bool): Активна ли доска
        created_at (datetime): Дата создания
    """

    __tablename__ = 'boards'

    id = db.Column(Integer, primary_key=True)
    name = db.Column(Text, nullable=False)
    description = db.Column(Text)
    type = db.Column(String(20), nullable=False)
    is_active = db.Column(Boolean, nullable=False, default=True)
    created_at = db.Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Board {self.name} ({self.type})>'
