# edu_admin/models/note.py
"""
Модель заметки (rich text) со счётчиком просмотров
"""
from edu_admin import db
from edu_admin.models.mixins import RecordMixin
from datetime import datetime
from sqlalchemy import Integer, Text, DateTime

class Note(RecordMixin, db.Model):
    """
    Модель заметки

    Attributes:
        id (int): Уникальный идентификатор заметки
        title (str): Заголовок
        content (str): HTML-содержимое
        subject_id (int): ID предмета
        board_id (int): ID доски
        views (int): Число просмотров, меняется только инкрементом
        created_by (int): ID автора
        created_at (datetime): Дата создания
    """

    __tablename__ = 'notes'

    id = db.Column(Integer, primary_key=True)
    title = db.Column(Text, nullable=False)
    content = db.Column(Text, nullable=False)
    subject_id = db.Column(Integer, nullable=False, index=True)
    board_id = db.Column(Integer, nullable=False, index=True)
    views = db.Column(Integer, nullable=False, default=0)
    created_by = db.Column(Integer, nullable=False)
    created_at = db.Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Note {self.title[:50]} views={self.views}>'
