# edu_admin/models/pyq_paper.py
"""
Модель экзаменационного билета прошлых лет (PYQ)
Содержит метаданные файла и сведения об экзамене
"""
from edu_admin import db
from edu_admin.models.mixins import RecordMixin
from datetime import datetime
from sqlalchemy import Integer, Text, Boolean, DateTime

class PyqPaper(RecordMixin, db.Model):
    """
    Модель билета прошлых лет

    Attributes:
        id (int): Уникальный идентификатор билета
        title (str): Заголовок
        year (int): Год экзамена
        file_name (str): Исходное имя загруженного файла
        file_size (int): Размер файла в байтах
        duration (int): Длительность экзамена в минутах (может отсутствовать)
        total_questions (int): Количество вопросов (может отсутствовать)
        subject_id (int): ID предмета
        board_id (int): ID доски
        has_solutions (bool): Есть ли решения
        has_answer_key (bool): Есть ли ключ ответов
        uploaded_by (int): ID пользователя, загрузившего файл
        created_at (datetime): Дата загрузки
    """

    __tablename__ = 'pyq_papers'

    id = db.Column(Integer, primary_key=True)
    title = db.Column(Text, nullable=False)
    year = db.Column(Integer, nullable=False, index=True)
    file_name = db.Column(Text, nullable=False)
    file_size = db.Column(Integer, nullable=False)
    duration = db.Column(Integer)  # в минутах
    total_questions = db.Column(Integer)
    subject_id = db.Column(Integer, nullable=False, index=True)
    board_id = db.Column(Integer, nullable=False, index=True)
    has_solutions = db.Column(Boolean, nullable=False, default=False)
    has_answer_key = db.Column(Boolean, nullable=False, default=False)
    uploaded_by = db.Column(Integer, nullable=False)
    created_at = db.Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<PyqPaper {self.title} ({self.year})>'
