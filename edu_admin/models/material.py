# edu_admin/models/material.py
"""
Модель учебного материала
Хранит только метаданные загруженного файла, сам файл лежит в UPLOAD_FOLDER
"""
from edu_admin import db
from edu_admin.models.mixins import RecordMixin
from datetime import datetime
from sqlalchemy import String, Integer, Text, DateTime

class Material(RecordMixin, db.Model):
    """
    Модель материала

    Attributes:
        id (int): Уникальный идентификатор материала
        title (str): Заголовок
        description (str): Описание
        file_name (str): Исходное имя загруженного файла
        file_size (int): Размер файла в байтах
        file_type (str): MIME-тип файла
        subject_id (int): ID предмета
        board_id (int): ID доски
        uploaded_by (int): ID пользователя, загрузившего файл
        created_at (datetime): Дата загрузки
    """

    __tablename__ = 'materials'

    id = db.Column(Integer, primary_key=True)
    title = db.Column(Text, nullable=False)
    description = db.Column(Text)
    file_name = db.Column(Text, nullable=False)
    file_size = db.Column(Integer, nullable=False)
    file_type = db.Column(String(255), nullable=False)
    subject_id = db.Column(Integer, nullable=False, index=True)
    board_id = db.Column(Integer, nullable=False, index=True)
    uploaded_by = db.Column(Integer, nullable=False)
    created_at = db.Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Material {self.title}: {self.file_name}>'
