# edu_admin/utils/uploads.py
"""
Утилиты загрузки файлов учебных материалов и билетов
Проверка типа и размера файла, сохранение на диск и удаление
"""
from collections import namedtuple
import logging
import os
import uuid

from flask import current_app
from flask_babel import _

logger = logging.getLogger(__name__)

__all__ = ['UploadRejected', 'UploadedFile', 'allowed_file', 'save_upload', 'discard_upload']

# Метаданные, которые попадают в запись Material / PyqPaper
UploadedFile = namedtuple('UploadedFile', ['original_file_name', 'size_bytes', 'mime_type', 'path'])


class UploadRejected(Exception):
    """Файл отклонён до создания записи (нет файла, неверный тип, превышен размер)"""


def allowed_file(filename, extensions_set):
    """Проверка разрешённого расширения файла"""
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in extensions_set


def _stream_size(file_storage):
    stream = file_storage.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def save_upload(files, field='file'):
    """
    Проверка и сохранение одного загруженного файла

    Args:
        files: request.files
        field (str): Имя поля multipart-формы

    Returns:
        UploadedFile: Исходное имя, размер в байтах, MIME-тип и путь на диске

    Raises:
        UploadRejected: Файл отсутствует, недопустимого типа или слишком большой
    """
    file_storage = files.get(field)
    if file_storage is None or not file_storage.filename:
        raise UploadRejected(_('No file uploaded'))

    config = current_app.config
    filename = file_storage.filename
    mime_type = file_storage.mimetype

    if mime_type not in config['ALLOWED_UPLOAD_MIME_TYPES'] or \
       not allowed_file(filename, config['ALLOWED_UPLOAD_EXTENSIONS']):
        logger.warning("Rejected upload %r of type %r", filename, mime_type)
        raise UploadRejected(_('Invalid file type. Only PDF, DOC, DOCX, PPT, PPTX files are allowed.'))

    size = _stream_size(file_storage)
    if size > config['MAX_UPLOAD_SIZE']:
        logger.warning("Rejected upload %r: %d bytes exceeds limit", filename, size)
        raise UploadRejected(_('File too large'))

    # На диске файл хранится под случайным именем с проверенным расширением,
    # исходное имя попадает только в запись
    extension = filename.rsplit('.', 1)[1].lower()
    stored_name = f'{uuid.uuid4().hex}.{extension}'
    upload_folder = config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)
    path = os.path.join(upload_folder, stored_name)
    file_storage.save(path)

    return UploadedFile(
        original_file_name=filename,
        size_bytes=size,
        mime_type=mime_type,
        path=path,
    )


def discard_upload(upload):
    """Удаление сохранённого файла, если запись так и не была создана"""
    if upload is None or not os.path.exists(upload.path):
        return
    try:
        os.remove(upload.path)
    except OSError as e:
        logger.warning(f"Failed to remove {upload.path}: {e}")
