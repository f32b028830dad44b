# edu_admin/utils/__init__.py
"""
Инициализация вспомогательных утилит
Объединение всех утилит в одном месте
"""
from .uploads import *
from .auth import *

__all__ = [
    'UploadRejected', 'UploadedFile', 'allowed_file', 'save_upload', 'discard_upload',
    'AdminUser', 'acting_user_id'
]
