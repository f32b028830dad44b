# config.py
import os
import tempfile
from datetime import timedelta

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Базовый класс конфигурации приложения"""

    # Название приложения
    APP_NAME = 'EduAdmin'

    # Настройки безопасности
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key-here'

    # Настройки базы данных
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///edu_admin.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Хранилище: 'sql' (Flask-SQLAlchemy) или 'memory' (словари в памяти)
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND') or 'sql'

    # Настройки загрузки файлов
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(BASE_DIR, 'uploads')
    MAX_UPLOAD_SIZE = 50 * 1024 * 1024  # 50MB max file size
    # Запас на остальные поля multipart-формы
    MAX_CONTENT_LENGTH = MAX_UPLOAD_SIZE + 1024 * 1024

    # Babel
    BABEL_DEFAULT_LOCALE = 'en'
    BABEL_DEFAULT_TIMEZONE = 'UTC'

    PERMANENT_SESSION_LIFETIME = timedelta(days=7)

    # Администратор по умолчанию (пароль хранится только в виде хэша)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'

    # Демонстрационные доски и предметы при первом запуске
    SEED_DEMO_DATA = os.environ.get('SEED_DEMO_DATA', 'False').lower() == 'true'

    # Константы приложения
    ALLOWED_UPLOAD_EXTENSIONS = {'pdf', 'doc', 'docx', 'ppt', 'pptx'}
    ALLOWED_UPLOAD_MIME_TYPES = {
        'application/pdf',
        'application/msword',
        'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
        'application/vnd.ms-powerpoint',
        'application/vnd.openxmlformats-officedocument.presentationml.presentation',
    }
    # Учеников в модели данных нет, на дашборде показывается константа
    TOTAL_STUDENTS_PLACEHOLDER = 2847


class DevelopmentConfig(Config):
    DEBUG = True
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND') or 'memory'
    SEED_DEMO_DATA = True


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    STORAGE_BACKEND = 'memory'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_DEMO_DATA = False
    UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), 'edu_admin_test_uploads')


config = {
    'development': DevelopmentConfig,
    'production': Config,
    'testing': TestingConfig,
    'default': Config,
}
