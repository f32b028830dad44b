# edu_admin/routes/__init__.py
"""
Инициализация маршрутов приложения
Объединение всех модулей маршрутов в одном месте
"""
from .health import bp as health_bp
from .auth import bp as auth_bp
from .dashboard import bp as dashboard_bp
from .boards import bp as boards_bp
from .subjects import bp as subjects_bp
from .materials import bp as materials_bp
from .notes import bp as notes_bp
from .pyq_papers import bp as pyq_papers_bp

# Определение всех blueprints
__all__ = ['health_bp', 'auth_bp', 'dashboard_bp', 'boards_bp', 'subjects_bp',
           'materials_bp', 'notes_bp', 'pyq_papers_bp']
