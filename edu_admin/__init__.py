# edu_admin/__init__.py
"""
Инициализация Flask-приложения панели администратора учебного контента
Создание экземпляра приложения, инициализация расширений и хранилища
"""
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_babel import Babel
from config import Config
import os


# Инициализация расширений Flask (до create_app)
db = SQLAlchemy()
login_manager = LoginManager()

def create_app(config_class=Config):
    """
    Создание и настройка экземпляра Flask-приложения

    Args:
        config_class: Класс конфигурации приложения

    Returns:
        app: Настроенный экземпляр Flask-приложения
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Инициализация расширений
    db.init_app(app)
    login_manager.init_app(app)

    # === Babel: сообщения API на языке BABEL_DEFAULT_LOCALE ===
    Babel(app)

    # === Обработчики ошибок (JSON вместо HTML) ===
    from edu_admin.errors import register_error_handlers
    register_error_handlers(app)

    # === Регистрация Blueprints ===
    from edu_admin.routes.health import bp as health_bp
    app.register_blueprint(health_bp, url_prefix='/api')

    from edu_admin.routes.auth import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    from edu_admin.routes.dashboard import bp as dashboard_bp
    app.register_blueprint(dashboard_bp, url_prefix='/api/dashboard')

    from edu_admin.routes.boards import bp as boards_bp
    app.register_blueprint(boards_bp, url_prefix='/api/boards')

    from edu_admin.routes.subjects import bp as subjects_bp
    app.register_blueprint(subjects_bp, url_prefix='/api/subjects')

    from edu_admin.routes.materials import bp as materials_bp
    app.register_blueprint(materials_bp, url_prefix='/api/materials')

    from edu_admin.routes.notes import bp as notes_bp
    app.register_blueprint(notes_bp, url_prefix='/api/notes')

    from edu_admin.routes.pyq_papers import bp as pyq_papers_bp
    app.register_blueprint(pyq_papers_bp, url_prefix='/api/pyq-papers')

    # === Создание папки загрузки ===
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    # === Инициализация хранилища ===
    from edu_admin.storage import create_storage
    storage = create_storage(app)
    app.extensions['storage'] = storage

    with app.app_context():
        if app.config['STORAGE_BACKEND'] == 'sql':
            # Импорт моделей (чтобы SQLAlchemy их увидел)
            from edu_admin import models  # noqa: F401
            db.create_all()

        # === Создание администратора по умолчанию ===
        try:
            storage.seed_defaults(
                app.config['ADMIN_USERNAME'],
                app.config['ADMIN_PASSWORD'],
                demo_data=app.config.get('SEED_DEMO_DATA', False),
            )
        except Exception:
            if app.config['STORAGE_BACKEND'] == 'sql':
                db.session.rollback()
            app.logger.exception("Failed to seed default data")
            raise

    return app

# Функция загрузки пользователя для Flask-Login
@login_manager.user_loader
def load_user(user_id):
    from edu_admin.storage import get_storage
    from edu_admin.utils.auth import AdminUser
    if user_id is None:
        return None
    try:
        record = get_storage().get_user(int(user_id))
    except (ValueError, TypeError):
        return None
    return AdminUser(record) if record else None


@login_manager.unauthorized_handler
def unauthorized():
    from flask import jsonify
    from flask_babel import _
    return jsonify({'message': _('Authentication required')}), 401
