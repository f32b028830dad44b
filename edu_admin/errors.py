# edu_admin/errors.py
"""
Обработчики ошибок приложения
Все ошибки отдаются клиенту в виде JSON {message, ...}
"""
from flask import jsonify, current_app
from flask_babel import _
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from edu_admin import db
from edu_admin.utils.uploads import UploadRejected


def error_response(message, status, **extra):
    payload = {'message': message}
    payload.update(extra)
    return jsonify(payload), status


def register_error_handlers(app):
    """
    Регистрация обработчиков ошибок

    Args:
        app: Экземпляр Flask-приложения
    """

    @app.errorhandler(UploadRejected)
    def handle_upload_rejected(error):
        return error_response(str(error), 400)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        current_app.logger.warning("Request body exceeds MAX_CONTENT_LENGTH")
        return error_response(_('File too large'), 400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if current_app.config.get('STORAGE_BACKEND') == 'sql':
            db.session.rollback()
        current_app.logger.exception("Unhandled error")
        return error_response(_('Internal server error'), 500)
