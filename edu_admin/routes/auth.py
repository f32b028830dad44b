# edu_admin/routes/auth.py
"""
Маршруты аутентификации администратора
Вход, выход и данные текущего пользователя (JSON)
"""
from flask import Blueprint, jsonify, current_app
from flask_login import login_user, logout_user, login_required, current_user
from flask_babel import _
from marshmallow import ValidationError

from edu_admin.routes.common import json_payload, invalid_data
from edu_admin.schemas import login_schema, user_schema
from edu_admin.storage import get_storage
from edu_admin.utils.auth import AdminUser

# Создание Blueprint для маршрутов аутентификации
bp = Blueprint('auth', __name__)


@bp.route('/login', methods=['POST'])
def login():
    """Вход по логину и паролю; пароль сверяется с солёным хэшем"""
    try:
        credentials = login_schema.load(json_payload())
    except ValidationError as e:
        return invalid_data('login', e)

    user = get_storage().verify_user(credentials['username'], credentials['password'])
    if user is None:
        current_app.logger.warning("Failed login for %r", credentials['username'])
        return jsonify({'message': _('Invalid credentials')}), 401

    login_user(AdminUser(user))
    return jsonify(user_schema.dump(user))


@bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """Выход из системы"""
    logout_user()
    return '', 204


@bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify(user_schema.dump({'id': current_user.id, 'username': current_user.username}))
