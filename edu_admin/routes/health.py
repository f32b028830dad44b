# edu_admin/routes/health.py
"""
Проверка работоспособности сервера
"""
from datetime import datetime, timezone

from flask import Blueprint, jsonify, current_app

bp = Blueprint('health', __name__)


@bp.route('/health', methods=['GET'])
def health():
    return jsonify({
        'status': 'ok',
        'message': f"{current_app.config.get('APP_NAME', 'EduAdmin')} server running",
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })
