# edu_admin/routes/dashboard.py
"""
Маршрут сводной статистики для главной страницы панели
"""
from flask import Blueprint, jsonify

from edu_admin.storage import get_storage

# Создание Blueprint для дашборда
bp = Blueprint('dashboard', __name__)


@bp.route('/stats', methods=['GET'])
def stats():
    """
    Количество досок, материалов и билетов

    totalStudents - константа из конфигурации, учеников в модели данных нет
    """
    data = get_storage().get_dashboard_stats()
    return jsonify({
        'totalStudents': data['total_students'],
        'totalBoards': data['total_boards'],
        'totalMaterials': data['total_materials'],
        'totalPyqPapers': data['total_pyq_papers'],
    })
