# edu_admin/routes/common.py
"""
Общие помощники маршрутов REST API
"""
from flask import request, jsonify
from flask_babel import _


def positive_int_arg(name):
    """
    Целочисленный параметр строки запроса

    Returns:
        int: Значение параметра или None, если он не задан, не число или не больше нуля
    """
    value = request.args.get(name, type=int)
    if value is None or value <= 0:
        return None
    return value


def json_payload():
    """Тело запроса в виде словаря (пустой словарь, если JSON не передан)"""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def invalid_data(entity, error):
    """Ответ 400 с перечнем ошибочных полей"""
    return jsonify({
        'message': _('Invalid %(entity)s data', entity=entity),
        'errors': error.messages,
    }), 400


def not_found(entity):
    """Ответ 404 для отсутствующей записи"""
    return jsonify({'message': _('%(entity)s not found', entity=entity)}), 404


def form_int(name):
    """
    Целочисленное поле multipart-формы

    Returns:
        int: Значение поля, если строка - целое число; иначе исходная строка
        (или None), чтобы ошибку поля сообщила схема
    """
    value = request.form.get(name)
    try:
        return int(value)
    except (TypeError, ValueError):
        return value
