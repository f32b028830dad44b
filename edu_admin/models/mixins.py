# edu_admin/models/mixins.py
"""
Общие методы моделей: преобразование строки таблицы в словарь-запись
"""


class RecordMixin:
    """Примесь для моделей, которые хранилище отдаёт наружу как словари"""

    def to_dict(self):
        """
        Преобразование объекта модели в словарь

        Returns:
            dict: Значения всех колонок таблицы (ключи - имена атрибутов)
        """
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}
