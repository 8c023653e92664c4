"""Модель данных контакта."""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .errors import InvalidContact, MissingIdentifier

FIELDS = ('id', 'name', 'email', 'phone')


@dataclass
class Contact:
    """Контакт: идентификатор и три необязательных поля."""
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""

    @classmethod
    def from_dict(cls, payload: Any, default_id: Optional[str] = None) -> 'Contact':
        """Собирает контакт из JSON-объекта запроса.

        Отсутствующие name/email/phone становятся пустыми строками,
        отсутствующий id берётся из default_id (например, из пути запроса).
        """
        if not isinstance(payload, dict):
            raise InvalidContact('Ожидается JSON-объект контакта')
        values: Dict[str, str] = {}
        for key in FIELDS:
            value = payload.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidContact(f'Поле {key} должно быть строкой')
            values[key] = value
        if not values.get('id'):
            if not default_id:
                raise MissingIdentifier('Не указан идентификатор контакта')
            values['id'] = default_id
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
