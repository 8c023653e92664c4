"""Проверки идентификатора и полей контакта перед изменением хранилища."""
import re

from .errors import IdentifierConflict, InvalidContact, InvalidIdentifier
from .models import Contact

MAX_ID_LENGTH = 200
FORBIDDEN_ID_PATTERN = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f\x85\u2028\u2029]')
# Все символы, на которых str.splitlines разрывает строку
LINE_BREAKS = frozenset('\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029')
RESERVED_NAMES = frozenset(
    ['CON', 'PRN', 'AUX', 'NUL']
    + [f'COM{i}' for i in range(1, 10)]
    + [f'LPT{i}' for i in range(1, 10)]
)


def validate_identifier(contact_id: str) -> None:
    """Проверяет, что из идентификатора получится безопасное имя файла."""
    if not isinstance(contact_id, str) or not contact_id:
        raise InvalidIdentifier('Идентификатор контакта не может быть пустым')
    if len(contact_id) > MAX_ID_LENGTH:
        raise InvalidIdentifier(f'Идентификатор слишком длинный (макс {MAX_ID_LENGTH})')
    if contact_id.startswith('.'):
        raise InvalidIdentifier('Идентификатор не может начинаться с точки')
    if FORBIDDEN_ID_PATTERN.search(contact_id):
        raise InvalidIdentifier(f'Недопустимые символы в идентификаторе {contact_id!r}')
    if contact_id.upper() in RESERVED_NAMES:
        raise InvalidIdentifier(f'Зарезервированное имя {contact_id!r}')


def check_identifier_match(target_id: str, contact: Contact) -> None:
    if contact.id != target_id:
        raise IdentifierConflict(target_id, contact.id)


def validate_contact(contact: Contact) -> None:
    validate_identifier(contact.id)
    # В формате нет экранирования, перевод строки сломал бы карточку
    for field_name in ('name', 'email', 'phone'):
        value = getattr(contact, field_name)
        if any(char in LINE_BREAKS for char in value):
            raise InvalidContact(f'Поле {field_name} не может содержать перевод строки')
