"""Кодирование контактов в текст карточки (.vcf) и обратный разбор."""
from typing import Dict, Iterable, Optional

from .errors import EmptyInput, MissingIdentifier
from .models import Contact

BEGIN_MARKER = 'BEGIN:VCARD'
VERSION_MARKER = 'VERSION:3.0'
END_MARKER = 'END:VCARD'

# Порядок важен: encode выводит поля именно в нём
FIELD_KEYS = (
    ('ID', 'id'),
    ('FN', 'name'),
    ('EMAIL', 'email'),
    ('TEL', 'phone'),
)


def encode(contact: Contact) -> str:
    """Возвращает текст карточки. Для равных контактов результат побайтово одинаков."""
    lines = [BEGIN_MARKER, VERSION_MARKER]
    for key, attr in FIELD_KEYS:
        value = getattr(contact, attr)
        if attr == 'id' and not value:
            continue
        lines.append(f'{key}:{value}')
    lines.append(END_MARKER)
    return ''.join(f'{line}\n' for line in lines)


def encode_many(contacts: Iterable[Contact]) -> str:
    return ''.join(encode(contact) for contact in contacts)


def decode(text: str, external_id: Optional[str] = None) -> Contact:
    """Разбирает текст карточки построчно.

    Порядок строк не важен, незнакомые строки пропускаются, при повторе
    ключа побеждает последнее значение. external_id (имя файла без
    расширения) имеет приоритет над строкой ID:.
    """
    found: Dict[str, str] = {}
    for line in text.splitlines():
        for key, attr in FIELD_KEYS:
            prefix = f'{key}:'
            if line.startswith(prefix):
                found[attr] = line[len(prefix):]
                break

    if not found:
        raise EmptyInput('Карточка не содержит ни одного поля')

    if external_id:
        found['id'] = external_id
    elif not found.get('id'):
        raise MissingIdentifier('В карточке нет строки ID:')

    return Contact(
        id=found['id'],
        name=found.get('name', ''),
        email=found.get('email', ''),
        phone=found.get('phone', ''),
    )
