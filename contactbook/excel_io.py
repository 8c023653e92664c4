"""Импорт и экспорт контактов в формате Excel."""
import io
import logging
from typing import List

import pandas as pd

from .errors import InvalidContact, InvalidIdentifier
from .models import Contact
from .repository import ContactStore

logger = logging.getLogger(__name__)

COLUMNS = ['ID', 'Name', 'Email', 'Phone']


def export_to_excel(contacts: List[Contact]) -> bytes:
    """Возвращает байты Excel-файла со всеми контактами."""
    data = []
    for contact in contacts:
        data.append({
            'ID': contact.id,
            'Name': contact.name,
            'Email': contact.email,
            'Phone': contact.phone,
        })
    df = pd.DataFrame(data, columns=COLUMNS)
    buffer = io.BytesIO()
    df.to_excel(buffer, index=False, engine='openpyxl')
    buffer.seek(0)
    return buffer.read()


def _cell(row, column: str) -> str:
    value = row[column]
    return '' if pd.isna(value) else str(value).strip()


def import_from_excel(file_stream, store: ContactStore) -> int:
    """Создаёт контакты из строк Excel. Возвращает количество записанных контактов.

    Контакт с уже существующим ID перезаписывается, строки без ID
    и с недопустимыми значениями пропускаются.
    """
    try:
        # na_filter=False: строки вроде "NA" или "None" остаются значениями
        df = pd.read_excel(file_stream, dtype=str, engine='openpyxl', keep_default_na=False, na_filter=False)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f'Не удалось прочитать файл Excel: {exc}') from exc
    # нормализуем имена колонок
    columns_map = {str(c).strip().lower(): c for c in df.columns}
    for key in COLUMNS:
        if key.lower() not in columns_map:
            raise ValueError('Неверный формат столбцов Excel')

    imported = 0
    for index, row in df.iterrows():
        contact_id = _cell(row, columns_map['id'])
        if not contact_id:
            continue
        contact = Contact(
            id=contact_id,
            name=_cell(row, columns_map['name']),
            email=_cell(row, columns_map['email']),
            phone=_cell(row, columns_map['phone']),
        )
        try:
            store.create(contact)
        except (InvalidIdentifier, InvalidContact) as exc:
            logger.warning('Строка %s пропущена: %s', index + 2, exc)
            continue
        imported += 1
    return imported
