"""Хранилище контактов: один файл .vcf на контакт в каталоге данных."""
import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional

from . import vcard
from .errors import ContactError, IOFailure, NotFound
from .filesystem import FileSystem, LocalFileSystem
from .models import Contact
from .validation import check_identifier_match, validate_contact, validate_identifier

logger = logging.getLogger(__name__)

CARD_EXTENSION = '.vcf'

SkipCallback = Callable[[Path, Exception], None]


class ContactStore:
    """Операции list/get/create/update/delete над каталогом карточек.

    Каталог является единственным источником данных: контакты не кешируются,
    файлы не блокируются, при параллельной записи одного id побеждает последний.
    """

    def __init__(
        self,
        root: str | Path,
        fs: Optional[FileSystem] = None,
        extension: str = CARD_EXTENSION,
        on_skip: Optional[SkipCallback] = None,
    ) -> None:
        self.root = Path(root)
        self.fs = fs if fs is not None else LocalFileSystem()
        self.extension = extension
        self.on_skip = on_skip
        self.skipped_entries = 0
        # Один экземпляр обслуживает все потоки запросов
        self._skip_lock = threading.Lock()

    def path_for(self, contact_id: str) -> Path:
        validate_identifier(contact_id)
        return self.root / f'{contact_id}{self.extension}'

    def ensure_root(self) -> None:
        """Создаёт каталог данных при отсутствии."""
        try:
            self.fs.create_dir_all(self.root)
        except OSError as exc:
            raise IOFailure('mkdir', str(exc)) from exc

    def list(self) -> List[Contact]:
        """Читает все карточки каталога.

        Нечитаемые и битые файлы пропускаются и не считаются ошибкой;
        ошибкой является только недоступность самого каталога.
        """
        try:
            entries = self.fs.list_dir(self.root)
        except OSError as exc:
            raise IOFailure('list', str(exc)) from exc

        contacts: List[Contact] = []
        for entry in entries:
            if entry.suffix != self.extension:
                self._skip(entry, ValueError(f'Не карточка контакта: {entry.name}'))
                continue
            try:
                validate_identifier(entry.stem)
                text = self.fs.read_to_string(entry)
                contacts.append(vcard.decode(text, entry.stem))
            except (OSError, UnicodeDecodeError, ContactError) as exc:
                self._skip(entry, exc)
        return contacts

    def _skip(self, entry: Path, error: Exception) -> None:
        with self._skip_lock:
            self.skipped_entries += 1
        logger.warning('Пропущен файл %s: %s', entry, error)
        if self.on_skip is not None:
            self.on_skip(entry, error)

    def get(self, contact_id: str) -> Contact:
        path = self.path_for(contact_id)
        try:
            text = self.fs.read_to_string(path)
            return vcard.decode(text, contact_id)
        except (OSError, UnicodeDecodeError, ContactError) as exc:
            logger.debug('Не удалось прочитать %s: %s', path, exc)
            raise NotFound(contact_id) from exc

    def create(self, contact: Contact) -> None:
        """Записывает карточку. Существующий файл с тем же id перезаписывается."""
        validate_contact(contact)
        self._write(self.path_for(contact.id), contact)
        logger.info('Создан контакт %s', contact.id)

    def update(self, contact_id: str, contact: Contact) -> None:
        """Полностью заменяет существующую карточку."""
        path = self.path_for(contact_id)
        check_identifier_match(contact_id, contact)
        validate_contact(contact)
        if not self.fs.exists(path):
            raise NotFound(contact_id)
        self._write(path, contact)
        logger.info('Обновлён контакт %s', contact_id)

    def delete(self, contact_id: str) -> None:
        path = self.path_for(contact_id)
        if not self.fs.exists(path):
            raise NotFound(contact_id)
        try:
            self.fs.remove_file(path)
        except FileNotFoundError as exc:
            raise NotFound(contact_id) from exc
        except OSError as exc:
            raise IOFailure('delete', str(exc)) from exc
        logger.info('Удалён контакт %s', contact_id)

    def _write(self, path: Path, contact: Contact) -> None:
        data = vcard.encode(contact).encode('utf-8')
        try:
            self.fs.write_bytes(path, data)
        except OSError as exc:
            raise IOFailure('write', str(exc)) from exc
