"""Ошибки кодека, валидатора и хранилища контактов."""


class ContactError(Exception):
    """Базовая ошибка работы с контактами."""


class EmptyInput(ContactError, ValueError):
    """В тексте карточки не найдено ни одного известного поля."""


class MissingIdentifier(ContactError, ValueError):
    """Идентификатор не найден ни в карточке, ни во внешнем источнике."""


class IdentifierConflict(ContactError, ValueError):
    """Идентификатор в пути не совпадает с идентификатором в теле запроса."""

    def __init__(self, target_id: str, body_id: str):
        super().__init__(f'Идентификатор {body_id!r} не совпадает с {target_id!r}')
        self.target_id = target_id
        self.body_id = body_id


class InvalidIdentifier(ContactError, ValueError):
    """Идентификатор нельзя использовать как имя файла."""


class InvalidContact(ContactError, ValueError):
    """Значения полей нельзя записать в карточку."""


class NotFound(ContactError, LookupError):
    """Контакт не найден."""

    def __init__(self, contact_id: str):
        super().__init__(f'Контакт {contact_id!r} не найден')
        self.contact_id = contact_id


class IOFailure(ContactError):
    """Ошибка файловой системы при выполнении операции."""

    def __init__(self, operation: str, detail: str = ''):
        message = f'Ошибка ввода-вывода при операции {operation}'
        if detail:
            message = f'{message}: {detail}'
        super().__init__(message)
        self.operation = operation
