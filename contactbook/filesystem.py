"""Узкий интерфейс файловой системы, которым пользуется хранилище контактов."""
import os
from pathlib import Path
from typing import List, Protocol


class FileSystem(Protocol):
    """Операции над файлами. Все ошибки поднимаются как OSError."""

    def create_dir_all(self, path: Path) -> None: ...

    def read_to_string(self, path: Path) -> str: ...

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Перезаписывает файл целиком. Родительский каталог должен существовать."""
        ...

    def remove_file(self, path: Path) -> None: ...

    def list_dir(self, path: Path) -> List[Path]: ...

    def exists(self, path: Path) -> bool: ...


class LocalFileSystem:
    """Реализация FileSystem поверх локального диска.

    Запись идёт напрямую в целевой файл, без временного файла и rename,
    поэтому параллельный читатель может увидеть частично записанный файл.
    """

    def create_dir_all(self, path: Path) -> None:
        os.makedirs(path, exist_ok=True)

    def read_to_string(self, path: Path) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def write_bytes(self, path: Path, data: bytes) -> None:
        with open(path, 'wb') as f:
            f.write(data)

    def remove_file(self, path: Path) -> None:
        os.remove(path)

    def list_dir(self, path: Path) -> List[Path]:
        return [Path(path) / name for name in os.listdir(path)]

    def exists(self, path: Path) -> bool:
        return os.path.isfile(path)
