"""
Writer — минимальный интерфейс вывода строк

Writer.write(data) возвращает число записанных символов.
Реализации:
- ConsoleWriter: печатает строку в поток (stdout по умолчанию)
- StringWriter: накапливает данные в памяти
"""

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    """Всё, что умеет write(str) -> int."""

    def write(self, data: str) -> int: ...


class ConsoleWriter:
    """Печатает каждую запись отдельной строкой."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def write(self, data: str) -> int:
        # Поток разрешается при записи, чтобы подмена sys.stdout работала
        print(data, file=self._stream or sys.stdout)
        return len(data)


class StringWriter:
    """Накапливает записи без разделителей."""

    def __init__(self) -> None:
        self.content = ""

    def write(self, data: str) -> int:
        self.content += data
        return len(data)


class LineCollector:
    """
    Writer, сохраняющий записи списком строк.

    Используется драйверами уроков, чтобы вернуть вывод вызывающему коду
    и одновременно продублировать его в другой Writer.
    """

    def __init__(self, target: Writer | None = None):
        self.lines: list[str] = []
        self._target = target

    def write(self, data: str) -> int:
        self.lines.append(data)
        if self._target is not None:
            self._target.write(data)
        return len(data)
