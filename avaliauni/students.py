"""Student accounts kept in a semicolon-separated text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = Path("arquivos") / "alunos.txt"

# username (at most 29 chars); password (at most 19 chars);
_RECORD = re.compile(r"([^;]{1,29});([^;]{1,19});\s*")


@dataclass(frozen=True)
class Student:
    """A student account: a unique username and its password."""

    username: str
    password: str


class DuplicateStudentError(ValueError):
    """Raised when a username is already taken."""


class StudentNotFoundError(LookupError):
    """Raised when no student has the given username."""


class StudentStore:
    """The students known to the program, newest first."""

    def __init__(self, path=DEFAULT_PATH):
        self.path = Path(path)
        self._students: list[Student] = []

    def __enter__(self) -> StudentStore:
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.save()

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def load(self) -> None:
        """Read the students from the file; a missing file means none."""
        self._students = []
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        pos = 0
        while (match := _RECORD.match(content, pos)) is not None:
            username, password = match.groups()
            self._students.insert(0, Student(username, password))
            pos = match.end()

    def save(self) -> None:
        """Write every student to the file, in the current order."""
        with self.path.open("w", encoding="utf-8") as out:
            for student in self._students:
                out.write(f"{student.username};{student.password};\n")

    def _index(self, username: str) -> int | None:
        return next(
            (i for i, s in enumerate(self._students) if s.username == username),
            None,
        )

    def get(self, username: str) -> Student | None:
        """Return the student with this username, or None."""
        index = self._index(username)
        return None if index is None else self._students[index]

    def login(self, username: str, password: str) -> bool:
        """Tell whether the username exists and the password matches."""
        student = self.get(username)
        return student is not None and student.password == password

    def create(self, student: Student) -> Student:
        """Add a new student in front of the others."""
        if not student.username:
            raise ValueError("username must not be empty")
        if self._index(student.username) is not None:
            raise DuplicateStudentError(student.username)
        created = Student(student.username, student.password)
        self._students.insert(0, created)
        return created

    def modify(self, username: str, student: Student) -> Student:
        """Replace the data of the student with this username."""
        index = self._index(username)
        if index is None:
            raise StudentNotFoundError(username)
        updated = Student(student.username, student.password)
        self._students[index] = updated
        return updated

    def delete(self, username: str) -> None:
        """Remove the student with this username."""
        index = self._index(username)
        if index is None:
            raise StudentNotFoundError(username)
        del self._students[index]