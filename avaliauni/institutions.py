"""Institution accounts kept in a semicolon-separated text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = Path("arquivos") / "instituicoes.txt"

# id; name (49); country (24); password (19);
_RECORD = re.compile(r"\s*([+-]?\d+);([^;]{1,49});([^;]{1,24});([^;]{1,19});\s*")


@dataclass(frozen=True)
class Institution:
    """An institution: a unique name, its country, password and id."""

    name: str
    country: str
    password: str
    id: int = 0


class DuplicateInstitutionError(ValueError):
    """Raised when an institution name is already taken."""


class InstitutionNotFoundError(LookupError):
    """Raised when no institution has the given id."""


class InstitutionStore:
    """The institutions known to the program, newest first."""

    def __init__(self, path=DEFAULT_PATH):
        self.path = Path(path)
        self._institutions: list[Institution] = []

    def __enter__(self) -> InstitutionStore:
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.save()

    def __iter__(self) -> Iterator[Institution]:
        return iter(list(self._institutions))

    def load(self) -> None:
        """Read the institutions from the file; a missing file means none."""
        self._institutions = []
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        pos = 0
        while (match := _RECORD.match(content, pos)) is not None:
            ident, name, country, password = match.groups()
            self._institutions.insert(0, Institution(name, country, password, int(ident)))
            pos = match.end()

    def save(self) -> None:
        """Write every institution to the file, in the current order."""
        with self.path.open("w", encoding="utf-8") as out:
            for inst in self._institutions:
                out.write(f"{inst.id};{inst.name};{inst.country};{inst.password};\n")

    def _index(self, institution_id: int) -> int | None:
        return next(
            (i for i, inst in enumerate(self._institutions) if inst.id == institution_id),
            None,
        )

    def get(self, institution_id: int) -> Institution | None:
        """Return the institution with this id, or None."""
        index = self._index(institution_id)
        return None if index is None else self._institutions[index]

    def login(self, institution_id: int, password: str) -> bool:
        """Tell whether the id exists and the password matches."""
        inst = self.get(institution_id)
        return inst is not None and inst.password == password

    def create(self, institution: Institution) -> int:
        """Add a new institution and return the id given to it.

        The id of the argument is ignored; the new id is one more than the
        number of institutions already stored.
        """
        if not institution.name or not institution.password:
            raise ValueError("name and password must not be empty")
        if any(inst.name == institution.name for inst in self._institutions):
            raise DuplicateInstitutionError(institution.name)
        new_id = len(self._institutions) + 1
        self._institutions.insert(
            0,
            Institution(institution.name, institution.country, institution.password, new_id),
        )
        return new_id

    def modify(self, institution_id: int, institution: Institution) -> Institution:
        """Replace name, country and password of the institution with this id."""
        if any(
            inst.id != institution_id and inst.name == institution.name
            for inst in self._institutions
        ):
            raise DuplicateInstitutionError(institution.name)
        index = self._index(institution_id)
        if index is None:
            raise InstitutionNotFoundError(institution_id)
        updated = Institution(
            institution.name, institution.country, institution.password, institution_id
        )
        self._institutions[index] = updated
        return updated

    def delete(self, institution_id: int) -> None:
        """Remove the institution with this id."""
        index = self._index(institution_id)
        if index is None:
            raise InstitutionNotFoundError(institution_id)
        del self._institutions[index]