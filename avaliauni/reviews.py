"""Reviews of institutions written by students, kept in a text file."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = Path("arquivos") / "avaliacoes.txt"

# id; text (399); author (25); institution id;
_RECORD = re.compile(r"\s*([+-]?\d+);([^;]{1,399});([^;]{1,25});\s*([+-]?\d+);")


@dataclass(frozen=True)
class Review:
    """A review: who wrote it, about which institution, and what it says."""

    institution_id: int
    author: str
    text: str
    id: int = 0


class ReviewNotFoundError(LookupError):
    """Raised when no review has the given id."""


class ReviewStore:
    """The reviews known to the program, newest first."""

    def __init__(self, path=DEFAULT_PATH):
        self.path = Path(path)
        self._reviews: list[Review] = []

    def __enter__(self) -> ReviewStore:
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.save()

    def __iter__(self) -> Iterator[Review]:
        return iter(list(self._reviews))

    def load(self) -> None:
        """Read the reviews from the file, keeping the file's order.

        Raises FileNotFoundError when the file does not exist.
        """
        content = self.path.read_text(encoding="utf-8")
        self._reviews = []
        pos = 0
        while (match := _RECORD.match(content, pos)) is not None:
            ident, text, author, inst = match.groups()
            self._reviews.append(Review(int(inst), author, text, int(ident)))
            pos = match.end()

    def save(self) -> None:
        """Write every review to the file, in the current order."""
        with self.path.open("w", encoding="utf-8") as out:
            for review in self._reviews:
                out.write(f"{review.id};{review.text};{review.author};{review.institution_id};\n")

    def _index(self, review_id: int) -> int | None:
        return next(
            (i for i, r in enumerate(self._reviews) if r.id == review_id),
            None,
        )

    def get(self, review_id: int) -> Review | None:
        """Return the review with this id, or None."""
        index = self._index(review_id)
        return None if index is None else self._reviews[index]

    def create(self, review: Review) -> Review:
        """Add a review in front of the others and return it.

        The id is computed (one more than the newest review's, or 0), and any
        ';' is removed from the text and the author.
        """
        new_id = self._reviews[0].id + 1 if self._reviews else 0
        created = Review(
            review.institution_id,
            review.author.replace(";", ""),
            review.text.replace(";", ""),
            new_id,
        )
        self._reviews.insert(0, created)
        return created

    def modify(self, review_id: int, text: str) -> Review:
        """Replace the text of the review with this id."""
        index = self._index(review_id)
        if index is None:
            raise ReviewNotFoundError(review_id)
        updated = replace(self._reviews[index], text=text)
        self._reviews[index] = updated
        return updated

    def delete(self, review_id: int) -> None:
        """Remove the review with this id."""
        index = self._index(review_id)
        if index is None:
            raise ReviewNotFoundError(review_id)
        del self._reviews[index]

    def for_institution(self, institution_id: int) -> list[Review]:
        """Reviews of one institution, oldest first."""
        return [r for r in reversed(self._reviews) if r.institution_id == institution_id]

    def by_author(self, username: str) -> list[Review]:
        """Reviews written by one student, oldest first."""
        return [r for r in reversed(self._reviews) if r.author == username]