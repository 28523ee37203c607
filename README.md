# avaliauni

A console application in which students review institutions.

Students register with a username and a password. Once logged in they can change their password, delete their account, see their profile with the reviews they wrote, write a new review of an institution, change or delete one of their own reviews, and look up any institution by its ID together with the reviews it received.

Institutions register with a name, a country and a password and are given a numeric ID. Once logged in they can change their name, country and password, delete their account, and see their profile with the reviews they received.

The menus and messages are in Portuguese.

## Installation

```
pip install .
```

## Running

```
avaliauni
```

or, to keep the data somewhere other than `./arquivos`:

```
avaliauni --data-dir path/to/data
```

The data directory holds three semicolon-separated text files:

- `alunos.txt`: students (`username;password;`)
- `instituicoes.txt`: institutions (`id;name;country;password;`)
- `avaliacoes.txt`: reviews (`id;text;author;institution id;`)

The directory must exist. A missing `alunos.txt` or `instituicoes.txt` is treated as empty, but `avaliacoes.txt` must already exist (it may be empty); otherwise the program prints `cannot read ...` on standard error and exits with status 1.

The first menu offers: log in as a student, log in as an institution, register a student, register an institution. After each action the program asks `Deseja voltar ao menu? (s/n)`; any answer not starting with `s` or `S`, or the end of input, ends the session. All three files are then rewritten and the program prints `Encerrando o programa...`.

Input is cut to the field sizes the files allow: usernames to 29 characters, student and institution passwords to 19, institution names to 49, countries to 24 and review texts to 399.

## Using the stores from Python

Each kind of record has a store in its own module: `StudentStore` in `avaliauni.students`, `InstitutionStore` in `avaliauni.institutions` and `ReviewStore` in `avaliauni.reviews`. A store reads its file when a `with` block begins and writes it back when the block ends without an exception; `load()` and `save()` can also be called directly. Iterating over a store yields its records, newest first.

```python
from pathlib import Path

from avaliauni.institutions import Institution, InstitutionStore
from avaliauni.reviews import Review, ReviewStore
from avaliauni.students import Student, StudentStore

data = Path("arquivos")
data.mkdir(exist_ok=True)
(data / "avaliacoes.txt").touch()

password = "password"

with StudentStore(data / "alunos.txt") as students:
    students.create(Student("maria", password))
    assert students.login("maria", password)

with InstitutionStore(data / "instituicoes.txt") as institutions:
    inst_id = institutions.create(Institution("Universidade Exemplo", "Brasil", password))

with ReviewStore(data / "avaliacoes.txt") as reviews:
    reviews.create(Review(inst_id, "maria", "Muito boa!"))
    for review in reviews.for_institution(inst_id):
        print(review.id, review.author, review.text)
```

The records are frozen dataclasses:

- `Student(username, password)`
- `Institution(name, country, password, id=0)`
- `Review(institution_id, author, text, id=0)`

How the stores behave:

- `get(...)` returns the record, or `None` when there is none.
- `login(...)` returns `True` only when the record exists and the password matches.
- `StudentStore.create` raises `ValueError` for an empty username and `DuplicateStudentError` for a username already taken.
- `InstitutionStore.create` ignores the given `id`, raises `ValueError` when the name or the password is empty and `DuplicateInstitutionError` when the name is taken, and returns the new ID: one more than the number of institutions stored.
- `InstitutionStore.modify` raises `DuplicateInstitutionError` when another institution already has the new name.
- `ReviewStore.create` ignores the given `id`, gives the review one more than the newest review's ID (or 0 when there are none), removes every `;` from the text and the author, and returns the stored review.
- `ReviewStore.modify(review_id, text)` changes only the text.
- `modify` and `delete` raise `StudentNotFoundError`, `InstitutionNotFoundError` or `ReviewNotFoundError` when the record does not exist. These derive from `LookupError`; the duplicate errors derive from `ValueError`.
- `ReviewStore.for_institution(institution_id)` and `ReviewStore.by_author(username)` return lists, oldest review first.
- `ReviewStore.load()` raises `FileNotFoundError` when the file does not exist; the other two stores start empty instead.

## What it does not do

Passwords are stored and compared as plain text; there is no hashing. The stores keep no lock on their files, so two programs working on the same data directory will overwrite each other's changes. There is no network or web interface: the only way in is the console menu or the stores themselves.

## Tests

```
pip install .[test]
pytest
```