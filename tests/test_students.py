import pytest

from avaliauni.students import (
    DuplicateStudentError,
    Student,
    StudentNotFoundError,
    StudentStore,
)


@pytest.fixture
def store(tmp_path):
    s = StudentStore(tmp_path / "alunos.txt")
    s.load()
    s.create(Student("joao", "password"))
    s.create(Student("maria", "secret"))
    return s


def test_create_and_get(store):
    assert store.get("maria") == Student("maria", "secret")
    assert store.get("naoexiste") is None


def test_create_duplicate_raises(store):
    with pytest.raises(DuplicateStudentError):
        store.create(Student("joao", "token"))
    assert store.get("joao").password == "password"


def test_create_empty_username_raises(store):
    with pytest.raises(ValueError):
        store.create(Student("", "password"))
    assert len(list(store)) == 2


def test_newest_first(store):
    assert [s.username for s in store] == ["maria", "joao"]


def test_login(store):
    assert store.login("joao", "password") is True
    assert store.login("maria", "token") is False
    assert store.login("pedro", "password") is False


def test_modify_changes_password(store):
    updated = store.modify("maria", Student("maria", "token"))
    assert updated == Student("maria", "token")
    assert store.login("maria", "token") is True
    assert store.login("maria", "secret") is False


def test_modify_missing_raises(store):
    with pytest.raises(StudentNotFoundError):
        store.modify("inexistente", Student("inexistente", "token"))


def test_delete(store):
    store.delete("joao")
    assert store.login("joao", "password") is False
    assert store.get("joao") is None
    with pytest.raises(StudentNotFoundError):
        store.delete("inexistente")


def test_save_format(store):
    store.save()
    assert store.path.read_text(encoding="utf-8") == "maria;secret;\njoao;password;\n"


def test_reload_reverses_order(store):
    store.save()
    reloaded = StudentStore(store.path)
    reloaded.load()
    assert list(reloaded) == list(reversed(list(store)))


def test_load_missing_file_is_empty(tmp_path):
    s = StudentStore(tmp_path / "none.txt")
    s.load()
    assert list(s) == []


def test_load_stops_at_malformed_record(tmp_path):
    path = tmp_path / "alunos.txt"
    path.write_text("ana;password;\n" + "x" * 40 + ";secret;\nbia;token;\n", encoding="utf-8")
    s = StudentStore(path)
    s.load()
    assert [st.username for st in s] == ["ana"]


def test_context_manager_persists(tmp_path):
    path = tmp_path / "alunos.txt"
    with StudentStore(path) as s:
        s.create(Student("joao", "password"))
    with StudentStore(path) as again:
        assert again.login("joao", "password") is True