import pytest

from avaliauni.reviews import Review, ReviewNotFoundError, ReviewStore

SAMPLE = [
    Review(123, "The; Jail", "Melhor ;faculdade do mundo!"),
    Review(333, "Mary Tony;", "Meilleure; université du monde!", 1),
    Review(123, "Isabela Melo", "Ja fui a faculdades melhores;...", 2),
    Review(123, "Walter Gratz", "Minha faculdade era muito longe... e difícil!", 3),
    Review(222, "Mary Tony;", "Essa faculdade é uma porcaria!", 4),
    Review(666, "The Jail", "Diese ist echt eine peinliche aber gute Universität!", 4),
]


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "avaliacoes.txt"
    path.write_text("", encoding="utf-8")
    s = ReviewStore(path)
    s.load()
    for review in SAMPLE:
        s.create(review)
    return s


def test_ids_are_computed(store):
    assert sorted(r.id for r in store) == list(range(len(SAMPLE)))
    assert [r.id for r in store] == sorted((r.id for r in store), reverse=True)


def test_semicolons_removed(store):
    found = store.get(1)
    assert found.author == "Mary Tony"
    assert found.text == "Meilleure université du monde!"
    assert found.institution_id == 333


def test_get_missing(store):
    assert store.get(-1341) is None


def test_modify_only_changes_text(store):
    before = store.get(2)
    updated = store.modify(2, "Essa faculdade é meio ruim...")
    assert updated.text == "Essa faculdade é meio ruim..."
    assert (updated.author, updated.institution_id, updated.id) == (
        before.author,
        before.institution_id,
        before.id,
    )
    assert store.get(2) == updated


def test_modify_missing_raises(store):
    with pytest.raises(ReviewNotFoundError):
        store.modify(-2342, "Essa faculdade é meio ruim...")


def test_delete(store):
    store.delete(0)
    assert store.get(0) is None
    with pytest.raises(ReviewNotFoundError):
        store.delete(-87090)


def test_for_institution(store):
    assert [r.id for r in store.for_institution(123)] == [0, 2, 3]
    assert store.for_institution(-9823) == []
    store.delete(0)
    assert all(r.institution_id == 123 for r in store.for_institution(123))
    assert store.get(0) not in store.for_institution(123)


def test_by_author(store):
    jail = store.by_author("The Jail")
    assert [r.institution_id for r in jail] == [123, 666]
    assert [r.institution_id for r in store.by_author("Mary Tony")] == [333, 222]
    assert store.by_author("Tony Ramos") == []


def test_save_and_reload_round_trip(store):
    store.save()
    reloaded = ReviewStore(store.path)
    reloaded.load()
    assert list(reloaded) == list(store)
    next_review = reloaded.create(Review(1, "ana", "ok"))
    assert next_review.id == max(r.id for r in store) + 1


def test_save_format(tmp_path):
    path = tmp_path / "avaliacoes.txt"
    path.write_text("", encoding="utf-8")
    s = ReviewStore(path)
    s.load()
    s.create(Review(123, "The Jail", "Boa"))
    s.save()
    assert path.read_text(encoding="utf-8") == "0;Boa;The Jail;123;\n"


def test_load_stops_at_malformed_record(tmp_path):
    path = tmp_path / "avaliacoes.txt"
    path.write_text("7;Boa;ana;3;\nabc;Ruim;bia;4;\n", encoding="utf-8")
    s = ReviewStore(path)
    s.load()
    assert list(s) == [Review(3, "ana", "Boa", 7)]


def test_load_missing_file_raises(tmp_path):
    s = ReviewStore(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        s.load()


def test_context_manager_persists(tmp_path):
    path = tmp_path / "avaliacoes.txt"
    path.write_text("", encoding="utf-8")
    with ReviewStore(path) as s:
        created = s.create(Review(5, "ana", "Boa"))
    with ReviewStore(path) as again:
        assert again.get(created.id) == created