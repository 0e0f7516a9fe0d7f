from src.diary import DiaryEntry, DiaryRepository


def test_replace_then_get_returns_normalized_entry():
    repo = DiaryRepository()

    flags = repo.replace("2024-05-01", "a, b ,,c", " hi ", "")
    assert flags.has_contents is True
    assert flags.has_todos is True

    entry = repo.get("2024-05-01")
    assert entry == DiaryEntry(todo_items=["a", "b", "c"], contents="hi", thanks="")


def test_replace_overwrites_previous_entry():
    repo = DiaryRepository()
    repo.replace("2024-05-01", ["x"], "first", "thanks")

    flags = repo.replace("2024-05-01", contents="second")
    assert flags.has_todos is False

    assert repo.get("2024-05-01") == DiaryEntry(todo_items=[], contents="second", thanks="")


def test_get_missing_date_returns_empty_entry():
    repo = DiaryRepository()
    entry = repo.get("1999-12-31")
    assert entry == DiaryEntry()
    assert len(repo) == 0


def test_get_returns_copy():
    repo = DiaryRepository()
    repo.replace("2024-05-01", ["x"])

    entry = repo.get("2024-05-01")
    entry.todo_items.append("y")

    assert repo.get("2024-05-01").todo_items == ["x"]


def test_merge_without_fields_is_noop():
    repo = DiaryRepository()
    repo.replace("2024-05-01", "a,b", "hi", "ok")
    before = repo.get("2024-05-01")

    flags = repo.merge("2024-05-01")

    assert repo.get("2024-05-01") == before
    assert flags.has_contents and flags.has_todos


def test_merge_contents_only_keeps_other_fields():
    repo = DiaryRepository()
    repo.replace("2024-05-01", ["a", "b"], "hi", "grateful")

    repo.merge("2024-05-01", contents="  updated ")

    assert repo.get("2024-05-01") == DiaryEntry(
        todo_items=["a", "b"], contents="updated", thanks="grateful"
    )


def test_merge_explicit_none_clears_field():
    repo = DiaryRepository()
    repo.replace("2024-05-01", ["a"], "hi", "")

    flags = repo.merge("2024-05-01", todo=None)

    assert flags.has_todos is False
    assert repo.get("2024-05-01").contents == "hi"


def test_merge_on_missing_date_starts_from_empty_entry():
    repo = DiaryRepository()

    flags = repo.merge("2024-06-01", thanks="sun")

    assert flags.has_contents is False
    assert flags.has_todos is False
    assert repo.get("2024-06-01") == DiaryEntry(thanks="sun")
    assert repo.dates() == ["2024-06-01"]


def test_summarize_sorts_and_filters():
    repo = DiaryRepository()
    repo.replace("2024-05-03", contents="c")
    repo.replace("2024-05-01", todo="t", contents="c")
    repo.replace("2023-12-31", todo=["t"])
    repo.replace("2024-05-02", thanks="only thanks")

    summary = repo.summarize()

    assert summary.have_contents == ["2024-05-01", "2024-05-03"]
    assert summary.have_todos == ["2023-12-31", "2024-05-01"]


def test_summarize_reflects_later_writes():
    repo = DiaryRepository()
    repo.replace("2024-05-01", contents="c")
    assert repo.summarize().have_contents == ["2024-05-01"]

    repo.merge("2024-05-01", contents="")
    assert repo.summarize().have_contents == []
