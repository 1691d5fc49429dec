from tasktracker.models import Task
from tasktracker.repository import TaskRepository


def _add(repository: TaskRepository, title: str, completed: bool = False) -> Task:
    return repository.save(Task(title=title, completed=completed))


def test_save_assigns_id_and_created_at(repository: TaskRepository) -> None:
    task = repository.save(Task(title="Write report", description="Q3 numbers"))

    assert task.id is not None
    assert task.created_at is not None
    assert task.completed is False
    assert repository.exists_by_id(task.id)
    assert repository.count() == 1


def test_save_existing_keeps_id_and_created_at(repository: TaskRepository) -> None:
    task = _add(repository, "Draft")
    task_id, created_at = task.id, task.created_at

    task.title = "Final"
    saved = repository.save(task)

    assert saved.id == task_id
    assert saved.created_at == created_at
    assert repository.find_by_id(task_id).title == "Final"
    assert repository.count() == 1


def test_find_by_id_missing_returns_none(repository: TaskRepository) -> None:
    assert repository.find_by_id(999) is None
    assert not repository.exists_by_id(999)


def test_delete_by_id_is_idempotent(repository: TaskRepository) -> None:
    task = _add(repository, "Temporary")

    repository.delete_by_id(task.id)
    repository.delete_by_id(task.id)

    assert repository.find_by_id(task.id) is None
    assert repository.find_all() == []


def test_find_by_completed_partitions(repository: TaskRepository) -> None:
    _add(repository, "a", completed=True)
    _add(repository, "b")
    _add(repository, "c", completed=True)

    done = {t.title for t in repository.find_by_completed(True)}
    pending = {t.title for t in repository.find_by_completed(False)}

    assert done == {"a", "c"}
    assert pending == {"b"}


def test_title_search_ignores_case(repository: TaskRepository) -> None:
    for title in ("Spring", "spring boot", "RESPONSE", "Summer"):
        _add(repository, title)

    found = {t.title for t in repository.find_by_title_containing_ignore_case("sp")}

    assert found == {"Spring", "spring boot", "RESPONSE"}


def test_title_search_treats_wildcards_literally(repository: TaskRepository) -> None:
    _add(repository, "100% done")
    _add(repository, "1000 lines")

    found = [t.title for t in repository.find_by_title_containing_ignore_case("0%")]

    assert found == ["100% done"]
    assert repository.find_by_title_containing_ignore_case("_") == []


def test_title_search_folds_non_ascii_case(repository: TaskRepository) -> None:
    _add(repository, "École")
    _add(repository, "Ärger mit Äpfeln")
    _add(repository, "Ecology")

    def titles(text: str) -> list[str]:
        return sorted(t.title for t in repository.find_by_title_containing_ignore_case(text))

    assert titles("École") == ["École"]
    assert titles("école") == ["École"]
    assert titles("ÉCOLE") == ["École"]
    assert titles("äPFEL") == ["Ärger mit Äpfeln"]
    assert titles("eco") == ["Ecology"]
