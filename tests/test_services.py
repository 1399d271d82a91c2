import pytest
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import OperationalError

from tasktrack.core.errors import AuthenticationError, StorageError, ValidationError
from tasktrack.models.task import Task
from tasktrack.models.task_list import TaskList
from tasktrack.schemas.task import TaskCreate, TaskUpdate
from tasktrack.schemas.task_list import TaskListUpdate
from tasktrack.services import list_service, task_service, user_service


# ============ TESTS list_service.py ============

def test_list_service_create_and_get(db, test_user):
    """TEST: create_list() puis get_list() relit la même liste"""
    created = list_service.create_list(db, test_user.id, "Work", "Boulot")
    fetched = list_service.get_list(db, created.id)

    assert fetched.id == created.id
    assert fetched.name == "Work"
    assert fetched.description == "Boulot"
    assert fetched.user_id == test_user.id

def test_list_service_empty_description_is_null(db, test_user):
    assert list_service.create_list(db, test_user.id, "Work", "").description is None

def test_list_service_create_requires_name(db, test_user):
    with pytest.raises(ValidationError) as exc:
        list_service.create_list(db, test_user.id, None)
    assert exc.value.to_dict() == {"error": "Name is required"}

def test_list_service_get_owned_list(db, test_user, make_user):
    other = make_user("other")
    task_list = list_service.create_list(db, test_user.id, "Work")

    assert list_service.get_owned_list(db, task_list.id, test_user.id).id == task_list.id
    assert list_service.get_owned_list(db, task_list.id, other.id) is None

def test_list_service_update_only_supplied_fields(db, test_user):
    task_list = list_service.create_list(db, test_user.id, "Work", "Boulot")
    updated = list_service.update_list(db, task_list, TaskListUpdate(description="Bureau"))

    assert updated.name == "Work"
    assert updated.description == "Bureau"

def test_list_service_delete_cascades(db, test_user):
    """TEST: delete_list() supprime la liste et ses tâches, pas les autres"""
    work = list_service.create_list(db, test_user.id, "Work")
    home = list_service.create_list(db, test_user.id, "Home")
    for title in ["T1", "T2"]:
        task_service.create_task(db, test_user, TaskCreate(title=title, list_id=work.id))
    kept = task_service.create_task(db, test_user, TaskCreate(title="T3", list_id=home.id))
    work_id = work.id

    removed = list_service.delete_list(db, work)

    assert removed == 2
    assert list_service.get_list(db, work_id) is None
    assert db.query(Task).filter(Task.list_id == work_id).count() == 0
    assert task_service.get_task(db, kept.id) is not None

def test_list_service_delete_is_atomic(db, test_user, monkeypatch):
    """TEST: si le commit échoue, ni la liste ni ses tâches ne disparaissent"""
    work = list_service.create_list(db, test_user.id, "Work")
    task = task_service.create_task(db, test_user, TaskCreate(title="T1", list_id=work.id))
    work_id, task_id = work.id, task.id

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(StorageError):
        list_service.delete_list(db, work)
    monkeypatch.undo()

    assert db.query(TaskList).filter(TaskList.id == work_id).count() == 1
    assert db.query(Task).filter(Task.id == task_id).count() == 1


# ============ TESTS task_service.py ============

@pytest.mark.parametrize("value,expected", [(None, "medium"), ("", "medium"), ("high", "high"), ("low", "low")])
def test_normalize_priority(value, expected):
    assert task_service.normalize_priority(value) == expected

def test_normalize_priority_rejects_unknown():
    with pytest.raises(ValidationError) as exc:
        task_service.normalize_priority("urgent")
    assert exc.value.status_code == 400

def test_task_service_create_defaults(db, test_user):
    task = task_service.create_task(db, test_user, TaskCreate(title="T"))
    assert task.assignee_id == test_user.id
    assert task.status == "todo"
    assert task.priority == "medium"
    assert task.created_at is not None

def test_task_service_list_for_user_filters(db, test_user, make_user):
    other = make_user("other")
    work = list_service.create_list(db, test_user.id, "Work")
    in_list = task_service.create_task(db, test_user, TaskCreate(title="in list", list_id=work.id))
    task_service.create_task(db, test_user, TaskCreate(title="loose"))
    task_service.create_task(db, other, TaskCreate(title="not mine"))

    assert len(task_service.list_for_user(db, test_user.id)) == 2
    assert [t.id for t in task_service.list_for_user(db, test_user.id, work.id)] == [in_list.id]

def test_task_service_list_for_user_validates_sort(db, test_user):
    with pytest.raises(ValidationError):
        task_service.list_for_user(db, test_user.id, sort_by="nope")

def test_task_service_update_ignores_unset_fields(db, test_user):
    task = task_service.create_task(db, test_user, TaskCreate(title="T", description="D", priority="low"))
    updated = task_service.update_task(db, task, test_user.id, TaskUpdate(status="done"))

    assert updated.status == "done"
    assert updated.description == "D"
    assert updated.priority == "low"

def test_task_service_update_validates_list(db, test_user, make_user):
    other = make_user("other")
    foreign = list_service.create_list(db, other.id, "Privée")
    task = task_service.create_task(db, test_user, TaskCreate(title="T"))

    with pytest.raises(ValidationError) as exc:
        task_service.update_task(db, task, test_user.id, TaskUpdate(list_id=foreign.id))
    assert exc.value.message == "Invalid list_id"

def test_task_update_schema_rejects_unknown_keys():
    with pytest.raises(SchemaValidationError):
        TaskUpdate.model_validate({"title": "T", "assignee_id": 3})


# ============ TESTS user_service.py ============

def test_user_service_register_hashes_password(db):
    user = user_service.register_user(db, "zoe", "secret")
    assert user.password_hash != "secret"
    assert user.verify_password("secret")
    assert not user.verify_password("wrong")

def test_user_service_authenticate(db):
    user_service.register_user(db, "zoe", "secret")
    assert user_service.authenticate_user(db, "zoe", "secret").username == "zoe"

    with pytest.raises(AuthenticationError):
        user_service.authenticate_user(db, "zoe", "nope")
