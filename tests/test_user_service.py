# tests/test_user_service.py
import pytest

from minicommerce.domain.errors import ConflictError, NotFoundError
from minicommerce.domain.schemas import UserCreate, UserUpdate
from minicommerce.services.user_service import UserService, normalize_email


def test_create_user_normalizes_email(db):
    created = UserService(db).create_user(UserCreate(name="  Anna ", email="Anna.Nowak@Example.COM"))

    assert created.name == "Anna"
    assert created.email == "anna.nowak@example.com"
    assert created.created_at is not None


def test_duplicate_email_is_case_insensitive(db, user):
    with pytest.raises(ConflictError, match="Email already exists"):
        UserService(db).create_user(UserCreate(name="Other", email="JAN@example.com"))


def test_update_user(db, user):
    updated = UserService(db).update_user(user.id, UserUpdate(name="Jan K.", email="Jan.K@example.com"))

    assert updated.name == "Jan K."
    assert updated.email == "jan.k@example.com"


def test_update_user_keeping_own_email(db, user):
    updated = UserService(db).update_user(user.id, UserUpdate(name="Jan", email="JAN@EXAMPLE.COM"))
    assert updated.email == "jan@example.com"


def test_update_user_to_taken_email_conflicts(db, user):
    svc = UserService(db)
    other = svc.create_user(UserCreate(name="Ewa", email="ewa@example.com"))

    with pytest.raises(ConflictError):
        svc.update_user(other.id, UserUpdate(name="Ewa", email="jan@example.com"))


def test_list_get_delete(db, user):
    svc = UserService(db)
    assert [u.id for u in svc.list_users()] == [user.id]
    assert svc.get_user(user.id).email == "jan@example.com"

    svc.delete_user(user.id)

    with pytest.raises(NotFoundError, match="User not found"):
        svc.get_user(user.id)
    with pytest.raises(NotFoundError):
        svc.delete_user(user.id)


def test_normalize_email():
    assert normalize_email("  X@Y.Z ") == "x@y.z"
    assert normalize_email(None) == ""
