import pytest
from pydantic import ValidationError


@pytest.fixture
def service(db_session):
    from trackhub.domain.library import UserService

    return UserService(db_session)


@pytest.mark.unit
def test_create_user_keeps_open_record(service):
    user = service.create_user({"username": "meera", "favourite_genre": "Dance"})

    data = user.to_dict()
    assert data == {"username": "meera", "favourite_genre": "Dance", "id": user.id}


@pytest.mark.unit
def test_create_user_ignores_client_id(service):
    user = service.create_user({"id": 77, "username": "ravi"})

    assert user.attributes == {"username": "ravi"}
    assert user.to_dict()["id"] == user.id


@pytest.mark.unit
def test_create_user_rejects_non_mapping_payload(service):
    with pytest.raises(ValidationError):
        service.create_user(["not", "a", "record"])


@pytest.mark.unit
def test_update_user_merges_fields(service, db_session):
    user = service.create_user({"username": "meera", "city": "Pune"})

    updated = service.update_user(user.id, {"city": "Mumbai", "age": 30})
    db_session.expire_all()
    reloaded = service.get_user(user.id)

    assert updated.id == user.id
    assert reloaded.attributes == {"username": "meera", "city": "Mumbai", "age": 30}


@pytest.mark.unit
def test_update_user_missing_returns_none(service):
    assert service.update_user(404, {"city": "Nowhere"}) is None
