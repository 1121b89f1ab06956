import pytest

from backend.auth_service import repository
from backend.auth_service.models import User, UserRegisterCredentials
from backend.auth_service.repository import UserValidationError, validate_new_user

ROW = {"id": 3, "name": "jordi", "email": "jordi@gmail.com", "password_hash": "hashed"}


def test_find_user_by_email(mock_db):
    db, _, mock_cursor = mock_db
    mock_cursor.fetchone.return_value = ROW

    user = repository.find_user_by_email(db, "jordi@gmail.com")

    assert user == User(id=3, name="jordi", email="jordi@gmail.com", password_hash="hashed")
    args, _ = mock_cursor.execute.call_args
    assert args[1] == ("jordi@gmail.com",)


def test_find_user_by_email_not_found(mock_db):
    db, _, mock_cursor = mock_db
    mock_cursor.fetchone.return_value = None

    assert repository.find_user_by_email(db, "nobody@gmail.com") is None


def test_find_user_by_email_propagates_storage_errors(mock_db):
    db, _, mock_cursor = mock_db
    error = Exception("connection lost")
    mock_cursor.execute.side_effect = error

    with pytest.raises(Exception) as exc_info:
        repository.find_user_by_email(db, "jordi@gmail.com")

    assert exc_info.value is error


def test_create_user_stores_hash_not_plaintext(mock_db):
    db, _, mock_cursor = mock_db
    mock_cursor.fetchone.return_value = ROW
    credentials = UserRegisterCredentials(name="jordi", email="jordi@gmail.com", password="12345678")

    user = repository.create_user(db, credentials, "hashed")

    assert user.id == 3
    args, _ = mock_cursor.execute.call_args
    assert args[1] == ("jordi", "jordi@gmail.com", "hashed")
    assert "12345678" not in args[1]


def test_create_user_rejects_invalid_document_before_insert(mock_db):
    db, _, mock_cursor = mock_db
    credentials = UserRegisterCredentials(name="jordi", email="jordi@gmail.com", password="short")

    with pytest.raises(UserValidationError):
        repository.create_user(db, credentials, "hashed")

    mock_cursor.execute.assert_not_called()


@pytest.mark.parametrize(
    "name, email, password",
    [
        ("", "jordi@gmail.com", "12345678"),
        ("jordi", "", "12345678"),
        ("jordi", "jordi.gmail.com", "12345678"),
        ("jordi", "jordi@gmail.com", "1234567"),
    ],
)
def test_validate_new_user_rejects(name, email, password):
    with pytest.raises(UserValidationError):
        validate_new_user(UserRegisterCredentials(name=name, email=email, password=password))


def test_validate_new_user_accepts_eight_characters():
    validate_new_user(
        UserRegisterCredentials(name="jordi", email="jordi@gmail.com", password="12345678")
    )


def test_credentials_from_json_is_lenient():
    credentials = UserRegisterCredentials.from_json({"name": 5, "email": " A@B.io "})

    assert credentials == UserRegisterCredentials(name="", email="a@b.io", password="")
    assert UserRegisterCredentials.from_json(None).email == ""


def test_validate_new_user_has_no_name_length_limit():
    validate_new_user(
        UserRegisterCredentials(name="x" * 500, email="jordi@gmail.com", password="12345678")
    )
