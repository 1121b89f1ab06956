import pytest

from backend.common.errors import AppError
from backend.common.results import Failure, Success
from backend.events_service import controllers, repository
from backend.events_service.models import Event, EventType

GRAVEL = {
    "name": "Sa costa",
    "date": "27/02/1898",
    "description": "asdjklksadhdashdjk",
    "distance": 123,
    "image": "sacosta.png",
    "type": "Gravel",
}
ROAD = dict(GRAVEL, type="Road")

BAD_REQUEST = AppError("Bad request", 400, "Couldn't retrieve bike events")


def test_get_events_success(database, gravel_event, road_event, mocker):
    mocker.patch.object(
        controllers.repository, "find_all_events", return_value=[gravel_event, road_event]
    )

    result = controllers.get_events(database)

    assert result == Success(200, {"events": [GRAVEL, ROAD]})


def test_get_events_non_queryable_result(database, mocker):
    mocker.patch.object(controllers.repository, "find_all_events", return_value=None)

    assert controllers.get_events(database) == Failure(BAD_REQUEST)


def test_get_events_repository_error(database, mocker):
    mocker.patch.object(
        controllers.repository, "find_all_events", side_effect=Exception("connection lost")
    )

    assert controllers.get_events(database) == Failure(BAD_REQUEST)


def test_list_events(client, gravel_event, road_event, mocker):
    mocker.patch.object(
        controllers.repository, "find_all_events", return_value=[gravel_event, road_event]
    )

    response = client.get("/events")

    assert response.status_code == 200
    assert response.get_json() == {"events": [GRAVEL, ROAD]}


def test_list_events_trailing_slash(client, mocker):
    mocker.patch.object(controllers.repository, "find_all_events", return_value=[])

    response = client.get("/events/")

    assert response.status_code == 200
    assert response.get_json() == {"events": []}


def test_list_events_bad_request(client, mocker):
    mocker.patch.object(controllers.repository, "find_all_events", return_value=None)

    response = client.get("/events")

    assert response.status_code == 400
    assert response.get_json() == {"error": "Bad request"}


# --- REPOSITORY ---
def test_find_all_events_keeps_order(mock_db):
    db, _, mock_cursor = mock_db
    mock_cursor.fetchall.return_value = [
        dict(ROAD, distance=45.5),
        dict(GRAVEL, distance=123.0),
    ]

    events = repository.find_all_events(db)

    assert [e.type for e in events] == [EventType.ROAD, EventType.GRAVEL]
    assert events[0].distance == 45.5
    assert events[1].distance == 123
    assert isinstance(events[1].distance, int)


def test_find_all_events_unknown_type(mock_db):
    db, _, mock_cursor = mock_db
    mock_cursor.fetchall.return_value = [dict(GRAVEL, type="Mountain")]

    with pytest.raises(ValueError):
        repository.find_all_events(db)


def test_event_to_dict_round_trips_row():
    assert Event.from_row(GRAVEL).to_dict() == GRAVEL
