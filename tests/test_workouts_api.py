from factories import auth_headers, make_profile, make_workout, at

WORKOUTS_URL = "/api/v1/workouts"


def test_create_workout(client, db):
    make_profile(db, "alice")

    response = client.post(
        WORKOUTS_URL,
        json={"name": "Morning run", "difficulty": "beginner", "duration_minutes": 30},
        headers=auth_headers("alice"),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Morning run"
    assert data["durationMinutes"] == 30
    assert data["isPublic"] is False
    assert data["userId"] == "alice"


def test_create_workout_validation(client, db):
    make_profile(db, "alice")

    response = client.post(
        WORKOUTS_URL, json={"name": "Run", "duration_minutes": 301}, headers=auth_headers("alice")
    )

    assert response.status_code == 400


def test_list_own_workouts_newest_first(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_workout(db, "alice", id="w-old", created_at=at(0))
    make_workout(db, "alice", id="w-new", created_at=at(5))
    make_workout(db, "bob", id="w-bob", created_at=at(10))

    response = client.get(WORKOUTS_URL, headers=auth_headers("alice"))

    assert [w["id"] for w in response.json()["data"]] == ["w-new", "w-old"]


def test_read_workout_visibility(client, db):
    make_profile(db, "alice")
    make_profile(db, "bob")
    make_workout(db, "alice", id="private", is_public=False)
    make_workout(db, "alice", id="public", is_public=True)

    assert client.get(f"{WORKOUTS_URL}/private", headers=auth_headers("bob")).status_code == 404
    assert client.get(f"{WORKOUTS_URL}/private", headers=auth_headers("alice")).status_code == 200
    assert client.get(f"{WORKOUTS_URL}/public", headers=auth_headers("bob")).status_code == 200
