from __future__ import annotations

import io

from gym_app.models import ActivityLog

DAY = "2024-06-01"


def _create_exercise(client, headers, name: str, **data) -> dict:
    resp = client.post("/api/exercises", json={"name": name, **data}, headers=headers)
    assert resp.status_code == 201
    return resp.get_json()["exercise"]


def _create_plan(client, headers, name: str, exercise_ids=()) -> dict:
    resp = client.post("/api/plans", json={"name": name}, headers=headers)
    assert resp.status_code == 201
    plan = resp.get_json()["plan"]
    for exercise_id in exercise_ids:
        resp = client.post(f"/api/plans/{plan['id']}/exercises", json={"exercise_id": exercise_id}, headers=headers)
        assert resp.status_code == 201
        plan = resp.get_json()["plan"]
    return plan


def test_health(client) -> None:
    assert client.get("/health").get_json() == {"status": "ok"}


def test_register_login_and_me(client) -> None:
    resp = client.post("/api/auth/register", json={
        "name": "Sam", "email": "Sam@Example.com", "password": "longenough",
    })
    assert resp.status_code == 201

    resp = client.post("/api/auth/login", json={"email": "sam@example.com", "password": "longenough"})
    assert resp.status_code == 200
    token = resp.get_json()["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.get_json()["email"] == "sam@example.com"


def test_login_rejects_wrong_password(client, user) -> None:
    resp = client.post("/api/auth/login", json={"email": user.email, "password": "nope"})
    assert resp.status_code == 401


def test_api_requires_token(client) -> None:
    resp = client.get("/api/plans")
    assert resp.status_code == 401
    assert "msg" in resp.get_json()


def test_today_follows_rotation_until_logged(client, auth_headers) -> None:
    bench = _create_exercise(client, auth_headers, "Bench Press", muscle_group="chest")
    plan_a = _create_plan(client, auth_headers, "A", [bench["id"]])
    _create_plan(client, auth_headers, "B")

    today = client.get(f"/api/today?date={DAY}", headers=auth_headers).get_json()
    assert today["source"] == "rotation"
    assert today["workout_plan_id"] == plan_a["id"]
    assert today["logged"] is False
    assert len(today["form"][0]["sets"]) == 3

    entry_id = plan_a["exercises"][0]["id"]
    resp = client.post("/api/activity", headers=auth_headers, json={
        "date": DAY,
        "workout_plan_id": plan_a["id"],
        "exercises": [{"plan_exercise_id": entry_id, "sets": [{"weight": 40, "reps": 10}]}],
        "notes": "first session",
    })
    assert resp.status_code == 200
    activity = resp.get_json()["activity"]
    assert activity["exercises"][0]["sets"][0]["weight"] == 40.0

    today = client.get(f"/api/today?date={DAY}", headers=auth_headers).get_json()
    assert today["source"] == "logged"
    assert today["activity"]["notes"] == "first session"

    # the next day moves on to plan B
    tomorrow = client.get("/api/today?date=2024-06-02", headers=auth_headers).get_json()
    assert tomorrow["workout_plan_name"] == "B"


def test_relog_same_day_keeps_one_entry(client, auth_headers, user) -> None:
    plan_a = _create_plan(client, auth_headers, "A")
    plan_b = _create_plan(client, auth_headers, "B")
    for plan in (plan_a, plan_b):
        resp = client.post("/api/activity", json={"date": DAY, "workout_plan_id": plan["id"]}, headers=auth_headers)
        assert resp.status_code == 200

    assert ActivityLog.query.filter_by(user_id=user.id).count() == 1
    entry = client.get(f"/api/activity/{DAY}", headers=auth_headers).get_json()
    assert entry["workout_plan_id"] == plan_b["id"]


def test_activity_validation_errors(client, auth_headers) -> None:
    resp = client.post("/api/activity", json={"date": DAY}, headers=auth_headers)
    assert resp.status_code == 400

    resp = client.post("/api/activity", json={"date": DAY, "workout_plan_id": 404}, headers=auth_headers)
    assert resp.status_code == 404

    resp = client.get("/api/today?date=june", headers=auth_headers)
    assert resp.status_code == 400


def test_missing_day_is_not_found(client, auth_headers) -> None:
    assert client.get(f"/api/activity/{DAY}", headers=auth_headers).status_code == 404


def test_rest_days_and_streak(client, auth_headers) -> None:
    for day in ("2024-06-01", "2024-06-02", "2024-06-03", "2024-06-05", "2024-06-06"):
        resp = client.post("/api/activity", json={"date": day, "kind": "rest"}, headers=auth_headers)
        assert resp.status_code == 200

    streak = client.get("/api/streak?as_of=2024-06-06", headers=auth_headers).get_json()
    assert (streak["current"], streak["longest"]) == (2, 3)
    assert streak["rest_days"] == 5

    history = client.get("/api/activity?limit=2", headers=auth_headers).get_json()
    assert [h["date"] for h in history] == ["2024-06-06", "2024-06-05"]


def test_override_and_schedule(client, auth_headers) -> None:
    _create_plan(client, auth_headers, "A")
    _create_plan(client, auth_headers, "B")
    plan_c = _create_plan(client, auth_headers, "C")

    resp = client.put("/api/overrides/2024-06-02", json={"workout_plan_id": plan_c["id"]}, headers=auth_headers)
    assert resp.status_code == 200

    schedule = client.get("/api/schedule?start=2024-06-01&days=4", headers=auth_headers).get_json()
    assert [d["workout_plan_name"] for d in schedule["days"]] == ["A", "C", "C", "A"]
    assert schedule["end"] == "2024-06-04"

    assert client.delete("/api/overrides/2024-06-02", headers=auth_headers).status_code == 200
    assert client.delete("/api/overrides/2024-06-02", headers=auth_headers).status_code == 404


def test_personal_records(client, auth_headers) -> None:
    bench = _create_exercise(client, auth_headers, "Bench Press")
    plan = _create_plan(client, auth_headers, "Push", [bench["id"]])
    sessions = {
        "2024-06-01": [{"weight": 40, "reps": 10}],
        "2024-06-03": [{"weight": 50, "reps": 6}, {"weight": 30, "reps": 12}],
    }
    for day, sets in sessions.items():
        client.post("/api/activity", headers=auth_headers, json={
            "date": day,
            "workout_plan_id": plan["id"],
            "exercises": [{"exercise_id": bench["id"], "sets": sets}],
        })

    records = client.get("/api/records", headers=auth_headers).get_json()
    assert len(records) == 1
    assert records[0]["max_weight"] == 50.0
    assert records[0]["max_weight_date"] == "2024-06-03"
    assert records[0]["max_reps"] == 12
    assert records[0]["sessions"] == 2


def test_plan_exercise_move_endpoint(client, auth_headers) -> None:
    ids = [_create_exercise(client, auth_headers, name)["id"] for name in ("Squat", "Bench")]
    plan = _create_plan(client, auth_headers, "Full", ids)
    first = plan["exercises"][0]["id"]

    resp = client.post(f"/api/plans/{plan['id']}/exercises/{first}/move", json={"direction": "down"}, headers=auth_headers)
    moved = resp.get_json()["plan"]["exercises"]
    assert [e["exercise"]["name"] for e in moved] == ["Bench", "Squat"]
    assert [e["position"] for e in moved] == [1, 2]

    resp = client.post(f"/api/plans/{plan['id']}/exercises/{first}/move", json={"direction": "left"}, headers=auth_headers)
    assert resp.status_code == 400


def test_measurements(client, auth_headers) -> None:
    for day, weight in (("2024-06-01", 80.0), ("2024-06-08", 79.5)):
        resp = client.post("/api/measurements", json={"stat_date": day, "weight": weight}, headers=auth_headers)
        assert resp.status_code == 201

    assert client.post("/api/measurements", json={"stat_date": DAY}, headers=auth_headers).status_code == 400

    series = client.get("/api/measurements/series", headers=auth_headers).get_json()
    assert series["labels"] == ["2024-06-01", "2024-06-08"]
    assert series["weight_change"] == [None, -0.5]

    stats = client.get("/api/measurements", headers=auth_headers).get_json()
    assert client.delete(f"/api/measurements/{stats[0]['id']}", headers=auth_headers).status_code == 200
    assert len(client.get("/api/measurements", headers=auth_headers).get_json()) == 1


def test_catalog_lists_vocabularies(client) -> None:
    data = client.get("/api/catalog").get_json()
    assert "Chest" in [m["name"] for m in data["muscle_groups"]]
    assert "Barbell" in [e["name"] for e in data["equipment"]]


def test_history_limit_must_be_positive(client, auth_headers) -> None:
    assert client.get("/api/activity?limit=-1", headers=auth_headers).status_code == 400
    assert client.get("/api/activity?limit=0", headers=auth_headers).status_code == 400
    assert client.get("/api/activity?limit=5", headers=auth_headers).status_code == 200


def _upload(client, headers, url: str, filename: str):
    return client.post(
        url,
        data={"image": (io.BytesIO(b"\x89PNG fake image"), filename)},
        content_type="multipart/form-data",
        headers=headers,
    )


def test_exercise_image_upload_is_served(app, client, auth_headers, tmp_path) -> None:
    app.config["UPLOAD_FOLDER"] = str(tmp_path)
    exercise = _create_exercise(client, auth_headers, "Squat")

    resp = _upload(client, auth_headers, f"/api/exercises/{exercise['id']}/image", "my squat.png")
    assert resp.status_code == 200
    image_url = resp.get_json()["image_url"]
    assert image_url.startswith(f"/uploads/exercise_{exercise['id']}_")
    assert " " not in image_url

    filename = image_url.rsplit("/", 1)[1]
    assert (tmp_path / filename).exists()
    served = client.get(image_url)
    assert served.status_code == 200
    assert served.data == b"\x89PNG fake image"
    assert client.get(f"/api/exercises/{exercise['id']}", headers=auth_headers).get_json()["image_url"] == image_url


def test_upload_rejects_unlisted_extension(app, client, auth_headers, tmp_path) -> None:
    app.config["UPLOAD_FOLDER"] = str(tmp_path)
    plan = _create_plan(client, auth_headers, "Push")

    resp = _upload(client, auth_headers, f"/api/plans/{plan['id']}/image", "notes.txt")
    assert resp.status_code == 400
    assert list(tmp_path.iterdir()) == []


def test_image_url_can_be_set_and_cleared(client, auth_headers) -> None:
    plan = _create_plan(client, auth_headers, "Push")
    url = f"/api/plans/{plan['id']}/image"

    resp = client.post(url, json={"image_url": "https://example.com/push.png"}, headers=auth_headers)
    assert resp.get_json()["image_url"] == "https://example.com/push.png"

    resp = client.post(url, json={"image_url": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert client.get(f"/api/plans/{plan['id']}", headers=auth_headers).get_json()["image_url"] is None

    assert client.post(url, json={}, headers=auth_headers).status_code == 400
