from datetime import datetime

USER_A = {"X-User-Id": "user-a"}
USER_B = {"X-User-Id": "user-b"}


def _create(client, headers=USER_A, **overrides):
    body = {"title": "Task", "column": "Work", "week_start_date": "2024-01-01"}
    body.update(overrides)
    r = client.post("/rpc/createWeeklyTask", json=body, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_auto_position_scenario(client):
    t1 = _create(client, title="T1")
    t2 = _create(client, title="T2")
    t3 = _create(client, title="T3", column="Family")
    assert t1["position"] == 1
    assert t2["position"] == 2
    assert t3["position"] == 1
    assert t1["user_id"] == "user-a"


def test_counters_independent_per_week_and_user(client):
    _create(client, title="a")
    _create(client, title="b")
    assert _create(client, title="next week", week_start_date="2024-01-08")["position"] == 1
    assert _create(client, headers=USER_B, title="other user")["position"] == 1


def test_get_weekly_tasks_sorted_by_position(client):
    _create(client, title="third", position=30)
    _create(client, title="first", position=10, column="Self")
    _create(client, title="second", position=20, column="Side Hustle")
    _create(client, title="elsewhere", week_start_date="2024-01-08", position=0)
    r = client.get("/rpc/getWeeklyTasks", params={"week_start_date": "2024-01-01"}, headers=USER_A)
    assert r.status_code == 200
    assert [t["title"] for t in r.json()] == ["first", "second", "third"]


def test_week_start_must_be_monday(client):
    r = client.post(
        "/rpc/createWeeklyTask",
        json={"title": "Tue", "column": "Work", "week_start_date": "2024-01-02"},
        headers=USER_A,
    )
    assert r.status_code == 422


def test_shape_errors_are_422(client):
    r = client.post("/rpc/createWeeklyTask", json={"title": "", "column": "Kitchen"}, headers=USER_A)
    assert r.status_code == 422
    assert isinstance(r.json()["detail"], list)


def test_update_and_move(client):
    task = _create(client, title="move me")
    r = client.post(
        "/rpc/updateWeeklyTask",
        json={"id": task["id"], "column": "Family", "position": 5},
        headers=USER_A,
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["column"] == "Family"
    assert body["position"] == 5
    assert body["title"] == "move me"
    assert datetime.fromisoformat(body["updated_at"]) > datetime.fromisoformat(task["updated_at"])


def test_update_foreign_task_404(client):
    task = _create(client)
    r = client.post("/rpc/updateWeeklyTask", json={"id": task["id"], "title": "mine now"}, headers=USER_B)
    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "WEEKLY_TASK_NOT_FOUND"


def test_delete_reports_whether_removed(client):
    task = _create(client)
    r = client.post("/rpc/deleteWeeklyTask", json={"id": task["id"]}, headers=USER_B)
    assert r.json() == {"success": False}
    r = client.post("/rpc/deleteWeeklyTask", json={"id": task["id"]}, headers=USER_A)
    assert r.json() == {"success": True}
    r = client.get("/rpc/getWeeklyTasks", params={"week_start_date": "2024-01-01"}, headers=USER_A)
    assert r.json() == []
