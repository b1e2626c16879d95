from datetime import datetime

USER_A = {"X-User-Id": "user-a"}


def _capture(client, content, tag, headers=USER_A):
    r = client.post("/rpc/createInboxItem", json={"content": content, "tag": tag}, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()


def test_buy_milk_lands_in_personal_bucket(client):
    _capture(client, "buy milk", "Personal")
    r = client.get("/rpc/getTodayFocusTasks", headers=USER_A)
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"work", "sideHustle", "personal"}
    assert [i["content"] for i in body["personal"]] == ["buy milk"]
    assert body["work"] == []
    assert body["sideHustle"] == []


def test_focus_excludes_other_tags_and_processed(client):
    for tag in ("Gratitude", "Family", "Idea"):
        _capture(client, f"{tag} note", tag)
    done = _capture(client, "closed deal", "Work")
    client.post("/rpc/updateInboxItem", json={"id": done["id"], "is_processed": True}, headers=USER_A)
    _capture(client, "launch page", "Side Hustle")
    body = client.get("/rpc/getTodayFocusTasks", headers=USER_A).json()
    assert body["work"] == []
    assert [i["content"] for i in body["sideHustle"]] == ["launch page"]
    assert body["personal"] == []


def test_processed_only_filter(client):
    a = _capture(client, "a", "Work")
    _capture(client, "b", "Work")
    client.post("/rpc/updateInboxItem", json={"id": a["id"], "is_processed": True}, headers=USER_A)

    def contents(params):
        r = client.get("/rpc/getInboxItems", params=params, headers=USER_A)
        assert r.status_code == 200
        return [i["content"] for i in r.json()]

    assert contents({"processed_only": "true"}) == ["a"]
    assert contents({"processed_only": "false"}) == ["b"]
    assert contents({}) == ["b", "a"]


def test_update_keeps_omitted_fields(client):
    item = _capture(client, "draft", "Idea")
    r = client.post("/rpc/updateInboxItem", json={"id": item["id"], "tag": "Work"}, headers=USER_A)
    assert r.status_code == 200
    body = r.json()
    assert body["tag"] == "Work"
    assert body["content"] == "draft"
    assert body["is_processed"] is False
    assert datetime.fromisoformat(body["updated_at"]) > datetime.fromisoformat(item["updated_at"])


def test_delete_with_wrong_user(client):
    item = _capture(client, "keep me", "Self")
    r = client.post("/rpc/deleteInboxItem", json={"id": item["id"]}, headers={"X-User-Id": "wrong-user"})
    assert r.status_code == 200
    assert r.json() == {"success": False}
    still = client.get("/rpc/getInboxItems", headers=USER_A).json()
    assert [i["id"] for i in still] == [item["id"]]


def test_delete_of_id_that_never_exists_reports_false(client):
    item = _capture(client, "keep me", "Self")
    for op in ("deleteInboxItem", "deleteWeeklyTask", "deleteAutomationTask"):
        for bogus in (0, -3):
            r = client.post(f"/rpc/{op}", json={"id": bogus}, headers=USER_A)
            assert r.status_code == 200
            assert r.json() == {"success": False}
    assert [i["id"] for i in client.get("/rpc/getInboxItems", headers=USER_A).json()] == [item["id"]]


def test_empty_content_rejected(client):
    r = client.post("/rpc/createInboxItem", json={"content": "", "tag": "Work"}, headers=USER_A)
    assert r.status_code == 422


def test_blank_content_rejected_by_handler(client):
    r = client.post("/rpc/createInboxItem", json={"content": "   ", "tag": "Work"}, headers=USER_A)
    assert r.status_code == 400
    assert r.json()["detail"]["code"] == "INBOX_CONTENT_REQUIRED"
