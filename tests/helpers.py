"""Request builders and row checks shared by the endpoint tests."""


def run_query(client, stmt):
    """Execute a statement on the app's own event loop and pool."""
    return client.portal.call(client.app.state.db.execute, stmt)


def make_user(client, name="Ann", email="ann@x.com"):
    resp = client.post("/users", json={"name": name, "email": email})
    assert resp.status_code == 201, resp.text
    return resp.json()


def make_board(client, admin_id, name="Sprint"):
    resp = client.post("/boards", json={"name": name, "adminUserId": admin_id})
    assert resp.status_code == 201, resp.text
    return resp.json()


def make_list(client, board_id, name="Todo"):
    resp = client.post("/boards/lists", json={"name": name, "boardId": board_id})
    assert resp.status_code == 201, resp.text
    return resp.json()


def card_payload(list_id, owner_id, **overrides):
    payload = {
        "title": "Write spec",
        "description": "Draft v1",
        "due_date": "2024-01-01",
        "list_id": list_id,
        "ownerUserId": owner_id,
    }
    payload.update(overrides)
    return payload
