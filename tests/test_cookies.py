import pytest
from sqlalchemy import text

from cookie_shop.extensions import db
from cookie_shop.model import Cookie

from .conftest import bearer


def _count(app):
    with app.app_context():
        return Cookie.query.count()


def test_list_cookies_is_public_and_deserialized(client):
    r = client.get("/api/cookies")
    assert r.status_code == 200
    cookies = r.get_json()["cookies"]
    assert [c["name"] for c in cookies] == ["Chocolate Chip", "Oatmeal Raisin"]
    assert cookies[0]["nutrition"] == {"calories": 250, "protein": 3, "fat": 12, "carbs": 36}
    assert cookies[0]["allergens"] == ["Gluten", "Dairy", "Eggs"]
    assert len(cookies[1]["top_reviews"]) == 3


def test_get_cookie(client):
    r = client.get("/api/cookies/2")
    assert r.status_code == 200
    assert r.get_json()["cookie"]["name"] == "Oatmeal Raisin"


def test_get_unknown_cookie(client):
    r = client.get("/api/cookies/999")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Cookie not found"}


def test_create_with_omitted_fields_uses_empty_defaults(client, admin_token):
    r = client.post("/api/cookies", json={"name": "Snickerdoodle", "stock": 5}, headers=bearer(admin_token))
    assert r.status_code == 200
    body = r.get_json()
    assert body["success"] is True
    assert body["message"] == "Cookie added successfully"

    cookie = client.get(f"/api/cookies/{body['cookieId']}").get_json()["cookie"]
    assert cookie["name"] == "Snickerdoodle"
    assert cookie["stock"] == 5
    assert cookie["nutrition"] == {}
    assert cookie["allergens"] == []
    assert cookie["top_reviews"] == []
    assert cookie["description"] == ""
    assert cookie["bg_color"] == "#FFDC9C"


def test_create_keeps_nested_structures(client, admin_token):
    payload = {
        "name": "Double Fudge",
        "description": "Very chocolatey",
        "bg_color": "#3b2314",
        "image": "/images/cookies/fudge.jpg",
        "stock": 12,
        "nutrition": {"calories": 310, "protein": 4, "fat": 16, "carbs": 40},
        "allergens": ["Gluten", "Dairy", "Soy"],
        "top_reviews": ["Rich!", "Too good"],
    }
    cid = client.post("/api/cookies", json=payload, headers=bearer(admin_token)).get_json()["cookieId"]
    cookie = client.get(f"/api/cookies/{cid}").get_json()["cookie"]
    for key, value in payload.items():
        assert cookie[key] == value


def test_null_and_unreadable_json_columns_read_as_empty(app, client):
    with app.app_context():
        db.session.execute(text("INSERT INTO cookies (name) VALUES ('Plain')"))
        db.session.execute(text(
            "INSERT INTO cookies (name, nutrition, allergens, top_reviews) "
            "VALUES ('Broken', 'not json', '', '[')"
        ))
        db.session.commit()

    cookies = {c["name"]: c for c in client.get("/api/cookies").get_json()["cookies"]}
    for name in ("Plain", "Broken"):
        assert cookies[name]["nutrition"] == {}
        assert cookies[name]["allergens"] == []
        assert cookies[name]["top_reviews"] == []


def test_create_requires_name(client, admin_token):
    r = client.post("/api/cookies", json={"stock": 3}, headers=bearer(admin_token))
    assert r.status_code == 400
    assert r.get_json() == {"error": "Cookie name is required"}


def test_create_without_token_is_401(app, client):
    before = _count(app)
    r = client.post("/api/cookies", json={"name": "Sneaky"})
    assert r.status_code == 401
    assert r.get_json() == {"error": "Authentication required"}
    assert _count(app) == before


def test_create_with_non_admin_token_is_403(app, client, user_token):
    before = _count(app)
    r = client.post("/api/cookies", json={"name": "Sneaky"}, headers=bearer(user_token))
    assert r.status_code == 403
    assert r.get_json() == {"error": "Unauthorized"}
    assert _count(app) == before


def test_create_with_bad_bearer_values_is_403(app, client):
    before = _count(app)
    for header in ("Bearer", "Bearer garbage", "Token"):
        r = client.post("/api/cookies", json={"name": "Sneaky"}, headers={"Authorization": header})
        assert r.status_code == 403
    assert _count(app) == before


def test_update_cookie(client, admin_token):
    r = client.put(
        "/api/cookies/1",
        json={"name": "Chocolate Chunk", "stock": 40, "allergens": ["Gluten"]},
        headers=bearer(admin_token),
    )
    assert r.status_code == 200
    assert r.get_json() == {"success": True, "message": "Cookie updated successfully"}

    cookie = client.get("/api/cookies/1").get_json()["cookie"]
    assert cookie["name"] == "Chocolate Chunk"
    assert cookie["stock"] == 40
    assert cookie["allergens"] == ["Gluten"]
    # full replacement: omitted fields fall back to defaults
    assert cookie["nutrition"] == {}
    assert cookie["top_reviews"] == []
    assert cookie["image"] == ""


def test_update_unknown_cookie(client, admin_token):
    r = client.put("/api/cookies/999", json={"name": "Ghost"}, headers=bearer(admin_token))
    assert r.status_code == 404
    assert r.get_json() == {"error": "Cookie not found"}


def test_update_requires_name(client, admin_token):
    r = client.put("/api/cookies/1", json={"stock": 1}, headers=bearer(admin_token))
    assert r.status_code == 400


def test_update_with_non_admin_token_changes_nothing(client, user_token):
    r = client.put("/api/cookies/1", json={"name": "Hacked"}, headers=bearer(user_token))
    assert r.status_code == 403
    assert client.get("/api/cookies/1").get_json()["cookie"]["name"] == "Chocolate Chip"


def test_delete_cookie(client, admin_token):
    r = client.delete("/api/cookies/2", headers=bearer(admin_token))
    assert r.status_code == 200
    assert r.get_json() == {"success": True, "message": "Cookie deleted successfully"}
    assert client.get("/api/cookies/2").status_code == 404

    r = client.delete("/api/cookies/2", headers=bearer(admin_token))
    assert r.status_code == 404


def test_delete_without_admin_changes_nothing(app, client, user_token):
    before = _count(app)
    assert client.delete("/api/cookies/1").status_code == 401
    assert client.delete("/api/cookies/1", headers=bearer(user_token)).status_code == 403
    assert _count(app) == before


def test_export_cookies_csv(client, admin_token):
    r = client.get("/api/cookies/export", headers=bearer(admin_token))
    assert r.status_code == 200
    assert r.mimetype == "text/csv"
    text_body = r.get_data(as_text=True)
    assert text_body.splitlines()[0].startswith("ID,Name,Description")
    assert "Chocolate Chip" in text_body
    assert "Gluten, Dairy, Eggs" in text_body


def test_export_requires_admin(client, user_token):
    assert client.get("/api/cookies/export").status_code == 401
    assert client.get("/api/cookies/export", headers=bearer(user_token)).status_code == 403


def test_unknown_api_route_is_json_404(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Not found"}


@pytest.mark.parametrize("body", [[{"name": "Listed"}], "Snickerdoodle"])
def test_create_with_non_object_body_is_400(app, client, admin_token, body):
    before = _count(app)
    r = client.post("/api/cookies", json=body, headers=bearer(admin_token))
    assert r.status_code == 400
    assert r.get_json() == {"error": "Cookie name is required"}
    assert _count(app) == before


@pytest.mark.parametrize("body", [[{"name": "Listed"}], "Renamed"])
def test_update_with_non_object_body_is_400(client, admin_token, body):
    r = client.put("/api/cookies/1", json=body, headers=bearer(admin_token))
    assert r.status_code == 400
    assert client.get("/api/cookies/1").get_json()["cookie"]["name"] == "Chocolate Chip"


@pytest.mark.parametrize("method", ["put", "delete"])
def test_non_numeric_id_checks_auth_before_lookup(client, admin_token, method):
    call = getattr(client, method)
    r = call("/api/cookies/abc", json={"name": "x"})
    assert r.status_code == 401
    assert r.get_json() == {"error": "Authentication required"}

    r = call("/api/cookies/abc", json={"name": "x"}, headers=bearer(admin_token))
    assert r.status_code == 404
    assert r.get_json() == {"error": "Cookie not found"}


def test_get_non_numeric_id_is_not_found(client):
    r = client.get("/api/cookies/abc")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Cookie not found"}
