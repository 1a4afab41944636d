from app.models.union import Union


def test_create_union_scenario_a(client, alice_union, alice):
    assert alice_union["slug"] == "ironworkers-local-123"
    assert alice_union["name"] == "Ironworkers Local 123"
    assert alice_union["description"] is None

    me = client.get("/api/auth/me", headers=alice).json()
    assert alice_union["created_by"] == me["id"]


def test_create_union_scenario_b_same_name_gets_suffix(client, alice_union, bob):
    response = client.post("/api/unions", json={"name": "Ironworkers Local 123"}, headers=bob)

    assert response.status_code == 201
    assert response.json()["slug"] == "ironworkers-local-123-1"


def test_create_union_ignores_client_slug(client, alice):
    response = client.post(
        "/api/unions",
        json={"name": "Local 12", "slug": "hijack", "description": " Builders "},
        headers=alice,
    )

    assert response.status_code == 201
    assert response.json()["slug"] == "local-12"
    assert response.json()["description"] == "Builders"


def test_create_union_requires_auth(client, db):
    response = client.post("/api/unions", json={"name": "Local 1"})

    assert response.status_code == 401
    assert db.query(Union).count() == 0


def test_create_union_requires_name(client, alice, db):
    assert client.post("/api/unions", json={"name": ""}, headers=alice).status_code == 422
    assert client.post("/api/unions", json={"name": "   "}, headers=alice).status_code == 400
    assert client.post("/api/unions", json={}, headers=alice).status_code == 422
    assert db.query(Union).count() == 0


def test_list_my_unions_newest_first(client, alice, bob):
    client.post("/api/unions", json={"name": "First"}, headers=alice)
    client.post("/api/unions", json={"name": "Second"}, headers=alice)
    client.post("/api/unions", json={"name": "Bobs"}, headers=bob)

    response = client.get("/api/unions", headers=alice)

    assert response.status_code == 200
    assert [u["slug"] for u in response.json()] == ["second", "first"]


def test_list_my_unions_empty_for_new_user(client, bob):
    assert client.get("/api/unions", headers=bob).json() == []


def test_get_union_detail_admin_only(client, alice_union, alice, bob):
    slug = alice_union["slug"]

    assert client.get(f"/api/unions/{slug}", headers=alice).status_code == 200
    assert client.get(f"/api/unions/{slug}", headers=bob).status_code == 403
    assert client.get(f"/api/unions/{slug}").status_code == 401
    assert client.get("/api/unions/no-such-union", headers=alice).status_code == 404


def test_update_union_settings(client, alice_union, alice):
    slug = alice_union["slug"]

    response = client.put(f"/api/unions/{slug}", json={"name": "Ironworkers Local 123 West"}, headers=alice)

    assert response.status_code == 200
    assert response.json()["name"] == "Ironworkers Local 123 West"
    assert response.json()["slug"] == slug
    assert client.get(f"/api/unions/{slug}", headers=alice).json()["name"] == "Ironworkers Local 123 West"


def test_update_union_forbidden_for_non_admin(client, alice_union, bob, db):
    slug = alice_union["slug"]

    response = client.put(f"/api/unions/{slug}", json={"name": "Taken Over"}, headers=bob)

    assert response.status_code == 403
    assert db.query(Union).filter_by(slug=slug).one().name == "Ironworkers Local 123"


def test_update_union_blank_name(client, alice_union, alice):
    response = client.put(f"/api/unions/{alice_union['slug']}", json={"name": "  "}, headers=alice)

    assert response.status_code == 400
    assert response.json()["detail"] == "Union name is required"


def test_placeholder_pages(client, alice_union, alice, bob):
    slug = alice_union["slug"]

    for page in ("payments", "grievances"):
        response = client.get(f"/api/unions/{slug}/{page}", headers=alice)
        assert response.status_code == 200
        assert response.json()["union"]["name"] == "Ironworkers Local 123"
        assert response.json()["items"] == []

        assert client.get(f"/api/unions/{slug}/{page}", headers=bob).status_code == 403


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
