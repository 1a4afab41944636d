from app.models.member import Member


def members_url(union, member_id=None):
    url = f"/api/unions/{union['slug']}/members"
    return url if member_id is None else f"{url}/{member_id}"


MEMBER = {
    "first_name": "Rosa",
    "last_name": "Diaz",
    "email": "rosa@example.org",
    "phone": "555-0100",
    "member_number": "IW-0042",
    "status": "pending",
    "date_joined": "2024-03-01",
}


def test_create_and_fetch_member_round_trip(client, alice, alice_union):
    created = client.post(members_url(alice_union), json=MEMBER, headers=alice)
    assert created.status_code == 201

    fetched = client.get(members_url(alice_union, created.json()["id"]), headers=alice)

    assert fetched.status_code == 200
    body = fetched.json()
    for field, value in MEMBER.items():
        assert body[field] == value
    assert body["union_id"] == alice_union["id"]


def test_member_status_defaults_to_active(client, alice, alice_union):
    response = client.post(
        members_url(alice_union),
        json={"first_name": "Sam", "last_name": "Lee", "email": "", "date_joined": ""},
        headers=alice,
    )

    assert response.status_code == 201
    assert response.json()["status"] == "active"
    assert response.json()["email"] is None
    assert response.json()["date_joined"] is None


def test_list_members_newest_first(client, alice, alice_union):
    for first_name in ("Ann", "Ben", "Cal"):
        client.post(members_url(alice_union), json={"first_name": first_name, "last_name": "X"}, headers=alice)

    response = client.get(members_url(alice_union), headers=alice)

    assert response.status_code == 200
    assert [m["first_name"] for m in response.json()] == ["Cal", "Ben", "Ann"]


def test_scenario_c_other_user_cannot_list_members(client, alice, bob, alice_union):
    client.post(members_url(alice_union), json=MEMBER, headers=alice)

    response = client.get(members_url(alice_union), headers=bob)

    assert response.status_code == 403
    assert response.json()["detail"] == "You are not an admin of this union"


def test_other_user_cannot_read_create_or_update_members(client, alice, bob, alice_union, db):
    member_id = client.post(members_url(alice_union), json=MEMBER, headers=alice).json()["id"]

    assert client.get(members_url(alice_union, member_id), headers=bob).status_code == 403
    assert client.post(members_url(alice_union), json=MEMBER, headers=bob).status_code == 403
    assert client.put(
        members_url(alice_union, member_id), json={"first_name": "Hacked"}, headers=bob
    ).status_code == 403

    assert db.query(Member).count() == 1
    assert db.get(Member, member_id).first_name == "Rosa"


def test_scenario_d_unauthenticated_create_writes_nothing(client, alice_union, db):
    response = client.post(members_url(alice_union), json=MEMBER)

    assert response.status_code == 401
    assert db.query(Member).count() == 0


def test_unauthenticated_request_checked_before_slug(client):
    response = client.get("/api/unions/does-not-exist/members")

    assert response.status_code == 401


def test_unknown_slug_is_not_found(client, alice):
    response = client.get("/api/unions/does-not-exist/members", headers=alice)

    assert response.status_code == 404
    assert response.json()["detail"] == "Union not found"


def test_scenario_e_empty_first_name_writes_nothing(client, alice, alice_union, db):
    empty = client.post(members_url(alice_union), json={**MEMBER, "first_name": ""}, headers=alice)
    blank = client.post(members_url(alice_union), json={**MEMBER, "first_name": "   "}, headers=alice)
    missing = client.post(members_url(alice_union), json={"last_name": "Diaz"}, headers=alice)

    assert empty.status_code == 422
    assert blank.status_code == 400
    assert blank.json()["detail"] == "First name is required"
    assert missing.status_code == 422
    assert db.query(Member).count() == 0


def test_invalid_status_rejected(client, alice, alice_union):
    response = client.post(members_url(alice_union), json={**MEMBER, "status": "retired"}, headers=alice)

    assert response.status_code == 422


def test_update_member(client, alice, alice_union):
    member_id = client.post(members_url(alice_union), json=MEMBER, headers=alice).json()["id"]

    response = client.put(
        members_url(alice_union, member_id),
        json={"status": "inactive", "phone": "", "last_name": " Diaz-Lopez "},
        headers=alice,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "inactive"
    assert body["phone"] is None
    assert body["last_name"] == "Diaz-Lopez"
    assert body["first_name"] == "Rosa"


def test_update_member_rejects_blank_or_null_names(client, alice, alice_union):
    member_id = client.post(members_url(alice_union), json=MEMBER, headers=alice).json()["id"]

    assert client.put(
        members_url(alice_union, member_id), json={"first_name": "  "}, headers=alice
    ).status_code == 400
    assert client.put(
        members_url(alice_union, member_id), json={"last_name": None}, headers=alice
    ).status_code == 400


def test_member_of_another_union_is_not_found(client, alice, alice_union):
    other_union = client.post("/api/unions", json={"name": "Local 500"}, headers=alice).json()
    member_id = client.post(members_url(other_union), json=MEMBER, headers=alice).json()["id"]

    assert client.get(members_url(alice_union, member_id), headers=alice).status_code == 404
    assert client.put(
        members_url(alice_union, member_id), json={"first_name": "Moved"}, headers=alice
    ).status_code == 404


def test_list_is_scoped_to_union(client, alice, bob, alice_union):
    bob_union = client.post("/api/unions", json={"name": "Teamsters Local 705"}, headers=bob).json()
    client.post(members_url(alice_union), json=MEMBER, headers=alice)
    client.post(members_url(bob_union), json={"first_name": "Tom", "last_name": "Ng"}, headers=bob)

    alice_members = client.get(members_url(alice_union), headers=alice).json()
    bob_members = client.get(members_url(bob_union), headers=bob).json()

    assert [m["first_name"] for m in alice_members] == ["Rosa"]
    assert [m["first_name"] for m in bob_members] == ["Tom"]


def test_all_members_across_admin_unions(client, alice, bob, alice_union):
    second = client.post("/api/unions", json={"name": "Local 500"}, headers=alice).json()
    bob_union = client.post("/api/unions", json={"name": "Teamsters Local 705"}, headers=bob).json()
    client.post(members_url(alice_union), json=MEMBER, headers=alice)
    client.post(members_url(second), json={"first_name": "Lou", "last_name": "B"}, headers=alice)
    client.post(members_url(bob_union), json={"first_name": "Tom", "last_name": "Ng"}, headers=bob)

    response = client.get("/api/members", headers=alice)

    assert response.status_code == 200
    assert sorted(m["first_name"] for m in response.json()) == ["Lou", "Rosa"]


def test_all_members_empty_without_unions(client, bob):
    assert client.get("/api/members", headers=bob).json() == []


def test_non_admin_invalid_body_is_forbidden_not_validated(client, alice, bob, alice_union, db):
    member_id = client.post(members_url(alice_union), json=MEMBER, headers=alice).json()["id"]

    create = client.post(members_url(alice_union), json={"first_name": "", "last_name": "X"}, headers=bob)
    update = client.put(members_url(alice_union, member_id), json={"status": "retired"}, headers=bob)

    assert create.status_code == 403
    assert update.status_code == 403
    assert create.json() == {"detail": "You are not an admin of this union"}
    assert db.query(Member).count() == 1


def test_blank_name_error_body_is_plain_detail(client, alice, alice_union):
    response = client.post(members_url(alice_union), json={**MEMBER, "last_name": "  "}, headers=alice)

    assert response.status_code == 400
    assert response.json() == {"detail": "Last name is required"}
