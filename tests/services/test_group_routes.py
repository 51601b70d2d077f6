"""Group & Health Routes - create-with-wallet, deletion rules, probes."""

from tests.services.seed_data import auth


async def test_health_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_leader_creates_group_with_zero_wallet(client, people):
    res = await client.post(
        "/api/v1/groups", json={"name": "RT 03", "type": "RT"}, headers=auth(people.leader),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["type"] == "RT"
    assert body["wallet"]["balance"] == 0


async def test_unknown_group_type_is_400(client, people):
    res = await client.post(
        "/api/v1/groups", json={"name": "RT 03", "type": "KELURAHAN"},
        headers=auth(people.leader),
    )
    assert res.status_code == 400


async def test_admin_group_list_redacts_other_wallets(client, people, groups):
    res = await client.get("/api/v1/groups", headers=auth(people.admin_a))
    by_id = {g["id"]: g for g in res.json()["data"]}
    assert "wallet" in by_id[str(groups.a.id)]
    assert "wallet" not in by_id[str(groups.b.id)]


async def test_delete_group_with_members_is_409(client, people, groups):
    res = await client.delete(f"/api/v1/groups/{groups.b.id}", headers=auth(people.leader))
    assert res.status_code == 409


async def test_get_unknown_group_is_404(client, people):
    res = await client.get(
        "/api/v1/groups/00000000-0000-0000-0000-000000000000", headers=auth(people.leader),
    )
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_leader_assigns_member(client, people, groups):
    res = await client.post(
        f"/api/v1/groups/{groups.a.id}/members/{people.maria_b.id}",
        headers=auth(people.leader),
    )
    assert res.status_code == 200
    assert res.json()["group"]["id"] == str(groups.a.id)


async def test_admin_cannot_rename_other_group(client, people, groups):
    res = await client.put(
        f"/api/v1/groups/{groups.b.id}", json={"name": "Diambil alih"},
        headers=auth(people.admin_a),
    )
    assert res.status_code == 404

    check = await client.get(f"/api/v1/groups/{groups.b.id}", headers=auth(people.leader))
    assert check.json()["name"] == "RT 02"


async def test_admin_cannot_delete_other_group(client, people, groups):
    created = await client.post(
        "/api/v1/groups", json={"name": "Seksi Kebersihan", "type": "OTHER"},
        headers=auth(people.leader),
    )
    group_id = created.json()["id"]

    res = await client.delete(f"/api/v1/groups/{group_id}", headers=auth(people.admin_a))
    assert res.status_code == 404

    still = await client.get(f"/api/v1/groups/{group_id}", headers=auth(people.leader))
    assert still.status_code == 200


async def test_leader_deletes_empty_group(client, people):
    created = await client.post(
        "/api/v1/groups", json={"name": "Seksi Kebersihan", "type": "OTHER"},
        headers=auth(people.leader),
    )
    group_id = created.json()["id"]

    res = await client.delete(f"/api/v1/groups/{group_id}", headers=auth(people.leader))
    assert res.status_code == 204
