"""HTTP tests for login, token introspection and password change."""

from httpx import AsyncClient

API = "/api/v1"
PASSWORD = "correct-password"


async def _setup_user_with_access(client: AsyncClient) -> int:
    user = (
        await client.post(
            f"{API}/users",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "mobile": "9876543210",
                "password": PASSWORD,
            },
        )
    ).json()
    role = (await client.post(f"{API}/roles", json={"name": "Viewer"})).json()
    for name in ("read", "export"):
        access = (await client.post(f"{API}/access", json={"name": name})).json()
        await client.post(
            f"{API}/role-access", json={"role_id": role["id"], "access_id": access["id"]}
        )
    await client.post(f"{API}/user-roles", json={"user_id": user["id"], "role_id": role["id"]})
    return user["id"]


async def _login(client: AsyncClient, username: str, password: str):
    return await client.post(
        f"{API}/auth/login", json={"username": username, "password": password}
    )


async def test_login_embeds_access_in_token(client: AsyncClient) -> None:
    user_id = await _setup_user_with_access(client)
    response = await _login(client, "alice", PASSWORD)
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["access"] == ["read", "export"]

    me = await client.get(
        f"{API}/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"}
    )
    assert me.status_code == 200
    claims = me.json()
    assert claims["user_id"] == user_id
    assert claims["username"] == "alice"
    assert claims["access"] == ["read", "export"]


async def test_login_without_roles_gets_empty_access(client: AsyncClient) -> None:
    await client.post(
        f"{API}/users",
        json={
            "username": "bob",
            "email": "bob@example.com",
            "mobile": "9876543211",
            "password": PASSWORD,
        },
    )
    response = await _login(client, "bob", PASSWORD)
    assert response.status_code == 200
    assert response.json()["access"] == []


async def test_wrong_password_and_unknown_user_look_the_same(client: AsyncClient) -> None:
    await _setup_user_with_access(client)
    wrong_password = await _login(client, "alice", "not-the-password")
    unknown_user = await _login(client, "nobody", "not-the-password")
    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json()["error"] == "INVALID_CREDENTIALS"


async def test_me_requires_valid_token(client: AsyncClient) -> None:
    missing = await client.get(f"{API}/auth/me")
    assert missing.status_code == 401
    assert missing.json()["error"] == "AUTHENTICATION_ERROR"

    garbage = await client.get(f"{API}/auth/me", headers={"Authorization": "Bearer nope"})
    assert garbage.status_code == 401


async def test_change_password(client: AsyncClient) -> None:
    user_id = await _setup_user_with_access(client)
    path = f"{API}/users/{user_id}/password"

    rejected = await client.put(
        path, json={"old_password": "guess-password", "new_password": "new-password-1"}
    )
    assert rejected.status_code == 401
    assert rejected.json()["message"] == "Incorrect old password"
    # Nothing changed.
    assert (await _login(client, "alice", PASSWORD)).status_code == 200

    changed = await client.put(
        path, json={"old_password": PASSWORD, "new_password": "new-password-1"}
    )
    assert changed.status_code == 204
    assert (await _login(client, "alice", PASSWORD)).status_code == 401
    assert (await _login(client, "alice", "new-password-1")).status_code == 200


async def test_change_password_unknown_user(client: AsyncClient) -> None:
    response = await client.put(
        f"{API}/users/999/password",
        json={"old_password": PASSWORD, "new_password": "new-password-1"},
    )
    assert response.status_code == 404


async def test_change_password_rejects_short_new_password(client: AsyncClient) -> None:
    user_id = await _setup_user_with_access(client)
    response = await client.put(
        f"{API}/users/{user_id}/password",
        json={"old_password": PASSWORD, "new_password": "short"},
    )
    assert response.status_code == 422
