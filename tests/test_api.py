"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_login_and_me(client: TestClient) -> None:
    response = client.post("/auth/login", json={"login": "admin", "password": "admin"})

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "admin"
    assert "password" not in response.json()["user"]

    me = client.get("/auth/me").json()
    assert me["authenticated"]
    assert me["user"]["id"] == "1"


def test_login_failure(client: TestClient) -> None:
    response = client.post("/auth/login", json={"login": "admin", "password": "no"})

    assert response.status_code == 401
    assert client.get("/auth/me").json() == {"authenticated": False, "user": None}


def test_logout(client: TestClient) -> None:
    client.post("/auth/login", json={"login": "admin", "password": "admin"})

    client.post("/auth/logout")

    assert not client.get("/auth/me").json()["authenticated"]


def test_register_and_duplicate(client: TestClient) -> None:
    payload = {
        "email": "olga@studio.test",
        "login": "olga",
        "password": "pw",
        "name": "Olga",
        "role": "designer",
    }

    created = client.post("/auth/register", json=payload)
    duplicate = client.post("/auth/register", json=payload)

    assert created.status_code == 201
    assert created.json()["user"]["login"] == "olga"
    assert duplicate.status_code == 409


def test_register_rejects_unknown_role(client: TestClient) -> None:
    response = client.post(
        "/auth/register",
        json={
            "email": "x@studio.test",
            "login": "x",
            "password": "pw",
            "name": "X",
            "role": "intern",
        },
    )

    assert response.status_code == 422


def test_user_crud(client: TestClient) -> None:
    created = client.post(
        "/users",
        json={
            "email": "pavel@studio.test",
            "login": "pavel",
            "password": "pw",
            "name": "Pavel",
            "role": "photographer",
            "salary": 50000,
        },
    ).json()["user"]

    updated = client.patch(f"/users/{created['id']}", json={"phone": "+7 900"})
    assert updated.json()["user"]["phone"] == "+7 900"
    assert updated.json()["user"]["salary"] == 50000

    photographers = client.get("/users", params={"role": "photographer"}).json()
    assert {user["login"] for user in photographers["users"]} == {
        "john@company.com",
        "pavel",
    }

    assert client.delete(f"/users/{created['id']}").status_code == 200
    assert client.get(f"/users/{created['id']}").status_code == 404


def test_unknown_user_is_404(client: TestClient) -> None:
    assert client.patch("/users/999", json={"name": "x"}).status_code == 404
    assert client.delete("/users/999").status_code == 404


def test_seeded_projects(client: TestClient) -> None:
    projects = client.get("/projects").json()["projects"]

    assert [project["id"] for project in projects] == ["1", "2", "3"]
    assert projects[0]["photographer"]["name"] == "John Doe"
    assert projects[1]["designer"] is None


def test_project_crud(client: TestClient) -> None:
    created = client.post(
        "/projects",
        json={
            "title": "Семья Ивановых",
            "album_type": "Семейный альбом",
            "deadline": "2024-05-01",
            "manager_id": "1",
            "designer_id": "3",
        },
    )
    assert created.status_code == 201
    project = created.json()["project"]
    assert project["status"] == "planning"
    assert project["manager"]["id"] == "1"
    assert project["photographer"] is None

    updated = client.patch(
        f"/projects/{project['id']}",
        json={"status": "completed", "designer_id": None},
    ).json()["project"]
    assert updated["status"] == "completed"
    assert updated["designer"] is None
    assert updated["manager"]["id"] == "1"

    assert client.delete(f"/projects/{project['id']}").status_code == 200
    assert client.get(f"/projects/{project['id']}").status_code == 404


def test_project_with_unknown_assignee(client: TestClient) -> None:
    response = client.post(
        "/projects",
        json={
            "title": "X",
            "album_type": "Детский альбом",
            "deadline": "2024-05-01",
            "photographer_id": "999",
        },
    )

    assert response.status_code == 422


def test_project_files(client: TestClient) -> None:
    created = client.post(
        "/projects/1/files",
        json={
            "name": "wedding_photo_001.jpg",
            "type": "image",
            "size": 2_400_000,
            "uploaded_by": "John Doe",
        },
    )
    assert created.status_code == 201
    file_id = created.json()["file"]["id"]
    project = client.get("/projects/1").json()["project"]
    assert [item["id"] for item in project["files"]] == [file_id]

    assert client.delete(f"/projects/1/files/{file_id}").status_code == 200
    assert client.get("/projects/1").json()["project"]["files"] == []


def test_files_on_unknown_project(client: TestClient) -> None:
    response = client.post(
        "/projects/999/files",
        json={"name": "a", "type": "image", "size": 1, "uploaded_by": "J"},
    )

    assert response.status_code == 404


def test_project_update_rejects_null_for_required_fields(client: TestClient) -> None:
    for field_name in ("deadline", "title", "status", "photos_count"):
        response = client.patch("/projects/1", json={field_name: None})
        assert response.status_code == 422

    assert client.get("/projects").status_code == 200
    assert client.get("/projects/1").json()["project"]["deadline"] == "2024-03-15"


def test_project_update_accepts_null_assignee(client: TestClient) -> None:
    response = client.patch("/projects/1", json={"manager_id": None})

    assert response.status_code == 200
    assert response.json()["project"]["manager"] is None


def test_user_update_rejects_null_for_required_fields(client: TestClient) -> None:
    assert client.patch("/users/2", json={"password": None}).status_code == 422
    assert client.patch("/users/2", json={"role": None}).status_code == 422

    response = client.post(
        "/auth/login", json={"login": "john@company.com", "password": "password123"}
    )
    assert response.status_code == 200


def test_user_update_accepts_null_profile_field(client: TestClient) -> None:
    response = client.patch("/users/2", json={"salary": None, "department": None})

    assert response.status_code == 200
    assert response.json()["user"]["salary"] is None
    assert response.json()["user"]["department"] is None
