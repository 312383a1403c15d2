"""HTTP-level tests for the /users resource."""
from unittest.mock import MagicMock

from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from app_factory import create_app


def test_create_user_returns_201_with_defaults(client, new_user):
    response = client.post("/users", json=new_user)

    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "standard"
    assert body["isDisabled"] is False
    assert ObjectId.is_valid(body["id"])
    assert body["email"] == "a@x.com"


def test_create_user_missing_field_returns_400(client, new_user):
    del new_user["lastName"]

    response = client.post("/users", json=new_user)

    assert response.status_code == 400
    assert response.json()["message"].startswith("Bad Request: ")
    assert "lastName" in response.json()["message"]


def test_create_user_invalid_json_returns_400(client):
    response = client.post("/users", content="{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("Bad Request: ")


def test_create_user_store_failure_returns_500(new_user):
    collection = MagicMock()
    collection.insert_one.side_effect = PyMongoError("db down")
    client = TestClient(create_app(users_collection=collection))

    response = client.post("/users", json=new_user)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error: db down"}


def test_list_users_empty(client):
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == []


def test_list_users_hides_private_fields(client, new_user):
    first = client.post("/users", json=new_user).json()
    second = client.post("/users", json={**new_user, "email": "c@x.com"}).json()

    response = client.get("/users")

    assert response.status_code == 200
    users = response.json()
    assert [u["id"] for u in users] == [first["id"], second["id"]]
    for user in users:
        assert set(user) == {"id", "firstName", "lastName", "email", "role"}


def test_get_user_by_id(client, new_user):
    created = client.post("/users", json=new_user).json()

    response = client.get(f"/users/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"],
        "firstName": "A",
        "lastName": "B",
        "email": "a@x.com",
        "role": "standard",
    }


def test_get_user_bad_id_returns_400(client):
    response = client.get("/users/123")

    assert response.status_code == 400
    assert response.json() == {"message": "Bad Request: Invalid userId"}


def test_get_user_unknown_id_returns_404(client):
    response = client.get(f"/users/{ObjectId()}")

    assert response.status_code == 404
    assert response.json()["message"].startswith("Not Found: ")


def test_update_user_returns_204(client, collection, new_user):
    created = client.post("/users", json=new_user).json()

    response = client.put(f"/users/{created['id']}", json={"role": "admin", "isDisabled": False})

    assert response.status_code == 204
    assert response.content == b""
    assert collection.documents[ObjectId(created["id"])]["role"] == "admin"


def test_update_unknown_user_returns_404(client):
    response = client.put(f"/users/{ObjectId()}", json={"role": "admin", "isDisabled": False})

    assert response.status_code == 404


def test_update_user_bad_id_returns_400(client):
    response = client.put("/users/123", json={"role": "admin"})

    assert response.status_code == 400


def test_update_user_non_object_body_returns_400(client, new_user):
    created = client.post("/users", json=new_user).json()

    response = client.put(f"/users/{created['id']}", json=["admin"])

    assert response.status_code == 400


def test_disable_user_keeps_document(client, collection, new_user):
    created = client.post("/users", json=new_user).json()

    response = client.delete(f"/users/{created['id']}")

    assert response.status_code == 204
    assert client.get(f"/users/{created['id']}").status_code == 200
    assert collection.documents[ObjectId(created["id"])]["isDisabled"] is True


def test_disable_user_twice_succeeds(client, collection, new_user):
    created = client.post("/users", json=new_user).json()

    assert client.delete(f"/users/{created['id']}").status_code == 204
    assert client.delete(f"/users/{created['id']}").status_code == 204
    assert collection.documents[ObjectId(created["id"])]["isDisabled"] is True


def test_disable_unknown_user_returns_404(client):
    response = client.delete(f"/users/{ObjectId()}")

    assert response.status_code == 404
    assert response.json()["message"].startswith("Not Found: ")


def test_disable_user_bad_id_returns_400(client):
    response = client.delete("/users/123")

    assert response.status_code == 400


def test_create_user_null_optionals_returns_201_with_defaults(client, new_user):
    response = client.post("/users", json={
        **new_user,
        "isDisabled": None,
        "role": None,
        "selectedSecurityQuestions": None,
    })

    assert response.status_code == 201
    body = response.json()
    assert body["isDisabled"] is False
    assert body["role"] == "standard"
    assert body["selectedSecurityQuestions"] == []


def test_create_user_echoes_email_case(client, new_user):
    response = client.post("/users", json={**new_user, "email": "Bob@X.COM"})

    assert response.status_code == 201
    assert response.json()["email"] == "Bob@X.COM"


def test_reads_after_non_string_update_return_200(client, new_user):
    created = client.post("/users", json=new_user).json()
    assert client.put(f"/users/{created['id']}", json={"firstName": 5}).status_code == 204

    listed = client.get("/users")
    fetched = client.get(f"/users/{created['id']}")

    assert listed.status_code == 200
    assert listed.json()[0]["firstName"] == 5
    assert fetched.status_code == 200
    assert fetched.json()["firstName"] == 5
