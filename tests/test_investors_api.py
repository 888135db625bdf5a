"""API tests for /investors."""


def test_create_investor(client):
    payload = {"name": "CalPERS", "investor_type": "Institution", "email": "privateequity@calpers.ca.gov"}

    response = client.post("/investors", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == payload["name"]
    assert data["investor_type"] == "Institution"
    assert data["email"] == payload["email"]
    assert data["id"]
    assert data["created_at"]


def test_create_investor_missing_fields(client):
    response = client.post("/investors", json={"name": "Nobody"})

    assert response.status_code == 400
    assert response.json() == {
        "message": "Validation failed",
        "errors": ["investor_type is required", "email is required"],
    }


def test_create_investor_invalid_email_and_type(client):
    response = client.post(
        "/investors",
        json={"name": "Jane Doe", "investor_type": "Hedge Fund", "email": "invalid-email"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "investor_type must be one of: Individual, Institution, Family Office",
        "email must be a valid email address",
    ]


def test_duplicate_email_conflicts_and_is_not_persisted(client, create_investor):
    create_investor(name="Jane Doe", investor_type="Individual", email="jane.doe@email.com")

    response = client.post(
        "/investors",
        json={"name": "Another Jane", "investor_type": "Individual", "email": "jane.doe@email.com"},
    )

    assert response.status_code == 409
    assert response.json() == {"message": "A record with this value already exists"}

    names = [investor["name"] for investor in client.get("/investors").json()]
    assert names == ["Jane Doe"]


def test_list_investors_newest_first(client, create_investor):
    first = create_investor(investor_type="Family Office")
    second = create_investor(investor_type="Individual")

    response = client.get("/investors")

    assert response.status_code == 200
    assert [investor["id"] for investor in response.json()] == [second["id"], first["id"]]
