import pytest

from app.modules.resource.repositories import ResourceRepository
from app.modules.resource.seeders import ResourceSeeder

VALIDATE_URL = "/api/v1/doi/validate"


@pytest.fixture(scope="module")
def test_client(test_client):
    """
    Extends the test_client fixture with the demo resources
    (10.5880/gfz.2024.001 - .005 plus one draft without DOI).
    """
    with test_client.application.app_context():
        ResourceSeeder().run()

    yield test_client


def resource_id(doi):
    return ResourceRepository().find_by_doi(doi).id


def test_validate_existing_doi(test_client):
    response = test_client.post(VALIDATE_URL, json={"doi": "10.5880/gfz.2024.001"})

    assert response.status_code == 200
    assert response.get_json() == {
        "is_valid_format": True,
        "exists": True,
        "existing_resource": {"id": resource_id("10.5880/gfz.2024.001"), "title": "Seismic Survey 2024"},
        "last_assigned_doi": "10.5880/gfz.2024.005",
        "suggested_doi": "10.5880/gfz.2024.006",
    }


def test_validate_free_doi(test_client):
    response = test_client.post(VALIDATE_URL, json={"doi": "10.5880/gfz.2024.006"})

    assert response.status_code == 200
    assert response.get_json() == {"is_valid_format": True, "exists": False}


def test_validate_excludes_edited_resource(test_client):
    own_id = resource_id("10.5880/gfz.2024.003")

    response = test_client.post(VALIDATE_URL, json={"doi": "10.5880/gfz.2024.003", "exclude_resource_id": own_id})

    assert response.status_code == 200
    assert response.get_json()["exists"] is False


def test_validate_other_resource_still_conflicts_in_edit_mode(test_client):
    own_id = resource_id("10.5880/gfz.2024.003")

    response = test_client.post(VALIDATE_URL, json={"doi": "10.5880/gfz.2024.004", "exclude_resource_id": own_id})

    data = response.get_json()
    assert data["exists"] is True
    assert data["existing_resource"]["id"] == resource_id("10.5880/gfz.2024.004")


def test_validate_accepts_resolver_url(test_client):
    response = test_client.post(VALIDATE_URL, json={"doi": "  https://doi.org/10.5880/gfz.2024.002 "})

    data = response.get_json()
    assert response.status_code == 200
    assert data["exists"] is True
    assert data["suggested_doi"] == "10.5880/gfz.2024.006"


def test_validate_invalid_format(test_client):
    response = test_client.post(VALIDATE_URL, json={"doi": "not-a-doi"})

    assert response.status_code == 422
    data = response.get_json()
    assert data["is_valid_format"] is False
    assert data["exists"] is False
    assert "Invalid DOI format" in data["error"]


def test_validate_empty_doi(test_client):
    response = test_client.post(VALIDATE_URL, json={"doi": "   "})

    assert response.status_code == 422


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"doi": None},
        {"doi": 105880},
        {"doi": "10.5880/gfz.2024.001", "exclude_resource_id": "7"},
        {"doi": "10.5880/gfz.2024.001", "exclude_resource_id": True},
        {"doi": "10.5880/gfz.2024.001", "exclude_resource_id": 2**70},
        {"doi": "10.5880/gfz.2024.001", "exclude_resource_id": 2**63},
        {"doi": "10.5880/gfz.2024.001", "exclude_resource_id": 0},
        {"doi": "10.5880/gfz.2024.001", "exclude_resource_id": -1},
    ],
)
def test_validate_rejects_malformed_payload(test_client, payload):
    response = test_client.post(VALIDATE_URL, json=payload)

    assert response.status_code == 400
    assert "message" in response.get_json()


def test_validate_rejects_non_json_body(test_client):
    response = test_client.post(VALIDATE_URL, data="doi=10.5880/gfz.2024.001")

    assert response.status_code == 400


def test_validate_requires_post(test_client):
    response = test_client.get(VALIDATE_URL)

    assert response.status_code == 405


def test_validate_accepts_largest_resource_id(test_client):
    response = test_client.post(VALIDATE_URL, json={"doi": "10.5880/gfz.2024.001", "exclude_resource_id": 2**63 - 1})

    assert response.status_code == 200
    assert response.get_json()["exists"] is True


def test_validate_long_trailing_number(test_client):
    doi = "10.5880/gfz." + "1" * 5000

    response = test_client.post(VALIDATE_URL, json={"doi": doi})
    assert response.status_code == 200
    assert response.get_json() == {"is_valid_format": True, "exists": False}

    ResourceRepository().create(doi=doi)
    response = test_client.post(VALIDATE_URL, json={"doi": doi})

    assert response.status_code == 200
    data = response.get_json()
    assert data["exists"] is True
    assert data["suggested_doi"] == "10.5880/gfz." + "1" * 4999 + "2"
    assert data["last_assigned_doi"] == "10.5880/gfz.2024.005"
