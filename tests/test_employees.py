import pytest
from fastapi import status
from ehotel.models import Employee
from tests.conf_tests import (
    client,
    clear_db,
    test_db,
    test_chain,
    test_manager,
    test_hotel,
)


EMPLOYEE_DATA = {
    "sin_employee": "555-666-777",
    "firstname": "Olivier",
    "lastname": "Martin",
    "role": "receptionist",
    "street_number": 80,
    "street_name": "Queen Street",
    "city": "Ottawa",
    "postal_code": "K1P 1J9",
    "country": "Canada",
}


# pylint: disable-next=redefined-outer-name
def test_create_employee_in_hotel(test_hotel):
    response = client.post("/employees/", json={**EMPLOYEE_DATA, "hotel_id": test_hotel.id})
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["sin_employee"] == EMPLOYEE_DATA["sin_employee"]
    assert data["hotel_id"] == test_hotel.id


def test_create_employee_without_hotel():
    response = client.post("/employees/", json=EMPLOYEE_DATA)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["hotel_id"] is None


def test_create_employee_hotel_not_found(test_db):  # pylint: disable=redefined-outer-name
    response = client.post("/employees/", json={**EMPLOYEE_DATA, "hotel_id": 999})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Hotel not found"
    assert test_db.query(Employee).count() == 0


def test_create_employee_invalid_sin():
    response = client.post("/employees/", json={**EMPLOYEE_DATA, "sin_employee": "55-666-7777"})
    assert response.status_code == 422


# pylint: disable-next=redefined-outer-name
def test_create_employee_duplicate_sin(test_manager):
    response = client.post(
        "/employees/", json={**EMPLOYEE_DATA, "sin_employee": test_manager.sin_employee}
    )
    assert response.status_code == status.HTTP_409_CONFLICT


# pylint: disable-next=redefined-outer-name
def test_get_employee(test_manager):
    response = client.get(f"/employees/{test_manager.sin_employee}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["role"] == "manager"
    assert data["lastname"] == "Tremblay"

    response = client.get("/employees/")
    assert [employee["sin_employee"] for employee in response.json()] == [test_manager.sin_employee]


def test_get_employee_not_found():
    response = client.get("/employees/000-000-000")
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_assign_employee_to_hotel(test_manager, test_hotel):
    response = client.put(f"/employees/{test_manager.sin_employee}", json={"hotel_id": test_hotel.id})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["hotel_id"] == test_hotel.id

    response = client.put(f"/employees/{test_manager.sin_employee}", json={"hotel_id": 999})
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_delete_employee(test_db, test_manager):
    response = client.delete(f"/employees/{test_manager.sin_employee}")
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert test_db.query(Employee).count() == 0


# pylint: disable-next=redefined-outer-name
def test_delete_hotel_manager_rejected(test_db, test_hotel):
    response = client.delete(f"/employees/{test_hotel.sin_manager}")
    assert response.status_code == status.HTTP_409_CONFLICT
    assert test_db.query(Employee).count() == 1


@pytest.mark.parametrize("field", ["firstname", "lastname", "street_name", "city"])
# pylint: disable-next=redefined-outer-name
def test_update_employee_rejects_null(test_manager, field):
    response = client.put(f"/employees/{test_manager.sin_employee}", json={field: None})
    assert response.status_code == 422


# pylint: disable-next=redefined-outer-name
def test_update_employee_clears_role_and_hotel(test_manager, test_hotel):
    response = client.put(f"/employees/{test_manager.sin_employee}", json={"hotel_id": test_hotel.id})
    assert response.json()["hotel_id"] == test_hotel.id

    response = client.put(
        f"/employees/{test_manager.sin_employee}", json={"role": None, "hotel_id": None}
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["role"] is None
    assert data["hotel_id"] is None
