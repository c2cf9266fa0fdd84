from conftest import get_vehicle_row

from app.models.enums import VehicleStatus

NEW_VEHICLE = {
    "brand": "Honda",
    "model": "CR-V",
    "year": 2024,
    "price": 550000000,
    "color": "White",
    "fuel_type": "Gasoline",
    "transmission": "Automatic",
    "body_type": "SUV",
    "seats": 5,
    "stock": 3,
    "images": [
        {"image_url": "https://images.example.com/crv-1.jpg", "is_primary": True, "display_order": 0},
        {"image_url": "https://images.example.com/crv-2.jpg", "display_order": 1},
    ],
}


def test_list_shows_only_available_vehicles(client, make_vehicle):
    available = make_vehicle(model="Avanza")
    make_vehicle(model="Sold Out", status=VehicleStatus.SOLD, stock=0)
    make_vehicle(model="On Hold", status=VehicleStatus.RESERVED)

    response = client.get("/api/vehicles")

    assert response.status_code == 200
    assert [v["id"] for v in response.json()] == [available]


def test_list_filters_combine(client, make_vehicle):
    match = make_vehicle(brand="Toyota", model="Fortuner", body_type="SUV", fuel_type="Diesel",
                         transmission="Automatic", year=2023, price=600000000, is_featured=True)
    make_vehicle(brand="Toyota", model="Rush", body_type="SUV", fuel_type="Gasoline",
                 transmission="Automatic", year=2023, price=300000000)
    make_vehicle(brand="Honda", model="BR-V", body_type="SUV", fuel_type="Diesel",
                 transmission="Automatic", year=2023, price=400000000)

    response = client.get("/api/vehicles", params={
        "brand": "toy",
        "body_type": "SUV",
        "fuel_type": "Diesel",
        "transmission": "Automatic",
        "min_price": 500000000,
        "max_price": 700000000,
        "min_year": 2020,
        "max_year": 2024,
        "is_featured": True,
    })

    assert [v["id"] for v in response.json()] == [match]


def test_brand_filter_treats_wildcards_literally(client, make_vehicle):
    literal = make_vehicle(brand="a_b")
    make_vehicle(brand="axb")
    make_vehicle(brand="Toyota")

    underscore = client.get("/api/vehicles", params={"brand": "A_B"}).json()
    percent = client.get("/api/vehicles", params={"brand": "%"}).json()

    assert [v["id"] for v in underscore] == [literal]
    assert percent == []


def test_list_sorting(client, make_vehicle):
    cheap = make_vehicle(price=100000000, year=2020)
    mid = make_vehicle(price=200000000, year=2024)
    pricey = make_vehicle(price=300000000, year=2022)

    by_price = client.get("/api/vehicles", params={"sort_by": "price", "sort_order": "asc"}).json()
    by_year = client.get("/api/vehicles", params={"sort_by": "year"}).json()
    newest = client.get("/api/vehicles").json()

    assert [v["id"] for v in by_price] == [cheap, mid, pricey]
    assert [v["id"] for v in by_year] == [mid, pricey, cheap]
    assert [v["id"] for v in newest] == [pricey, mid, cheap]


def test_list_rejects_unknown_sort_column(client):
    assert client.get("/api/vehicles", params={"sort_by": "stock"}).status_code == 400


def test_get_vehicle_of_any_status(client, make_vehicle):
    vehicle_id = make_vehicle(status=VehicleStatus.SOLD, stock=0)

    response = client.get(f"/api/vehicles/{vehicle_id}")

    assert response.status_code == 200
    assert response.json()["status"] == "Sold"
    assert client.get("/api/vehicles/999").status_code == 404


def test_admin_creates_vehicle_with_images(client, admin_headers):
    response = client.post("/api/vehicles", json=NEW_VEHICLE, headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Available"
    assert body["stock"] == 3
    assert body["price"] == 550000000.0
    assert [image["image_url"] for image in body["images"]] == [
        "https://images.example.com/crv-1.jpg",
        "https://images.example.com/crv-2.jpg",
    ]


def test_customers_cannot_manage_catalog(client, user_headers, make_vehicle):
    vehicle_id = make_vehicle()

    assert client.post("/api/vehicles", json=NEW_VEHICLE, headers=user_headers).status_code == 403
    assert client.put(f"/api/vehicles/{vehicle_id}", json={"price": 1}, headers=user_headers).status_code == 403
    assert client.delete(f"/api/vehicles/{vehicle_id}", headers=user_headers).status_code == 403
    assert client.post("/api/vehicles", json=NEW_VEHICLE).status_code == 401


def test_partial_update_keeps_unsent_fields(client, admin_headers, make_vehicle):
    vehicle_id = make_vehicle(color="Silver", stock=2)

    response = client.put(
        f"/api/vehicles/{vehicle_id}",
        json={"price": 260000000, "color": None, "status": "Reserved"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 260000000.0
    assert body["color"] == "Silver"
    assert body["status"] == "Reserved"
    assert body["stock"] == 2


def test_update_writes_stock_and_status_independently(client, admin_headers, make_vehicle):
    vehicle_id = make_vehicle(stock=1)

    client.put(f"/api/vehicles/{vehicle_id}", json={"stock": 0}, headers=admin_headers)

    vehicle = get_vehicle_row(vehicle_id)
    assert vehicle.stock == 0
    assert vehicle.status == VehicleStatus.AVAILABLE


def test_update_rejects_unknown_status(client, admin_headers, make_vehicle):
    vehicle_id = make_vehicle()

    response = client.put(f"/api/vehicles/{vehicle_id}", json={"status": "Scrapped"}, headers=admin_headers)

    assert response.status_code == 400


def test_delete_vehicle_removes_dependents(client, admin_headers, user_headers, make_vehicle):
    vehicle_id = make_vehicle(stock=2, images=[{"image_url": "https://images.example.com/a.jpg"}])
    client.post(f"/api/wishlist/{vehicle_id}", headers=user_headers)
    client.post("/api/test-drives", json={
        "vehicle_id": vehicle_id, "requested_date": "2026-11-02", "requested_time": "10:00",
    }, headers=user_headers)
    client.post("/api/inquiries", json={
        "vehicle_id": vehicle_id, "subject": "Price", "message": "Any discount?",
    }, headers=user_headers)
    client.post("/api/transactions", json={"vehicle_id": vehicle_id, "payment_method": "Cash"}, headers=user_headers)

    response = client.delete(f"/api/vehicles/{vehicle_id}", headers=admin_headers)

    assert response.status_code == 200
    assert client.get(f"/api/vehicles/{vehicle_id}").status_code == 404
    assert client.get("/api/wishlist", headers=user_headers).json() == []
    assert client.get("/api/test-drives", headers=user_headers).json() == []
    assert client.get("/api/inquiries", headers=user_headers).json() == []
    assert client.get("/api/transactions", headers=user_headers).json() == []


def test_add_and_remove_vehicle_image(client, admin_headers, make_vehicle):
    vehicle_id = make_vehicle()

    created = client.post(
        f"/api/vehicles/{vehicle_id}/images",
        json={"image_url": "https://images.example.com/side.jpg", "display_order": 2},
        headers=admin_headers,
    )
    assert created.status_code == 201
    image_id = created.json()["id"]
    assert len(client.get(f"/api/vehicles/{vehicle_id}").json()["images"]) == 1

    deleted = client.delete(f"/api/vehicles/{vehicle_id}/images/{image_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/vehicles/{vehicle_id}").json()["images"] == []

    missing = client.delete(f"/api/vehicles/{vehicle_id}/images/{image_id}", headers=admin_headers)
    assert missing.status_code == 404
