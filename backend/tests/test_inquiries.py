def ask(client, headers, vehicle_id, subject="Availability", message="Is the white one in stock?"):
    return client.post(
        "/api/inquiries",
        json={"vehicle_id": vehicle_id, "subject": subject, "message": message},
        headers=headers,
    )


def test_create_inquiry(client, user_headers, make_vehicle):
    vehicle_id = make_vehicle(brand="Daihatsu", model="Terios")

    response = ask(client, user_headers, vehicle_id)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pending"
    assert body["vehicle_brand"] == "Daihatsu"
    assert body["user_name"] == "Buyer One"
    assert body["admin_response"] is None


def test_create_inquiry_validation(client, user_headers, make_vehicle):
    vehicle_id = make_vehicle()

    assert ask(client, user_headers, 999).status_code == 404
    assert ask(client, user_headers, vehicle_id, subject="").status_code == 400


def test_admin_responds(client, user_headers, admin_headers, make_vehicle):
    vehicle_id = make_vehicle()
    inquiry = ask(client, user_headers, vehicle_id).json()

    response = client.put(
        f"/api/inquiries/{inquiry['id']}/response",
        json={"admin_response": "Yes, two units left", "status": "Responded"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Responded"
    assert body["admin_response"] == "Yes, two units left"
    assert body["responded_by"] is not None

    mine = client.get(f"/api/inquiries/{inquiry['id']}", headers=user_headers).json()
    assert mine["admin_response"] == "Yes, two units left"


def test_admin_response_status_must_be_known(client, user_headers, admin_headers, make_vehicle):
    vehicle_id = make_vehicle()
    inquiry = ask(client, user_headers, vehicle_id).json()

    response = client.put(
        f"/api/inquiries/{inquiry['id']}/response",
        json={"admin_response": "Noted", "status": "Archived"},
        headers=admin_headers,
    )

    assert response.status_code == 400


def test_inquiry_access(client, user_headers, other_user_headers, admin_headers, make_vehicle):
    vehicle_id = make_vehicle()
    inquiry = ask(client, user_headers, vehicle_id).json()
    ask(client, other_user_headers, vehicle_id, subject="Colors")

    assert client.get(f"/api/inquiries/{inquiry['id']}", headers=other_user_headers).status_code == 403
    assert [i["id"] for i in client.get("/api/inquiries", headers=user_headers).json()] == [inquiry["id"]]
    assert len(client.get("/api/inquiries/all", headers=admin_headers).json()) == 2
    assert client.get("/api/inquiries/all", params={"status": "Closed"}, headers=admin_headers).json() == []
    assert client.get("/api/inquiries/all", headers=user_headers).status_code == 403


def test_admin_deletes_inquiry(client, user_headers, admin_headers, make_vehicle):
    vehicle_id = make_vehicle()
    inquiry = ask(client, user_headers, vehicle_id).json()

    assert client.delete(f"/api/inquiries/{inquiry['id']}", headers=user_headers).status_code == 403
    assert client.delete(f"/api/inquiries/{inquiry['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/inquiries/{inquiry['id']}", headers=admin_headers).status_code == 404
