from datetime import datetime, timedelta, timezone

from app.models.comment import Comment

BASE = "/admin/api/v1"


def comment_payload(product_id, **overrides):
    payload = {"email": "reader@example.com", "text": "Nice!", "productId": product_id}
    payload.update(overrides)
    return payload


def test_create_comment(client, auth_headers, create_product):
    product = create_product()

    response = client.post(f"{BASE}/comment/create", json=comment_payload(product["id"]), headers=auth_headers)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["email"] == "reader@example.com"
    assert data["text"] == "Nice!"
    assert data["product_id"] == product["id"]


def test_create_comment_for_missing_product_is_rejected(client, auth_headers, db):
    response = client.post(f"{BASE}/comment/create", json=comment_payload("missing"), headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"status": "fail", "message": "Product not found"}
    assert db.query(Comment).count() == 0


def test_create_comment_validates_email(client, auth_headers, create_product):
    product = create_product()

    response = client.post(
        f"{BASE}/comment/create",
        json=comment_payload(product["id"], email="not-an-email", text=""),
        headers=auth_headers,
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert len(errors) == 2
    assert any(e.startswith('"email"') for e in errors)
    assert any(e.startswith('"text"') for e in errors)


def test_comments_by_product(client, auth_headers, create_product, db):
    tea = create_product(title="Tea")
    coffee = create_product(title="Coffee")
    first = client.post(f"{BASE}/comment/create", json=comment_payload(tea["id"], text="first"), headers=auth_headers)
    client.post(f"{BASE}/comment/create", json=comment_payload(tea["id"], text="second"), headers=auth_headers)
    client.post(f"{BASE}/comment/create", json=comment_payload(coffee["id"]), headers=auth_headers)
    db.get(Comment, first.json()["data"]["id"]).created_at = datetime.now(timezone.utc) - timedelta(hours=1)
    db.commit()

    response = client.get(f"{BASE}/comments/get/by/productId/{tea['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert [c["text"] for c in response.json()["data"]] == ["second", "first"]


def test_comments_by_missing_product(client, auth_headers):
    response = client.get(f"{BASE}/comments/get/by/productId/missing", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_all_comments_include_product_projection(client, auth_headers, create_product):
    product = create_product(title="Tea", description="Green tea")
    client.post(f"{BASE}/comment/create", json=comment_payload(product["id"]), headers=auth_headers)

    response = client.get(f"{BASE}/comments/get/all", headers=auth_headers)

    assert response.status_code == 200
    comments = response.json()["data"]
    assert len(comments) == 1
    assert comments[0]["product"] == {"id": product["id"], "title": "Tea", "description": "Green tea"}


def test_comment_routes_have_no_update_or_delete(client, auth_headers):
    assert client.put(f"{BASE}/comment/update/x", json={}, headers=auth_headers).status_code == 404
    assert client.delete(f"{BASE}/comment/delete/x", headers=auth_headers).status_code == 404
