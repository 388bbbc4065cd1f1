"""Tests de l'identification de bouteilles par photo"""

import base64

MAKERS_MARK = {
    "brand": "Maker's Mark",
    "productName": "Kentucky Straight Bourbon Whisky",
    "category": "whisky",
    "subCategory": "bourbon",
    "countryOfOrigin": "USA",
    "region": "Kentucky",
    "abv": 45,
    "sizeMl": 700,
    "description": "Wheated bourbon with a red wax seal",
    "tastingNotes": "Caramel, vanilla, soft wheat",
    "confidence": "high",
}


def test_identify_bottle(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue(MAKERS_MARK)

    response = client.post(
        "/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers
    )

    assert response.status_code == 200
    bottle = response.json()["bottle"]
    assert bottle["brand"] == "Maker's Mark"
    assert bottle["productName"] == "Kentucky Straight Bourbon Whisky"
    assert bottle["subCategory"] == "bourbon"
    assert bottle["confidence"] == "high"

    call = completion_client.calls[0]
    assert call["mime_type"] == "image/png"
    assert call["image_bytes"].startswith(b"\x89PNG")
    assert call["max_tokens"] == 1024


def test_identify_does_not_create_bottle(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue(MAKERS_MARK)
    client.post("/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers)

    response = client.get("/api/v1/bottles", headers=auth_headers)
    assert response.json()["bottles"] == []


def test_identify_omits_missing_optional_fields(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue(
        {
            "brand": "Unknown Distillery",
            "productName": "Spiced Rum",
            "category": "Rum",
            "confidence": "Low",
        }
    )

    response = client.post(
        "/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers
    )

    bottle = response.json()["bottle"]
    assert bottle == {
        "brand": "Unknown Distillery",
        "productName": "Spiced Rum",
        "category": "rum",
        "confidence": "low",
    }


def test_identify_unknown_category_becomes_other(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue(
        {
            "brand": "Pernod",
            "productName": "Absinthe",
            "category": "absinthe",
            "confidence": "medium",
        }
    )

    response = client.post(
        "/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers
    )
    assert response.json()["bottle"]["category"] == "other"


def test_identify_without_image(client, auth_headers, completion_client):
    response = client.post("/api/v1/identify", json={}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No image provided"}
    assert completion_client.calls == []


def test_identify_rejects_malformed_data_uri(client, auth_headers, completion_client):
    response = client.post(
        "/api/v1/identify", json={"image": "not-a-data-uri"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid image format"
    assert completion_client.calls == []


def test_identify_rejects_unsupported_mime(client, auth_headers, completion_client):
    payload = base64.b64encode(b"hello").decode()
    response = client.post(
        "/api/v1/identify",
        json={"image": f"data:text/plain;base64,{payload}"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert completion_client.calls == []


def test_identify_rejects_undecodable_image(client, auth_headers, completion_client):
    payload = base64.b64encode(b"definitely not a png").decode()
    response = client.post(
        "/api/v1/identify",
        json={"image": f"data:image/png;base64,{payload}"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert completion_client.calls == []


def test_identify_not_recognized(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue({"error": "Could not identify a liquor bottle in this image"})

    response = client.post(
        "/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Could not identify a liquor bottle in this image",
    }


def test_identify_unparseable_response(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue("I think this is a bottle of bourbon.")

    response = client.post(
        "/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers
    )

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to identify bottle"}


def test_identify_fenced_json_is_not_accepted(client, auth_headers, completion_client, png_data_uri):
    completion_client.queue("```json\n" + '{"brand": "X", "productName": "Y", "category": "gin", "confidence": "high"}' + "\n```")

    response = client.post(
        "/api/v1/identify", json={"image": png_data_uri}, headers=auth_headers
    )

    assert response.status_code == 500


def test_identify_requires_authentication(client, png_data_uri):
    response = client.post("/api/v1/identify", json={"image": png_data_uri})
    assert response.status_code == 401
