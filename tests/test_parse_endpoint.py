"""
Tests for the ad-hoc parse endpoint.
"""
from fastapi import status


def test_parse_with_explicit_vendor(client):
    response = client.post(
        "/api/v1/parse/",
        json={
            "config_text": "access-list OUTSIDE extended permit tcp any host 1.1.1.1 eq 443",
            "vendor": "cisco",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["vendor"] == "cisco_asa"
    assert data["snapshot_id"] is None
    assert data["rules"][0]["source"] == "0.0.0.0/0"
    assert data["rules"][0]["port"] == "443"


def test_parse_detects_vendor(client):
    response = client.post(
        "/api/v1/parse/",
        json={"config_text": "*filter\n-A INPUT -p tcp --dport 22 -j ACCEPT\nCOMMIT\n"},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["vendor"] == "iptables"
    assert data["rules"][0]["action"] == "accept"


def test_parse_xml_returns_model(client, panos_config):
    response = client.post("/api/v1/parse/", json={"config_text": panos_config([{"name": "r1", "disabled": True}])})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["rules"] is None
    assert data["snapshot"]["policies"][0]["disabled"] is True


def test_parse_unsupported_vendor(client):
    response = client.post("/api/v1/parse/", json={"config_text": "anything", "vendor": "fortinet"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Unsupported vendor type: fortinet"


def test_parse_undetectable_text(client):
    response = client.post("/api/v1/parse/", json={"config_text": "hostname router\n"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Could not detect vendor type from configuration"
