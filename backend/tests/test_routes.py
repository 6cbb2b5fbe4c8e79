"""Tests for the HTTP API."""

from jose import jwt
from sqlalchemy.orm import sessionmaker

from guest_portal.config import settings
from guest_portal.models import Guest, Session as WiFiSession
from guest_portal.services.radius_service import RadiusService

MAC = "aa:bb:cc:dd:ee:ff"


def _query(engine, model):
    s = sessionmaker(bind=engine)()
    try:
        return s.query(model).all()
    finally:
        s.close()


def _authenticate(client, **overrides):
    body = {"mac_address": "AA-BB-CC-DD-EE-FF", "email": "a@example.com", "auth_method": "email"}
    body.update(overrides)
    return client.post("/api/auth/guest", json=body)


# --- POST /api/auth/guest ---


def test_guest_auth_success(client, make_location) -> None:
    location = make_location(session_timeout=1800, bandwidth_limit_down=512)
    resp = _authenticate(client, location_id=location.id)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Authentication successful"
    assert body["data"]["username"] == MAC
    assert len(body["data"]["password"]) == 16
    assert body["data"]["session_timeout"] == 1800
    assert body["data"]["redirect_url"] == "https://example.com/welcome"
    assert resp.headers["Cache-Control"] == "no-store"


def test_guest_auth_missing_mac(client, engine) -> None:
    resp = client.post("/api/auth/guest", json={"email": "a@example.com"})

    assert resp.status_code == 400
    assert resp.json() == {"detail": "MAC address is required"}
    assert _query(engine, Guest) == []
    assert _query(engine, WiFiSession) == []


def test_guest_auth_invalid_method(client) -> None:
    resp = _authenticate(client, auth_method="sms")
    assert resp.status_code == 422


def test_guest_auth_internal_error_is_opaque(client, monkeypatch) -> None:
    def _boom(self, *args, **kwargs):
        raise RuntimeError("relation radcheck does not exist")

    monkeypatch.setattr(RadiusService, "set_authorization", _boom)
    resp = _authenticate(client)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Authentication failed"}
    assert "radcheck" not in resp.text


def test_blank_email_does_not_erase(client, engine) -> None:
    _authenticate(client)
    _authenticate(client, email="", auth_method="click-through")

    (guest,) = _query(engine, Guest)
    assert guest.email == "a@example.com"
    assert guest.visit_count == 2


# --- GET /api/auth/status/{mac} ---


def test_status_unauthorized(client) -> None:
    resp = client.get("/api/auth/status/AA-BB-CC-DD-EE-FF")
    assert resp.status_code == 200
    assert resp.json() == {"authorized": False}


def test_status_after_auth(client) -> None:
    _authenticate(client)
    resp = client.get("/api/auth/status/aabbccddeeff")
    assert resp.json() == {"authorized": True, "username": MAC}


# --- GET /api/location/{id} ---


def test_location_info(client, make_location) -> None:
    location = make_location(splash_message="Welcome!", terms_url="https://example.com/terms")
    resp = client.get(f"/api/location/{location.id}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Lobby"
    assert body["splash_message"] == "Welcome!"
    assert body["terms_url"] == "https://example.com/terms"
    assert "nas_ip" not in body


def test_location_not_found(client) -> None:
    resp = client.get("/api/location/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Location not found"}


# --- POST /api/admin/disconnect/{mac} ---


def test_disconnect_flow(client, engine, admin_headers) -> None:
    _authenticate(client)

    resp = client.post("/api/admin/disconnect/AA-BB-CC-DD-EE-FF", headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": f"Disconnected {MAC}", "sessions_closed": 1}
    (session,) = _query(engine, WiFiSession)
    assert session.status == "disconnected"
    assert client.get(f"/api/auth/status/{MAC}").json() == {"authorized": False}


def test_disconnect_requires_token(client) -> None:
    resp = client.post(f"/api/admin/disconnect/{MAC}")
    assert resp.status_code == 401


def test_disconnect_rejects_bad_token(client) -> None:
    token = jwt.encode({"sub": "ops", "role": "admin"}, "wrong-key", algorithm="HS256")
    resp = client.post(f"/api/admin/disconnect/{MAC}", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_disconnect_requires_admin_role(client) -> None:
    token = jwt.encode({"sub": "viewer", "role": "reports_user"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    resp = client.post(f"/api/admin/disconnect/{MAC}", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 403


def test_disconnect_failure_reported(client, admin_headers, monkeypatch) -> None:
    def _boom(self, username):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(RadiusService, "delete_authorization", _boom)
    resp = client.post(f"/api/admin/disconnect/{MAC}", headers=admin_headers)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to disconnect user"}


# --- POST /api/radius/accounting ---


def test_accounting_stop(client, engine) -> None:
    _authenticate(client)
    resp = client.post(
        "/api/radius/accounting",
        json={
            "username": MAC,
            "acct_status_type": "Stop",
            "session_id": "5A3F0001",
            "session_time": 3600,
            "input_octets": 10485760,
            "output_octets": 52428800,
        },
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    (session,) = _query(engine, WiFiSession)
    assert session.status == "expired"
    assert session.duration_seconds == 3600
    assert session.data_up_mb == 10
    assert session.data_down_mb == 50
    assert session.session_id == "5A3F0001"


def test_accounting_interim_is_acknowledged(client, engine) -> None:
    _authenticate(client)
    resp = client.post(
        "/api/radius/accounting",
        json={"username": MAC, "acct_status_type": "Interim-Update", "session_time": 60},
    )

    assert resp.json() == {"success": True}
    (session,) = _query(engine, WiFiSession)
    assert session.status == "active"


def test_accounting_unknown_session(client) -> None:
    resp = client.post("/api/radius/accounting", json={"username": "de:ad:be:ef:00:01", "acct_status_type": "Stop"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_accounting_shared_secret(client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "ACCOUNTING_SECRET", "s3cret")
    event = {"username": MAC, "acct_status_type": "Stop"}

    assert client.post("/api/radius/accounting", json=event).status_code == 401
    assert (
        client.post("/api/radius/accounting", json=event, headers={"X-Accounting-Secret": "nope"}).status_code == 401
    )
    assert (
        client.post("/api/radius/accounting", json=event, headers={"X-Accounting-Secret": "s3cret"}).status_code == 200
    )


def test_accounting_on_without_username(client) -> None:
    resp = client.post("/api/radius/accounting", json={"acct_status_type": "Accounting-On"})

    assert resp.status_code == 200
    assert resp.json() == {"success": True}


def test_accounting_without_status_type_is_acknowledged(client, engine) -> None:
    _authenticate(client)
    resp = client.post("/api/radius/accounting", json={"username": MAC})

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    (session,) = _query(engine, WiFiSession)
    assert session.status == "active"


def test_accounting_stop_without_username(client, engine) -> None:
    _authenticate(client)
    resp = client.post("/api/radius/accounting", json={"acct_status_type": "Stop", "session_time": 60})

    assert resp.status_code == 200
    (session,) = _query(engine, WiFiSession)
    assert session.status == "active"
