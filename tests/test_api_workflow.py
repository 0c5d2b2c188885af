"""End-to-end HTTP workflow against the FastAPI app and an in-memory database."""

from __future__ import annotations

import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from profgui import models
from profgui.config import settings
from profgui.database import get_db
from profgui import main
from profgui.main import app
from profgui.services import auth_service

from conftest import parent_payload, student_payload, teacher_payload

ADMIN_PHONE = "620000000"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def api(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    db = session_factory()
    try:
        auth_service.seed_admin(db, phone=ADMIN_PHONE, password=ADMIN_PASSWORD)
    finally:
        db.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield session_factory
    finally:
        app.dependency_overrides.clear()


def _client() -> TestClient:
    return TestClient(app)


def _login(client: TestClient, phone: str, password: str):
    return client.post("/api/login", json={"phone": phone, "password": password})


def _admin_client() -> TestClient:
    client = _client()
    response = _login(client, ADMIN_PHONE, ADMIN_PASSWORD)
    assert response.status_code == 200, response.text
    return client


def _user_id(session_factory, phone_key: str) -> str:
    db = session_factory()
    try:
        return db.query(models.User).filter(models.User.phone_key == phone_key).one().id
    finally:
        db.close()


def test_student_lifecycle_over_http(api):
    visitor = _client()
    response = visitor.post("/api/register/student", json=student_payload())
    assert response.status_code == 201
    assert "attente" in response.json()["message"]

    response = _login(visitor, "621112233", "secret1")
    assert response.status_code == 403
    assert "attente" in response.json()["detail"]

    admin = _admin_client()
    pending = admin.get("/api/admin/pending-users").json()
    assert [entry["user"]["role"] for entry in pending] == ["student"]
    assert pending[0]["profile"]["kind"] == "student"

    user_id = pending[0]["user"]["id"]
    response = admin.patch(f"/api/admin/users/{user_id}/status", json={"status": "approved"})
    assert response.status_code == 200
    body = response.json()
    temp_password = body["temp_password"]
    assert body["user_phone"] == "+224 621 11 22 33"

    assert _login(visitor, "621112233", "secret1").status_code == 401

    response = _login(visitor, "+224 621 11 22 33", temp_password)
    assert response.status_code == 200
    assert response.json()["user"]["must_change_password"] is True
    assert settings.SESSION_COOKIE_NAME in visitor.cookies

    me = visitor.get("/api/user").json()
    assert me["user"]["id"] == user_id
    assert me["profile"]["subjects"] == ["Mathématiques", "Anglais"]
    assert me["children"] is None

    response = visitor.post("/api/change-password", json={"new_password": "brandnew"})
    assert response.status_code == 200
    assert visitor.get("/api/user").json()["user"]["must_change_password"] is False

    assert visitor.post("/api/logout").status_code == 200
    assert visitor.get("/api/user").status_code == 401

    assert _login(visitor, "621112233", temp_password).status_code == 401
    assert _login(visitor, "621112233", "brandnew").status_code == 200


def test_logout_invalidates_the_token_server_side(api):
    admin = _admin_client()
    token = admin.cookies[settings.SESSION_COOKIE_NAME]

    admin.post("/api/logout")

    replay = _client()
    replay.cookies.set(settings.SESSION_COOKIE_NAME, token)
    assert replay.get("/api/user").status_code == 401


def test_registration_errors_over_http(api):
    client = _client()
    response = client.post("/api/register/parent", json=parent_payload(children=[]))
    assert response.status_code == 400
    assert response.json() == {"detail": "Veuillez ajouter au moins un enfant"}

    assert client.post("/api/register/parent", json=parent_payload()).status_code == 201
    response = client.post(
        "/api/register/student", json=student_payload(phone="+224 622 44 55 66")
    )
    assert response.status_code == 409
    assert response.json()["detail"] == "Ce numéro de téléphone est déjà utilisé"


def test_rejected_user_is_told_so(api):
    client = _client()
    client.post("/api/register/teacher", json=teacher_payload())
    admin = _admin_client()
    user_id = _user_id(api, "623778899")

    response = admin.patch(f"/api/admin/users/{user_id}/status", json={"status": "rejected"})
    assert response.status_code == 200
    assert response.json()["temp_password"] is None

    response = _login(client, "623778899", "secret3")
    assert response.status_code == 403
    assert "rejeté" in response.json()["detail"]


def test_status_update_errors(api):
    admin = _admin_client()
    response = admin.patch("/api/admin/users/missing/status", json={"status": "approved"})
    assert response.status_code == 404

    _client().post("/api/register/student", json=student_payload())
    user_id = _user_id(api, "621112233")
    response = admin.patch(f"/api/admin/users/{user_id}/status", json={"status": "maybe"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Statut invalide"


def test_public_directory(api):
    client = _client()
    client.post("/api/register/teacher", json=teacher_payload())
    client.post(
        "/api/register/teacher",
        json=teacher_payload(phone="623000002", subjects=["Philosophie"], city="Kindia"),
    )
    assert client.get("/api/teachers").json() == []

    admin = _admin_client()
    for phone_key in ("623778899", "623000002"):
        admin.patch(
            f"/api/admin/users/{_user_id(api, phone_key)}/status",
            json={"status": "approved"},
        )

    everyone = client.get("/api/teachers", params={"city": "all"}).json()
    assert len(everyone) == 2
    assert all("password_hash" not in t["user"] for t in everyone)
    assert all("must_change_password" not in t["user"] for t in everyone)

    maths = client.get("/api/teachers", params={"subject": "mathématiques"}).json()
    assert [t["first_name"] for t in maths] == ["Fatoumata"]
    assert maths[0]["user"]["status"] == "approved"

    kindia = client.get("/api/teachers", params={"city": "Kindia", "subject": "all"}).json()
    assert [t["subjects"] for t in kindia] == [["Philosophie"]]


def test_admin_routes_require_admin(api):
    anonymous = _client()
    assert anonymous.get("/api/admin/stats").status_code == 401
    assert anonymous.post("/api/change-password", json={"new_password": "abcdef"}).status_code == 401

    anonymous.post("/api/register/student", json=student_payload())
    admin = _admin_client()
    temp = admin.patch(
        f"/api/admin/users/{_user_id(api, '621112233')}/status",
        json={"status": "approved"},
    ).json()["temp_password"]

    student = _client()
    assert _login(student, "621112233", temp).status_code == 200
    response = student.get("/api/admin/students")
    assert response.status_code == 403
    assert response.json()["detail"] == "Accès refusé"


def test_admin_listings_stats_and_delete(api):
    client = _client()
    client.post("/api/register/student", json=student_payload())
    client.post("/api/register/parent", json=parent_payload())
    client.post("/api/register/teacher", json=teacher_payload())
    admin = _admin_client()

    assert admin.get("/api/admin/stats").json() == {
        "total_students": 1,
        "total_parents": 1,
        "total_teachers": 1,
        "pending_users": 3,
    }

    parents = admin.get("/api/admin/parents").json()
    assert len(parents[0]["children"]) == 2
    assert parents[0]["user"]["role"] == "parent"
    assert admin.get("/api/admin/students").json()[0]["user"]["phone"] == "+224 621 11 22 33"
    assert admin.get("/api/admin/teachers").json()[0]["diploma"] == "Master en Mathématiques"

    response = admin.delete(f"/api/admin/parents/{parents[0]['id']}")
    assert response.status_code == 200
    assert admin.get("/api/admin/parents").json() == []
    assert admin.get("/api/admin/stats").json()["pending_users"] == 2

    assert admin.delete("/api/admin/parents/does-not-exist").status_code == 200
    assert admin.delete("/api/admin/admins/whatever").status_code == 400


def test_reference_and_health(api):
    client = _client()
    reference = client.get("/api/reference").json()
    assert "Mathématiques" in reference["subjects"]
    assert "Conakry" in reference["cities"]
    assert reference["course_types"] == ["domicile", "en_ligne", "les_deux"]
    assert client.get("/health").json()["status"] == "healthy"


def test_startup_seeds_the_first_admin(session_factory, monkeypatch):
    monkeypatch.setattr(settings, "SEED_ADMIN_ON_STARTUP", True)
    monkeypatch.setattr(main, "SessionLocal", session_factory)

    with TestClient(app):
        pass

    db = session_factory()
    try:
        admin = db.query(models.User).filter(models.User.phone_key == settings.ADMIN_PHONE).one()
    finally:
        db.close()
    assert admin.role == "admin"
    assert admin.status == "approved"


def test_login_without_password_over_http(api):
    response = _login(_client(), ADMIN_PHONE, "")
    assert response.status_code == 400
    assert response.json() == {"detail": "Mot de passe requis"}
