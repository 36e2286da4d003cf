import logging

from app.core.logging import DOMAIN_SYSTEM, TutorLogFilter, redact_secrets


def test_redact_secrets_masks_sensitive_values():
    raw = (
        "authorization=Bearer abc123 "
        "token=my-token password=my-password "
        "jwt_secret=super-secret"
    )
    masked = redact_secrets(raw)
    assert "abc123" not in masked
    assert "my-token" not in masked
    assert "my-password" not in masked
    assert "super-secret" not in masked
    assert masked.count("[REDACTED]") >= 4


def test_redact_secrets_masks_bare_jwt():
    masked = redact_secrets("header was Bearer aaa.bbb.ccc")
    assert "aaa.bbb.ccc" not in masked


def test_log_filter_defaults_domain_and_redacts():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "login with password=%s", ("hunter2",), None)
    assert TutorLogFilter().filter(record) is True
    assert record.domain == DOMAIN_SYSTEM
    assert "hunter2" not in record.getMessage()
    assert "[REDACTED]" in record.getMessage()


def test_missing_token_is_401(client):
    resp = client.get("/student/profile")
    assert resp.status_code == 401
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["message"] == "Access token required"


def test_invalid_token_is_403(client):
    resp = client.get("/student/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 403
    assert resp.json()["error"]["message"] == "Invalid token"


def test_register_login_and_duplicate(client):
    payload = {"username": "dup_user", "email": "dup@example.com", "password": "pw-123", "gradeLevel": "5th Grade"}
    first = client.post("/auth/register", json=payload)
    assert first.status_code == 200
    student = first.json()["student"]
    assert student["username"] == "dup_user"
    assert student["totalPoints"] == 0

    again = client.post("/auth/register", json=payload)
    assert again.status_code == 400

    login = client.post("/auth/login", json={"username": "dup_user", "password": "pw-123"})
    assert login.status_code == 200
    assert login.json()["token"]

    bad = client.post("/auth/login", json={"username": "dup_user", "password": "nope"})
    assert bad.status_code == 401
    assert bad.json()["error"]["message"] == "Invalid credentials"


def test_demo_student_can_log_in(client):
    resp = client.post("/auth/login", json={"username": "demo_student", "password": "demo123"})
    assert resp.status_code == 200


def test_validation_errors_use_the_envelope(client):
    resp = client.post("/auth/login", json={"username": "x"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "validation_error"
    assert body["error"]["request_id"]


def test_token_claims_and_tampering():
    import uuid

    from app.core.security import create_token, read_token

    student_id = uuid.uuid4()
    token = create_token(student_id, "ana", "4th Grade")
    claims = read_token(token)
    assert claims is not None
    assert claims.student_id == student_id
    assert claims.grade_level == "4th Grade"
    assert read_token(token[:-2] + "xx") is None


def test_password_hash_round_trip():
    from app.core.security import hash_password, verify_password

    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
