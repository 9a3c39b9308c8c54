ADMIN_ID = "a1b2c3d4-0000-4000-8000-000000000001"
ADMIN_EMAIL = "jefatura@liceocostarica.ed.cr"
EDITOR_ID = "a1b2c3d4-0000-4000-8000-000000000002"
EDITOR_EMAIL = "editor@liceocostarica.ed.cr"


def test_profile_requires_credentials(client):
    r = client.get(f"/api/users/{ADMIN_ID}/profile")
    assert r.status_code == 401


def test_own_profile(client, admin_headers):
    r = client.get(f"/api/users/{ADMIN_ID}/profile", headers=admin_headers)

    assert r.status_code == 200
    body = r.json()
    assert body["email"] == ADMIN_EMAIL
    assert body["firstName"] == "Ana"
    assert body["configStep"] == 0


def test_admin_reads_other_profile_synced_from_provider(client, admin_headers):
    r = client.get(f"/api/users/{EDITOR_ID}/profile", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["email"] == EDITOR_EMAIL


def test_non_admin_cannot_read_other_profile(client, editor_headers, monkeypatch):
    monkeypatch.setenv("ADMIN_EMAILS", "jefatura@liceocostarica.ed.cr")
    r = client.get(f"/api/users/{ADMIN_ID}/profile", headers=editor_headers)
    assert r.status_code == 403


def test_unknown_profile_is_404(client, admin_headers):
    r = client.get("/api/users/nobody/profile", headers=admin_headers)
    assert r.status_code == 404


def test_update_profile_mirrors_to_provider(client, admin_headers, identity_provider):
    r = client.put(
        f"/api/users/{ADMIN_ID}/profile",
        json={"firstName": "Ana María", "configStep": 2},
        headers=admin_headers,
    )

    assert r.status_code == 200, r.text
    assert r.json()["firstName"] == "Ana María"
    assert r.json()["configStep"] == 2
    assert identity_provider.attribute_updates == [(ADMIN_ID, {"given_name": "Ana María"})]


def test_update_survives_provider_failure(client, admin_headers, identity_provider):
    identity_provider.fail_updates = True

    r = client.put(f"/api/users/{ADMIN_ID}/profile", json={"company": "LCR"}, headers=admin_headers)

    assert r.status_code == 200
    assert r.json()["company"] == "LCR"


def test_verify_email_complete_sends_welcome(client, email_service):
    r = client.post(f"/api/users/{EDITOR_ID}/verify-email-complete?language=en")

    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    assert body["user"]["email"] == EDITOR_EMAIL
    assert email_service.sent == [
        {"email": EDITOR_EMAIL, "first_name": "Luis", "last_name": "Solano", "language": "en"}
    ]


def test_verify_email_complete_defaults_to_spanish(client, email_service):
    r = client.post(f"/api/users/{EDITOR_ID}/verify-email-complete")
    assert r.status_code == 200
    assert email_service.sent[0]["language"] == "es"


def test_verify_email_complete_rejects_language(client):
    r = client.post(f"/api/users/{EDITOR_ID}/verify-email-complete?language=fr")
    assert r.status_code == 400


def test_verify_email_complete_unknown_user(client):
    r = client.post("/api/users/nobody/verify-email-complete")
    assert r.status_code == 404
    assert r.json()["detail"] == "User not found"


def test_verify_email_complete_email_failure(client, email_service):
    email_service.fail = True
    r = client.post(f"/api/users/{EDITOR_ID}/verify-email-complete")
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to process welcome materials"
