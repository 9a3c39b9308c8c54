import pytest
from fastapi.testclient import TestClient

from banderas.db.database import build_engine, build_session_factory, create_schema
from banderas.errors import IdentityProviderError, WelcomeEmailError
from banderas.services.container import build_container
from banderas.services.identity_provider import IdentityClaims, IdentityProvider
from banderas.services.storage import LocalStorage

ADMIN_TOKEN = "admin-token"
EDITOR_TOKEN = "editor-token"

ADMIN_CLAIMS = IdentityClaims(
    sub="a1b2c3d4-0000-4000-8000-000000000001",
    email="jefatura@liceocostarica.ed.cr",
    username="jefatura",
    first_name="Ana",
    last_name="Mora",
)
EDITOR_CLAIMS = IdentityClaims(
    sub="a1b2c3d4-0000-4000-8000-000000000002",
    email="editor@liceocostarica.ed.cr",
    username="editor",
    first_name="Luis",
    last_name="Solano",
)


class FakeIdentityProvider(IdentityProvider):
    """In-memory stand-in for the Cognito user pool."""

    def __init__(self):
        self.users = {ADMIN_CLAIMS.sub: ADMIN_CLAIMS, EDITOR_CLAIMS.sub: EDITOR_CLAIMS}
        self.tokens = {ADMIN_TOKEN: ADMIN_CLAIMS, EDITOR_TOKEN: EDITOR_CLAIMS}
        self.attribute_updates = []
        self.fail_updates = False

    def get_user(self, user_id):
        return self.users.get(user_id)

    def update_user_attributes(self, user_id, attributes):
        if self.fail_updates:
            raise IdentityProviderError("cognito unavailable")
        self.attribute_updates.append((user_id, dict(attributes)))

    def verify_access_token(self, token):
        return self.tokens.get(token)


class FakeEmailService:
    def __init__(self):
        self.sent = []
        self.fail = False

    def send_welcome_email(self, email, first_name=None, last_name=None, language="es"):
        if self.fail:
            raise WelcomeEmailError("smtp down")
        self.sent.append({"email": email, "first_name": first_name, "last_name": last_name, "language": language})
        return {"success": True}


@pytest.fixture(autouse=True)
def _auth_env(monkeypatch):
    monkeypatch.setenv("DEV_MODE", "false")
    monkeypatch.delenv("ADMIN_EMAILS", raising=False)
    yield


@pytest.fixture
def engine():
    eng = build_engine("sqlite+pysqlite:///:memory:")
    create_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def email_service():
    return FakeEmailService()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(root=tmp_path / "uploads", base_url="/uploads")


@pytest.fixture
def container(session_factory, identity_provider, email_service, storage):
    return build_container(
        session_factory,
        identity_provider=identity_provider,
        email_service=email_service,
        storage=storage,
    )


@pytest.fixture
def client(container):
    from banderas.api.main import create_app

    with TestClient(create_app(container)) as c:
        yield c


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def editor_headers():
    return {"Authorization": f"Bearer {EDITOR_TOKEN}"}
