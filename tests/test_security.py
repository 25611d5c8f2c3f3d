from datetime import timedelta

from jose import jwt

from jobly.api.routes import health
from jobly.core.config import settings
from jobly.core.security import create_access_token, decode_token, verify_token_type


class TestTokens:
    def test_round_trip_claims(self):
        payload = decode_token(create_access_token("u1", is_admin=True))

        assert payload["sub"] == "u1"
        assert payload["is_admin"] is True
        assert verify_token_type(payload, "access")

    def test_not_admin_by_default(self):
        payload = decode_token(create_access_token("u2"))
        assert payload["is_admin"] is False

    def test_expired_token(self):
        token = create_access_token("u1", expires_delta=timedelta(seconds=-1))
        assert decode_token(token) is None

    def test_wrong_secret(self):
        token = jwt.encode({"sub": "u1"}, "other-secret", algorithm=settings.algorithm)
        assert decode_token(token) is None

    def test_garbage(self):
        assert decode_token("not.a.token") is None


class TestAdminGuard:
    def test_wrong_token_type_rejected(self, client):
        token = jwt.encode(
            {"sub": "admin", "is_admin": True, "type": "refresh"},
            settings.secret_key,
            algorithm=settings.algorithm,
        )
        r = client.delete("/api/v1/jobs/1", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401
        assert r.json()["error"] == "INVALID_TOKEN"

    def test_token_without_subject_rejected(self, client):
        token = jwt.encode(
            {"is_admin": True, "type": "access"},
            settings.secret_key,
            algorithm=settings.algorithm,
        )
        r = client.delete("/api/v1/jobs/1", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401


class TestHealth:
    def test_reports_database(self, client, fake_db):
        r = client.get("/api/v1/health")

        assert r.status_code == 200
        body = r.json()
        assert body["checks"]["database"] == "healthy"
        assert body["status"] in ("healthy", "degraded")
        assert fake_db.calls == [("SELECT 1", [])]

    def test_root(self, client):
        r = client.get("/")
        assert r.json()["name"] == settings.app_name

    def test_request_id_echoed(self, client):
        r = client.get("/", headers={"X-Request-ID": "abc-123"})
        assert r.headers["X-Request-ID"] == "abc-123"


class UnreachableRedis:
    def __init__(self):
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True

    async def ping(self):
        raise ConnectionError("connection refused")


class TestHealthRedis:
    def test_redis_down_is_degraded_and_client_closed(self, client, monkeypatch):
        fake_redis = UnreachableRedis()
        monkeypatch.setattr(health.redis, "from_url", lambda url: fake_redis)

        r = client.get("/api/v1/health")

        assert r.status_code == 200
        assert r.json()["status"] == "degraded"
        assert r.json()["checks"]["redis"] == "unhealthy: connection refused"
        assert fake_redis.closed
