from app.core.security_headers import SECURITY_HEADERS


def test_security_headers_on_every_response(client):
    for r in (client.get("/v1/health"), client.post("/v1/survey", json={})):
        for name, value in SECURITY_HEADERS.items():
            assert r.headers[name] == value
        assert "x-powered-by" not in r.headers


def test_cors_allows_any_origin_by_default(make_client):
    c = make_client(CORS_ORIGIN="*")
    r = c.get("/v1/health", headers={"Origin": "https://elsewhere.example"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_cors_allow_list(make_client):
    c = make_client(CORS_ORIGIN="https://umfrage.example, https://www.umfrage.example")
    ok = c.options(
        "/v1/survey",
        headers={
            "Origin": "https://www.umfrage.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert ok.status_code == 200
    assert ok.headers["access-control-allow-origin"] == "https://www.umfrage.example"

    other = c.get("/v1/health", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in other.headers
