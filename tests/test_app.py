async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_request_id_is_echoed(client):
    response = await client.get("/api/users", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


async def test_api_responses_carry_security_headers(client):
    response = await client.get("/api/users")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Cache-Control"] == "no-store"


async def test_cors_preflight_for_browser_client(client):
    response = await client.options(
        "/api/users",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


async def test_unknown_route_uses_error_shape(client):
    response = await client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


async def test_malformed_json_is_a_bad_request(client):
    response = await client.post(
        "/api/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be valid JSON"}
