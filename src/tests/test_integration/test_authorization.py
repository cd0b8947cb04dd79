from datetime import timedelta

import pytest

from database.models.accounts import RoleEnum
from security.policy import Identity

NEW_MOVIE = {
    "title": "Tenet",
    "genre": "Action",
    "durationMinutes": 150,
    "price": 14.0
}


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, url",
    [
        ("GET", "/api/bookings"),
        ("GET", "/api/bookings/1"),
        ("GET", "/api/bookings/movies/1"),
        ("DELETE", "/api/bookings/1"),
        ("POST", "/api/movies"),
        ("DELETE", "/api/movies/1"),
    ],
)
async def test_protected_routes_require_token(client, method, url):
    response = await client.request(method, url)
    assert response.status_code == 401
    assert response.json()["detail"] == "Missing or invalid Authorization header"
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_missing_token_wins_over_bad_body(client):
    response = await client.post("/api/bookings", json={"movieId": "x"})
    assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.asyncio
async def test_non_bearer_scheme_is_rejected(client):
    response = await client.get(
        "/api/bookings", headers={"Authorization": "Basic dXNlcjpwYXNz"}
    )
    assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.asyncio
async def test_expired_token_is_rejected(client, customer_user, jwt_manager):
    identity = Identity(
        user_id=customer_user.id,
        email=customer_user.email,
        name=customer_user.name,
        role=customer_user.role
    )
    token = jwt_manager.create_access_token(
        identity.to_claims(), expires_delta=timedelta(seconds=-1)
    )
    response = await client.get(
        "/api/bookings", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Token has expired"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_tampered_token_is_rejected(client, customer_headers):
    token = customer_headers["Authorization"].removeprefix("Bearer ")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    response = await client.get(
        "/api/bookings", headers={"Authorization": f"Bearer {tampered}"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_garbage_token_is_rejected(client):
    response = await client.get(
        "/api/bookings", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.asyncio
async def test_token_without_role_claim_is_rejected(client, jwt_manager):
    token = jwt_manager.create_access_token({"sub": "1", "user_id": 1})
    response = await client.get(
        "/api/bookings", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.asyncio
async def test_customer_cannot_manage_movies(client, customer_headers, seed_movies):
    movie_id = seed_movies[0].id
    responses = [
        await client.post("/api/movies", json=NEW_MOVIE, headers=customer_headers),
        await client.put(
            f"/api/movies/{movie_id}", json=NEW_MOVIE, headers=customer_headers
        ),
        await client.delete(f"/api/movies/{movie_id}", headers=customer_headers),
    ]
    for response in responses:
        assert response.status_code == 403
        assert response.json()["detail"] == "Admin role required for this operation"

    still_there = await client.get(f"/api/movies/{movie_id}")
    assert still_there.status_code == 200


@pytest.mark.integration
@pytest.mark.asyncio
async def test_admin_can_use_customer_routes(client, admin_headers):
    response = await client.get("/api/bookings", headers=admin_headers)
    assert response.status_code == 200


@pytest.mark.integration
@pytest.mark.asyncio
async def test_public_routes_ignore_bad_tokens(client, seed_movies):
    headers = {"Authorization": "Bearer not-a-jwt"}
    assert (await client.get("/api/movies", headers=headers)).status_code == 200
    assert (await client.get("/health")).json() == {
        "status": "healthy",
        "version": "1.0.0"
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_role_comes_from_token(client, customer_user, jwt_manager):
    """A CUSTOMER account holding an ADMIN-role token is treated as admin."""
    identity = Identity(
        user_id=customer_user.id,
        email=customer_user.email,
        name=customer_user.name,
        role=RoleEnum.ADMIN
    )
    token = jwt_manager.create_access_token(identity.to_claims())
    response = await client.post(
        "/api/movies",
        json=NEW_MOVIE,
        headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 201


@pytest.mark.integration
@pytest.mark.asyncio
async def test_anonymous_can_register_and_log_in(client):
    register = await client.post(
        "/api/auth/register",
        json={"email": "a@b.com", "name": "A", "password": "abcdef12"}
    )
    assert register.status_code == 201

    login = await client.post(
        "/api/auth/login",
        json={"email": "a@b.com", "password": "abcdef12"}
    )
    assert login.status_code == 200

    failed = await client.post(
        "/api/auth/login",
        json={"email": "a@b.com", "password": "wrong1234"}
    )
    assert failed.status_code == 401
    assert failed.json()["detail"] == "Invalid email or password"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_anonymous_can_browse_movies(client, seed_movies):
    movie_id = seed_movies[0].id
    assert (await client.get("/api/movies")).status_code == 200
    assert (await client.get(f"/api/movies/{movie_id}")).status_code == 200


@pytest.mark.integration
@pytest.mark.asyncio
async def test_customer_token_cannot_create_movie(client, customer_headers):
    response = await client.post(
        "/api/movies", json=NEW_MOVIE, headers=customer_headers
    )
    assert response.status_code == 403
    assert (await client.get("/api/movies")).json() == []


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("POST", "/api/movies"),
        ("PUT", "/api/movies/{movie_id}"),
        ("DELETE", "/api/movies/{movie_id}"),
    ],
)
async def test_movie_mutations_require_token(client, seed_movies, method, path):
    url = path.format(movie_id=seed_movies[0].id)
    response = await client.request(method, url, json=NEW_MOVIE)
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_unparsable_json_is_rejected_before_authentication(client):
    response = await client.post(
        "/api/bookings",
        content=b"{not json",
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
