AUTHORS = "/api/v1/authors"


async def test_create_and_get_author(client):
    res = await client.post(AUTHORS, json={"id": 9, "name": "Grace", "email": "grace@y.org"})
    assert res.status_code == 201
    created = res.json()
    assert created["id"] != 9
    assert res.headers["location"] == f"{AUTHORS}/{created['id']}"

    res = await client.get(f"{AUTHORS}/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"id": created["id"], "name": "Grace", "email": "grace@y.org"}


async def test_list_authors(client, author):
    res = await client.get(AUTHORS)
    assert res.status_code == 200
    assert res.json() == [author]


async def test_unknown_author_is_not_found(client):
    res = await client.get(f"{AUTHORS}/3")
    assert res.status_code == 404


async def test_invalid_email_is_validation_failure(client):
    res = await client.post(AUTHORS, json={"name": "Ada", "email": "not-an-email"})
    assert res.status_code == 400
    assert res.json()["error"] == "validation_failed"


async def test_name_too_long_is_validation_failure(client):
    res = await client.post(AUTHORS, json={"name": "a" * 51, "email": "ada@x.com"})
    assert res.status_code == 400


async def test_author_id_outside_integer_column_is_not_found(client):
    res = await client.get(f"{AUTHORS}/9223372036854775808")
    assert res.status_code == 404
