def _create(client, titre="first title", description="first description", condition="$var"):
    return client.post(
        "/api/node",
        json={"titre": titre, "description": description, "condition": condition},
    )


def test_create_node(client):
    response = _create(client)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {
        "id": 0,
        "titre": "first title",
        "description": "first description",
        "condition": "$var",
        "list_adj": [],
    }


def test_create_rejects_missing_data(client):
    response = _create(client, titre="")
    assert response.status_code == 400
    assert "error" in response.json()

    response = client.post("/api/node", json={"titre": "title"})
    assert response.status_code == 400


def test_create_rejects_invalid_condition(client):
    response = _create(client, titre="first", condition="$var $var2")

    assert response.status_code == 400
    assert response.json() == {"error": "invalid condition"}


def test_get_node(client):
    _create(client)

    response = client.get("/api/node/0")
    assert response.status_code == 200
    assert response.json()["id"] == 0

    response = client.get("/api/node/100")
    assert response.status_code == 404
    assert "error" in response.json()


def test_update_node(client):
    _create(client)

    response = client.put("/api/node/0", json={"titre": "updated title"})
    assert response.status_code == 200
    assert response.json()["titre"] == "updated title"
    assert response.json()["condition"] == "$var"


def test_update_rejects_invalid_data(client):
    _create(client)

    response = client.put("/api/node/0", json={"titre": "", "condition": "$a"})
    assert response.status_code == 400

    response = client.put("/api/node/0", json={"condition": "$var $var2"})
    assert response.status_code == 400

    body = client.get("/api/node/0").json()
    assert body["titre"] == "first title"
    assert body["condition"] == "$var"


def test_update_unknown_node(client):
    response = client.put("/api/node/100000000000", json={"condition": "$var AND $var2"})
    assert response.status_code == 404


def test_delete_node(client):
    _create(client)

    assert client.delete("/api/node/0").status_code == 200
    assert client.get("/api/node/0").status_code == 404
    assert client.delete("/api/node/100").status_code == 404


def test_connect_and_disconnect(client):
    _create(client)
    _create(client, titre="second title")

    response = client.get("/api/connect/0/1")
    assert response.status_code == 200
    assert response.json()["list_adj"] == [1]

    assert client.get("/api/connect/0/1").status_code == 400
    assert client.get("/api/connect/100/101").status_code == 400

    assert client.delete("/api/connect/0/1").status_code == 200
    assert client.delete("/api/connect/0/1").status_code == 400
    assert client.delete("/api/connect/100/101").status_code == 400


def test_shortest_path(client):
    for title in ("node a", "node b", "node c"):
        _create(client, titre=title)
    client.get("/api/connect/0/1")
    client.get("/api/connect/1/2")

    assert client.get("/api/shortest-path/0/2").json() == {"distance": 2}
    assert client.get("/api/shortest-path/1/1").json() == {"distance": 0}

    response = client.get("/api/shortest-path/2/0")
    assert response.status_code == 400
    assert "error" in response.json()

    assert client.get("/api/shortest-path/100/101").status_code == 400


def test_graph_stats(client):
    _create(client)
    _create(client, titre="second title")
    client.get("/api/connect/0/1")

    body = client.get("/api/graph/stats").json()
    assert body["nodes"] == 2
    assert body["edges"] == 1
