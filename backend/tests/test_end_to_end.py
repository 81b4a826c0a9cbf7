def test_node_lifecycle_and_cycle_detection(client):
    """
    Replays a full session against the API:
    - four nodes created, the first one edited then deleted
    - 1 -> 2, 2 -> 1 and 2 -> 3 linked
    - shortest path and cycles queried
    """

    for i, title in enumerate(["first title", "first title", "second title", "third title"]):
        response = client.post(
            "/api/node",
            json={"titre": title, "description": "some description", "condition": f"$var{i}"},
        )
        assert response.status_code == 200
        assert response.json()["id"] == i

    assert client.put("/api/node/0", json={"titre": "updated title"}).status_code == 200
    assert client.delete("/api/node/0").status_code == 200

    assert client.get("/api/connect/1/2").status_code == 200
    assert client.get("/api/connect/1/2").status_code == 400
    assert client.get("/api/connect/2/1").status_code == 200
    assert client.get("/api/connect/2/3").status_code == 200

    assert client.delete("/api/connect/1/3").status_code == 400

    assert client.get("/api/shortest-path/1/2").json() == {"distance": 1}
    assert client.get("/api/shortest-path/1/3").json() == {"distance": 2}

    response = client.get("/api/cycles")
    assert response.status_code == 200
    assert response.json() == [[1, 2, 1]]

    # Deleting a linked node leaves the graph usable.
    assert client.delete("/api/node/3").status_code == 200
    assert client.get("/api/node/2").json()["list_adj"] == [1, 3]
    assert client.get("/api/cycles").json() == [[1, 2, 1]]
    assert client.get("/api/shortest-path/2/1").json() == {"distance": 1}
