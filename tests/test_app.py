"""
Root and health endpoints.
"""


def test_root_banner(client):
    r = client.get("/")

    assert r.status_code == 200
    assert r.text == "Hello world!"


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.text == "OK"
