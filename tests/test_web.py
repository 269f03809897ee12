import pytest

from millerrabin.config import Settings
from millerrabin.web import create_app


@pytest.fixture
def client():
    app = create_app(Settings(workers=1, max_bits=256, max_rounds=64))
    app.config["TESTING"] = True
    return app.test_client()


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"ok": True}


def test_is_prime_query(client):
    body = client.get("/api/is_prime?n=2147483647").get_json()
    assert body["ok"] is True
    assert body["n"] == "2147483647"
    assert body["k"] == 16
    assert body["prime"] is True
    assert isinstance(body["duration_ms"], int)


def test_is_prime_json_post(client):
    r = client.post("/api/is_prime", json={"n": "18446744073709551615", "k": 4})
    assert r.status_code == 200
    body = r.get_json()
    assert body["prime"] is False
    assert body["k"] == 4


def test_is_prime_big_mersenne(client):
    n = str(2**127 - 1)
    body = client.get(f"/api/is_prime?n={n}&k=8").get_json()
    assert body["n"] == n
    assert body["prime"] is True


@pytest.mark.parametrize("query", [
    "",
    "?n=",
    "?n=abc",
    "?n=-5",
    "?n=7&k=-1",
    "?n=7&k=x",
    f"?n={2**300 + 1}",
])
def test_is_prime_bad_request(client, query):
    assert client.get("/api/is_prime" + query).status_code == 400


def test_is_witness(client):
    assert client.get("/api/is_witness?a=2&n=27").get_json()["result"] == "witness"
    assert client.get("/api/is_witness?a=2&n=7").get_json()["result"] == "non-witness"
    assert client.get("/api/is_witness?a=1&n=27").get_json()["result"] == "invalid"


def test_is_witness_form_post(client):
    body = client.post("/api/is_witness", data={"a": "3", "n": "2047"}).get_json()
    assert body == {"ok": True, "a": "3", "n": "2047", "result": "witness"}


def test_is_witness_missing_param(client):
    assert client.get("/api/is_witness?a=2").status_code == 400


def test_rounds_above_cap_rejected(client):
    n = 2**65 + 1
    r = client.get(f"/api/is_prime?n={n}&k=10000000000")
    assert r.status_code == 400
    assert client.get(f"/api/is_prime?n={n}&k=64").status_code == 200


@pytest.mark.parametrize("payload", [[7], "7", 7])
def test_non_object_json_body_rejected(client, payload):
    assert client.post("/api/is_prime", json=payload).status_code == 400
    assert client.post("/api/is_witness", json=payload).status_code == 400
