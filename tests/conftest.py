import pytest
from fastapi.testclient import TestClient

from mei_dashboard.main import create_app


@pytest.fixture
def app(tmp_path):
    # Banco em memória e pasta de documentos temporária por teste
    return create_app("sqlite:///:memory:", documents_dir=str(tmp_path / "documentos"))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def register_and_login(client, email="maria@empresa.com.br", password="segredo123", **extra):
    r = client.post("/auth/register", json={"email": email, "password": password, **extra})
    assert r.status_code == 200, r.text
    r = client.post("/auth/login", data={"username": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client, full_name="Maria Souza", cnpj="12.345.678/0001-90")


@pytest.fixture
def other_headers(client):
    return register_and_login(client, email="joao@empresa.com.br")


def add_transaction(client, headers, **fields):
    data = {
        "type": "income",
        "amount": "100.00",
        "transaction_date": "2024-06-05",
        **fields,
    }
    files = data.pop("files", None)
    r = client.post("/transactions/", data=data, files=files, headers=headers)
    assert r.status_code == 200, r.text
    return r.json()
