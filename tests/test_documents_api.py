from conftest import add_transaction


def _upload(client, headers, name="nota.pdf", content=b"%PDF-1.4 nota", **fields):
    return add_transaction(
        client, headers, type="expense", amount="120", files={"file": (name, content, "application/pdf")}, **fields
    )


def test_upload_stores_path_and_download_returns_bytes(client, auth_headers):
    created = _upload(client, auth_headers, category="Internet")
    assert created["file_url"].startswith(f"{created['user_id']}/")
    assert created["file_url"].endswith(".pdf")

    r = client.get(f"/documents/{created['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.content == b"%PDF-1.4 nota"


def test_list_documents_only_with_files(client, auth_headers):
    _upload(client, auth_headers, transaction_date="2024-06-05", description="Conta de internet")
    _upload(client, auth_headers, name="recibo.png", transaction_date="2024-03-02", description="Aluguel")
    add_transaction(client, auth_headers, transaction_date="2024-07-01")

    r = client.get("/documents/", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["months"] == ["2024-06", "2024-03"]
    assert len(body["items"]) == 2

    r = client.get("/documents/", params={"month": "2024-03"}, headers=auth_headers)
    assert [i["description"] for i in r.json()["items"]] == ["Aluguel"]

    r = client.get("/documents/", params={"search": "internet"}, headers=auth_headers)
    assert [i["description"] for i in r.json()["items"]] == ["Conta de internet"]
    # a lista de meses não depende do filtro
    assert r.json()["months"] == ["2024-06", "2024-03"]


def test_download_without_document_or_from_other_user(client, auth_headers, other_headers):
    plain = add_transaction(client, auth_headers)
    with_file = _upload(client, auth_headers)

    assert client.get(f"/documents/{plain['id']}", headers=auth_headers).status_code == 404
    assert client.get(f"/documents/{with_file['id']}", headers=other_headers).status_code == 404
    assert client.get("/documents/9999", headers=auth_headers).status_code == 404
