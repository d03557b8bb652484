from decimal import Decimal

from freezegun import freeze_time
from sqlalchemy.exc import OperationalError

from conftest import add_transaction
from mei_dashboard.api import transactions as transactions_api
from mei_dashboard.storage import LocalDocumentStore


def test_create_and_list_transactions(client, auth_headers):
    created = add_transaction(client, auth_headers, amount="1000.00", category="Venda de Produtos",
                              description="Feira de junho")
    assert created["type"] == "income"
    assert Decimal(created["amount"]) == Decimal("1000.00")
    assert created["transaction_date"] == "2024-06-05"
    assert created["file_url"] is None

    add_transaction(client, auth_headers, type="expense", amount="300", transaction_date="2024-06-10")

    r = client.get("/transactions/", headers=auth_headers)
    assert r.status_code == 200
    items = r.json()
    # mais recente primeiro
    assert [i["transaction_date"] for i in items] == ["2024-06-10", "2024-06-05"]


def test_negative_amount_is_rejected(client, auth_headers):
    r = client.post("/transactions/", data={"type": "expense", "amount": "-5", "transaction_date": "2024-06-05"},
                    headers=auth_headers)
    assert r.status_code == 400


def test_invalid_type_is_rejected(client, auth_headers):
    r = client.post("/transactions/", data={"type": "transfer", "amount": "5", "transaction_date": "2024-06-05"},
                    headers=auth_headers)
    assert r.status_code == 422


def test_filters(client, auth_headers):
    add_transaction(client, auth_headers, amount="10", category="Venda de Produtos", transaction_date="2024-05-02")
    add_transaction(client, auth_headers, type="expense", amount="20", category="Internet",
                    transaction_date="2024-06-02")
    add_transaction(client, auth_headers, type="expense", amount="30", description="Conta de luz",
                    transaction_date="2024-06-03")

    def amounts(**params):
        r = client.get("/transactions/", params=params, headers=auth_headers)
        assert r.status_code == 200, r.text
        return sorted(Decimal(i["amount"]) for i in r.json())

    assert amounts(type="expense") == [Decimal("20"), Decimal("30")]
    assert amounts(month="2024-05") == [Decimal("10")]
    assert amounts(month="all", search="luz") == [Decimal("30")]
    assert amounts(type="income", month="2024-06") == []


@freeze_time("2024-06-15 15:00:00")
def test_current_month_filter(client, auth_headers):
    add_transaction(client, auth_headers, amount="10", transaction_date="2024-05-31")
    add_transaction(client, auth_headers, amount="20", transaction_date="2024-06-01")
    r = client.get("/transactions/", params={"month": "current"}, headers=auth_headers)
    assert [Decimal(i["amount"]) for i in r.json()] == [Decimal("20")]


def test_invalid_month_filter(client, auth_headers):
    r = client.get("/transactions/", params={"month": "junho"}, headers=auth_headers)
    assert r.status_code == 400


def test_transactions_are_scoped_by_user(client, auth_headers, other_headers):
    created = add_transaction(client, auth_headers)
    assert client.get("/transactions/", headers=other_headers).json() == []

    r = client.delete(f"/transactions/{created['id']}", headers=other_headers)
    assert r.status_code == 404
    assert len(client.get("/transactions/", headers=auth_headers).json()) == 1


def test_delete_transaction(client, auth_headers):
    created = add_transaction(client, auth_headers)
    r = client.delete(f"/transactions/{created['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert client.get("/transactions/", headers=auth_headers).json() == []
    assert client.delete(f"/transactions/{created['id']}", headers=auth_headers).status_code == 404


def test_export_csv(client, auth_headers):
    add_transaction(client, auth_headers, amount="1000", category="Venda de Produtos", description="Feira")
    add_transaction(client, auth_headers, type="expense", amount="300", transaction_date="2024-06-10")
    add_transaction(client, auth_headers, amount="5", transaction_date="2024-04-10")

    r = client.get("/transactions/export", params={"month": "2024-06"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert "lancamentos_" in r.headers["content-disposition"]
    assert r.text.split("\n") == [
        "Data,Tipo,Valor,Categoria,Descrição",
        "10/06/2024,Saída,R$ 300,00,,",
        "05/06/2024,Entrada,R$ 1.000,00,Venda de Produtos,Feira",
    ]


@freeze_time("2024-07-01 01:00:00")
def test_current_month_and_export_date_follow_timezone(client, auth_headers):
    # 01:00 UTC ainda é 30/06 em São Paulo
    add_transaction(client, auth_headers, amount="10", transaction_date="2024-06-30")
    add_transaction(client, auth_headers, amount="20", transaction_date="2024-07-01")

    r = client.get("/transactions/", params={"month": "current"}, headers=auth_headers)
    assert [Decimal(i["amount"]) for i in r.json()] == [Decimal("10")]
    r = client.get("/transactions/", params={"month": "current", "tz": "UTC"}, headers=auth_headers)
    assert [Decimal(i["amount"]) for i in r.json()] == [Decimal("20")]

    r = client.get("/transactions/export", headers=auth_headers)
    assert "lancamentos_2024-06-30.csv" in r.headers["content-disposition"]
    r = client.get("/transactions/export", params={"tz": "UTC"}, headers=auth_headers)
    assert "lancamentos_2024-07-01.csv" in r.headers["content-disposition"]


def test_storage_failure_returns_502(client, auth_headers, monkeypatch):
    def broken_save(self, user_id, filename, data):
        raise OSError("disco cheio")

    monkeypatch.setattr(LocalDocumentStore, "save", broken_save)
    r = client.post(
        "/transactions/",
        data={"type": "expense", "amount": "50", "transaction_date": "2024-06-05"},
        files={"file": ("nota.pdf", b"%PDF-1.4", "application/pdf")},
        headers=auth_headers,
    )
    assert r.status_code == 502
    assert r.json()["detail"] == "Erro ao enviar o arquivo."
    assert client.get("/transactions/", headers=auth_headers).json() == []


def test_database_failure_returns_503(client, auth_headers, monkeypatch):
    def unavailable(session, user_id):
        raise OperationalError("SELECT", {}, Exception("conexão recusada"))

    monkeypatch.setattr(transactions_api, "load_user_transactions", unavailable)
    r = client.get("/transactions/", headers=auth_headers)
    assert r.status_code == 503
    assert r.json() == {"detail": "Erro ao acessar o banco de dados. Tente novamente."}
