from mei_dashboard.constants.links import LinkKind, PGMEI_URL


def test_links_are_tagged_with_known_kinds(client):
    r = client.get("/links/")
    assert r.status_code == 200
    links = r.json()
    assert len(links) == 9
    assert {link["kind"] for link in links} == {kind.value for kind in LinkKind}
    das = next(link for link in links if link["kind"] == "das")
    assert das["url"] == PGMEI_URL


def test_categories_by_group(client):
    assert client.get("/categories/", params={"type": "income"}).json()[0] == "Venda de Produtos"
    assert "Internet" in client.get("/categories/", params={"type": "expense"}).json()
    assert "Financiamento" in client.get("/categories/", params={"type": "recurring"}).json()
    assert client.get("/categories/", params={"type": "outros"}).status_code == 422
