import pytest

from articles import repository
from conftest import CREATED_AT, fail_if_called


def _row(**overrides):
    row = {
        "id": 7,
        "titulo": "A",
        "resumo": "B",
        "conteudo": "C",
        "categoria": "tecnologia",
        "imagem": None,
        "created_at": CREATED_AT,
    }
    row.update(overrides)
    return row


@pytest.fixture()
def captured_insert(monkeypatch):
    calls = []

    async def fake_insert(**kwargs):
        calls.append(kwargs)
        return _row(**kwargs)

    monkeypatch.setattr(repository, "insert_article", fake_insert)
    return calls


def test_list_returns_rows(client, monkeypatch):
    seen = {}

    async def fake_list(*, categoria=None):
        seen["categoria"] = categoria
        return [_row(id=2), _row(id=1)]

    monkeypatch.setattr(repository, "list_articles", fake_list)

    r = client.get("/api/noticias")
    assert r.status_code == 200
    assert [a["id"] for a in r.json()] == [2, 1]
    assert seen["categoria"] is None


def test_list_filters_by_category(client, monkeypatch):
    seen = {}

    async def fake_list(*, categoria=None):
        seen["categoria"] = categoria
        return []

    monkeypatch.setattr(repository, "list_articles", fake_list)

    r = client.get("/api/noticias", params={"categoria": "economia"})
    assert r.status_code == 200
    assert r.json() == []
    assert seen["categoria"] == "economia"


def test_list_empty_category_means_no_filter(client, monkeypatch):
    seen = {}

    async def fake_list(*, categoria=None):
        seen["categoria"] = categoria
        return []

    monkeypatch.setattr(repository, "list_articles", fake_list)

    r = client.get("/api/noticias?categoria=")
    assert r.status_code == 200
    assert seen["categoria"] is None


@pytest.mark.parametrize("categoria", ["esportes", "TECNOLOGIA", "geral "])
def test_list_invalid_category_never_queries(client, monkeypatch, categoria):
    monkeypatch.setattr(repository, "list_articles", fail_if_called("list_articles"))

    r = client.get("/api/noticias", params={"categoria": categoria})
    assert r.status_code == 400
    assert r.json() == {"error": "Categoria inválida."}


def test_list_database_failure_is_generic_500(client, monkeypatch):
    async def broken(*, categoria=None):
        raise OSError("connection refused: db.internal:5432")

    monkeypatch.setattr(repository, "list_articles", broken)

    r = client.get("/api/noticias")
    assert r.status_code == 500
    assert r.json() == {"error": "Erro ao listar notícias."}


def test_get_non_integer_id(client, monkeypatch):
    monkeypatch.setattr(repository, "get_article", fail_if_called("get_article"))

    r = client.get("/api/noticias/abc")
    assert r.status_code == 400
    assert r.json() == {"error": "ID inválido."}


def test_get_missing_article(client, monkeypatch):
    async def fake_get(article_id):
        return None

    monkeypatch.setattr(repository, "get_article", fake_get)

    r = client.get("/api/noticias/99")
    assert r.status_code == 404
    assert r.json() == {"error": "Notícia não encontrada."}


def test_get_article(client, monkeypatch):
    async def fake_get(article_id):
        return _row(id=article_id)

    monkeypatch.setattr(repository, "get_article", fake_get)

    r = client.get("/api/noticias/7")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 7
    assert body["created_at"] == "2025-03-01T12:30:00"


def test_create_requires_login(client, monkeypatch):
    monkeypatch.setattr(repository, "insert_article", fail_if_called("insert_article"))

    r = client.post(
        "/api/noticias",
        data={"titulo": "A", "resumo": "B", "conteudo": "C", "categoria": "tecnologia"},
    )
    assert r.status_code == 401
    assert r.json() == {"error": "Login necessário."}


def test_create_without_image(admin_client, captured_insert):
    r = admin_client.post(
        "/api/noticias",
        data={"titulo": "A", "resumo": "B", "conteudo": "C", "categoria": "tecnologia"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 7
    assert body["created_at"]
    assert body["imagem"] is None
    assert captured_insert[0]["imagem"] is None


def test_create_with_image(admin_client, captured_insert, uploads_dir):
    r = admin_client.post(
        "/api/noticias",
        data={"titulo": "A", "resumo": "B", "conteudo": "C", "categoria": "geral"},
        files={"imagem": ("Foto Capa.JPG", b"\xff\xd8jpeg-bytes", "image/jpeg")},
    )
    assert r.status_code == 201
    imagem = r.json()["imagem"]
    assert imagem.startswith("/uploads/")
    assert imagem.endswith("-foto_capa.jpg")

    stored = uploads_dir / imagem.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\xff\xd8jpeg-bytes"


@pytest.mark.parametrize("missing", ["titulo", "resumo", "conteudo", "categoria"])
def test_create_missing_field(admin_client, monkeypatch, missing):
    monkeypatch.setattr(repository, "insert_article", fail_if_called("insert_article"))
    data = {"titulo": "A", "resumo": "B", "conteudo": "C", "categoria": "tecnologia"}
    data[missing] = ""

    r = admin_client.post("/api/noticias", data=data)
    assert r.status_code == 400
    assert r.json() == {"error": "Campos obrigatórios faltando."}


def test_create_invalid_category_writes_nothing(admin_client, monkeypatch, uploads_dir):
    monkeypatch.setattr(repository, "insert_article", fail_if_called("insert_article"))

    r = admin_client.post(
        "/api/noticias",
        data={"titulo": "A", "resumo": "B", "conteudo": "C", "categoria": "fofoca"},
        files={"imagem": ("x.png", b"png", "image/png")},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Categoria inválida."}
    assert not uploads_dir.exists()


def test_delete_requires_login(client, monkeypatch):
    monkeypatch.setattr(repository, "delete_article", fail_if_called("delete_article"))

    r = client.delete("/api/noticias/1")
    assert r.status_code == 401


def test_delete_missing_article(admin_client, monkeypatch):
    async def fake_delete(article_id):
        return False

    monkeypatch.setattr(repository, "delete_article", fake_delete)

    r = admin_client.delete("/api/noticias/12345")
    assert r.status_code == 404
    assert r.json() == {"error": "Notícia não encontrada."}


def test_delete_article(admin_client, monkeypatch):
    deleted = []

    async def fake_delete(article_id):
        deleted.append(article_id)
        return True

    monkeypatch.setattr(repository, "delete_article", fake_delete)

    r = admin_client.delete("/api/noticias/3")
    assert r.status_code == 204
    assert r.content == b""
    assert deleted == [3]


def test_delete_bad_id(admin_client):
    r = admin_client.delete("/api/noticias/1x")
    assert r.status_code == 400
    assert r.json() == {"error": "ID inválido."}


@pytest.mark.parametrize("raw_id", ["1_000", "١٢", "0x1f"])
def test_get_rejects_non_decimal_ids(client, monkeypatch, raw_id):
    monkeypatch.setattr(repository, "get_article", fail_if_called("get_article"))

    r = client.get(f"/api/noticias/{raw_id}")
    assert r.status_code == 400
    assert r.json() == {"error": "ID inválido."}
