"""
Journal Backend — Entry Endpoint Tests
========================================

What:  /api/entries create, read, list, update and delete over HTTP.
How:   Real SQLite database per test (see conftest.py).

What we test:
    ✅ Create returns the row with date == updatedAt and categoryId null
    ✅ Missing or blank title/content → 400 with the French message
    ✅ List is newest first and joins the category
    ✅ GET on an unknown id → 404; on a non-numeric id → 400
    ✅ PATCH replaces fields, keeps date, bumps updatedAt
    ✅ DELETE is idempotent and cascades to media and comments
"""

from datetime import datetime

import pytest


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestCreateEntry:

    @pytest.mark.asyncio
    async def test_create_entry_returns_row(self, test_client):
        response = await test_client.post(
            "/api/entries", json={"title": "Lundi", "content": "Il a plu."}
        )

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["title"] == "Lundi"
        assert body["content"] == "Il a plu."
        assert body["categoryId"] is None
        assert body["date"] == body["updatedAt"]
        assert body["date"].endswith("Z")

    @pytest.mark.asyncio
    async def test_create_entry_with_category(self, test_client):
        category = (await test_client.post("/api/categories", json={"name": "Voyages"})).json()

        response = await test_client.post(
            "/api/entries",
            json={"title": "Rome", "content": "Colisée", "categoryId": category["id"]},
        )

        assert response.status_code == 200
        assert response.json()["categoryId"] == category["id"]

    @pytest.mark.asyncio
    async def test_falsy_category_id_is_stored_as_null(self, test_client):
        response = await test_client.post(
            "/api/entries", json={"title": "T", "content": "C", "categoryId": 0}
        )

        assert response.status_code == 200
        assert response.json()["categoryId"] is None

    @pytest.mark.asyncio
    async def test_missing_title_rejected(self, test_client):
        response = await test_client.post("/api/entries", json={"content": "C"})

        assert response.status_code == 400
        assert response.json() == {"message": "Le titre est requis"}

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, test_client):
        response = await test_client.post("/api/entries", json={"title": "T", "content": "   "})

        assert response.status_code == 400
        assert response.json() == {"message": "Le contenu est requis"}

    @pytest.mark.asyncio
    async def test_unknown_category_is_a_store_error(self, test_client):
        response = await test_client.post(
            "/api/entries", json={"title": "T", "content": "C", "categoryId": 999}
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Erreur lors de la création de l'entrée"}

    @pytest.mark.asyncio
    async def test_rejected_create_leaves_no_row(self, test_client):
        await test_client.post("/api/entries", json={"title": "", "content": "C"})

        response = await test_client.get("/api/entries")
        assert response.json() == []


class TestReadEntries:

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, test_client, create_entry):
        first = await create_entry(title="Premier")
        second = await create_entry(title="Second")

        response = await test_client.get("/api/entries")

        assert response.status_code == 200
        ids = [entry["id"] for entry in response.json()]
        assert ids == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_list_joins_category(self, test_client, create_entry):
        category = (
            await test_client.post(
                "/api/categories", json={"name": "Travail", "description": "Bureau"}
            )
        ).json()
        await create_entry(title="Réunion", category_id=category["id"])
        await create_entry(title="Sans catégorie")

        entries = (await test_client.get("/api/entries")).json()
        by_title = {entry["title"]: entry for entry in entries}

        assert by_title["Réunion"]["category"]["name"] == "Travail"
        assert by_title["Réunion"]["category"]["description"] == "Bureau"
        assert by_title["Sans catégorie"]["category"] is None

    @pytest.mark.asyncio
    async def test_get_entry(self, test_client, create_entry):
        created = await create_entry(title="Détail")

        response = await test_client.get(f"/api/entries/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["title"] == "Détail"
        assert body["date"] == created["date"]
        assert body["category"] is None

    @pytest.mark.asyncio
    async def test_get_unknown_entry_is_404(self, test_client):
        response = await test_client.get("/api/entries/4242")

        assert response.status_code == 404
        assert response.json() == {"message": "Entrée non trouvée"}

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_400(self, test_client):
        response = await test_client.get("/api/entries/abc")

        assert response.status_code == 400
        assert response.json() == {"message": "Identifiant invalide"}


class TestUpdateEntry:

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_keeps_date(self, test_client, create_entry):
        created = await create_entry(title="Avant", content="Ancien")

        response = await test_client.patch(
            f"/api/entries/{created['id']}",
            json={"title": "Après", "content": "Nouveau", "categoryId": None},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Après"
        assert body["content"] == "Nouveau"
        assert body["date"] == created["date"]
        assert _ts(body["updatedAt"]) > _ts(created["updatedAt"])

    @pytest.mark.asyncio
    async def test_successive_updates_strictly_increase_updated_at(self, test_client, create_entry):
        created = await create_entry()
        stamps = [_ts(created["updatedAt"])]

        for i in range(3):
            response = await test_client.patch(
                f"/api/entries/{created['id']}",
                json={"title": f"v{i}", "content": "C"},
            )
            stamps.append(_ts(response.json()["updatedAt"]))

        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)

    @pytest.mark.asyncio
    async def test_update_can_clear_category(self, test_client, create_entry):
        category = (await test_client.post("/api/categories", json={"name": "Cat"})).json()
        created = await create_entry(category_id=category["id"])

        response = await test_client.patch(
            f"/api/entries/{created['id']}", json={"title": "T", "content": "C"}
        )

        assert response.json()["categoryId"] is None

    @pytest.mark.asyncio
    async def test_update_unknown_entry_is_404(self, test_client):
        response = await test_client.patch(
            "/api/entries/999", json={"title": "T", "content": "C"}
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Entrée non trouvée"}

    @pytest.mark.asyncio
    async def test_update_requires_title(self, test_client, create_entry):
        created = await create_entry()

        response = await test_client.patch(
            f"/api/entries/{created['id']}", json={"content": "C"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Le titre est requis"}


class TestDeleteEntry:

    @pytest.mark.asyncio
    async def test_delete_entry(self, test_client, create_entry):
        created = await create_entry()

        response = await test_client.delete(f"/api/entries/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Entrée supprimée avec succès"}
        assert (await test_client.get(f"/api/entries/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, test_client):
        response = await test_client.delete("/api/entries/12345")

        assert response.status_code == 200
        assert response.json() == {"message": "Entrée supprimée avec succès"}

    @pytest.mark.asyncio
    async def test_delete_cascades_to_comments_and_media(
        self, test_client, create_entry, sample_png_bytes
    ):
        created = await create_entry()
        entry_id = created["id"]
        await test_client.post(
            f"/api/entries/{entry_id}/comments",
            json={"content": "Bravo", "authorName": "Ana"},
        )
        await test_client.post(
            f"/api/entries/{entry_id}/media",
            files={"file": ("photo.png", sample_png_bytes, "image/png")},
        )

        await test_client.delete(f"/api/entries/{entry_id}")

        assert (await test_client.get(f"/api/entries/{entry_id}/comments")).json() == []
        assert (await test_client.get(f"/api/entries/{entry_id}/media")).json() == []

    @pytest.mark.asyncio
    async def test_delete_leaves_other_entries(self, test_client, create_entry):
        keep = await create_entry(title="Garder")
        drop = await create_entry(title="Supprimer")
        await test_client.post(
            f"/api/entries/{keep['id']}/comments",
            json={"content": "Reste", "authorName": "Ana"},
        )

        await test_client.delete(f"/api/entries/{drop['id']}")

        entries = (await test_client.get("/api/entries")).json()
        assert [entry["id"] for entry in entries] == [keep["id"]]
        comments = (await test_client.get(f"/api/entries/{keep['id']}/comments")).json()
        assert len(comments) == 1
