"""
Journal Backend — Media Endpoint Tests
========================================

What:  Upload, list, serve and delete media attached to an entry.

What we test:
    ✅ Upload stores the file under a UUID name and records /uploads/<name>
    ✅ MIME classification: image, video, pdf, other
    ✅ Missing file part → 400, oversize file → 400 and nothing written
    ✅ Unknown entry → 500 and the written file is removed again
    ✅ Uploaded files are served back from /uploads/<name>
    ✅ Delete removes the row and the file; unknown id still succeeds
"""

import re

import pytest

UPLOAD_URL = re.compile(r"^/uploads/[0-9a-f-]{36}\.png$")


def _stored_files(file_service):
    return sorted(p.name for p in file_service.upload_dir.iterdir())


class TestUploadMedia:

    @pytest.mark.asyncio
    async def test_upload_image(self, test_client, create_entry, file_service, sample_png_bytes):
        entry = await create_entry()

        response = await test_client.post(
            f"/api/entries/{entry['id']}/media",
            files={"file": ("Photo.PNG", sample_png_bytes, "image/png")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["entryId"] == entry["id"]
        assert body["type"] == "image"
        assert UPLOAD_URL.match(body["url"])

        stored = file_service.upload_dir / body["url"].rsplit("/", 1)[1]
        assert stored.read_bytes() == sample_png_bytes

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "filename, mime, expected",
        [
            ("clip.mp4", "video/mp4", "video"),
            ("doc.pdf", "application/pdf", "pdf"),
            ("notes.txt", "text/plain", "other"),
            ("photo.jpg", "image/jpeg", "image"),
        ],
    )
    async def test_upload_classification(self, test_client, create_entry, filename, mime, expected):
        entry = await create_entry()

        response = await test_client.post(
            f"/api/entries/{entry['id']}/media",
            files={"file": (filename, b"data", mime)},
        )

        assert response.status_code == 200
        assert response.json()["type"] == expected

    @pytest.mark.asyncio
    async def test_upload_without_file_part(self, test_client, create_entry, file_service):
        entry = await create_entry()

        response = await test_client.post(
            f"/api/entries/{entry['id']}/media", data={"other": "value"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Aucun fichier n'a été téléchargé"}
        assert _stored_files(file_service) == []

    @pytest.mark.asyncio
    async def test_upload_too_large(self, test_client, create_entry, file_service):
        entry = await create_entry()
        too_big = b"x" * (file_service.max_file_size + 1)

        response = await test_client.post(
            f"/api/entries/{entry['id']}/media",
            files={"file": ("big.bin", too_big, "application/octet-stream")},
        )

        assert response.status_code == 400
        assert "taille maximale" in response.json()["message"]
        assert _stored_files(file_service) == []

    @pytest.mark.asyncio
    async def test_upload_for_unknown_entry_removes_file(
        self, test_client, file_service, sample_png_bytes
    ):
        response = await test_client.post(
            "/api/entries/999/media",
            files={"file": ("photo.png", sample_png_bytes, "image/png")},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Erreur lors du téléchargement du média"}
        assert _stored_files(file_service) == []


class TestListAndServeMedia:

    @pytest.mark.asyncio
    async def test_list_newest_first(self, test_client, create_entry):
        entry = await create_entry()
        url = f"/api/entries/{entry['id']}/media"
        first = (await test_client.post(url, files={"file": ("a.pdf", b"a", "application/pdf")})).json()
        second = (await test_client.post(url, files={"file": ("b.pdf", b"b", "application/pdf")})).json()

        response = await test_client.get(url)

        assert response.status_code == 200
        assert [m["id"] for m in response.json()] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_list_unknown_entry_is_empty(self, test_client):
        response = await test_client.get("/api/entries/555/media")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_uploaded_file_is_served(self, test_client, create_entry, sample_png_bytes):
        entry = await create_entry()
        media = (
            await test_client.post(
                f"/api/entries/{entry['id']}/media",
                files={"file": ("photo.png", sample_png_bytes, "image/png")},
            )
        ).json()

        response = await test_client.get(media["url"])

        assert response.status_code == 200
        assert response.content == sample_png_bytes
        assert response.headers["content-type"] == "image/png"

    @pytest.mark.asyncio
    async def test_unknown_upload_is_404(self, test_client):
        response = await test_client.get("/uploads/does-not-exist.png")

        assert response.status_code == 404
        assert response.json() == {"message": "Fichier non trouvé"}


class TestDeleteMedia:

    @pytest.mark.asyncio
    async def test_delete_media_removes_row_and_file(
        self, test_client, create_entry, file_service, sample_png_bytes
    ):
        entry = await create_entry()
        media = (
            await test_client.post(
                f"/api/entries/{entry['id']}/media",
                files={"file": ("photo.png", sample_png_bytes, "image/png")},
            )
        ).json()
        assert len(_stored_files(file_service)) == 1

        response = await test_client.delete(f"/api/media/{media['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Média supprimé avec succès"}
        assert (await test_client.get(f"/api/entries/{entry['id']}/media")).json() == []
        assert _stored_files(file_service) == []

    @pytest.mark.asyncio
    async def test_delete_unknown_media_succeeds(self, test_client):
        response = await test_client.delete("/api/media/4040")

        assert response.status_code == 200
        assert response.json() == {"message": "Média supprimé avec succès"}
