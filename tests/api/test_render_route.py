"""Render Route - multipart upload, defaults, bounds, size ceiling.

Invariants:
    - n omitted -> 2; n=4 -> at most 4 images; n=5 -> 400
    - size omitted -> 1536x1536; size=999x999 -> 400
    - No image -> 400 "image file required"
    - Upload over the ceiling -> 413 before the handler runs
"""

import base64

import pytest
from httpx import ASGITransport, AsyncClient

from rosati_render.config import Settings
from rosati_render.core.errors import ExternalServiceError
from rosati_render.main import create_app
from tests.api.http_helpers import AUTH, JPEG_BYTES
from tests.fake_backend import FakeRelayBackend


async def _render(client, data=None, files=None, headers=AUTH):
    return await client.post("/render", data=data or {}, files=files, headers=headers)


async def test_render_success(client, backend, jpeg_file):
    res = await _render(
        client,
        data={"prompt": "white vinyl double-hung", "n": "2", "size": "1536x1536"},
        files=jpeg_file,
    )
    assert res.status_code == 200
    images = res.json()["images"]
    assert 0 < len(images) <= 2
    for img in images:
        base64.b64decode(img, validate=True)

    call = backend.edit_calls[0]
    assert call["upload"].content == JPEG_BYTES
    assert call["upload"].content_type == "image/jpeg"
    assert call["upload"].filename == "photo.jpg"


async def test_render_defaults(client, backend, jpeg_file):
    res = await _render(client, data={"prompt": "white vinyl double-hung"}, files=jpeg_file)
    assert res.status_code == 200
    assert backend.edit_calls[0]["n"] == 2
    assert backend.edit_calls[0]["size"] == "1536x1536"
    assert len(res.json()["images"]) == 2


async def test_render_n4_returns_at_most_four(client, backend, jpeg_file):
    backend.return_all = True
    backend.images = backend.images * 2
    res = await _render(
        client, data={"prompt": "white vinyl double-hung", "n": "4"}, files=jpeg_file,
    )
    assert res.status_code == 200
    assert len(res.json()["images"]) <= 4


@pytest.mark.parametrize("fields,bad_field", [
    ({"prompt": "white vinyl", "n": "5"}, "n"),
    ({"prompt": "white vinyl", "n": "0"}, "n"),
    ({"prompt": "white vinyl", "size": "999x999"}, "size"),
    ({"prompt": "w"}, "prompt"),
    ({"prompt": "x" * 1001}, "prompt"),
    ({}, "prompt"),
    ({"prompt": "white vinyl", "n": ""}, "n"),
    ({"prompt": "white vinyl", "size": ""}, "size"),
    ({"prompt": ""}, "prompt"),
])
async def test_render_field_errors(client, backend, jpeg_file, fields, bad_field):
    res = await _render(client, data=fields, files=jpeg_file)
    assert res.status_code == 400
    assert res.json()["error"].startswith(f"{bad_field}: ")
    assert backend.call_count == 0


async def test_render_requires_image(client, backend):
    res = await _render(client, data={"prompt": "white vinyl double-hung"})
    assert res.status_code == 400
    assert res.json() == {"error": "image file required"}
    assert backend.call_count == 0


async def test_render_missing_content_type_defaults_to_jpeg(client, backend):
    res = await _render(
        client,
        data={"prompt": "white vinyl double-hung"},
        files={"image": ("house", JPEG_BYTES)},
    )
    assert res.status_code == 200
    assert backend.edit_calls[0]["upload"].content_type in ("image/jpeg", "application/octet-stream")


async def test_render_png_content_type_preserved(client, backend):
    await _render(
        client,
        data={"prompt": "white vinyl double-hung"},
        files={"image": ("house.png", b"\x89PNG\r\n\x1a\n", "image/png")},
    )
    assert backend.edit_calls[0]["upload"].content_type == "image/png"


async def test_render_oversized_upload_rejected():
    backend = FakeRelayBackend()
    app = create_app(
        Settings(_env_file=None, bearer_token="test-token", max_upload_bytes=1024),
        backend=backend,
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        res = await c.post(
            "/render",
            data={"prompt": "white vinyl double-hung"},
            files={"image": ("big.jpg", b"\x00" * 1025, "image/jpeg")},
            headers=AUTH,
        )
    assert res.status_code == 413
    assert "upload limit" in res.json()["error"]
    assert backend.call_count == 0


async def test_render_upload_at_ceiling_accepted():
    backend = FakeRelayBackend()
    app = create_app(
        Settings(_env_file=None, bearer_token="test-token", max_upload_bytes=1024),
        backend=backend,
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        res = await c.post(
            "/render",
            data={"prompt": "white vinyl double-hung"},
            files={"image": ("ok.jpg", b"\x00" * 1024, "image/jpeg")},
            headers=AUTH,
        )
    assert res.status_code == 200


async def test_render_vendor_error_is_400_with_message(client, backend, jpeg_file):
    backend.edit_error = ExternalServiceError("Invalid image file", "openai")
    res = await _render(client, data={"prompt": "white vinyl double-hung"}, files=jpeg_file)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid image file"}


async def test_render_empty_n_is_not_defaulted(client, backend, jpeg_file):
    res = await _render(
        client, data={"prompt": "white vinyl double-hung", "n": ""}, files=jpeg_file,
    )
    assert res.status_code == 400
    assert res.json()["error"].startswith("n: ")
    assert backend.edit_calls == []


async def test_render_empty_size_is_not_defaulted(client, backend, jpeg_file):
    res = await _render(
        client, data={"prompt": "white vinyl double-hung", "size": ""}, files=jpeg_file,
    )
    assert res.status_code == 400
    assert res.json()["error"].startswith("size: ")
    assert backend.edit_calls == []
