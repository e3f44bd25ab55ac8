"""
Unit tests for VideoUploadClient using httpx.MockTransport.

Run with: pytest tests/test_video_upload_client.py -v
"""

import asyncio

import httpx
import pytest

from branchchat.infrastructure.http import VideoUploadClient
from branchchat.domain.value_objects.video_clip import VideoClip

CLIP = VideoClip(data=b"clip-bytes", mime_type="video/webm;codecs=vp9,opus")


def test_upload_posts_multipart_and_returns_video_url():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.read()
        seen["content_type"] = request.headers["content-type"]
        return httpx.Response(
            200, json={"videoUrl": "/videos/1_recording.webm", "filename": "1_recording.webm"}
        )

    client = VideoUploadClient("http://backend:3001/", transport=httpx.MockTransport(handler))

    video_url = asyncio.run(client.upload(CLIP))

    assert video_url == "/videos/1_recording.webm"
    assert seen["url"] == "http://backend:3001/api/upload/video"
    assert seen["content_type"].startswith("multipart/form-data")
    assert b'name="video"' in seen["body"]
    assert b'filename="recording.webm"' in seen["body"]
    assert b"Content-Type: video/webm" in seen["body"]
    assert b"clip-bytes" in seen["body"]


def test_upload_error_uses_server_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "No video file uploaded."})

    client = VideoUploadClient("http://backend:3001", transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(client.upload(CLIP))

    assert "No video file uploaded." in str(exc_info.value)
    assert exc_info.value.response.status_code == 400


def test_upload_error_with_plain_text_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    client = VideoUploadClient("http://backend:3001", transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(client.upload(CLIP))

    assert "Bad Gateway" in str(exc_info.value)


def test_upload_error_with_non_object_json_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json=["boom"])

    client = VideoUploadClient("http://backend:3001", transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(client.upload(CLIP))

    assert exc_info.value.response.status_code == 500
    assert "boom" in str(exc_info.value)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"filename": "1_recording.webm"}),
        httpx.Response(200, json=["/videos/1_recording.webm"]),
        httpx.Response(200, text="ok"),
    ],
)
def test_success_without_video_url_is_rejected(response):
    client = VideoUploadClient(
        "http://backend:3001", transport=httpx.MockTransport(lambda request: response)
    )

    with pytest.raises(ValueError, match="no videoUrl"):
        asyncio.run(client.upload(CLIP))
