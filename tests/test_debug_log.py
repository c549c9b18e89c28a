"""
Tests for provider response capture helpers.
"""

import json
from types import SimpleNamespace

from pydantic import BaseModel

from mixology.utils.debug_log import analyze_response, save_debug_log


class _ImageData(BaseModel):
    url: str


class _ImagesResponse(BaseModel):
    data: list[_ImageData]


class TestSaveDebugLog:

    def test_disabled_writes_nothing(self, tmp_path):
        assert save_debug_log("DALL-E-3", {"a": 1}, directory=str(tmp_path), enabled=False) is None
        assert list(tmp_path.iterdir()) == []

    def test_writes_model_as_json(self, tmp_path):
        response = _ImagesResponse(data=[_ImageData(url="http://img/x.png")])

        path = save_debug_log("DALL-E-3", response, directory=str(tmp_path), enabled=True)

        assert path is not None
        assert path.parent == tmp_path
        assert path.name.startswith("DALL-E-3_")
        assert json.loads(path.read_text()) == {"data": [{"url": "http://img/x.png"}]}

    def test_label_is_made_filename_safe(self, tmp_path):
        path = save_debug_log("GPT4o/DALLE Hybrid", {}, directory=str(tmp_path), enabled=True)

        assert path.name.startswith("GPT4o_DALLE_Hybrid_")

    def test_write_failure_returns_none(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        assert save_debug_log("Gemini", {}, directory=str(blocker), enabled=True) is None


class TestAnalyzeResponse:

    def test_none(self):
        assert analyze_response(None) == {"has_image_content": False, "content_type": "null", "urls": []}

    def test_dalle_style(self):
        result = analyze_response({"data": [{"url": "http://img/a.png"}, {"b64_json": "..."}]})

        assert result["content_type"] == "dalle-style"
        assert result["has_image_content"] is True
        assert result["urls"] == ["http://img/a.png"]

    def test_chat_completion_with_url_in_text(self):
        result = analyze_response({
            "choices": [{"message": {"content": "Here it is: https://img.example.com/a.png"}}]
        })

        assert result["content_type"] == "chat-completion"
        assert result["urls"] == ["https://img.example.com/a.png"]

    def test_chat_completion_with_image_parts(self):
        result = analyze_response({
            "choices": [{"message": {"content": [
                {"type": "text", "text": "hi"},
                {"type": "image_url", "image_url": {"url": "http://img/b.png"}},
            ]}}]
        })

        assert result["urls"] == ["http://img/b.png"]

    def test_unknown_object(self):
        result = analyze_response(SimpleNamespace(foo="bar"))

        assert result["content_type"] == "unknown"
        assert result["has_image_content"] is False
