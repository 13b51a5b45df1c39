import requests

from fakes import FakeResponse, RecordingHTTP

from ai_translator.adapters.google_vision_adapter import GoogleVisionAdapter
from ai_translator.adapters.ocr_space_adapter import OCRSpaceAdapter
from ai_translator.domain.confidence import estimate_confidence
from ai_translator.domain.models import ExtractionRequest

OCR_URL = "https://ocr.example.com/parse/image"
VISION_URL = "https://vision.example.com/v1/images:annotate"


def _request() -> ExtractionRequest:
    return ExtractionRequest.from_bytes(b"\x89PNG-bytes", "image/png", filename="sign.png")


def test_ocr_space_posts_data_uri_and_flags(monkeypatch) -> None:
    text = "Exit this way\r\nplease"
    fake_post = RecordingHTTP(
        FakeResponse(payload={"ParsedResults": [{"ParsedText": text}], "IsErroredOnProcessing": False})
    )
    monkeypatch.setattr(requests, "post", fake_post)

    adapter = OCRSpaceAdapter(api_key="k", url=OCR_URL, timeout=5)
    outcome = adapter.attempt(_request())

    assert outcome.is_success
    assert outcome.value.text == text
    assert outcome.value.method == "ocr.space"
    assert outcome.value.confidence == estimate_confidence(text)
    args, kwargs = fake_post.calls[0]
    assert args == (OCR_URL,)
    assert kwargs["headers"] == {"apikey": "k"}
    assert kwargs["data"]["base64Image"] == _request().data_uri()
    assert kwargs["data"]["base64Image"].startswith("data:image/png;base64,")
    assert kwargs["data"]["detectOrientation"] == "true"
    assert kwargs["data"]["scale"] == "true"
    assert kwargs["data"]["OCREngine"] == "2"
    assert kwargs["timeout"] == 5


def test_ocr_space_blank_text_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(
        requests,
        "post",
        RecordingHTTP(
            FakeResponse(
                payload={
                    "ParsedResults": [{"ParsedText": "   "}],
                    "IsErroredOnProcessing": True,
                    "ErrorMessage": ["bad image"],
                }
            )
        ),
    )
    outcome = OCRSpaceAdapter(api_key="k", url=OCR_URL).attempt(_request())
    assert outcome.status == "recoverable"


def test_ocr_space_http_error_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(requests, "post", RecordingHTTP(FakeResponse(status_code=503)))
    outcome = OCRSpaceAdapter(api_key="k", url=OCR_URL).attempt(_request())
    assert outcome.status == "recoverable"
    assert outcome.message == "HTTP 503"


def test_ocr_space_network_error_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(
        requests, "post", RecordingHTTP(requests.ConnectionError("unreachable"))
    )
    outcome = OCRSpaceAdapter(api_key="k", url=OCR_URL).attempt(_request())
    assert outcome.status == "recoverable"


def test_ocr_space_malformed_json_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(
        requests, "post", RecordingHTTP(FakeResponse(payload=ValueError("not json")))
    )
    outcome = OCRSpaceAdapter(api_key="k", url=OCR_URL).attempt(_request())
    assert outcome.message == "malformed response"


def test_google_vision_uses_top_annotation_with_fixed_confidence(monkeypatch) -> None:
    fake_post = RecordingHTTP(
        FakeResponse(
            payload={
                "responses": [
                    {"textAnnotations": [{"description": "STOP\nAHEAD"}, {"description": "STOP"}]}
                ]
            }
        )
    )
    monkeypatch.setattr(requests, "post", fake_post)

    outcome = GoogleVisionAdapter(api_key="vision-key", url=VISION_URL).attempt(_request())

    assert outcome.is_success
    assert outcome.value.text == "STOP\nAHEAD"
    assert outcome.value.method == "google-vision"
    assert outcome.value.confidence == 90
    _, kwargs = fake_post.calls[0]
    assert kwargs["params"] == {"key": "vision-key"}
    body = kwargs["json"]["requests"][0]
    assert body["image"]["content"] == _request().base64_content()
    assert body["features"][0]["type"] == "TEXT_DETECTION"


def test_google_vision_without_annotations_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(requests, "post", RecordingHTTP(FakeResponse(payload={"responses": [{}]})))
    outcome = GoogleVisionAdapter(api_key="vision-key", url=VISION_URL).attempt(_request())
    assert outcome.status == "recoverable"


def test_google_vision_without_key_skips_request(monkeypatch) -> None:
    fake_post = RecordingHTTP()
    monkeypatch.setattr(requests, "post", fake_post)
    outcome = GoogleVisionAdapter(api_key="", url=VISION_URL).attempt(_request())
    assert outcome.status == "recoverable"
    assert fake_post.calls == []
