import pytest
import requests

from fakes import FakeResponse, RecordingHTTP

from ai_translator.adapters.llm_chat_adapter import (
    ChatCompletionTranslationAdapter,
    build_system_prompt,
)
from ai_translator.adapters.mymemory_adapter import MyMemoryAdapter
from ai_translator.adapters.static_phrase_adapter import StaticPhraseAdapter
from ai_translator.domain.models import TranslationRequest

MYMEMORY_URL = "https://mt.example.com/get"


def _chat_payload(content: str) -> dict:
    return {"choices": [{"message": {"content": content}}]}


def _adapter(api_key: str = "secret") -> ChatCompletionTranslationAdapter:
    return ChatCompletionTranslationAdapter(
        api_key=api_key, model="mock-model", base_url="https://llm.example.com/v1/"
    )


def test_chat_adapter_translates_with_system_instruction(monkeypatch) -> None:
    fake_post = RecordingHTTP(FakeResponse(payload=_chat_payload("  Hola mundo  ")))
    monkeypatch.setattr(requests, "post", fake_post)

    outcome = _adapter().attempt(
        TranslationRequest(text="Hello world", target_language="es", source_language="en")
    )

    assert outcome.is_success
    assert outcome.value.translation == "Hola mundo"
    assert outcome.value.service == "deepseek"
    assert outcome.value.source_language == "en"
    args, kwargs = fake_post.calls[0]
    assert args == ("https://llm.example.com/v1/chat/completions",)
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    messages = kwargs["json"]["messages"]
    assert messages[0]["role"] == "system"
    assert "Translate the given text to Spanish." in messages[0]["content"]
    assert messages[1] == {"role": "user", "content": "Hello world"}
    assert "temperature" not in kwargs["json"]


def test_chat_adapter_without_key_is_fatal(monkeypatch) -> None:
    fake_post = RecordingHTTP()
    monkeypatch.setattr(requests, "post", fake_post)

    outcome = _adapter(api_key="").attempt(TranslationRequest(text="hi", target_language="es"))

    assert outcome.is_fatal
    assert outcome.message == "API key not configured"
    assert fake_post.calls == []


def test_chat_adapter_non_ok_status_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(
        requests, "post", RecordingHTTP(FakeResponse(status_code=503, text="overloaded"))
    )
    outcome = _adapter().attempt(TranslationRequest(text="hi", target_language="es"))
    assert outcome.status == "recoverable"


def test_chat_adapter_missing_content_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(requests, "post", RecordingHTTP(FakeResponse(payload={"choices": []})))
    outcome = _adapter().attempt(TranslationRequest(text="hi", target_language="es"))
    assert outcome.status == "recoverable"


def test_chat_adapter_network_error_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(requests, "post", RecordingHTTP(requests.Timeout("slow")))
    outcome = _adapter().attempt(TranslationRequest(text="hi", target_language="es"))
    assert outcome.status == "recoverable"


def test_system_prompt_keeps_unknown_language_literal() -> None:
    prompt = build_system_prompt("xx")
    assert "Translate the given text to Unknown Language." in prompt


def test_deepseek_preset_sends_sampling_controls(monkeypatch) -> None:
    fake_post = RecordingHTTP(FakeResponse(payload=_chat_payload("Bonjour")))
    monkeypatch.setattr(requests, "post", fake_post)

    adapter = ChatCompletionTranslationAdapter.from_preset("deepseek", api_key="secret")
    adapter.attempt(TranslationRequest(text="Hello", target_language="fr"))

    args, kwargs = fake_post.calls[0]
    assert args == ("https://api.deepseek.com/v1/chat/completions",)
    assert kwargs["json"]["model"] == "deepseek-chat"
    assert kwargs["json"]["temperature"] == 0.3
    assert kwargs["json"]["max_tokens"] == 1000


def test_openrouter_preset_honors_overrides(monkeypatch) -> None:
    fake_post = RecordingHTTP(FakeResponse(payload=_chat_payload("Hallo")))
    monkeypatch.setattr(requests, "post", fake_post)

    adapter = ChatCompletionTranslationAdapter.from_preset(
        "OpenRouter", api_key="secret", model="custom/model"
    )
    adapter.attempt(TranslationRequest(text="Hello", target_language="de"))

    args, kwargs = fake_post.calls[0]
    assert args == ("https://openrouter.ai/api/v1/chat/completions",)
    assert kwargs["json"]["model"] == "custom/model"
    assert "max_tokens" not in kwargs["json"]


def test_unknown_preset_raises() -> None:
    with pytest.raises(ValueError):
        ChatCompletionTranslationAdapter.from_preset("nope", api_key="secret")


def test_mymemory_sends_auto_langpair(monkeypatch) -> None:
    fake_get = RecordingHTTP(
        FakeResponse(payload={"responseStatus": 200, "responseData": {"translatedText": "Ciao"}})
    )
    monkeypatch.setattr(requests, "get", fake_get)

    outcome = MyMemoryAdapter(url=MYMEMORY_URL).attempt(
        TranslationRequest(text="Hello & bye", target_language="it", source_language="en")
    )

    assert outcome.is_success
    assert outcome.value.translation == "Ciao"
    assert outcome.value.source_language == "auto"
    assert outcome.value.service == "mymemory"
    args, kwargs = fake_get.calls[0]
    assert args == (MYMEMORY_URL,)
    assert kwargs["params"] == {"q": "Hello & bye", "langpair": "auto|it"}
    assert "User-Agent" in kwargs["headers"]


def test_mymemory_internal_error_status_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(
        requests,
        "get",
        RecordingHTTP(
            FakeResponse(
                payload={"responseStatus": 403, "responseData": {"translatedText": "INVALID"}}
            )
        ),
    )
    outcome = MyMemoryAdapter(url=MYMEMORY_URL).attempt(
        TranslationRequest(text="hi", target_language="it")
    )
    assert outcome.status == "recoverable"


def test_mymemory_http_error_is_recoverable(monkeypatch) -> None:
    monkeypatch.setattr(requests, "get", RecordingHTTP(FakeResponse(status_code=500)))
    outcome = MyMemoryAdapter(url=MYMEMORY_URL).attempt(
        TranslationRequest(text="hi", target_language="it")
    )
    assert outcome.status == "recoverable"


def test_static_phrase_adapter_hit_and_miss() -> None:
    adapter = StaticPhraseAdapter()
    hit = adapter.attempt(TranslationRequest(text="Thank You ", target_language="es"))
    miss = adapter.attempt(TranslationRequest(text="good morning", target_language="es"))

    assert hit.is_success
    assert hit.value.translation == "gracias"
    assert hit.value.service == "simple"
    assert miss.status == "recoverable"
