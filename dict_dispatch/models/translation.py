"""Data models for the Easydict HTTP translation API."""

from dataclasses import dataclass, field
from typing import Any

# Service types offered when the user is asked to pick one
SERVICE_TYPE_CANDIDATES = [
    "AppleDictionary",
    "Apple",
    "CustomOpenAI",
    "OpenAI",
    "BuiltInAI",
    "Gemini",
    "Ollama",
    "DeepL",
    "Google",
    "Bing",
    "Youdao",
    "Baidu",
    "Volcano",
    "Tencent",
    "Alibaba",
    "Caiyun",
    "NiuTrans",
]

# Service types that only answer on /streamTranslate
STREAM_SERVICE_TYPES = frozenset(
    {
        "CustomOpenAI",
        "OpenAI",
        "BuiltInAI",
        "Gemini",
        "Ollama",
    }
)

TARGET_LANGUAGE_CANDIDATES = [
    "zh-Hans",
    "zh-Hant",
    "en",
    "ja",
    "ko",
    "fr",
    "de",
    "es",
    "it",
    "pt",
    "ru",
]


@dataclass
class TranslationRequest:
    """Request body for Easydict's translate endpoints."""

    text: str
    target_language: str
    service_type: str
    apple_dictionary_names: list[str] = field(default_factory=list)

    @property
    def endpoint(self) -> str:
        """Path of the endpoint that serves this service type."""
        if self.service_type in STREAM_SERVICE_TYPES:
            return "/streamTranslate"
        return "/translate"

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body sent to Easydict."""
        payload: dict[str, Any] = {
            "text": self.text,
            "targetLanguage": self.target_language,
            "serviceType": self.service_type,
        }
        if self.service_type == "AppleDictionary" and self.apple_dictionary_names:
            payload["appleDictionaryNames"] = list(self.apple_dictionary_names)
        return payload


@dataclass
class TranslationResult:
    """Translated text returned by Easydict."""

    translated_text: str
    service_type: str
    target_language: str

    def __str__(self) -> str:
        return self.translated_text
