"""Language model adapter wrapping the OpenAI chat completions API.

The client is built on first use, so a process without an API key starts
normally and only the routes that need the model report it as unavailable.
"""

from typing import Optional, List, Dict, Any
import logging

from openai import OpenAI, OpenAIError

from app.exceptions import DependencyUnavailableError

logger = logging.getLogger("pantrykeeper.llm")


class LanguageModelClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        chat_model: str = "gpt-3.5-turbo",
        vision_model: str = "gpt-4o",
        timeout: float = 60.0,
    ):
        self.api_key = api_key
        self.chat_model = chat_model
        self.vision_model = vision_model
        self.timeout = timeout
        self._client: Optional[OpenAI] = None

    @classmethod
    def from_settings(cls, settings) -> "LanguageModelClient":
        client = cls(
            api_key=settings.openai_api_key,
            chat_model=settings.openai_chat_model,
            vision_model=settings.openai_vision_model,
            timeout=settings.openai_timeout_sec,
        )
        if not client.is_configured:
            logger.warning("OpenAI API key not found - NLP features will be disabled")
        return client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def ensure_available(self, feature: str = "Language model") -> None:
        """Raise DependencyUnavailableError when no API key is configured."""
        if not self.is_configured:
            raise DependencyUnavailableError(
                f"{feature} service unavailable",
                details={"reason": "OpenAI integration is not configured"},
            )

    def _get_client(self, feature: str) -> OpenAI:
        self.ensure_available(feature)
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def chat(
        self,
        system: str,
        user: str,
        json_mode: bool = False,
        max_tokens: Optional[int] = None,
        feature: str = "Language model",
    ) -> str:
        """Send a system+user exchange and return the assistant text."""
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        return self._complete(self.chat_model, messages, json_mode, max_tokens, feature)

    def describe_image(
        self,
        system: str,
        prompt: str,
        image_url: str,
        max_tokens: int = 500,
        feature: str = "Image recognition",
    ) -> str:
        """Ask the vision model about the image at ``image_url``."""
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": system},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {
                        "type": "image_url",
                        "image_url": {"url": image_url, "detail": "high"},
                    },
                ],
            },
        ]
        return self._complete(self.vision_model, messages, False, max_tokens, feature)

    def _complete(
        self,
        model: str,
        messages: List[Dict[str, Any]],
        json_mode: bool,
        max_tokens: Optional[int],
        feature: str,
    ) -> str:
        client = self._get_client(feature)
        kwargs: Dict[str, Any] = {"model": model, "messages": messages}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        if max_tokens:
            kwargs["max_tokens"] = max_tokens
        try:
            completion = client.chat.completions.create(**kwargs)
        except OpenAIError as exc:
            logger.error("OpenAI request for %s failed: %s", feature, exc)
            raise DependencyUnavailableError(f"{feature} service unavailable") from exc
        content = completion.choices[0].message.content or ""
        logger.debug("OpenAI %s returned %d characters", model, len(content))
        return content
