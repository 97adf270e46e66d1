import logging
from typing import Optional

import groq
from groq import Groq
from groq.types.chat import ChatCompletion

from prompts import PromptPair

logger = logging.getLogger(__name__)


class GatewayError(RuntimeError):
    pass


class ConfigurationError(GatewayError):
    pass


class UpstreamError(GatewayError):
    """The gateway answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"AI gateway error: {status_code}")
        self.status_code = status_code
        self.body = body


class GatewayClient:
    """One POST per call to the gateway's OpenAI-compatible chat endpoint."""

    def __init__(self, settings, http_client=None):
        self.settings = settings
        self._http_client = http_client
        self._client = None

    def _groq(self) -> Groq:
        if not self.settings.api_key:
            raise ConfigurationError("LOVABLE_API_KEY is not configured")
        if self._client is None:
            self._client = Groq(
                api_key=self.settings.api_key,
                base_url=self.settings.gateway_url,
                max_retries=0,
                http_client=self._http_client,
            )
        return self._client

    def complete(self, prompts: PromptPair, model: Optional[str] = None,
                 temperature: Optional[float] = None) -> str:
        client = self._groq()
        body = {
            "model": model or self.settings.model,
            "messages": [
                {"role": "system", "content": prompts.system},
                {"role": "user", "content": prompts.user},
            ],
        }
        if temperature is not None:
            body["temperature"] = temperature

        try:
            completion = client.post(
                "/chat/completions",
                cast_to=ChatCompletion,
                body=body,
            )
        except groq.APIStatusError as e:
            logger.error("AI gateway error: %s %s", e.status_code, e.response.text)
            raise UpstreamError(e.status_code, e.response.text) from e

        content = None
        if completion.choices:
            content = completion.choices[0].message.content
        if content is None:
            raise GatewayError("No content in AI response")
        logger.debug("AI response received: %s", content[:200])
        return content
