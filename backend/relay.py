"""Completion relay: OpenAI streaming passthrough."""

from typing import Any, AsyncIterator

import httpx
from openai import AsyncOpenAI, OpenAIError

from config import LLMConfig, LOG_PREVIEW_CHARS, TEMPERATURE
from models import ChatMessage
from utils import truncate

USER_SUFFIX = (
    "\nPlease ONLY return code, NO backticks or language names. React code only with tailwindcss"
)


class UpstreamError(Exception):
    """The completion provider failed before any text was streamed."""


def build_messages(system_prompt: str, messages: list[ChatMessage]) -> list[dict[str, str]]:
    """Provider payload: system turn first, then the conversation in order."""
    payload = [{"role": "system", "content": system_prompt}]
    for msg in messages:
        content = msg.content
        if msg.role == "user":
            content = content + USER_SUFFIX
        payload.append({"role": msg.role, "content": content})
    return payload


class CompletionRelay:
    def __init__(self, client: AsyncOpenAI, temperature: float = TEMPERATURE):
        self.client = client
        self.temperature = temperature

    @classmethod
    def from_config(cls, config: LLMConfig) -> "CompletionRelay":
        client = AsyncOpenAI(api_key=config.api_key, base_url=config.base_url)
        return cls(client, temperature=config.temperature)

    async def start(
        self,
        model: str,
        system_prompt: str,
        messages: list[ChatMessage],
    ) -> AsyncIterator[str]:
        """Open the upstream stream and return an iterator over its text deltas.

        The request is sent before this returns, so connection and auth
        failures raise UpstreamError here instead of yielding an empty stream.
        """
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=build_messages(system_prompt, messages),
                temperature=self.temperature,
                stream=True,
            )
        except OpenAIError as e:
            print(f"[relay] Upstream request failed: {truncate(str(e), LOG_PREVIEW_CHARS)}")
            raise UpstreamError(str(e)) from e
        return self._relay(response)

    async def _relay(self, response: Any) -> AsyncIterator[str]:
        relayed = 0
        try:
            async for chunk in response:
                choice = chunk.choices[0] if chunk.choices else None
                if not choice:
                    continue
                delta = choice.delta
                if delta and delta.content:
                    relayed += 1
                    yield delta.content
        except (OpenAIError, httpx.HTTPError) as e:
            # Output ends here; the client keeps what it already received.
            print(
                f"[relay] Stream error after {relayed} fragments: "
                f"{truncate(str(e), LOG_PREVIEW_CHARS)}"
            )
        finally:
            await response.close()

    async def aclose(self):
        await self.client.close()
