import httpx
import openai

from resumegate.llm.client_base import BaseGenerativeModel
from resumegate.llm.exceptions import ModelNetworkError, ModelResponseError


class OpenAIClientAdapter(BaseGenerativeModel):
    """Generative model adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        temperature: float = 0.0,
        system_prompt: str = "",
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt

    def generate_content(self, prompt: str) -> str:
        messages = []
        if self._system_prompt:
            messages.append({"role": "system", "content": self._system_prompt})
        messages.append({"role": "user", "content": prompt})
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                response_format={"type": "json_object"},
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(
                f"Model provider network error: {exc}"
            ) from exc
        except openai.APIStatusError as exc:
            raise ModelNetworkError(
                f"Model provider API error: {exc}",
                status=exc.status_code,
                code=getattr(exc, "code", None),
            ) from exc
        except openai.APIError as exc:
            raise ModelNetworkError(
                f"Model provider API error: {exc}",
                code=getattr(exc, "code", None),
            ) from exc

        if not response.choices:
            raise ModelResponseError("Model returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ModelResponseError("Model returned empty response")
        return content
