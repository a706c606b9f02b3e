"""LLM client wrapper for Anthropic text generation."""

from anthropic import APIError, APITimeoutError, AsyncAnthropic

from src.config import settings


class LLMClientError(Exception):
    """Raised when LLM generation fails."""

    pass


class LLMClient:
    """Anthropic client wrapper returning the raw text of a reply.

    Every request is bounded by the configured timeout; a timeout surfaces
    as LLMClientError like any other failure.
    """

    def __init__(self, client: AsyncAnthropic | None = None):
        """Initialize LLM client.

        Args:
            client: Optional Anthropic client for dependency injection.
                   If not provided, creates one from settings.
        """
        if client is not None:
            self._client = client
        elif settings.anthropic_api_key:
            self._client = AsyncAnthropic(
                api_key=settings.anthropic_api_key,
                timeout=settings.request_timeout_seconds,
                max_retries=0,
            )
        else:
            # Allow initialization without API key for testing
            self._client = None

    @property
    def configured(self) -> bool:
        """True when an Anthropic client is available."""
        return self._client is not None

    async def generate(self, prompt: str) -> str:
        """Send a single-turn prompt and return the reply text.

        Args:
            prompt: The full user prompt

        Returns:
            Concatenated text blocks of the reply

        Raises:
            LLMClientError: If the client is not configured or the call fails
        """
        if self._client is None:
            raise LLMClientError(
                "Anthropic client not initialized. "
                "Set ANTHROPIC_API_KEY environment variable."
            )

        try:
            response = await self._client.messages.create(
                model=settings.anthropic_model,
                max_tokens=settings.extraction_max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except APITimeoutError as e:
            raise LLMClientError(f"Anthropic request timed out: {e}") from e
        except APIError as e:
            raise LLMClientError(f"Anthropic API error: {e}") from e
        except Exception as e:
            raise LLMClientError(f"Generation failed: {e}") from e

        return "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.close()
