from typing import Protocol

from google.generativeai import GenerativeModel, configure

from travel_planner.config import Settings
from travel_planner.utils.logger import logger


class CompletionClient(Protocol):
    """Anything that turns a prompt into raw completion text."""

    async def complete(self, model_id: str, prompt: str) -> str:
        ...


class GeminiClient:
    """
    Thin wrapper around a single Gemini text generation call.

    Errors from the SDK (network, auth, quota, blocked or empty responses)
    are not caught here; they reach the caller unchanged.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        # Configure the API
        configure(api_key=settings.gemini_api_key)

    async def complete(self, model_id: str, prompt: str) -> str:
        """
        Send a prompt to Gemini and return the raw response text.

        Args:
            model_id: The Gemini model to use (e.g. gemini-1.5-flash)
            prompt: The prompt to send to the model

        Returns:
            The model's response text
        """
        model = GenerativeModel(model_id)
        logger.info(f"Calling Gemini API with model {model_id}")
        response = await model.generate_content_async(prompt)
        return response.text
