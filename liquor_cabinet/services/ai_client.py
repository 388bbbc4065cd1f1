from typing import Optional
import logging

from google import genai
from google.genai import errors, types

from liquor_cabinet.core.config import Settings
from liquor_cabinet.utils.exceptions import AIServiceUnavailableError

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    Accès au modèle de complétion (Gemini).
    Construit une seule fois au démarrage puis injecté dans les services.
    """

    def __init__(self, client: genai.Client, identify_model: str, recipe_model: str):
        self.client = client
        self.identify_model = identify_model
        self.recipe_model = recipe_model

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        return cls(
            client=genai.Client(api_key=settings.GEMINI_API_KEY),
            identify_model=settings.IDENTIFY_MODEL,
            recipe_model=settings.RECIPE_MODEL,
        )

    async def complete_with_image(
        self, image_bytes: bytes, mime_type: str, prompt: str, max_tokens: int
    ) -> str:
        contents = [
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
            prompt,
        ]
        return await self._generate(self.identify_model, contents, max_tokens)

    async def complete_text(self, prompt: str, max_tokens: int) -> str:
        return await self._generate(self.recipe_model, [prompt], max_tokens)

    async def _generate(self, model: str, contents: list, max_tokens: int) -> str:
        config = types.GenerateContentConfig(
            max_output_tokens=max_tokens,
            response_mime_type="application/json",
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            logger.error(f"Completion API call failed ({model}): {e}", exc_info=True)
            raise AIServiceUnavailableError("AI service unavailable")

        text: Optional[str] = response.text
        if not text:
            logger.error(f"Empty completion from {model}")
            raise AIServiceUnavailableError()

        return text
