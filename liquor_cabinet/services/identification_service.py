import base64
import binascii
import io
import json
import logging

from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError

from liquor_cabinet.core.config import Settings
from liquor_cabinet.schemas.identification import BottleIdentification
from liquor_cabinet.services.ai_client import CompletionClient
from liquor_cabinet.utils.exceptions import (
    AIResponseParseError,
    BottleNotRecognizedException,
    InvalidImageException,
)
from liquor_cabinet.utils.validators import is_allowed_image_mime, parse_image_data_uri

logger = logging.getLogger(__name__)


IDENTIFY_PROMPT = """Identify this liquor bottle and return ONLY valid JSON (no markdown, no explanation) with these fields:
{
  "brand": "Brand name",
  "productName": "Full product name",
  "category": "whisky|gin|rum|vodka|tequila|brandy|liqueur|wine|beer|other",
  "subCategory": "e.g., bourbon, single malt, spiced rum (optional)",
  "countryOfOrigin": "Country (optional)",
  "region": "Specific region like Kentucky, Speyside (optional)",
  "abv": numeric ABV percentage if visible (optional),
  "sizeMl": bottle size in ml if visible (optional),
  "description": "Brief description of this product",
  "tastingNotes": "Typical tasting notes for this product",
  "confidence": "high|medium|low based on how clearly you can identify it"
}

If you cannot identify a liquor bottle in the image, return:
{"error": "Could not identify a liquor bottle in this image"}"""


class IdentificationService:
    def __init__(self, completion_client: CompletionClient, settings: Settings):
        self.completion_client = completion_client
        self.max_tokens = settings.IDENTIFY_MAX_TOKENS

    @staticmethod
    def decode_image(image_data_uri: str):
        """
        Valide la data URI et retourne (bytes, mime).
        Lève InvalidImageException si l'URI, le type ou l'image sont invalides.
        """
        if not image_data_uri:
            raise InvalidImageException("No image provided")

        parsed = parse_image_data_uri(image_data_uri)
        if not parsed:
            raise InvalidImageException("Invalid image format")

        mime_type, payload = parsed
        if not is_allowed_image_mime(mime_type):
            raise InvalidImageException(f"Unsupported image type: {mime_type}")

        try:
            image_bytes = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidImageException("Invalid base64 image data")

        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise InvalidImageException("Image data could not be decoded")

        return image_bytes, mime_type.lower()

    async def identify(self, image_data_uri: str) -> BottleIdentification:
        image_bytes, mime_type = self.decode_image(image_data_uri)

        response_text = await self.completion_client.complete_with_image(
            image_bytes=image_bytes,
            mime_type=mime_type,
            prompt=IDENTIFY_PROMPT,
            max_tokens=self.max_tokens,
        )

        # JSON strict : pas de nettoyage des blocs markdown ici
        try:
            data = json.loads(response_text.strip())
        except json.JSONDecodeError:
            logger.error(f"Failed to parse identification: {response_text}")
            raise AIResponseParseError("Failed to identify bottle")

        if not isinstance(data, dict):
            logger.error(f"Unexpected identification payload: {response_text}")
            raise AIResponseParseError("Failed to identify bottle")

        if data.get("error"):
            logger.info(f"Bottle not recognized: {data['error']}")
            raise BottleNotRecognizedException(str(data["error"]))

        try:
            identification = BottleIdentification.model_validate(data)
        except ValidationError as e:
            logger.error(f"Identification has unexpected shape: {e}")
            raise AIResponseParseError("Failed to identify bottle")

        logger.info(
            f"Identified: {identification.brand} {identification.product_name} "
            f"({identification.confidence})"
        )
        return identification
