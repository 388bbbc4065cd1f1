"""
Client TheCocktailDB pour les vignettes de cocktails.

Une recherche par nom ; l'absence de résultat ou une erreur réseau
donnent None, jamais une exception.
"""

import asyncio
import httpx
import logging
from typing import Dict, Iterable, Optional

from liquor_cabinet.core.config import Settings

logger = logging.getLogger(__name__)


class CocktailImageClient:
    def __init__(self, http_client: httpx.AsyncClient, search_url: str):
        self.http_client = http_client
        self.search_url = search_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "CocktailImageClient":
        http_client = httpx.AsyncClient(timeout=settings.COCKTAIL_IMAGE_TIMEOUT_SECONDS)
        return cls(http_client, settings.COCKTAIL_IMAGE_API_URL)

    async def close(self):
        await self.http_client.aclose()

    async def get_image_url(self, cocktail_name: str) -> Optional[str]:
        try:
            response = await self.http_client.get(
                self.search_url, params={"s": cocktail_name}
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to fetch image for {cocktail_name}: {e}")
            return None

        drinks = data.get("drinks") if isinstance(data, dict) else None
        if not isinstance(drinks, list) or not drinks:
            return None

        first = drinks[0]
        if not isinstance(first, dict):
            logger.warning(f"Unexpected drink entry for {cocktail_name}: {first!r}")
            return None

        thumbnail = first.get("strDrinkThumb")
        return thumbnail if isinstance(thumbnail, str) and thumbnail else None

    async def get_image_urls(self, cocktail_names: Iterable[str]) -> Dict[str, Optional[str]]:
        """Une requête par nom distinct, lancées en parallèle."""
        distinct_names = list(dict.fromkeys(cocktail_names))
        results = await asyncio.gather(
            *(self.get_image_url(name) for name in distinct_names)
        )
        return dict(zip(distinct_names, results))
