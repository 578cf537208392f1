import json
import logging
from pathlib import Path
from typing import List, Optional

import httpx
from pydantic import ValidationError

from occupation_match.core.config import settings
from occupation_match.core.errors import CatalogDataError, CatalogLoadError
from occupation_match.models.career_profile import Occupation, OccupationRecord

logger = logging.getLogger(__name__)


# -----------------------------
# Parse
# -----------------------------

def parse_catalog(payload) -> List[Occupation]:
    """
    Validate a decoded JSON payload into occupations.

    Individual bad scores become None (absent). A payload that is not a
    list, or an entry without a usable name, fails the whole load.
    """
    if not isinstance(payload, list):
        raise CatalogDataError("Occupation catalog must be a JSON array")

    occupations: List[Occupation] = []

    for index, entry in enumerate(payload):
        try:
            record = OccupationRecord.model_validate(entry)
        except ValidationError as e:
            raise CatalogDataError(f"Invalid occupation entry at index {index}: {e}") from e

        occupations.append(record.to_occupation())

    return occupations


def _decode(text: str):
    try:
        return json.loads(text)
    except ValueError as e:
        raise CatalogDataError(f"Occupation catalog is not valid JSON: {e}") from e


# -----------------------------
# Load from a local file
# -----------------------------

def load_catalog_file(path: Path = settings.CATALOG_PATH) -> List[Occupation]:
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Failed to read occupation catalog %s: %s", path, e)
        raise CatalogLoadError(f"Could not read occupation catalog: {path}") from e
    except UnicodeDecodeError as e:
        logger.error("Occupation catalog %s is not UTF-8: %s", path, e)
        raise CatalogDataError(f"Occupation catalog is not valid UTF-8: {path}") from e

    occupations = parse_catalog(_decode(text))
    logger.info("Loaded %d occupations from %s", len(occupations), path)
    return occupations


# -----------------------------
# Fetch over HTTP
# -----------------------------

async def fetch_catalog(
    url: str = settings.CATALOG_URL,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = settings.CATALOG_TIMEOUT,
) -> List[Occupation]:
    """
    GET the static occupation catalog.

    Network failures and non-200 responses raise CatalogLoadError.
    Pass a client to reuse a connection pool (or a mock transport).
    """
    if not url:
        raise CatalogLoadError("No catalog URL configured")

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned_client:
                response = await owned_client.get(url)
        else:
            response = await client.get(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Error loading occupation catalog from %s: %s", url, e)
        raise CatalogLoadError(
            "Failed to load occupation scores. "
            "Check your network connection and try again later."
        ) from e

    if response.status_code != 200:
        logger.error("Occupation catalog request failed: HTTP %d", response.status_code)
        raise CatalogLoadError(
            f"HTTP error! status: {response.status_code}",
            status_code=response.status_code,
        )

    occupations = parse_catalog(_decode(response.text))
    logger.info("Loaded %d occupations from %s", len(occupations), url)
    return occupations
