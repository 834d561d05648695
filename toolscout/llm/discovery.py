"""Model discovery: find which Gemini models the credential can use."""

import logging
from typing import Any, Optional

import httpx

from toolscout.core.config import settings
from toolscout.core.exceptions import DiscoveryFailure
from toolscout.llm.models import DiscoveryResult, ModelDescriptor

logger = logging.getLogger(__name__)

GENERATE_CONTENT = "generateContent"


def strip_namespace(name: str) -> str:
    """Turn ``models/gemini-2.5-pro`` into ``gemini-2.5-pro``."""
    return name.rsplit("/", 1)[-1]


def parse_model_listing(payload: Any) -> list[ModelDescriptor]:
    """
    Parse a ``models.list`` response body into descriptors.

    Raises:
        DiscoveryFailure: If the payload has no usable models collection
    """
    if not isinstance(payload, dict):
        raise DiscoveryFailure("Model listing is not a JSON object")

    models = payload.get("models")
    if not isinstance(models, list):
        raise DiscoveryFailure("Model listing has no models collection")

    descriptors = []
    for item in models:
        if not isinstance(item, dict):
            continue
        name = item.get("name")
        if not isinstance(name, str) or not name:
            continue
        methods = item.get("supportedGenerationMethods") or []
        descriptors.append(
            ModelDescriptor(
                identifier=strip_namespace(name),
                supports_generation=GENERATE_CONTENT in methods,
            )
        )
    return descriptors


def rank_models(
    identifiers: list[str],
    families: list[str],
    variants: list[str],
    excluded: Optional[list[str]] = None,
    limit: Optional[int] = None,
) -> list[str]:
    """
    Order identifiers by version family, then by variant keyword.

    Newer families come first; inside a family the variants follow the given
    order. The newest identifier of every variant is placed first, so a
    ``limit`` never cuts a variant while another one holds several slots.
    After those come the best identifier of each remaining family/variant
    slot, then everything else that matched. Ties prefer the shortest
    identifier (``gemini-2.5-pro`` before ``gemini-2.5-pro-preview-06-05``),
    then alphabetical. Identifiers that match no family/variant pair, or that
    contain an excluded keyword, are dropped.
    """
    excluded = excluded or []
    usable = [
        i for i in identifiers if not any(k in i.lower() for k in excluded)
    ]

    slots: dict[tuple[str, str], list[str]] = {}
    for family in families:
        for variant in variants:
            slots[(family, variant)] = sorted(
                (i for i in usable if family in i and variant.lower() in i.lower()),
                key=lambda i: (len(i), i),
            )

    per_variant = []
    for variant in variants:
        for family in families:
            if slots[(family, variant)]:
                per_variant.append(slots[(family, variant)][0])
                break

    per_slot = [matches[0] for matches in slots.values() if matches]
    rest = [i for matches in slots.values() for i in matches[1:]]

    ranked: list[str] = []
    for identifier in per_variant + per_slot + rest:
        if identifier not in ranked:
            ranked.append(identifier)

    if limit is not None:
        ranked = ranked[:limit]
    return ranked


class ModelResolver:
    """
    Resolves the ordered list of candidate models for a credential.

    Discovery is fail-soft: any error degrades to the configured default pair,
    so ``resolve`` never raises and never returns an empty list.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.gemini_api_key
        self.base_url = base_url or settings.gemini_api_base_url
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client for the listing endpoint."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.discovery_timeout_seconds,
            transport=self._transport,
        )

    async def list_models(self) -> list[ModelDescriptor]:
        """
        Fetch the models visible to the credential.

        Raises:
            DiscoveryFailure: On transport errors, HTTP errors or bad payloads
        """
        params = {"key": self.api_key, "pageSize": settings.discovery_page_size}
        try:
            async with self._get_client() as client:
                response = await client.get("/models", params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise DiscoveryFailure(
                "Model listing request was rejected",
                details=f"HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise DiscoveryFailure(
                "Model listing request failed", details=repr(e)
            ) from e
        except ValueError as e:
            raise DiscoveryFailure("Model listing is not valid JSON", details=str(e)) from e

        return parse_model_listing(payload)

    def _default_result(self, error: str) -> DiscoveryResult:
        return DiscoveryResult(
            candidates=settings.default_models,
            source="default",
            error=error,
        )

    async def discover(self) -> DiscoveryResult:
        """Run discovery and wrap the outcome, substituting defaults on failure."""
        try:
            descriptors = await self.list_models()
        except DiscoveryFailure as e:
            logger.warning(f"Model discovery failed ({e.message}), using defaults")
            return self._default_result(e.message)
        except Exception as e:
            logger.warning(f"Unexpected model discovery error: {e}, using defaults")
            return self._default_result(str(e))

        generative = [d.identifier for d in descriptors if d.supports_generation]
        candidates = rank_models(
            generative,
            families=settings.version_families,
            variants=settings.variant_keywords,
            excluded=settings.excluded_keywords,
            limit=settings.max_candidate_models,
        )

        if not candidates:
            logger.warning(
                f"No preferred models among {len(generative)} generative models, "
                f"using defaults"
            )
            return self._default_result("No preferred models discovered")

        logger.info(f"Discovered candidate models: {candidates}")
        return DiscoveryResult(candidates=candidates, source="discovered")

    async def resolve(self) -> list[str]:
        """Return the ordered, never-empty candidate list."""
        result = await self.discover()
        return result.candidates


# Singleton instance
model_resolver = ModelResolver()
