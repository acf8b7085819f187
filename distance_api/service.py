"""Module contenant le service de calcul de distance."""
# distance_api/service.py
import hashlib
import json
import time
from dataclasses import dataclass
from typing import Optional

import psutil
from pydantic import ValidationError
from redis.exceptions import RedisError

from distance_api.cache import cache_manager
from distance_api.config import settings
from distance_api.logger import logger
from distance_api.models import DistanceOptions, DistanceResponse
from distance_api.scoring.distance import string_distance


@dataclass
class DistanceContext:
    """Contexte d'un calcul de distance."""
    a: Optional[str]
    b: Optional[str]
    max_distance: Optional[int]
    start_time: float


class DistanceService:
    """Service de distance combinant le calcul Levenshtein et le cache Redis."""

    def __init__(self, cache=None):
        self.cache = cache if cache is not None else cache_manager
        self.string_distance = string_distance

    def resolve_max_distance(
            self,
            a: Optional[str],
            b: Optional[str],
            options: DistanceOptions
        ) -> Optional[int]:
        """Détermine le seuil à appliquer pour une paire de chaînes."""
        if options.max_distance is not None:
            return options.max_distance
        if not options.dynamic_max or a is None or b is None:
            return None

        longest = a if len(a) >= len(b) else b
        return min(
            self.string_distance.dynamic_max(longest),
            settings.MAX_LEVENSHTEIN_DISTANCE_CAP
        )

    @staticmethod
    def cache_key(a: Optional[str], b: Optional[str], max_distance: Optional[int]) -> str:
        """Construit la clé de cache d'une requête."""
        payload = json.dumps([a, b, max_distance], ensure_ascii=False)
        digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
        return f"distance:{digest}"

    async def _cache_get(self, key: str) -> Optional[str]:
        try:
            return await self.cache.get(key)
        except RedisError as e:
            logger.warning("Cache unavailable on read ({error}), computing directly", error=e)
            return None

    async def _cache_set(self, key: str, value: str) -> None:
        try:
            await self.cache.set(key, value, expire=settings.CACHE_TTL)
        except RedisError as e:
            logger.warning("Cache unavailable on write ({error})", error=e)

    async def compute(
            self,
            a: Optional[str],
            b: Optional[str],
            options: Optional[DistanceOptions] = None
        ) -> DistanceResponse:
        """Calcule la distance entre deux chaînes en utilisant un système de cache.

        Args:
            a: Première chaîne (None = valeur absente).
            b: Deuxième chaîne (None = valeur absente).
            options: Seuil explicite ou dynamique.

        Returns:
            Un objet DistanceResponse.
        """
        options = options or DistanceOptions()
        max_distance = self.resolve_max_distance(a, b, options)
        start_time = time.time()

        if not settings.ENABLE_CACHE:
            return self._execute(DistanceContext(a, b, max_distance, start_time))

        key = self.cache_key(a, b, max_distance)
        cached_result = await self._cache_get(key)
        response_from_cache = self._decode_cached(key, cached_result) if cached_result else None
        if response_from_cache is not None:
            logger.info("Cache HIT for key: {key}", key=key)
            # Les métriques décrivent la requête courante, pas le calcul d'origine
            response_from_cache.cached = True
            response_from_cache.query_time_ms = (time.time() - start_time) * 1000
            response_from_cache.memory_used_mb = self._memory_mb()
            return response_from_cache

        logger.info("Cache MISS for key: {key}", key=key)
        response = self._execute(DistanceContext(a, b, max_distance, start_time))
        await self._cache_set(key, response.model_dump_json())
        return response

    @staticmethod
    def _decode_cached(key: str, cached_result: str) -> Optional[DistanceResponse]:
        try:
            return DistanceResponse.model_validate_json(cached_result)
        except ValidationError as e:
            logger.warning("Invalid cache entry for key {key} ({error}), recomputing", key=key, error=e)
            return None

    @staticmethod
    def _memory_mb() -> Optional[float]:
        if not settings.ENABLE_METRICS:
            return None
        return psutil.Process().memory_info().rss / 1024 / 1024

    def _execute(self, ctx: DistanceContext) -> DistanceResponse:
        """Exécute le calcul sans cache."""
        is_null_input = ctx.a is None or ctx.b is None
        if is_null_input:
            logger.debug("Valeur absente en entrée, distance = 0")

        dist = self.string_distance.distance(ctx.a, ctx.b, ctx.max_distance)

        within_threshold = None
        if ctx.max_distance is not None:
            within_threshold = dist <= ctx.max_distance

        duration = time.time() - ctx.start_time
        memory_mb = self._memory_mb()

        logger.info(
            "Distance = {dist} (max: {max_distance}) : Durée = {duration:.4f}s",
            dist=dist, max_distance=ctx.max_distance, duration=duration
        )

        return DistanceResponse(
            distance=dist,
            max_distance=ctx.max_distance,
            within_threshold=within_threshold,
            is_null_input=is_null_input,
            a_length=len(ctx.a) if ctx.a is not None else None,
            b_length=len(ctx.b) if ctx.b is not None else None,
            cached=False,
            query_time_ms=duration * 1000,
            memory_used_mb=memory_mb,
        )
