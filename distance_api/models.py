"""Modèles Pydantic pour les requêtes et réponses."""
from typing import Optional
from pydantic import BaseModel, Field


class DistanceOptions(BaseModel): # pylint: disable=too-few-public-methods
    """Options du calcul de distance."""
    # Seuil explicite : au-delà, la distance renvoyée vaut max_distance + 1
    max_distance: Optional[int] = Field(default=None, ge=0)
    # Seuil calculé selon la longueur de la plus longue chaîne (ignoré si max_distance est fourni)
    dynamic_max: bool = False


class DistanceRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de calcul de distance."""
    a: Optional[str] = None
    b: Optional[str] = None
    options: DistanceOptions = Field(default_factory=DistanceOptions)


class DistanceResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de calcul de distance."""
    distance: int
    max_distance: Optional[int] = None
    within_threshold: Optional[bool] = None
    is_null_input: bool = False
    a_length: Optional[int] = None
    b_length: Optional[int] = None
    cached: bool = False
    query_time_ms: float
    memory_used_mb: Optional[float] = None

