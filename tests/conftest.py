# tests/conftest.py
import os

# Pas de fichiers de logs pendant les tests
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from unittest.mock import MagicMock, AsyncMock


# --- Mocks des clients de bas niveau ---

@pytest.fixture
def mock_cache_manager():
    """Fixture pour un mock du gestionnaire de cache Redis."""
    cache = MagicMock()
    cache.get = AsyncMock(return_value=None)  # Par défaut, le cache est toujours vide (miss)
    cache.set = AsyncMock()
    cache.ping = AsyncMock(return_value=True)
    return cache

# --- Services de l'application ---

@pytest.fixture
def distance_service_mock(mock_cache_manager):
    """
    Fixture qui fournit un vrai DistanceService branché sur un cache mocké.
    """
    from distance_api.service import DistanceService

    return DistanceService(cache=mock_cache_manager)
