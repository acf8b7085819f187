"""Calcul de la distance de Levenshtein (Wagner-Fischer sur deux lignes)."""
from functools import lru_cache
from typing import List, Optional

from distance_api.config import settings


def levenshtein_distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Calcule la distance d'édition entre deux chaînes.

    Coûts unitaires pour l'insertion, la suppression et la substitution.
    Les caractères sont comparés tels quels (pas de casse, pas de normalisation Unicode).

    Args:
        a: Première chaîne, ou None
        b: Deuxième chaîne, ou None

    Returns:
        Distance de Levenshtein. 0 si l'une des deux valeurs est absente (None),
        et non la longueur de l'autre chaîne.
    """
    if a is None or b is None:
        return 0

    m = len(a)
    n = len(b)

    if m == 0:
        return n
    if n == 0:
        return m

    previous_row: List[int] = list(range(n + 1))
    current_row: List[int] = [0] * (n + 1)

    for i in range(m):
        current_row[0] = i + 1
        char_a = a[i]
        for j in range(n):
            cost = 0 if char_a == b[j] else 1
            current_row[j + 1] = min(
                previous_row[j + 1] + 1,
                current_row[j] + 1,
                previous_row[j] + cost,
            )
        # On écrit toujours dans la ligne qui n'est pas lue au tour suivant
        previous_row, current_row = current_row, previous_row

    return previous_row[n]


class StringDistance:
    """Classe pour calculer les distances entre chaînes."""

    @lru_cache(maxsize=settings.DISTANCE_CACHE_SIZE)
    def distance(self, s1: Optional[str], s2: Optional[str], max_distance: Optional[int] = None) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Args:
            s1: Première chaîne
            s2: Deuxième chaîne
            max_distance: Distance maximale (si dépassée, retourne max_distance + 1)

        Returns:
            Distance de Levenshtein
        """
        dist = levenshtein_distance(s1, s2)

        if max_distance is not None and dist > max_distance:
            return max_distance + 1

        return dist

    def dynamic_max(self, s: str) -> int:
        """
        Calcule la distance maximale dynamique selon la longueur.

        Args:
            s: Chaîne à analyser

        Returns:
            Distance maximale recommandée
        """
        length = len(s)

        if length <= 3:
            return 1
        if length <= 6:
            return 2
        if length <= 10:
            return 3
        return 4


# Instance globale réutilisable
string_distance = StringDistance()
