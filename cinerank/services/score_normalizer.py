"""
Normalisation des scores bruts sur une echelle bornee [0, 1000].

Les scores bruts ne sont pas bornes (un remux 4K depasse 20000).
La table de paliers ci-dessous les ramene sur une echelle lisible:

- <= 2000   -> 0-200   (faible qualite)
- <= 5000   -> 200-400 (basique)
- <= 10000  -> 400-600 (bonne)
- <= 15000  -> 600-800 (tres bonne)
- <= 25000  -> 800-950 (meilleure)
- au-dela   -> 950-1000 (queue logarithmique)

La table est commune a tous les profils.
"""

import math


# ====================
# Table des paliers
# ====================

# (seuil brut, score normalise au seuil), par seuils croissants
NORMALIZATION_TIERS: tuple[tuple[float, float], ...] = (
    (0, 0),
    (2000, 200),
    (5000, 400),
    (10000, 600),
    (15000, 800),
    (25000, 950),
)

MAX_NORMALIZED_SCORE = 1000
# Amplitude maximale de la queue logarithmique
TAIL_SPAN = 50.0


def normalize_score(raw_score: float) -> float:
    """
    Normalise un score brut sur [0, 1000].

    Interpolation lineaire entre les paliers, puis queue logarithmique
    au-dela du dernier palier: 950 + min(50, 10 * log10(excedent / 1000 + 1)).

    Args:
        raw_score: Score brut (peut etre negatif ou -inf)

    Returns:
        Score normalise, 0 pour tout score brut <= 0.
    """
    if raw_score <= 0 or math.isnan(raw_score):
        return 0.0

    previous_raw, previous_normalized = NORMALIZATION_TIERS[0]
    for threshold, normalized in NORMALIZATION_TIERS[1:]:
        if raw_score <= threshold:
            ratio = (raw_score - previous_raw) / (threshold - previous_raw)
            return previous_normalized + ratio * (normalized - previous_normalized)
        previous_raw, previous_normalized = threshold, normalized

    if math.isinf(raw_score):
        return float(MAX_NORMALIZED_SCORE)

    excess = raw_score - previous_raw
    return previous_normalized + min(TAIL_SPAN, 10 * math.log10(excess / 1000 + 1))
