"""
Services metier de cinerank.

- safe_regex : Garde-fous des expressions regulieres configurables
- format_matcher : Evaluation des formats personnalises
- formats/ : Registre des formats integres
- profiles : Profils de scoring integres
- score_normalizer : Normalisation des scores sur [0, 1000]
- release_scorer : Scoring, classement et decision d'upgrade
"""
