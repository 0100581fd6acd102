"""
Couche domaine (core).

Contient les ports (interfaces abstraites) et les objets valeur.
Cette couche n'a AUCUNE dépendance vers les adaptateurs ou les services.

Sous-packages :
- ports/ : Interfaces abstraites (parser de releases, source de profils)
- value_objects/ : Objets valeur immutables (ParsedRelease, CustomFormat, ScoringProfile)
"""
