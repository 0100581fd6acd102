"""
Interface en ligne de commande (Typer + Rich).

- commands : Commandes parse, score, rank, upgrade, profiles, formats
"""
