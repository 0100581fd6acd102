"""
Adaptateurs: implementations concretes des ports du domaine.

- parsing/ : Parser de titres de releases par expressions regulieres
- persistence/ : Source de profils et formats depuis un fichier JSON
"""
