"""
Filmorate - Catalogue de films et d'utilisateurs.

Ce package gere les films, les utilisateurs, les likes (utilisateur -> film)
et les amities (utilisateur <-> utilisateur), ainsi que le classement des
films les plus populaires.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, règles de validation, erreurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Stockage en mémoire et persistance SQLModel
"""
