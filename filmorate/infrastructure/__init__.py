"""
Couche infrastructure de Filmorate.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- memory/ : Stockage en memoire du processus (perdu au redemarrage)
- persistence/ : Stockage SQLite avec SQLModel (modeles et repositories)

Architecture hexagonale : les deux variantes implementent les memes ports,
le choix se fait a la composition (voir container.py) sans modifier
la logique metier.
"""
