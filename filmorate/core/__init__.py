"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites), les règles de
validation et les exceptions métier.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (stockage, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Film, User, Mpa, Genre)
- ports/ : Interfaces abstraites définissant les contrats de stockage
"""
