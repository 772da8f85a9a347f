"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les objets persistés. Ici la table User, simple échafaudage CRUD :
aucune route ne l'expose et l'administration n'a pas d'authentification.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).
"""

from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True)
    password: str
