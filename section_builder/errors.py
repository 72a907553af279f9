"""Exceptions du builder."""


class BuilderError(Exception):
    """Erreur de base du section_builder."""


class ComponentNotFound(BuilderError, KeyError):
    """Aucun composant enregistré sous ce nom."""

    def __init__(self, name: str, available=None):
        self.name = name
        self.available = sorted(available or [])
        super().__init__(name)

    def __str__(self) -> str:
        return f"Composant inconnu : {self.name!r}. Registry : {self.available}"
