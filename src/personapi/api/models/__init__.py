from .person import Person, PersonIn

__all__ = ["Person", "PersonIn"]
