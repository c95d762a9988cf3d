from .association import AssociationRow

__all__ = ["AssociationRow"]
