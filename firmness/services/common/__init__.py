from .permissions import Principal

__all__ = ["Principal"]
