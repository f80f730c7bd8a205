from .arithmetic import Arithmetic, add, subtract

__all__ = ["Arithmetic", "add", "subtract"]
