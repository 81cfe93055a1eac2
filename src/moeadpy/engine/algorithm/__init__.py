"""Algorithm implementations."""

from .config import MOEADConfig
from .moead import MOEAD, RunStatus

__all__ = ["MOEAD", "MOEADConfig", "RunStatus"]
