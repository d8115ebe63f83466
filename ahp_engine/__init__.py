import logging

from ahp_engine.core import MCDAMethod, MethodResult
from ahp_engine.engine import recompute
from ahp_engine.methods.ahp import AHPMethod
from ahp_engine.models import DecisionResult, DecisionSnapshot

logging.getLogger(__name__).addHandler(logging.NullHandler())

METHODS = {
    "ahp": AHPMethod(),
}


def get_method(method_id: str) -> MCDAMethod:
    return METHODS.get(method_id, METHODS["ahp"])


def list_methods() -> dict:
    return {method_id: method.name for method_id, method in METHODS.items()}


__all__ = [
    "AHPMethod",
    "DecisionResult",
    "DecisionSnapshot",
    "MCDAMethod",
    "MethodResult",
    "get_method",
    "list_methods",
    "recompute",
]
