from ahp_engine.methods.ahp import AHPMethod

__all__ = ["AHPMethod"]
