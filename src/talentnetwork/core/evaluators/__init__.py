"\"\"\"Signal evaluators for the screening engine.\"\"\""

from .auto_qualifiers import AutoQualifierEvaluator
from .strong_signals import StrongSignalEvaluator
from .disqualifiers import DisqualifierEvaluator

__all__ = [
    "AutoQualifierEvaluator",
    "StrongSignalEvaluator",
    "DisqualifierEvaluator",
]
