"""Core tree logger node and the sink decorators behind its transformations."""

from .composite import BranchingSimpleLogger, InterceptingSimpleLogger
from .tree_logger import KEEP_TAG, SimpleTreeLogger, TreeLogger, context_tag

__all__ = [
    "BranchingSimpleLogger",
    "InterceptingSimpleLogger",
    "KEEP_TAG",
    "SimpleTreeLogger",
    "TreeLogger",
    "context_tag",
]
