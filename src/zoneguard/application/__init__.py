"""
Application layer for zoneguard.

Orchestrates the rules over edge streams and collects the results.
"""

from zoneguard.application.engine import PolicyEngine, evaluate
from zoneguard.application.reporter import ViolationReporter

__all__ = [
    "PolicyEngine",
    "ViolationReporter",
    "evaluate",
]
