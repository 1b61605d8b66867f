"""
Quality Control module for evaluating rendered signals.
"""
from signalum.qc.qc import analyze, fingerprint
from signalum.qc.thresholds import QC_THRESHOLDS

__all__ = ["analyze", "fingerprint", "QC_THRESHOLDS"]
