"""Covering inference for probabilistic itemset mining under a noisy-OR model."""

import logging
from importlib import metadata

from .cost_model import Item, Itemset, Transaction, covering_cost, filter_itemsets, off_cost, on_cost
from .covering_program import CoveringProgram, CoveringSolver, HighsCoveringSolver, build_covering_program
from .inference import (
    ALGORITHMS,
    ExactCover,
    GreedyCover,
    InferenceAlgorithm,
    InferenceResult,
    PrimalDualCover,
    make_inference_algorithm,
)
from .validation import ValidationResult, check_probabilities, validate_covering, verify_covering

try:
    __version__ = metadata.version("itemset-inference")
except metadata.PackageNotFoundError:
    __version__ = "0.1.0"


def get_logger(name=None) -> logging.Logger:
    """Return a logger under the itemset_inference namespace (the package logger if *name* is None)."""
    if name is None:
        return logging.getLogger(__name__)
    return logging.getLogger(f"{__name__}.{name}")
