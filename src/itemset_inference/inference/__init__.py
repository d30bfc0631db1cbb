"""Inference algorithm implementations for explaining a transaction with itemsets."""

from .base import InferenceAlgorithm, InferenceResult
from .exact import ExactCover
from .factory import ALGORITHMS, make_inference_algorithm
from .greedy import GreedyCover
from .primal_dual import PrimalDualCover
