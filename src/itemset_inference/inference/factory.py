"""Select an inference algorithm by name."""

from .base import InferenceAlgorithm
from .exact import ExactCover
from .greedy import GreedyCover
from .primal_dual import PrimalDualCover

ALGORITHMS = ("greedy", "primal_dual", "exact")


def make_inference_algorithm(name: str, **kwargs) -> InferenceAlgorithm:
    """Build the inference algorithm called *name*.

    ``primal_dual`` accepts ``seed`` and ``rng``; ``exact`` accepts ``solver``
    and ``time_limit``.
    """
    if name == "greedy":
        return GreedyCover(**kwargs)
    elif name == "primal_dual":
        return PrimalDualCover(**kwargs)
    elif name == "exact":
        return ExactCover(**kwargs)
    else:
        raise ValueError(f"Unknown inference algorithm: {name}")
