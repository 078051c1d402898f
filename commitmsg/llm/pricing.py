"""Model pricing.

Each model identifier maps to a function turning the total number of tokens
used by a request into a cost in dollars. Adding a model means adding an entry
to ``MODEL_PRICING``.
"""

from typing import Callable

GPT_3_5_TURBO = "gpt-3.5-turbo"

PricingFn = Callable[[int], float]


def per_thousand_tokens(price: float) -> PricingFn:
    """Linear pricing, ``price`` dollars per 1000 tokens."""
    def _cost(total_tokens: int) -> float:
        if total_tokens <= 0:
            return 0.0
        return total_tokens * price / 1000
    return _cost


def _free(total_tokens: int) -> float:
    return 0.0


MODEL_PRICING: dict[str, PricingFn] = {
    GPT_3_5_TURBO: per_thousand_tokens(0.002),
}


def cost(model: str, total_tokens: int) -> float:
    """Cost in dollars of a request to ``model`` that used ``total_tokens``.

    Unknown models are priced at zero.
    """
    return MODEL_PRICING.get(model, _free)(total_tokens)
