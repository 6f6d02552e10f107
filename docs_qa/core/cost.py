"""
Token and cost accounting.

Per-model price tables, conversion of token counts to dollars, and the
per-question ledger that accumulates search and chat usage.

Dependencies: docs_qa.models
System role: Deterministic cost reporting for search and ask requests
"""

from dataclasses import dataclass

from docs_qa.models.ask import AskCost

# Dollars per 1K tokens
EMBEDDING_PRICE_PER_1K = 0.00002  # text-embedding-3-small
COST_DECIMALS = 8


@dataclass(frozen=True)
class ModelPricing:
    """Input/output price pair in dollars per 1K tokens."""

    input: float
    output: float


GPT_4O_MINI_PRICING = ModelPricing(input=0.00015, output=0.0006)
GPT_35_PRICING = ModelPricing(input=0.0005, output=0.0015)

# Checked in order; first substring contained in the model name wins.
_PRICING_TABLE: tuple[tuple[str, ModelPricing], ...] = (
    ("gpt-4o-mini", GPT_4O_MINI_PRICING),
    ("gpt-4o", GPT_4O_MINI_PRICING),
    ("gpt-3.5", GPT_35_PRICING),
)


def get_model_pricing(model: str) -> ModelPricing:
    """Price pair for ``model``; unknown models are priced as gpt-4o-mini."""
    for fragment, pricing in _PRICING_TABLE:
        if fragment in model:
            return pricing
    return GPT_4O_MINI_PRICING


def embedding_cost(tokens: int, price_per_1k: float = EMBEDDING_PRICE_PER_1K) -> float:
    """Dollar cost of embedding ``tokens`` tokens."""
    return (tokens / 1000) * price_per_1k


def chat_cost(prompt_tokens: int, output_tokens: int, model: str) -> float:
    """Dollar cost of a chat exchange with the given token usage."""
    pricing = get_model_pricing(model)
    return (prompt_tokens / 1000) * pricing.input + (output_tokens / 1000) * pricing.output


def round_cost(value: float) -> float:
    """Round a dollar amount to the reported precision."""
    return round(value, COST_DECIMALS)


@dataclass
class CostLedger:
    """Accumulates usage for a single question."""

    search_tokens: int = 0
    search_cost: float = 0.0
    prompt_tokens: int = 0
    output_tokens: int = 0

    def add_search(self, tokens: int, cost: float) -> None:
        self.search_tokens += tokens
        self.search_cost += cost

    def add_completion(self, prompt_tokens: int, output_tokens: int) -> None:
        self.prompt_tokens += prompt_tokens
        self.output_tokens += output_tokens

    def finalize(self, model: str) -> AskCost:
        """
        Produce the rounded cost breakdown.

        Args:
            model: Chat model used, selects the price table

        Returns:
            AskCost: Search, completion and total figures rounded to 8 decimals
        """
        completion = chat_cost(self.prompt_tokens, self.output_tokens, model)
        return AskCost(
            search_tokens=self.search_tokens,
            search_cost=round_cost(self.search_cost),
            completion_tokens=self.prompt_tokens + self.output_tokens,
            completion_cost=round_cost(completion),
            total_cost=round_cost(self.search_cost + completion),
        )
