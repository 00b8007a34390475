"""portfolio_qa.matching.classifier

Classifies questions the matcher could not answer, so the caller can return a useful fallback.

Rules are evaluated top to bottom and the first hit wins:
personal -> market -> financial_advice, then an unconditional portfolio default.
Only financial_advice questions go to the advisor review queue.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from portfolio_qa.contracts.models import Classification, FallbackType

PERSONAL_KEYWORDS = [
    "name", "address", "phone", "email", "advisor", "contact",
    "who am i", "my information", "account details",
]
MARKET_KEYWORDS = [
    "stock price", "market news", "interest rates", "fed", "inflation",
    "earnings", "when will", "what will happen",
]
ADVICE_KEYWORDS = [
    "should i", "what should", "recommend", "advice", "strategy",
    "buy", "sell", "rebalance", "allocate",
]


def any_keyword(keywords: list[str]) -> Callable[[str], bool]:
    lowered = [k.lower() for k in keywords]
    return lambda text: any(k in text for k in lowered)


@dataclass(frozen=True)
class FallbackRule:
    type: FallbackType
    title: str
    message: str
    action_text: Optional[str]
    predicate: Callable[[str], bool]

    def to_classification(self) -> Classification:
        return Classification(type=self.type, title=self.title, message=self.message, action_text=self.action_text)


RULES: list[FallbackRule] = [
    FallbackRule(
        type="personal",
        title="Account Information",
        message=(
            "I can help with portfolio analysis, but I don't have access to personal account information. "
            "You can find your account details in the main dashboard or contact your advisor directly."
        ),
        action_text="View Account Details",
        predicate=any_keyword(PERSONAL_KEYWORDS),
    ),
    FallbackRule(
        type="market",
        title="Market Data",
        message=(
            "I specialize in your portfolio analysis. For real-time market data or economic forecasts, "
            "I'd recommend checking your trading platform or financial news sources."
        ),
        action_text="Open Market Data",
        predicate=any_keyword(MARKET_KEYWORDS),
    ),
    FallbackRule(
        type="financial_advice",
        title="Advisor Review",
        message=(
            "This is a great question for personalized advice. I've added it to your advisor's review queue "
            "for detailed analysis. You should receive a response within 24 hours."
        ),
        action_text="Track Review Status",
        predicate=any_keyword(ADVICE_KEYWORDS),
    ),
]

DEFAULT_RULE = FallbackRule(
    type="portfolio",
    title="Portfolio Analysis",
    message=(
        "I don't have specific data for this portfolio question yet. I've added it to our development queue "
        "to enhance my capabilities. Meanwhile, your advisor can provide detailed insights."
    ),
    action_text="Contact Advisor",
    predicate=lambda _text: True,
)


def classify_question(question: str, rules: Optional[list[FallbackRule]] = None) -> Classification:
    text = question.lower()
    for rule in rules if rules is not None else RULES:
        if rule.predicate(text):
            return rule.to_classification()
    return DEFAULT_RULE.to_classification()
