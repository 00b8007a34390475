"""portfolio_qa.catalog.default_catalog

Built-in answer catalog seeded at process start.

Each record carries single-word keywords and higher-weight phrases; `data` is the payload the
UI renders (chart series, KPI metrics, holdings/sector tables). Override with CATALOG_PATH.
"""

from __future__ import annotations

from portfolio_qa.contracts.models import AnswerRecord


def default_catalog() -> list[AnswerRecord]:
    return [
        AnswerRecord(
            id="1",
            title="Portfolio Performance Analysis",
            content=(
                "Your portfolio has shown strong performance this year with a 12.4% return YTD, "
                "outperforming the S&P 500 by 2.1%."
            ),
            keywords=["performance", "return", "ytd", "s&p", "outperform"],
            phrases=["YTD performance", "portfolio return", "vs S&P 500"],
            category="Performance Analysis",
            answer_type="performance",
            data={
                "chart": {
                    "type": "line",
                    "data": [
                        {"period": "Jan", "value": 2.1},
                        {"period": "Feb", "value": 3.8},
                        {"period": "Mar", "value": 5.2},
                        {"period": "Apr", "value": 7.1},
                        {"period": "May", "value": 8.9},
                        {"period": "Jun", "value": 10.3},
                        {"period": "Jul", "value": 11.8},
                        {"period": "Aug", "value": 12.4},
                    ],
                },
                "ytdReturn": 12.4,
                "benchmarkReturn": 10.3,
                "excess": 2.1,
                "volatility": 14.2,
            },
        ),
        AnswerRecord(
            id="2",
            title="Risk Assessment",
            content="Your portfolio shows moderate risk with a beta of 0.85 and volatility of 14.2%.",
            keywords=["risk", "beta", "volatility", "assessment"],
            phrases=["risk metrics", "beta volatility"],
            category="Risk Assessment",
            answer_type="risk",
            data={
                "metrics": {
                    "beta": 0.85,
                    "volatility": 14.2,
                    "sharpeRatio": 1.23,
                    "maxDrawdown": -8.5,
                    "var95": -3.2,
                    "tracking": 2.1,
                },
                "riskProfile": "Moderate",
                "grade": "B+",
                "benchmarkBeta": 1.0,
                "benchmarkVol": 16.8,
            },
        ),
        AnswerRecord(
            id="3",
            title="Top Holdings",
            content=(
                "Your top 10 holdings represent 45% of your portfolio, with Apple (8.2%) and "
                "Microsoft (6.1%) being the largest positions."
            ),
            keywords=["holdings", "top", "positions", "apple", "microsoft"],
            phrases=["top holdings", "largest positions"],
            category="Holdings Analysis",
            answer_type="holdings",
            data={
                "topHoldings": [
                    {"symbol": "AAPL", "name": "Apple Inc.", "percentage": 8.2, "return": 14.5, "ytdReturn": 12.3},
                    {"symbol": "MSFT", "name": "Microsoft Corp.", "percentage": 6.1, "return": 18.2, "ytdReturn": 15.7},
                    {"symbol": "GOOGL", "name": "Alphabet Inc.", "percentage": 4.8, "return": 22.1, "ytdReturn": 18.9},
                    {"symbol": "AMZN", "name": "Amazon.com Inc.", "percentage": 4.2, "return": 16.7, "ytdReturn": 13.4},
                    {"symbol": "TSLA", "name": "Tesla Inc.", "percentage": 3.9, "return": 28.3, "ytdReturn": 24.1},
                    {"symbol": "NVDA", "name": "NVIDIA Corp.", "percentage": 3.7, "return": 45.6, "ytdReturn": 38.2},
                    {"symbol": "META", "name": "Meta Platforms Inc.", "percentage": 3.2, "return": 19.8, "ytdReturn": 16.5},
                    {"symbol": "BRK.B", "name": "Berkshire Hathaway Inc.", "percentage": 2.8, "return": 8.4, "ytdReturn": 7.1},
                    {"symbol": "JNJ", "name": "Johnson & Johnson", "percentage": 2.5, "return": 5.2, "ytdReturn": 4.8},
                    {"symbol": "V", "name": "Visa Inc.", "percentage": 2.3, "return": 12.7, "ytdReturn": 10.9},
                ],
                "totalWeight": 42.5,
                "avgPE": 24.8,
                "avgReturn": 19.2,
                "ytdReturn": 16.4,
                "contribution": 3.2,
            },
        ),
        AnswerRecord(
            id="4",
            title="Sector Allocation Analysis",
            content=(
                "Your portfolio shows strong diversification across sectors with Technology (28%) and "
                "Healthcare (18%) as top allocations."
            ),
            keywords=["allocation", "sector", "diversification", "technology", "healthcare"],
            phrases=["sector allocation", "asset allocation"],
            category="Allocation Analysis",
            answer_type="allocation",
            data={
                "sectors": [
                    {"name": "Technology", "portfolio": 28.5, "benchmark": 25.2, "excess": 3.3, "return": 18.7},
                    {"name": "Healthcare", "portfolio": 18.2, "benchmark": 16.8, "excess": 1.4, "return": 12.4},
                    {"name": "Financials", "portfolio": 15.1, "benchmark": 18.3, "excess": -3.2, "return": 8.9},
                    {"name": "Consumer Discretionary", "portfolio": 12.4, "benchmark": 11.7, "excess": 0.7, "return": 15.2},
                    {"name": "Communication Services", "portfolio": 8.8, "benchmark": 9.1, "excess": -0.3, "return": 14.6},
                    {"name": "Industrials", "portfolio": 7.9, "benchmark": 8.2, "excess": -0.3, "return": 11.3},
                ],
                "excessReturn": 2.1,
            },
        ),
        AnswerRecord(
            id="5",
            title="Dividend Income Analysis",
            content=(
                "Your portfolio generates a 2.8% dividend yield with consistent quarterly payments "
                "totaling $14,250 annually."
            ),
            keywords=["dividend", "yield", "income", "quarterly", "payments"],
            phrases=["dividend yield", "dividend income"],
            category="Income Analysis",
            answer_type="dividend",
            data={
                "currentYield": 2.8,
                "annualIncome": 14250,
                "quarterlyIncome": 3562.5,
                "yieldGrowth": 6.2,
                "payoutRatio": 45.3,
                "dividendGrowthRate": 8.1,
                "topDividendStocks": [
                    {"symbol": "JNJ", "yield": 2.9, "income": 1247},
                    {"symbol": "PG", "yield": 2.6, "income": 1089},
                    {"symbol": "KO", "yield": 3.1, "income": 892},
                ],
            },
        ),
    ]


# Shortcut questions shown by the demo UI, one per catalog entry plus fallback examples.
SUGGESTED_QUESTIONS = [
    "What's the YTD performance vs S&P 500?",
    "Show me the risk metrics for these accounts",
    "What are my top holdings?",
    "How does the sector allocation look?",
    "What's the dividend yield on this portfolio?",
    "How is {benchmark} doing against my portfolio return?",
    "What is my advisor's phone number?",
    "Should I sell my Tesla position?",
]
