"""portfolio_qa.matching.matcher

Matches a user question to an AnswerRecord using a dependency-free bag-of-substrings score.

Scoring per record:
- each phrase found in the question adds len(phrase) * 3 (long, specific phrases dominate)
- each keyword found adds 1
- when more than one distinct keyword is found (case-insensitive), that count is added again;
  a keyword listed twice in a record still scores +1 per listing but counts once for the bonus

Containment is plain substring, not word-level: "return" also hits "returning".
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from portfolio_qa.contracts.models import AnswerRecord, ConfidenceTier, MatchResult

PHRASE_WEIGHT = 3
HIGH_THRESHOLD = 8
MEDIUM_THRESHOLD = 4
LOW_THRESHOLD = 2


@dataclass
class RecordScore:
    answer: AnswerRecord
    score: int
    phrase_hits: list[str]
    keyword_hits: list[str]


def normalize_question(question: str, placeholders: Optional[Mapping[str, str]] = None) -> str:
    """Lower-case the question and substitute `{key}` placeholders, in mapping order."""
    text = question.lower()
    for key, value in (placeholders or {}).items():
        pattern = re.compile(re.escape("{" + key + "}"), flags=re.IGNORECASE)
        replacement = str(value).lower()
        text = pattern.sub(lambda _m: replacement, text)
    return text


def score_answer(text: str, answer: AnswerRecord) -> RecordScore:
    """Score one record against already-normalized question text."""
    score = 0
    phrase_hits: list[str] = []
    for phrase in answer.phrases or []:
        if phrase.lower() in text:
            score += len(phrase) * PHRASE_WEIGHT
            phrase_hits.append(phrase)

    keyword_hits: list[str] = []
    for kw in answer.keywords or []:
        if kw.lower() in text:
            score += 1
            keyword_hits.append(kw)

    distinct = len({k.lower() for k in keyword_hits})
    if distinct > 1:
        score += distinct

    return RecordScore(answer=answer, score=score, phrase_hits=phrase_hits, keyword_hits=keyword_hits)


def confidence_tier(score: int) -> Optional[ConfidenceTier]:
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MEDIUM_THRESHOLD:
        return "medium"
    if score >= LOW_THRESHOLD:
        return "low"
    return None


def score_catalog(text: str, catalog: Iterable[AnswerRecord]) -> list[RecordScore]:
    """Score every record, keeping catalog order."""
    return [score_answer(text, a) for a in catalog]


def pick_best(scores: Iterable[RecordScore]) -> Optional[MatchResult]:
    """Highest-scoring record with its tier, or None below the low threshold.

    Ties keep the record that comes first.
    """
    best: Optional[RecordScore] = None
    for rs in scores:
        if best is None or rs.score > best.score:
            best = rs
    if best is None:
        return None
    tier = confidence_tier(best.score)
    if tier is None:
        return None
    return MatchResult(answer=best.answer, confidence_score=best.score, confidence_tier=tier)


def best_match(
    question: str,
    catalog: Iterable[AnswerRecord],
    placeholders: Optional[Mapping[str, str]] = None,
) -> Optional[MatchResult]:
    """Normalize, score the catalog in order and pick the winner."""
    return pick_best(score_catalog(normalize_question(question, placeholders), catalog))
