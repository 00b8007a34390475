import logging

from portfolio_qa.logging_utils import build_logger
from portfolio_qa.tracing import TraceCollector, find_step


def test_build_logger_writes_app_log_once(tmp_path):
    logger = build_logger(str(tmp_path), name="portfolio_qa.tests.file", level="debug", console=False)
    again = build_logger(str(tmp_path), name="portfolio_qa.tests.file")
    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO

    logger.info("question q1 status=matched tier=high")
    logger.handlers[0].flush()
    assert "status=matched" in (tmp_path / "app.log").read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(tmp_path):
    logger = build_logger(str(tmp_path), name="portfolio_qa.tests.level", level="chatty", console=False)
    assert logger.level == logging.INFO


def test_trace_steps_and_lookup():
    tracer = TraceCollector()
    tracer.add("normalize", {"text": "top holdings"})
    tracer.add("score", {"scores": []})
    assert [t["step"] for t in tracer.traces] == ["normalize", "score"]
    assert tracer.traces[0]["elapsedMs"] >= 0
    assert find_step(tracer.traces, "normalize") == {"text": "top holdings"}
    assert find_step(tracer.traces, "classify") is None
    assert find_step(None, "score") is None
