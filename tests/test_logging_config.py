"""Tests for wfc.logging_config module."""

import logging

import pytest

from wfc import Matrix, SolveFailure, Solver
from wfc.logging_config import setup_logging


@pytest.fixture
def wfc_logger():
    """Restore the "wfc" logger after a test configured it."""
    logger = logging.getLogger("wfc")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self, wfc_logger):
        logger = setup_logging(logging.WARNING)
        assert logger is wfc_logger
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING

    def test_reinitialization_replaces_handlers(self, wfc_logger, tmp_path):
        setup_logging(log_file=tmp_path / "wfc.log")
        setup_logging(log_file=tmp_path / "wfc.log")
        assert len(wfc_logger.handlers) == 2

    def test_file_receives_solver_debug(self, wfc_logger, tmp_path, open_tileset):
        log_path = tmp_path / "logs" / "wfc.log"
        setup_logging(logging.CRITICAL, log_file=log_path)
        solver = Solver(Matrix(2, 1), open_tileset, seed=0)
        while not solver.step():
            pass
        for handler in wfc_logger.handlers:
            handler.flush()
        text = log_path.read_text(encoding="utf-8")
        assert "Collapsed" in text
        assert "Solved 2x1 matrix" in text


class TestSolverLogging:
    """Tests for what the solver reports."""

    def test_contradiction_logged(self, caplog, hostile_tileset):
        solver = Solver(Matrix(2, 1), hostile_tileset, seed=0)
        with caplog.at_level(logging.WARNING, logger="wfc"):
            with pytest.raises(SolveFailure):
                for _ in range(5):
                    solver.step()
        assert any("Contradiction" in r.getMessage() for r in caplog.records)
