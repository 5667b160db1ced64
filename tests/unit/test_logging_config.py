"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

from veritree.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_merkle_root_computation,
    log_merkle_verification,
    log_proof_generation,
    set_correlation_id,
    setup_logging,
)


def read_entries(log_file: Path):
    return [json.loads(line) for line in log_file.read_text().splitlines() if line]


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        # Logger can be BoundLogger or BoundLoggerLazyProxy (both are valid)
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_unknown_level_falls_back_to_info(self):
        setup_logging(level="NOPE")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_replaces_handlers(self, temp_dir: Path):
        setup_logging(log_file=temp_dir / "one.log")
        setup_logging(log_file=temp_dir / "two.log")

        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_creates_log_directory(self, temp_dir: Path):
        log_file = temp_dir / "nested" / "dir" / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("test").info("test_message")

        assert log_file.exists()

    def test_setup_logging_json_format(self, temp_dir: Path):
        """Test setup_logging with JSON format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_entry = read_entries(log_file)[0]
        assert log_entry["event"] == "test_message"
        assert log_entry["key"] == "value"
        assert log_entry["logger"] == "veritree.test"
        assert "timestamp" in log_entry
        assert "level" in log_entry

    def test_setup_logging_human_format(self, temp_dir: Path):
        """Test setup_logging with human-readable format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_content = log_file.read_text()
        assert "test_message" in log_content
        assert "key" in log_content

    def test_level_filters_messages(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="WARNING", log_file=log_file, json_format=True)

        logger = get_logger("test")
        logger.info("hidden_message")
        logger.warning("shown_message")

        events = [entry["event"] for entry in read_entries(log_file)]
        assert events == ["shown_message"]


class TestCorrelationId:
    """Test correlation ID context management."""

    def test_correlation_id_management(self):
        assert get_correlation_id() is None

        correlation_id = set_correlation_id("test-correlation-id")
        assert correlation_id == "test-correlation-id"
        assert get_correlation_id() == "test-correlation-id"

        clear_correlation_id()
        assert get_correlation_id() is None

    def test_correlation_id_auto_generation(self):
        correlation_id = set_correlation_id()
        assert correlation_id
        assert get_correlation_id() == correlation_id

    def test_correlation_id_in_logs(self, temp_dir: Path):
        """Test correlation ID appears in log output."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("test")
        set_correlation_id("test-correlation-123")
        logger.info("test_message")

        assert read_entries(log_file)[0]["correlation_id"] == "test-correlation-123"

    def test_no_correlation_id_in_logs_when_unset(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        get_logger("test").info("test_message")

        assert "correlation_id" not in read_entries(log_file)[0]


class TestTreeLogHelpers:
    """Test the convenience functions for tree operations."""

    def test_log_merkle_root_computation(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        log_merkle_root_computation(
            get_logger("test"),
            leaf_count=7,
            merkle_root="ab" * 32,
            algorithm="sha3_256",
            duration_ms=1.5,
        )

        log_entry = read_entries(log_file)[0]
        assert log_entry["event_type"] == "merkle_root_computation"
        assert log_entry["leaf_count"] == 7
        assert log_entry["merkle_root"] == "ab" * 32
        assert log_entry["algorithm"] == "sha3_256"
        assert log_entry["duration_ms"] == 1.5
        assert log_entry["level"] == "info"

    def test_log_proof_generation(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)

        log_proof_generation(
            get_logger("test"),
            merkle_root="cd" * 32,
            found=False,
            proof_length=0,
            value_size=12,
        )

        log_entry = read_entries(log_file)[0]
        assert log_entry["event_type"] == "merkle_proof_generation"
        assert log_entry["found"] is False
        assert log_entry["proof_length"] == 0
        assert log_entry["value_size"] == 12
        assert log_entry["level"] == "debug"

    def test_log_proof_generation_hidden_at_info(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        log_proof_generation(get_logger("test"), merkle_root="cd" * 32, found=True, proof_length=3)

        assert read_entries(log_file) == []

    def test_log_merkle_verification_success(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        log_merkle_verification(
            get_logger("test"),
            success=True,
            proof_length=3,
            algorithm="sha256",
            duration_ms=0.2,
        )

        log_entry = read_entries(log_file)[0]
        assert log_entry["event"] == "merkle_verification"
        assert log_entry["success"] is True
        assert log_entry["level"] == "info"

    def test_log_merkle_verification_failure(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        log_merkle_verification(
            get_logger("test"),
            success=False,
            proof_length=3,
            algorithm="sha256",
            duration_ms=0.2,
        )

        log_entry = read_entries(log_file)[0]
        assert log_entry["event"] == "merkle_verification_failed"
        assert log_entry["event_type"] == "merkle_verification"
        assert log_entry["success"] is False
        assert log_entry["level"] == "warning"
