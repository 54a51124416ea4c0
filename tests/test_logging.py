"""Tests for loguru-based bridge logging."""

from loguru import logger

from lifecycle_bridge.config import BridgeConfig
from lifecycle_bridge.status import map_status_code


class TestSetupLogging:
    def setup_method(self):
        logger.remove()

    def teardown_method(self):
        logger.remove()

    def test_setup_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        config = BridgeConfig(_env_file=None, log_dir=log_dir)
        config.setup_logging()
        assert log_dir.exists()

    def test_setup_adds_file_sink(self, tmp_path):
        log_dir = tmp_path / "logs"
        config = BridgeConfig(_env_file=None, log_dir=log_dir)
        config.setup_logging()
        logger.bind(stage="test").info("hello from test")
        content = (log_dir / "bridge.log").read_text()
        assert "hello from test" in content

    def test_stage_context_in_output(self, tmp_path):
        log_dir = tmp_path / "logs"
        config = BridgeConfig(_env_file=None, log_dir=log_dir)
        config.setup_logging()
        map_status_code(9999)
        content = (log_dir / "bridge.log").read_text()
        assert "status" in content
        assert "Unmapped lifecycle status code 9999" in content

    def test_default_stage_empty(self, tmp_path):
        log_dir = tmp_path / "logs"
        config = BridgeConfig(_env_file=None, log_dir=log_dir)
        config.setup_logging()
        logger.info("no stage bound")
        content = (log_dir / "bridge.log").read_text()
        assert "no stage bound" in content
