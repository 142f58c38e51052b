from loguru import logger

from awesomebar.logging_config import setup_logging


class TestSetupLogging:

    def test_messages_reach_configured_sink(self):
        messages = []
        handler_id = setup_logging("DEBUG", sink=messages.append, fmt="{level} {message}")
        try:
            logger.debug("hello")
        finally:
            logger.remove(handler_id)

        assert [m.strip() for m in messages] == ["DEBUG hello"]

    def test_level_filters_messages(self):
        messages = []
        handler_id = setup_logging("warning", sink=messages.append, fmt="{message}")
        try:
            logger.info("quiet")
            logger.warning("loud")
        finally:
            logger.remove(handler_id)

        assert [m.strip() for m in messages] == ["loud"]
