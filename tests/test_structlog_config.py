import logging
from types import SimpleNamespace
from unittest import TestCase, mock

import structlog

from pubsub_dispatcher.adapters.config import structlog_config
from pubsub_dispatcher.adapters.config.structlog_config import PACKAGE_LOGGER, configure_logging


class ConfigureLoggingTests(TestCase):
    def setUp(self):
        self.root = logging.getLogger()
        self.package_logger = logging.getLogger(PACKAGE_LOGGER)
        self._root_handlers = self.root.handlers[:]
        self._root_level = self.root.level
        self._package_state = (
            self.package_logger.handlers[:],
            self.package_logger.level,
            self.package_logger.propagate,
        )
        # structlog.configure é global; os testes só inspecionam os argumentos
        patcher = mock.patch("structlog.configure")
        self.configure = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        handlers, level, propagate = self._package_state
        self.package_logger.handlers[:] = handlers
        self.package_logger.setLevel(level)
        self.package_logger.propagate = propagate
        structlog_config._handler = None

    def test_level_and_json_renderer_come_from_settings(self):
        configure_logging(SimpleNamespace(LOG_LEVEL="warning", JSON_LOGS=True))

        kwargs = self.configure.call_args.kwargs
        self.assertTrue(kwargs["cache_logger_on_first_use"])
        self.assertIsInstance(kwargs["logger_factory"], structlog.stdlib.LoggerFactory)

        self.assertEqual(self.package_logger.level, logging.WARNING)
        self.assertEqual(len(self.package_logger.handlers), len(self._package_state[0]) + 1)
        formatter = self.package_logger.handlers[-1].formatter
        self.assertIsInstance(formatter, structlog.stdlib.ProcessorFormatter)
        self.assertIsInstance(formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_when_json_disabled(self):
        configure_logging(SimpleNamespace(LOG_LEVEL="DEBUG", JSON_LOGS=False))

        formatter = self.package_logger.handlers[-1].formatter
        self.assertIsInstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_host_root_logger_is_untouched(self):
        configure_logging(SimpleNamespace(LOG_LEVEL="INFO", JSON_LOGS=False))

        self.assertEqual(self.root.handlers, self._root_handlers)
        self.assertEqual(self.root.level, self._root_level)
        self.assertFalse(self.package_logger.propagate)

    def test_repeated_calls_replace_the_handler(self):
        settings = SimpleNamespace(LOG_LEVEL="INFO", JSON_LOGS=False)
        configure_logging(settings)
        first = self.package_logger.handlers[-1]

        returned = configure_logging(settings)

        self.assertIs(returned, self.package_logger)
        self.assertNotIn(first, self.package_logger.handlers)
        self.assertEqual(len(self.package_logger.handlers), len(self._package_state[0]) + 1)
