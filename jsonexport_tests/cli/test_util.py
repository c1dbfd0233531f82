import logging
import unittest

import structlog

from jsonexport.cli.util import (
    LoggingOptions,
    LoggingOutput,
    process_logging_options,
    process_logging_output,
    setup_logging,
)


class LoggingArgsTest(unittest.TestCase):
    def test_process_logging_output(self):
        argv = ['--json-logs', 'target']
        self.assertEqual(process_logging_output(argv), LoggingOutput.JSON)
        self.assertEqual(argv, ['target'])

        argv = ['--disable-logs']
        self.assertEqual(process_logging_output(argv), LoggingOutput.NULL)
        self.assertEqual(argv, [])

        self.assertEqual(process_logging_output([]), LoggingOutput.PRETTY)

    def test_process_logging_options(self):
        argv = ['--debug', 'target']
        self.assertEqual(process_logging_options(argv), LoggingOptions(debug=True))
        self.assertEqual(argv, ['target'])
        self.assertEqual(process_logging_options([]), LoggingOptions(debug=False))


class SetupLoggingTest(unittest.TestCase):
    def tearDown(self) -> None:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_setup_logging(self):
        for output in LoggingOutput:
            for debug in (False, True):
                with self.subTest(output=output, debug=debug):
                    setup_logging(logging_output=output, logging_options=LoggingOptions(debug=debug))
                    root = logging.getLogger()
                    self.assertEqual(root.level, logging.DEBUG if debug else logging.INFO)
                    self.assertEqual(len(root.handlers), 1)
