from contextlib import redirect_stdout
from io import StringIO
from unittest.mock import patch

from structlog.testing import capture_logs

from jsonexport.cli import encode
from jsonexport.cli.main import CliManager
from jsonexport_tests import unittest
from jsonexport_tests.utils import SimpleBool

# a module level value, encoded as is
SIMPLE_VALUE = SimpleBool()


def make_list_holder():
    from jsonexport_tests.utils import ListHolder
    return ListHolder(list=[SimpleBool(), SimpleBool()])


class EncodeCommandTest(unittest.TestCase):
    def _run(self, *args: str) -> tuple[int, str]:
        f = StringIO()
        with patch('jsonexport.cli.util.setup_logging'), capture_logs():
            with redirect_stdout(f):
                code = CliManager().execute_from_command_line(['encode', *args, '--disable-logs'])
        return code, f.getvalue()

    def test_encode_class(self):
        code, output = self._run('jsonexport_tests.utils:NestedHolder')
        self.assertEqual(code, 0)
        self.assertEqual(output, '{"testField":{"bool":false}}\n')

    def test_encode_value(self):
        code, output = self._run(f'{__name__}:SIMPLE_VALUE')
        self.assertEqual(code, 0)
        self.assertEqual(output, '{"bool":false}\n')

    def test_encode_factory(self):
        code, output = self._run(f'{__name__}:make_list_holder')
        self.assertEqual(code, 0)
        self.assertEqual(output, '{"list":["SimpleBool":{"bool":false},"SimpleBool":{"bool":false}]}\n')

    def test_encode_untagged(self):
        code, output = self._run(f'{__name__}:make_list_holder', '--untagged-collections')
        self.assertEqual(code, 0)
        self.assertEqual(output, '{"list":[{"bool":false},{"bool":false}]}\n')

    def test_encode_to_file(self):
        path = self.mktemp_path()
        code, output = self._run('jsonexport_tests.utils:SimpleBool', '--output', path)
        self.assertEqual(code, 0)
        self.assertEqual(output, '')
        with open(path, 'rb') as fp:
            self.assertEqual(fp.read(), b'{"bool":false}')

    def test_encode_error(self):
        f = StringIO()
        with capture_logs() as logs:
            with redirect_stdout(f):
                code = encode.main(['jsonexport_tests.utils:NotExported'])
        self.assertEqual(code, encode.EXIT_ENCODING_ERROR)
        self.assertEqual(f.getvalue(), '')
        errors = [log for log in logs if log['log_level'] == 'error']
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0]['error_type'], 'EligibilityError')

    def test_load_target(self):
        self.assertIs(encode.load_target(f'{__name__}:SIMPLE_VALUE'), SIMPLE_VALUE)
        self.assertIsInstance(encode.load_target('jsonexport_tests.utils:SimpleBool'), SimpleBool)
        with self.assertRaises(ValueError):
            encode.load_target('jsonexport_tests.utils')
        with self.assertRaises(AttributeError):
            encode.load_target('jsonexport_tests.utils:Missing')
