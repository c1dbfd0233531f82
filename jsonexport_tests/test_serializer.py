import io
import os
from datetime import datetime, time

from jsonexport.exception import ConstructionError, EligibilityError
from jsonexport.serializer import JsonSerializer, write_to_file, write_to_stream, write_to_string
from jsonexport_tests import unittest
from jsonexport_tests.utils import (
    Dates,
    ExcludeNulls,
    FrozenPoint,
    IncludeNulls,
    ListHolder,
    NestedHolder,
    NoDefaultConstructor,
    NotExported,
    NullableListHolder,
    SimpleBool,
)


class TrackingStream(io.BytesIO):
    """BytesIO that keeps its contents after being closed."""

    def close(self) -> None:
        if not self.closed:
            self.final_value = self.getvalue()
        super().close()


class SerializerTest(unittest.TestCase):
    def test_exclude_nulls(self):
        self.assertEncodes(ExcludeNulls(), '{"bool":false}')

    def test_include_nulls_with_ignored_and_renamed_fields(self):
        self.assertEncodes(IncludeNulls(), '{"string":null,"boolean value":false}')

    def test_not_exported(self):
        serializer = self.get_serializer()
        with self.assertRaises(EligibilityError) as cm:
            serializer.write_to_string(NotExported())
        self.assertEqual(str(cm.exception), 'The object NotExported you want to write is not @exported')

    def test_not_exported_builtin(self):
        with self.assertRaises(EligibilityError):
            self.get_serializer().write_to_string({'bool': False})

    def test_no_default_constructor(self):
        serializer = self.get_serializer()
        with self.assertRaises(ConstructionError) as cm:
            serializer.write_to_string(NoDefaultConstructor(1))
        self.assertEqual(str(cm.exception), 'There is no constructor with no parameters for class NoDefaultConstructor')

    def test_frozen_dataclass_without_defaults(self):
        self.assertEncodes(FrozenPoint(1, -2), '{"x":1,"y":-2}')

    def test_date_patterns(self):
        value = Dates(moment=datetime.max, clock=time.min)
        self.assertEncodes(value, '{"moment":"31/12/9999 11:59:59","clock":"12:00:00"}')

    def test_nested_object(self):
        self.assertEncodes(NestedHolder(), '{"testField":{"bool":false}}')

    def test_list_of_objects(self):
        value = ListHolder(list=[SimpleBool(), SimpleBool()])
        self.assertEncodes(value, '{"list":["SimpleBool":{"bool":false},"SimpleBool":{"bool":false}]}')

    def test_list_of_objects_untagged(self):
        value = ListHolder(list=[SimpleBool(), SimpleBool()])
        self.assertEncodes(value, '{"list":[{"bool":false},{"bool":false}]}', TAG_COLLECTION_ELEMENTS=False)

    def test_null_list_included(self):
        self.assertEncodes(NullableListHolder(), '{"list":null}')

    def test_null_list_excluded(self):
        self.assertEncodes(ListHolder(), '{}')

    def test_idempotent(self):
        value = ListHolder(list=[SimpleBool(), SimpleBool()])
        serializer = self.get_serializer()
        first = serializer.write_to_string(value)
        second = serializer.write_to_string(value)
        self.assertEqual(first, second)

    def test_does_not_mutate_input(self):
        value = IncludeNulls(string='x')
        self.get_serializer().write_to_string(value)
        self.assertEqual(value, IncludeNulls(string='x'))

    def test_ensure_ascii(self):
        value = IncludeNulls(string='ação')
        self.assertEncodes(value, '{"string":"ação","boolean value":false}')
        self.assertEncodes(value, '{"string":"a\\u00e7\\u00e3o","boolean value":false}', ENSURE_ASCII=True)


class SerializerStreamTest(unittest.TestCase):
    def test_write_to_stream(self):
        stream = TrackingStream()
        self.get_serializer().write_to_stream(IncludeNulls(string='ação'), stream)
        self.assertTrue(stream.closed)
        self.assertEqual(stream.final_value, '{"string":"ação","boolean value":false}'.encode('utf-8'))

    def test_write_to_stream_other_encoding(self):
        stream = TrackingStream()
        self.get_serializer(ENCODING='utf-16').write_to_stream(SimpleBool(), stream)
        self.assertEqual(stream.final_value.decode('utf-16'), '{"bool":false}')

    def test_write_to_stream_closes_on_error(self):
        stream = TrackingStream()
        with self.assertRaises(EligibilityError):
            self.get_serializer().write_to_stream(NotExported(), stream)
        self.assertTrue(stream.closed)
        self.assertEqual(stream.final_value, b'')

    def test_write_to_stream_write_error(self):
        class BrokenStream(TrackingStream):
            def write(self, data):
                raise OSError('disk full')

        stream = BrokenStream()
        with self.assertRaises(OSError):
            self.get_serializer().write_to_stream(SimpleBool(), stream)
        self.assertTrue(stream.closed)

    def test_write_to_file(self):
        path = self.mktemp_path()
        self.get_serializer().write_to_file(NestedHolder(), path)
        with open(path, 'rb') as fp:
            self.assertEqual(fp.read(), b'{"testField":{"bool":false}}')

    def test_write_to_file_truncates(self):
        path = self.mktemp_path()
        with open(path, 'w') as fp:
            fp.write('x' * 100)
        self.get_serializer().write_to_file(SimpleBool(), path)
        with open(path, 'rb') as fp:
            self.assertEqual(fp.read(), b'{"bool":false}')

    def test_write_to_file_error_does_not_create(self):
        path = self.mktemp_path()
        with self.assertRaises(EligibilityError):
            self.get_serializer().write_to_file(NotExported(), path)
        self.assertFalse(os.path.exists(path))

    def test_write_to_file_error_does_not_truncate(self):
        path = self.mktemp_path()
        with open(path, 'w') as fp:
            fp.write('previous')
        with self.assertRaises(ConstructionError):
            self.get_serializer().write_to_file(NoDefaultConstructor(1), path)
        with open(path) as fp:
            self.assertEqual(fp.read(), 'previous')

    def test_write_to_file_missing_directory(self):
        path = os.path.join(self.mkdtemp(), 'missing', 'out.json')
        with self.assertRaises(OSError):
            self.get_serializer().write_to_file(SimpleBool(), path)


class ShortcutsTest(unittest.TestCase):
    def test_write_to_string(self):
        self.assertEqual(write_to_string(ExcludeNulls()), '{"bool":false}')

    def test_write_to_stream(self):
        stream = TrackingStream()
        write_to_stream(SimpleBool(), stream)
        self.assertEqual(stream.final_value, b'{"bool":false}')

    def test_write_to_file(self):
        path = self.mktemp_path()
        write_to_file(SimpleBool(), path)
        with open(path, 'rb') as fp:
            self.assertEqual(fp.read(), b'{"bool":false}')

    def test_default_serializer_uses_global_settings(self):
        serializer = JsonSerializer()
        self.assertIs(serializer.settings, self._settings)
