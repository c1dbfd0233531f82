import os
import shutil
import tempfile
import unittest
from typing import Any, Callable
from unittest import main as ut_main

from structlog import get_logger

from jsonexport.conf.get_settings import get_global_settings
from jsonexport.conf.settings import ExportSettings
from jsonexport.serializer import JsonSerializer

logger = get_logger()
main = ut_main


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdirs: list[str] = []
        self.log = logger.new()
        self._pending_cleanups: list[Callable[..., Any]] = []
        self._settings = get_global_settings()

    def tearDown(self) -> None:
        self.clean_tmpdirs()
        for fn in self._pending_cleanups:
            fn()

    def mkdtemp(self) -> str:
        tmpdir = tempfile.mkdtemp()
        self.tmpdirs.append(tmpdir)
        return tmpdir

    def mktemp_path(self, name: str = 'out.json') -> str:
        """ A path inside a fresh temporary directory, the file itself is not created.
        """
        return os.path.join(self.mkdtemp(), name)

    def clean_tmpdirs(self) -> None:
        for tmpdir in self.tmpdirs:
            shutil.rmtree(tmpdir)

    def get_serializer(self, settings: ExportSettings | None = None, **kwargs: Any) -> JsonSerializer:
        """ A serializer with the test settings, `kwargs` override single settings.
        """
        if settings is None:
            settings = self._settings
        if kwargs:
            settings = settings.model_copy(update=kwargs)
        return JsonSerializer(settings=settings)

    def assertEncodes(self, value: object, expected: str, **kwargs: Any) -> None:
        self.assertEqual(self.get_serializer(**kwargs).write_to_string(value), expected)
