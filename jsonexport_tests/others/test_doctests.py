import doctest
from importlib import import_module

import pytest

MODULES_WITH_DOCTESTS = [
    'jsonexport.compound_encoding.collection',
    'jsonexport.compound_encoding.object',
    'jsonexport.encoding.bool',
    'jsonexport.encoding.enum',
    'jsonexport.encoding.leaf',
    'jsonexport.encoding.null',
    'jsonexport.encoding.number',
    'jsonexport.encoding.temporal',
    'jsonexport.encoding.text',
    'jsonexport.finalizer',
    'jsonexport.kinds',
    'jsonexport.metadata.provider',
    'jsonexport.serializer',
    'jsonexport.utils.typing',
    'jsonexport.validator',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name):
    module = import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
