import pytest

from jsonexport.finalizer import strip_trailing_separators


@pytest.mark.parametrize('text, expected', [
    ('{}', '{}'),
    ('{"a":1,}', '{"a":1}'),
    ('{"a":[],}', '{"a":[]}'),
    ('{"a":[1,2,],"b":{"c":[{"d":true,},],},}', '{"a":[1,2],"b":{"c":[{"d":true}]}}'),
    ('{"a":"x,}",}', '{"a":"x,}"}'),
    ('{"a":"x,]","b":",",}', '{"a":"x,]","b":","}'),
    ('{"a":"\\\\",}', '{"a":"\\\\"}'),
    ('{"a":"\\",}",}', '{"a":"\\",}"}'),
    ('{"a,}":1,}', '{"a,}":1}'),
])
def test_strip_trailing_separators(text, expected):
    assert strip_trailing_separators(text) == expected


def test_separators_between_values_are_kept():
    text = '{"a":1,"b":2,}'
    assert strip_trailing_separators(text) == '{"a":1,"b":2}'
