import builtins
from dataclasses import InitVar, dataclass
from datetime import date
from typing import Annotated, Any, ClassVar, Optional

import pytest
from structlog.testing import capture_logs

from jsonexport.exception import FieldAccessError
from jsonexport.metadata import (
    AnnotationMetadataProvider,
    DateFormat,
    FieldDescriptor,
    Ignored,
    NullHandling,
    PropertyName,
    exported,
)


class OtherMarker:
    pass


@exported(null_handling=NullHandling.INCLUDE)
@dataclass
class Person:
    COUNTER: ClassVar[int] = 0
    seed: InitVar[int] = 0
    name: Annotated[Optional[str], PropertyName('full name')] = None
    password: Annotated[str, Ignored()] = ''
    born: Annotated[Optional[date], DateFormat('%d/%m/%Y')] = None
    nickname: Optional[Annotated[str, PropertyName('nick')]] = None
    tags: Annotated[builtins.list[str], OtherMarker()] = ()  # type: ignore[assignment]
    __hidden: int = 0


@exported
class Base:
    first: int = 1


@exported
class Child(Base):
    second: int = 2
    first: int = 3


@pytest.fixture
def provider():
    return AnnotationMetadataProvider()


def test_get_config(provider):
    assert provider.get_config(Person).null_handling is NullHandling.INCLUDE
    assert provider.get_config(OtherMarker) is None


def test_get_fields(provider):
    fields = {field.name: field for field in provider.get_fields(Person)}
    assert list(fields) == ['COUNTER', 'seed', 'name', 'password', 'born', 'nickname', 'tags', '__hidden']

    assert fields['COUNTER'].is_static
    assert fields['COUNTER'].is_skipped()
    assert fields['seed'].is_synthetic
    assert fields['seed'].is_skipped()
    assert fields['password'].ignored
    assert fields['password'].is_skipped()

    assert fields['name'] == FieldDescriptor(
        name='name',
        attr_name='name',
        type_=str,
        property_name='full name',
    )
    assert fields['born'].date_pattern == '%d/%m/%Y'
    assert fields['born'].type_ is date
    assert fields['nickname'].property_name == 'nick'
    assert fields['nickname'].type_ is str
    assert fields['tags'].type_ == list[str]
    assert fields['tags'].property_name == 'tags'
    assert not fields['tags'].is_skipped()

    assert fields['__hidden'].attr_name == '_Person__hidden'
    assert fields['__hidden'].property_name == '__hidden'


def test_get_fields_inheritance_order(provider):
    fields = provider.get_fields(Child)
    assert [field.name for field in fields] == ['first', 'second']
    assert [provider.read_field(Child(), field) for field in fields] == [3, 2]


def test_get_fields_logs():
    with capture_logs() as logs:
        AnnotationMetadataProvider().get_fields(Base)
    assert logs == [{'event': 'fields collected', 'log_level': 'debug', 'type': 'Base', 'fields': ['first']}]


def test_read_field(provider):
    field = FieldDescriptor('missing', 'missing', Any, 'missing')
    assert provider.read_field(Base(), field) is None

    class Broken:
        @property
        def value(self) -> int:
            raise ValueError('boom')

    field = FieldDescriptor('value', 'value', int, 'value')
    with pytest.raises(FieldAccessError, match='Error reading field value of Broken'):
        provider.read_field(Broken(), field)


def test_get_type_metadata(provider):
    metadata = provider.get_type_metadata(Base)
    assert metadata.type_ is Base
    assert metadata.config.null_handling is NullHandling.EXCLUDE
    assert [field.name for field in metadata.fields] == ['first']


def test_get_fields_is_resolved_once_per_type():
    with capture_logs() as logs:
        provider = AnnotationMetadataProvider()
        fields = provider.get_fields(Base)
        assert provider.get_fields(Base) is fields
        provider.get_fields(Child)
        provider.get_fields(Child)
    assert [log['type'] for log in logs if log['event'] == 'fields collected'] == ['Base', 'Child']


def test_encoding_collection_resolves_element_type_once():
    from jsonexport.conf.settings import ExportSettings
    from jsonexport.serializer import JsonSerializer

    @exported
    class Holder:
        items: list[Base] = []

    holder = Holder()
    holder.items = [Base(), Base(), Base()]
    with capture_logs() as logs:
        output = JsonSerializer(settings=ExportSettings()).write_to_string(holder)
    assert output == '{"items":["Base":{"first":1},"Base":{"first":1},"Base":{"first":1}]}'
    assert [log['type'] for log in logs if log['event'] == 'fields collected'] == ['Holder', 'Base']
