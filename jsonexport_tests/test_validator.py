from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple

import pytest

from jsonexport.exception import ConstructionError, EligibilityError
from jsonexport.metadata import AnnotationMetadataProvider, exported
from jsonexport.validator import has_default_constructor, is_fixed_field_aggregate, validate_type


@exported
class Plain:
    pass


@exported
class WithDefaults:
    def __init__(self, a: int = 1, *args: int, b: str = '', **kwargs: str) -> None:
        self.a = a


@exported
class RequiresArgument:
    def __init__(self, a: int) -> None:
        self.a = a


@exported
class KeywordOnly:
    def __init__(self, *, a: int) -> None:
        self.a = a


@exported
@dataclass(frozen=True)
class FrozenRecord:
    a: int


@exported
@dataclass
class MutableRecord:
    a: int


@exported
class Pair(NamedTuple):
    a: int
    b: int


@exported
class Abstract(ABC):
    @abstractmethod
    def run(self) -> None:
        raise NotImplementedError


class Unexported:
    pass


@pytest.mark.parametrize('type_, expected', [
    (Plain, True),
    (WithDefaults, True),
    (RequiresArgument, False),
    (KeywordOnly, False),
    (MutableRecord, False),
    (Abstract, False),
])
def test_has_default_constructor(type_, expected):
    assert has_default_constructor(type_) is expected


@pytest.mark.parametrize('type_, expected', [
    (FrozenRecord, True),
    (Pair, True),
    (MutableRecord, False),
    (Plain, False),
    (tuple, False),
])
def test_is_fixed_field_aggregate(type_, expected):
    assert is_fixed_field_aggregate(type_) is expected


@pytest.mark.parametrize('type_', [Plain, WithDefaults, FrozenRecord, Pair])
def test_validate_type_accepts(type_):
    validate_type(type_, provider=AnnotationMetadataProvider())


@pytest.mark.parametrize('type_', [RequiresArgument, KeywordOnly, MutableRecord, Abstract])
def test_validate_type_construction_error(type_):
    with pytest.raises(ConstructionError, match=type_.__name__):
        validate_type(type_, provider=AnnotationMetadataProvider())


@pytest.mark.parametrize('type_', [Unexported, int, dict, list[int]])
def test_validate_type_eligibility_error(type_):
    with pytest.raises(EligibilityError, match='you want to write is not @exported'):
        validate_type(type_, provider=AnnotationMetadataProvider())


def test_eligibility_is_checked_first():
    class NeedsArgument:
        def __init__(self, a: int) -> None:
            self.a = a

    with pytest.raises(EligibilityError):
        validate_type(NeedsArgument, provider=AnnotationMetadataProvider())
