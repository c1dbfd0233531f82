import builtins
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Annotated, ClassVar, Optional

from jsonexport.metadata import DateFormat, Ignored, NullHandling, PropertyName, exported


@exported
class SimpleBool:
    bool: builtins.bool = False


@exported
@dataclass
class ExcludeNulls:
    UNUSED: ClassVar[str] = 'static'
    string: Optional[str] = None
    bool: builtins.bool = False


@exported(null_handling=NullHandling.INCLUDE)
@dataclass
class IncludeNulls:
    string: Optional[str] = None
    ignored: Annotated[str, Ignored()] = 'secret'
    flag: Annotated[bool, PropertyName('boolean value')] = False


@exported
@dataclass
class NestedHolder:
    testField: SimpleBool = field(default_factory=SimpleBool)


@exported
@dataclass
class ListHolder:
    list: Optional[builtins.list[SimpleBool]] = None


@exported(null_handling=NullHandling.INCLUDE)
@dataclass
class NullableListHolder:
    list: Optional[builtins.list[SimpleBool]] = None


@exported
@dataclass
class Dates:
    moment: Annotated[Optional[datetime], DateFormat('%d/%m/%Y %I:%M:%S')] = None
    clock: Annotated[Optional[time], DateFormat('%I:%M:%S')] = None
    day: Optional[date] = None


class NotExported:
    bool: builtins.bool = False


@exported
class NoDefaultConstructor:
    def __init__(self, value: int) -> None:
        self.value = value

    value: int


@exported
@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int
