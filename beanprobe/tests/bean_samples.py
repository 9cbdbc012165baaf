"""Sample beans shared by the test modules and CLI tests."""

import ctypes
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from functools import cached_property
from typing import TYPE_CHECKING, ClassVar, List, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from fractions import Fraction


class Point(ctypes.Structure):
    _fields_ = [("x", ctypes.c_int), ("y", ctypes.c_int)]


class AllPrimitives(ctypes.Structure):
    _fields_ = [
        ("b", ctypes.c_byte),
        ("s", ctypes.c_short),
        ("i", ctypes.c_int),
        ("l", ctypes.c_int64),
        ("f", ctypes.c_float),
        ("d", ctypes.c_double),
        ("flag", ctypes.c_bool),
        ("ch", ctypes.c_wchar),
    ]


class Base:
    @property
    def base_id(self) -> int:
        return 7


class Account(Base):
    def __init__(self) -> None:
        self._owner = "ada"
        self._secret = "hidden"

    @property
    def balance(self) -> "numbers.Number":
        return Decimal("10.50")

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def broken(self) -> int:
        raise RuntimeError("guarded")

    def _set_pin(self, value: int) -> None:
        self._pin = value

    pin = property(None, _set_pin)

    @property
    def _private(self) -> str:
        return self._secret


class Child(Account):
    @property
    def nickname(self):
        return "a"

    @property
    def owner(self) -> Optional[str]:
        return None


class Tagged:
    label: str = "tagged"


class Widget(Base, Tagged):
    @property
    def size(self) -> float:
        return 1.5


@dataclass
class Employee:
    name: str = "grace"
    age: int = 42
    tags: List[str] = field(default_factory=list)
    headcount: ClassVar[int] = 0


class Unset:
    present: int = 1
    missing: str


class Settings(BaseModel):
    host: str = "localhost"
    port: int = 8080


class Report:
    @cached_property
    def total(self) -> int:
        return 3


class Dangling:
    x: "NoSuchType"  # noqa: F821


@dataclass
class Line:
    sku: str
    qty: int


@dataclass
class Order:
    lines: List[Line]
    attributes: dict
    parent: Optional["Order"] = None


def make_point() -> Point:
    return Point(3, 4)


def make_account() -> Account:
    return Account()


def make_order() -> Order:
    return Order(
        lines=[Line("a-1", 2), Line("b-2", 5)],
        attributes={"colour": "red", "dims.cm": 12},
    )


def explode() -> None:
    raise RuntimeError("factory failed")


class Guarded:
    @property
    def ok(self) -> int:
        return 1

    @property
    def amount(self) -> "Fraction":
        return 0


class Unicode:
    @property
    def größe(self) -> int:
        return 180


def make_guarded() -> Guarded:
    return Guarded()
