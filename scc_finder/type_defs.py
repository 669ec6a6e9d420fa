#!/usr/bin/env python3

from collections.abc import Callable, Hashable, Iterable
from typing import Optional, TypeVar

V = TypeVar("V")
K = TypeVar("K", bound=Hashable)

KeyFunction = Callable[[V], K]
ChildrenFunction = Callable[[V], Optional[Iterable[V]]]
