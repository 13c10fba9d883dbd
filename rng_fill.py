"""Seeded in-place random fill for numeric containers.

This module exposes :func:`fill_random`, which overwrites every element of a
mutable, ordered, numeric container with values drawn from a uniform
distribution. The generator is a fresh :class:`random.Random` (MT19937)
created for each call, so the same seed always reproduces the same values.

Integral containers receive values from the closed interval
``[lower, upper]``; floating containers receive values from ``[lower, upper)``
(``upper`` may still appear through rounding in narrow storage types).
"""

from __future__ import annotations

import logging
import math
import numbers
import operator
from array import array
from collections.abc import MutableSequence
from enum import Enum
from random import Random
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

logger = logging.getLogger(__name__)

DEFAULT_SEED = 1337

INTEGRAL_TYPECODES = frozenset("bBhHiIlLqQ")
FLOATING_TYPECODES = frozenset("fd")

Number = Union[int, float]


class ElementKind(str, Enum):
    INTEGRAL = "integral"
    FLOATING = "floating"


class FillRequest(BaseModel):
    """Validated arguments of a single fill call."""

    model_config = ConfigDict(frozen=True)

    kind: ElementKind
    lower: Number
    upper: Number
    seed: int = DEFAULT_SEED

    @field_validator("lower", "upper")
    @classmethod
    def validate_finite(cls, value: Number) -> Number:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("bounds must be finite")
        return value

    @field_validator("upper")
    @classmethod
    def validate_order(cls, upper: Number, info: ValidationInfo) -> Number:
        lower: Optional[Number] = info.data.get("lower")
        if lower is None:
            return upper
        if lower > upper:
            raise ValueError("lower cannot be greater than upper")
        if isinstance(upper, float) and not math.isfinite(upper - lower):
            raise ValueError("bound span overflows a double")
        return upper

    @classmethod
    def build(cls, kind: ElementKind, lower: Any, upper: Any, seed: Any) -> "FillRequest":
        """Coerce caller values to ``kind``, then validate their ranges.

        Type problems raise ``TypeError`` here; range problems surface as a
        pydantic ``ValidationError``, which is a ``ValueError``.
        """
        if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
            raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
        return cls(
            kind=kind,
            lower=_coerce_bound(kind, lower),
            upper=_coerce_bound(kind, upper),
            seed=int(seed),
        )


_SAMPLERS: Dict[ElementKind, Callable[[Random, Any, Any], Number]] = {
    ElementKind.INTEGRAL: Random.randint,
    ElementKind.FLOATING: Random.uniform,
}


def element_kind(container: Any) -> Optional[ElementKind]:
    """Return the element kind fixed by the container's storage type.

    ``None`` means the container is an untyped mutable sequence (a ``list``,
    for example) whose kind has to come from the caller.

    Raises:
        TypeError: If the container cannot be filled with numbers.
    """
    if isinstance(container, np.ndarray):
        if container.ndim != 1:
            raise TypeError(f"expected a one-dimensional array, got {container.ndim} dimensions")
        if not container.flags.writeable:
            raise TypeError("array is read-only")
        if container.dtype.kind in "iu":
            return ElementKind.INTEGRAL
        if container.dtype.kind == "f":
            return ElementKind.FLOATING
        raise TypeError(f"unsupported array dtype: {container.dtype}")
    if isinstance(container, array):
        if container.typecode in INTEGRAL_TYPECODES:
            return ElementKind.INTEGRAL
        if container.typecode in FLOATING_TYPECODES:
            return ElementKind.FLOATING
        raise TypeError(f"unsupported array typecode: {container.typecode!r}")
    if isinstance(container, bytearray):
        return ElementKind.INTEGRAL
    if isinstance(container, MutableSequence):
        return None
    raise TypeError(f"{type(container).__name__} is not a mutable sequence")


def storage_range(container: Any) -> Optional[Tuple[Number, Number]]:
    """Return the representable ``(min, max)`` of fixed-width storage."""
    if isinstance(container, np.ndarray) and container.dtype.kind in "iuf":
        dtype = container.dtype
    elif isinstance(container, array) and container.typecode in FLOATING_TYPECODES:
        dtype = np.dtype(np.float32 if container.typecode == "f" else np.float64)
    elif isinstance(container, array) and container.typecode in INTEGRAL_TYPECODES:
        bits = container.itemsize * 8
        if container.typecode.islower():
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1
    elif isinstance(container, bytearray):
        return 0, 255
    else:
        return None
    if dtype.kind == "f":
        info = np.finfo(dtype)
        return float(info.min), float(info.max)
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def _coerce_bound(kind: ElementKind, value: Any) -> Number:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"bounds must be real numbers, got {type(value).__name__}")
    if kind is ElementKind.INTEGRAL:
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"integral elements need integral bounds, got {value!r}")
        return operator.index(value)
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError("bound does not fit a double") from exc


def _resolve_kind(container: Any, lower: Any, upper: Any, kind: Optional[ElementKind]) -> ElementKind:
    requested = ElementKind(kind) if kind is not None else None
    storage_kind = element_kind(container)
    if storage_kind is not None:
        if requested is not None and requested is not storage_kind:
            raise TypeError(
                f"{type(container).__name__} holds {storage_kind.value} elements, "
                f"not {requested.value}"
            )
        return storage_kind
    if requested is not None:
        return requested
    if all(isinstance(b, numbers.Integral) for b in (lower, upper)):
        return ElementKind.INTEGRAL
    return ElementKind.FLOATING


def _store(container: Any, values: List[Number]) -> None:
    if isinstance(container, array):
        container[:] = array(container.typecode, values)
    elif isinstance(container, (np.ndarray, list, bytearray)):
        container[:] = values
    else:
        for index, value in enumerate(values):
            container[index] = value


def fill_random(
    container: Any,
    lower: Number,
    upper: Number,
    seed: int = DEFAULT_SEED,
    kind: Optional[ElementKind] = None,
) -> None:
    """Overwrite every element of ``container`` with a seeded uniform draw.

    Args:
        container: A mutable ordered numeric sequence: a ``list`` or other
            ``MutableSequence``, a ``bytearray``, an ``array.array`` or a
            one-dimensional ``numpy.ndarray``.
        lower: Lower bound, inclusive.
        upper: Upper bound. Inclusive for integral elements; a supremum for
            floating elements.
        seed: Seed of the MT19937 generator created for this call.
        kind: Element kind for untyped containers. Inferred from the bounds
            when omitted; must agree with the storage type of typed ones.

    Raises:
        TypeError: If the container, bounds or seed have unsupported types.
        ValueError: If ``lower`` is greater than ``upper``, a floating bound
            or the span between the bounds is not finite, or the bounds exceed
            the range of fixed-width storage.

    The values are drawn before the container is written, so a call that
    raises leaves the container unchanged.
    """
    request = FillRequest.build(_resolve_kind(container, lower, upper, kind), lower, upper, seed)

    limits = storage_range(container)
    if limits is not None and (request.lower < limits[0] or request.upper > limits[1]):
        raise ValueError(
            f"bounds [{request.lower}, {request.upper}] do not fit storage range "
            f"[{limits[0]}, {limits[1]}]"
        )

    rng = Random(request.seed)
    draw = _SAMPLERS[request.kind]
    values = [draw(rng, request.lower, request.upper) for _ in range(len(container))]
    _store(container, values)

    logger.debug(
        "Filled %d %s elements from [%s, %s] with seed %d",
        len(values),
        request.kind.value,
        request.lower,
        request.upper,
        request.seed,
    )


def random_sequence(
    count: int,
    lower: Number = 0,
    upper: Number = 100,
    seed: int = DEFAULT_SEED,
) -> List[Number]:
    """Return a new list of ``count`` seeded uniform draws.

    The element kind follows the bounds, as for an untyped container passed to
    :func:`fill_random`.

    Raises:
        ValueError: If ``count`` is negative or if ``lower`` is greater than
            ``upper``.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    values: List[Number] = [lower] * count
    fill_random(values, lower, upper, seed)
    return values

