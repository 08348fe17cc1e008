"""
Validation error records and the multi-error collection.

Each failed check is recorded as an immutable, data-carrying record. A
validation run accumulates every record in a ``ValidationErrors`` collection
and reports them all at once instead of stopping at the first failure.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Tuple, Type


@dataclass(frozen=True)
class ValidationError:
    """Base class for a single failed consistency check."""

    @property
    def kind(self) -> str:
        """Name of the failed check."""
        return type(self).__name__

    def describe(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, **asdict(self)}

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class NoPressureProfile(ValidationError):
    def describe(self) -> str:
        return "Pressure profile required as vertical coordinate, none given."


@dataclass(frozen=True)
class InvalidVectorLength(ValidationError):
    """A profile whose length differs from the pressure profile."""

    name: str
    actual: int
    expected: int

    def describe(self) -> str:
        return (
            f"{self.name} profile has {self.actual} levels, "
            f"pressure profile has {self.expected}."
        )


@dataclass(frozen=True)
class PressureNotDecreasingWithHeight(ValidationError):
    """
    Vertical ordering violation.

    Raised both for pressure increasing with height and for geopotential
    height decreasing with level; ``profile`` tells them apart.

    Attributes
    ----------
    profile : str
        "Pressure" or "Height"
    below : float
        Value one level down (or the station baseline)
    above : float
        Offending value at the level above
    """

    profile: str
    below: float
    above: float

    def describe(self) -> str:
        if self.profile == "Height":
            return f"Height decreasing with level: {self.above:g} < {self.below:g}."
        return f"Pressure increasing with height: {self.above:g} > {self.below:g}."


@dataclass(frozen=True)
class TemperatureLessThanWetBulb(ValidationError):
    t: float
    wb: float

    def describe(self) -> str:
        return f"Temperature less than wet bulb: {self.t:g} < {self.wb:g}."


@dataclass(frozen=True)
class TemperatureLessThanDewPoint(ValidationError):
    t: float
    dp: float

    def describe(self) -> str:
        return f"Temperature less than dew point: {self.t:g} < {self.dp:g}."


@dataclass(frozen=True)
class WetBulbLessThanDewPoint(ValidationError):
    wb: float
    dp: float

    def describe(self) -> str:
        return f"Wet bulb less than dew point: {self.wb:g} < {self.dp:g}."


@dataclass(frozen=True)
class InvalidNegativeValue(ValidationError):
    field_name: str
    value: float

    def describe(self) -> str:
        return f"{self.field_name} must not be negative: {self.value:g} < 0."


@dataclass(frozen=True)
class InvalidPositiveValue(ValidationError):
    field_name: str
    value: float

    def describe(self) -> str:
        return f"{self.field_name} must not be positive: {self.value:g} > 0."


@dataclass(frozen=True)
class InvalidWindDirection(ValidationError):
    value: float

    def describe(self) -> str:
        return f"Wind direction outside [0, 360] degrees: {self.value:g}."


class ValidationErrors(Exception):
    """
    Ordered collection of every error found in one validation run.

    Raised by ``validate`` when the collection is not empty, so callers see
    the complete set of violations from a single pass.

    Example:
        >>> try:
        ...     validate(snd)
        ... except ValidationErrors as errs:
        ...     for err in errs.of_kind(InvalidWindDirection):
        ...         print(err.value)
    """

    def __init__(self, errors=()):
        super().__init__()
        self._errors: List[ValidationError] = list(errors)

    def push(self, error: ValidationError) -> None:
        """Append one error record."""
        self._errors.append(error)

    @property
    def errors(self) -> Tuple[ValidationError, ...]:
        return tuple(self._errors)

    def into_inner(self) -> List[ValidationError]:
        """Copy of the underlying ordered list."""
        return list(self._errors)

    def is_empty(self) -> bool:
        return not self._errors

    def of_kind(self, kind: Type[ValidationError]) -> List[ValidationError]:
        """Errors of one kind, in reporting order."""
        return [err for err in self._errors if isinstance(err, kind)]

    def check_any(self) -> None:
        """Raise this collection if it holds any error."""
        if self._errors:
            raise self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_errors": len(self._errors),
            "errors": [err.to_dict() for err in self._errors],
        }

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __getitem__(self, i):
        return self._errors[i]

    def __contains__(self, error) -> bool:
        return error in self._errors

    def __str__(self) -> str:
        return "\n".join(str(err) for err in self._errors)

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"
