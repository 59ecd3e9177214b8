"""Refrigerant names, mixtures, GC readings and classification records."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_LABEL = "Mixed"
DEFAULT_PURITY = 0.995


@dataclass(frozen=True, order=True)
class RefrigerantName:
    """A normalised refrigerant name: upper case with all spaces removed."""

    value: str

    @classmethod
    def parse(cls, text: str) -> "RefrigerantName":
        """Build a name from free text, normalising case and spacing."""
        return cls(text.upper().replace(" ", ""))

    def __str__(self) -> str:
        return self.value


def _parse_components(raw: Mapping[str, Any]) -> dict[RefrigerantName, float]:
    return {RefrigerantName.parse(name): float(value) for name, value in raw.items()}


@dataclass
class GCReading:
    """Component concentrations measured by a gas chromatograph."""

    components_map: dict[RefrigerantName, float] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> "GCReading":
        """Parse text such as ``"R32 0.5, R125 0.5"``.

        Raises ValueError when an entry lacks a concentration or the
        concentration is not a number.
        """
        data: dict[RefrigerantName, float] = {}
        for entry in text.split(","):
            parts = entry.strip().split(" ")
            if len(parts) < 2:
                raise ValueError(f"missing concentration in reading entry {entry!r}")
            name = RefrigerantName.parse(parts[0])
            try:
                concentration = float(parts[1].strip())
            except ValueError as exc:
                raise ValueError(
                    f"invalid concentration {parts[1]!r} in reading entry {entry!r}"
                ) from exc
            data[name] = concentration
        return cls(data)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "GCReading":
        """Build a reading from a mapping such as ``{"components": {...}}``."""
        try:
            components = raw["components"]
        except KeyError as exc:
            raise ValueError("reading has no 'components' field") from exc
        return cls(_parse_components(components))

    def get_component(self, name: RefrigerantName) -> Optional[float]:
        return self.components_map.get(name)

    def component_set(self) -> frozenset[RefrigerantName]:
        return frozenset(self.components_map)

    def components(self) -> Iterator[tuple[RefrigerantName, float]]:
        return iter(self.components_map.items())


@dataclass(eq=False)
class RefrigerantClassification:
    """A labelled purity threshold with optional admixture limits.

    Instances compare equal only to themselves.
    """

    purity: float
    max_lows: Optional[float] = None
    mixed_with: dict[RefrigerantName, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "RefrigerantClassification":
        try:
            purity = float(raw["purity"])
        except KeyError as exc:
            raise ValueError("classification has no 'purity' field") from exc
        max_lows = raw.get("max_lows")
        return cls(
            purity=purity,
            max_lows=None if max_lows is None else float(max_lows),
            mixed_with=_parse_components(raw.get("mixed_with", {})),
        )


@dataclass
class ClassificationList:
    """Ordered (label, classification) pairs of a mixture."""

    entries: list[tuple[str, RefrigerantClassification]] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ClassificationList":
        return cls(
            [
                (label, value if isinstance(value, RefrigerantClassification)
                 else RefrigerantClassification.from_dict(value))
                for label, value in raw.items()
            ]
        )

    def __iter__(self) -> Iterator[tuple[str, RefrigerantClassification]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class ClassificationResult:
    """Outcome of classifying a reading against a mixture."""

    label: str
    origin: RefrigerantName
    purity: float
    components: dict[RefrigerantName, float] = field(default_factory=dict)

    def __str__(self) -> str:
        return (
            f"Origin: {self.origin}, Classified Label: {self.label}, "
            f"Purity: {self.purity * 100.0:.3f}%, "
            f"{len(self.components)} total components."
        )


@dataclass
class RefrigerantMixture:
    """A named refrigerant blend with component proportions."""

    identifier: RefrigerantName
    components_map: dict[RefrigerantName, float] = field(default_factory=dict)
    classifications: ClassificationList = field(default_factory=ClassificationList)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "RefrigerantMixture":
        try:
            identifier = RefrigerantName.parse(raw["identifier"])
            components = _parse_components(raw["components"])
        except KeyError as exc:
            raise ValueError(f"mixture is missing field {exc.args[0]!r}") from exc
        return cls(
            identifier=identifier,
            components_map=components,
            classifications=ClassificationList.from_mapping(raw.get("classifications", {})),
        )

    def get_component(self, name: RefrigerantName) -> Optional[float]:
        return self.components_map.get(name)

    def components(self) -> Iterator[tuple[RefrigerantName, float]]:
        return iter(self.components_map.items())

    def component_set(self) -> frozenset[RefrigerantName]:
        return frozenset(self.components_map)