"""Event types emitted while the opacity fallback transform runs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripletGenerated:
    selector: str
    prop: str
    value: str


@dataclass(frozen=True)
class TripletReused:
    selector: str
    prop: str


@dataclass(frozen=True)
class DarkColorRecorded:
    name: str
    triplet: str


@dataclass(frozen=True)
class DeclarationRewritten:
    selector: str
    prop: str
    value: str


@dataclass(frozen=True)
class DarkOverrideInserted:
    selector: str
    props: tuple[str, ...]
