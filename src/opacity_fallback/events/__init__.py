"""Event system: bus and event types for transform runs."""

from opacity_fallback.events.bus import EventBus, EventRecorder
from opacity_fallback.events.types import (
    DarkColorRecorded,
    DarkOverrideInserted,
    DeclarationRewritten,
    TripletGenerated,
    TripletReused,
)

__all__ = [
    "EventBus",
    "EventRecorder",
    "DarkColorRecorded",
    "DarkOverrideInserted",
    "DeclarationRewritten",
    "TripletGenerated",
    "TripletReused",
]
