"""Core simulation engine components."""

from eventsim.core.event import CallbackEvent, Event
from eventsim.core.event_heap import EventHeap
from eventsim.core.simulator import Simulator

__all__ = [
    "CallbackEvent",
    "Event",
    "EventHeap",
    "Simulator",
]
