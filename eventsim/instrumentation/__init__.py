"""Run-level instrumentation."""

from eventsim.instrumentation.summary import RunSummary

__all__ = ["RunSummary"]
