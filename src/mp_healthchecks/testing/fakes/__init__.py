"""Testing fakes – scripted probes."""
from mp_healthchecks.testing.fakes.checks import CancellingHealthCheck, RaisingHealthCheck, StaticHealthCheck

__all__ = ["CancellingHealthCheck", "RaisingHealthCheck", "StaticHealthCheck"]
