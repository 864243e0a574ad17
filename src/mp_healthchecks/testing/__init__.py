"""Testing support – fakes and generators for code that registers health checks.

Hypothesis strategies live in :mod:`mp_healthchecks.testing.generators.strategies`
and need the ``test`` extra.
"""

from mp_healthchecks.testing.fakes import CancellingHealthCheck, RaisingHealthCheck, StaticHealthCheck
from mp_healthchecks.testing.generators import registration_name_gen, registrations_for

__all__ = [
    "CancellingHealthCheck",
    "RaisingHealthCheck",
    "StaticHealthCheck",
    "registration_name_gen",
    "registrations_for",
]
