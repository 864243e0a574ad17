"""Testing generators – registration sets and Hypothesis strategies."""
from mp_healthchecks.testing.generators.registrations import registration_name_gen, registrations_for

__all__ = ["registration_name_gen", "registrations_for"]
