from __future__ import annotations

class DomainError(ValueError):
	"""Degenerate physical configuration (zero capacitance, zero frequency on a
	capacitor, a short inside a parallel combination, ...)."""

class CircuitError(ValueError):
	"""Invalid use of a Circuit, e.g. mixing series and parallel registration."""

class InputValidationError(ValueError):
	"""User supplied text or config value that cannot be used. The console
	prompts catch this and ask again; config loading lets it propagate."""
