from __future__ import annotations
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence
import numpy as np

from .components import Component, check_frequency
from .errors import CircuitError, DomainError


class Connection(str, Enum):
    SERIES   = "series"
    PARALLEL = "parallel"


def as_connection(mode) -> Connection:
    """Normalize a Connection or a string such as 'Series' to a Connection."""
    op = str(getattr(mode, "value", mode)).lower().strip()
    if op not in ("series", "parallel"):
        raise CircuitError(f"Circuit mode must be 'series' or 'parallel', got: {mode}")
    return Connection(op)


def combine(op: Connection | str, impedances: Iterable[complex]) -> complex:
    """
    Combine impedances in series (sum) or parallel (reciprocal of the summed
    admittances). An empty list gives 0j.

    Parallel: a branch with Z == 0 is a short and raises DomainError. Open
    branches (infinite Z) carry no admittance; if every branch is open the
    result is inf.
    """
    op = as_connection(op)
    zs = [complex(z) for z in impedances]
    if not zs:
        return 0j
    if op is Connection.SERIES:
        Z = 0j
        for z in zs:
            Z = Z + z
        return Z
    # parallel
    Y = 0j
    for z in zs:
        if z == 0:
            raise DomainError("Parallel combination contains a zero impedance (short circuit).")
        if not np.isfinite(z):
            continue
        Y = Y + 1/z
    if Y == 0:
        return complex(np.inf, 0.0)
    return 1/Y


class Circuit:
    """
    Flat series or parallel circuit of components.

    The circuit keeps references to its components (it does not copy them) and
    caches the total impedance. The cache is refreshed on every add and every
    set_frequency(), so it always matches the members' current impedances.

    The circuit owns frequency propagation: set_frequency() drives every member
    to the new frequency before recomputing, and a component added to a circuit
    that already has a frequency is driven to it first. For a parallel circuit
    containing an inductor, set the frequency before adding (an undriven
    inductor is a 0 Ω short).
    """

    def __init__(self, mode: Optional[Connection | str] = None, frequency: Optional[float] = None):
        self._components: list[Component] = []
        self._mode: Optional[Connection] = None
        if mode is not None:
            self._mode = as_connection(mode)
        self._frequency: Optional[float] = None
        self._Z = 0j
        if frequency is not None:
            self.set_frequency(frequency)

    # ---------------- registration ----------------
    def add_component_in_series(self, component: Component) -> None:
        self._add(component, Connection.SERIES)

    def add_component_in_parallel(self, component: Component) -> None:
        self._add(component, Connection.PARALLEL)

    def _add(self, component: Component, op: Connection) -> None:
        if not isinstance(component, Component):
            raise TypeError(f"Expected a Component, got {type(component).__name__}")
        if self._mode is not None and self._mode is not op:
            raise CircuitError(
                f"Cannot add a component in {op.value} to a {self._mode.value} circuit."
            )
        # the new member is only touched once the combination is accepted
        if self._frequency is not None:
            z_new = component.impedance_at(component.check_frequency(self._frequency))
        else:
            z_new = component.get_impedance()
        Z = combine(op, [c.get_impedance() for c in self._components] + [z_new])
        if self._frequency is not None:
            component.set_frequency(self._frequency)
        members = self._components + [component]
        self._mode = op
        self._components = members
        self._Z = Z

    # ---------------- frequency ----------------
    def set_frequency(self, f) -> None:
        """Set f on every member, then recompute. Nothing changes if any member
        rejects f or the new combination is degenerate."""
        f = check_frequency(f, owner="Circuit")
        for c in self._components:
            c.check_frequency(f)
        if self._mode is not None:
            combine(self._mode, (c.impedance_at(f) for c in self._components))
        for c in self._components:
            c.set_frequency(f)
        self._frequency = f
        self.recompute()

    def get_frequency(self) -> float:
        return 0.0 if self._frequency is None else self._frequency

    @property
    def has_frequency(self) -> bool:
        return self._frequency is not None

    def recompute(self) -> None:
        if self._mode is None:
            self._Z = 0j
            return
        self._Z = combine(self._mode, (c.get_impedance() for c in self._components))

    # ---------------- results ----------------
    def get_circuit_impedance(self) -> complex:
        return self._Z

    def get_total_impedance_magnitude(self) -> float:
        return float(np.abs(self._Z))

    def get_phase_difference(self) -> float:
        return float(np.angle(self._Z))

    @property
    def total_impedance(self) -> complex:
        return self._Z

    @property
    def mode(self) -> Optional[Connection]:
        return self._mode

    @property
    def components(self) -> Sequence[Component]:
        return tuple(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(tuple(self._components))

    def __repr__(self) -> str:
        op = self._mode.value if self._mode else "empty"
        return f"Circuit({op}, {len(self)} components, f={self.get_frequency():g} Hz)"
