from __future__ import annotations
from dataclasses import dataclass
from abc import ABC, abstractmethod
from typing import ClassVar
import numpy as np

from .constants import TWOPI, PHASE_CAPACITIVE, PHASE_INDUCTIVE
from .errors import DomainError


def _real(owner: str, name: str, value) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise DomainError(f"{owner}: {name} must be a real number, got {value!r}") from None
    if not np.isfinite(v):
        raise DomainError(f"{owner}: {name} must be finite, got {v}")
    return v


def _positive(owner: str, name: str, value) -> float:
    v = _real(owner, name, value)
    if not (v > 0.0):
        raise DomainError(f"{owner}: {name} must be > 0, got {v:g}")
    return v


def check_frequency(f, owner: str = "Frequency") -> float:
    """Return f as float; it must be finite and >= 0 Hz."""
    f = _real(owner, "frequency", f)
    if f < 0.0:
        raise DomainError(f"{owner}: frequency must be >= 0 Hz, got {f:g}")
    return f


@dataclass(frozen=True, eq=False)
class Component(ABC):
    """
    Two-terminal circuit component with a memoized complex impedance.

    Subclasses hold their physical parameters as frozen dataclass fields and
    implement impedance_at(). Components compare and hash by identity. The memoized
    impedance always equals impedance_at(frequency): it is computed once at
    construction with frequency 0 and again on every set_frequency().
    """
    kind: ClassVar[str] = "Component"
    # True if impedance_at() diverges at f = 0 (set_frequency(0) is refused)
    open_at_dc: ClassVar[bool] = False

    def __post_init__(self):
        self._validate()
        self._store(_frequency=0.0, _Z=self.impedance_at(0.0))

    def _store(self, **attrs) -> None:
        # the only writes allowed on a frozen component
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    @abstractmethod
    def _validate(self) -> None:
        """Check and normalize the physical parameters (raise DomainError)."""
        ...

    @abstractmethod
    def impedance_at(self, f: float) -> complex:
        """Closed-form impedance at frequency f (Hz). Does not change state."""
        ...

    def check_frequency(self, f) -> float:
        f = check_frequency(f, owner=self.kind)
        if self.open_at_dc and f == 0.0:
            raise DomainError(f"{self.kind}: impedance is undefined at 0 Hz (open circuit).")
        return f

    def get_type(self) -> str:
        return self.kind

    def set_frequency(self, f) -> None:
        f = self.check_frequency(f)
        self._store(_frequency=f, _Z=self.impedance_at(f))

    def get_frequency(self) -> float:
        return self._frequency

    def get_impedance(self) -> complex:
        return self._Z

    def get_impedance_magnitude(self) -> float:
        # +inf for an undriven capacitor/diode, never NaN
        return float(np.abs(self._Z))

    def get_phase_difference(self) -> float:
        return float(np.angle(self._Z))

    @property
    def frequency(self) -> float:
        return self.get_frequency()

    @property
    def impedance(self) -> complex:
        return self.get_impedance()


@dataclass(frozen=True, eq=False)
class Resistor(Component):
    resistance: float  # ohm
    kind: ClassVar[str] = "Resistor"

    def _validate(self):
        self._store(resistance=_positive(self.kind, "resistance", self.resistance))

    def impedance_at(self, f):
        return complex(self.resistance, 0.0)


@dataclass(frozen=True, eq=False)
class Capacitor(Component):
    """Z = -j / (2πfC). Until set_frequency() is called the impedance is the
    0 Hz open-circuit limit -j·inf, which is not a meaningful value."""
    capacitance: float  # farad
    kind: ClassVar[str] = "Capacitor"
    open_at_dc: ClassVar[bool] = True

    def _validate(self):
        self._store(capacitance=_positive(self.kind, "capacitance", self.capacitance))

    def impedance_at(self, f):
        if f == 0:
            return complex(0.0, -np.inf)
        return complex(0.0, -1.0 / (TWOPI * f * self.capacitance))

    def get_phase_difference(self):
        return PHASE_CAPACITIVE


@dataclass(frozen=True, eq=False)
class Inductor(Component):
    inductance: float  # henry
    kind: ClassVar[str] = "Inductor"

    def _validate(self):
        self._store(inductance=_positive(self.kind, "inductance", self.inductance))

    def impedance_at(self, f):
        return complex(0.0, TWOPI * f * self.inductance)

    def get_phase_difference(self):
        return PHASE_INDUCTIVE


@dataclass(frozen=True, eq=False)
class Diode(Component):
    """
    Simplified small-signal diode: junction resistance R shunted by the
    junction capacitance C, plus a reactive term driven by the saturation
    current Is. With ω = 2πf and ω_s = Is·R/C:

        Z = R / (1 + jωRC) + ω_s / (jωC · (1 + jωRC))

    This is an approximation for display purposes, not a physical diode
    model. Like the capacitor it diverges at 0 Hz (limit R - j·inf).
    """
    capacitance: float         # farad
    resistance: float          # ohm
    saturation_current: float  # ampere
    kind: ClassVar[str] = "Diode"
    open_at_dc: ClassVar[bool] = True

    def _validate(self):
        self._store(capacitance=_positive(self.kind, "capacitance", self.capacitance))
        self._store(resistance=_positive(self.kind, "resistance", self.resistance))
        self._store(saturation_current=_real(self.kind, "saturation_current", self.saturation_current))
        if self.saturation_current < 0.0:
            raise DomainError(f"{self.kind}: saturation_current must be >= 0, got {self.saturation_current:g}")

    def impedance_at(self, f):
        R, C = self.resistance, self.capacitance
        if f == 0:
            return complex(R, -np.inf)
        w = TWOPI * f
        omega_s = self.saturation_current * R / C
        denom = 1.0 + 1j * w * R * C
        return complex(R / denom + omega_s / (1j * w * C * denom))


@dataclass(frozen=True, eq=False)
class Transistor(Component):
    """Static large-signal resistance Vce / Ic; frequency is ignored."""
    collector_current: float          # ampere
    base_current: float               # ampere
    emitter_current: float            # ampere
    collector_emitter_voltage: float  # volt
    base_emitter_voltage: float       # volt
    kind: ClassVar[str] = "Transistor"

    def _validate(self):
        self._store(collector_current=_positive(self.kind, "collector_current", self.collector_current))
        for name in ("base_current", "emitter_current", "collector_emitter_voltage", "base_emitter_voltage"):
            self._store(**{name: _real(self.kind, name, getattr(self, name))})

    def impedance_at(self, f):
        return complex(self.collector_emitter_voltage / self.collector_current, 0.0)

    def set_frequency(self, f) -> None:
        pass

    def get_frequency(self) -> float:
        return 0.0

    def get_phase_difference(self):
        return 0.0
