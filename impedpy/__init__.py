# import things so they will be available:
# import impedpy as ip
# ip.Circuit(...)

from .components import Component, Resistor, Capacitor, Inductor, Diode, Transistor
from .circuit import Circuit, Connection, combine
from .errors import DomainError, CircuitError, InputValidationError
from .topologies import Topology, TOPOLOGIES, get_topology, build_circuit
from .report import format_report, frequency_logspace, sweep
from .config import CircuitConfig, SweepRange, load_config, parse_config

from .constants import PROGRAMNAME, TWOPI

__all__ = [
    # components
    "Component", "Resistor", "Capacitor", "Inductor", "Diode", "Transistor",
    # circuit
    "Circuit", "Connection", "combine",
    # errors
    "DomainError", "CircuitError", "InputValidationError",
    # topologies
    "Topology", "TOPOLOGIES", "get_topology", "build_circuit",
    # reporting
    "format_report", "frequency_logspace", "sweep",
    # config
    "CircuitConfig", "SweepRange", "load_config", "parse_config",
    # constants
    "PROGRAMNAME", "TWOPI",
]
