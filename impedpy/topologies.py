from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .circuit import Circuit, Connection
from .components import Capacitor, Inductor, Resistor
from .errors import InputValidationError

# part letter -> (parameter name, component class)
PARTS = {
	"R": ("resistance", Resistor),
	"C": ("capacitance", Capacitor),
	"L": ("inductance", Inductor),
}

# parameters are always asked for in this order
PARAMETER_ORDER = ("resistance", "capacitance", "inductance")

@dataclass(frozen=True)
class Topology:
	number: int
	name: str
	mode: Connection
	parts: Tuple[str, ...]  # registration order, letters from PARTS
	diagram: str

	@property
	def parameters(self) -> Tuple[str, ...]:
		needed = {PARTS[p][0] for p in self.parts}
		return tuple(n for n in PARAMETER_ORDER if n in needed)

	def __str__(self):
		return f"{self.number}. {self.name}"

_P3 = """\
+-----{0}-----+
|           |
+-----{1}-----+
|           |
+-----{2}-----+"""

_P2 = """\
+-----{0}-----+
|           |
+-----{1}-----+
|           |
+-----------+"""

TOPOLOGIES: Dict[int, Topology] = {t.number: t for t in (
	Topology(1, "Parallel RLC circuit", Connection.PARALLEL, ("R", "C", "L"), _P3.format("R", "C", "L")),
	Topology(2, "Series RLC circuit", Connection.SERIES, ("R", "C", "L"),
		"+-----R-----C-----L-----+\n"
		"|                       |\n"
		"+-----------------------+"),
	Topology(3, "RL in Series", Connection.SERIES, ("R", "L"),
		"+-----R-----L-----+\n"
		"|                 |\n"
		"+-----------------+"),
	Topology(4, "RL in Parallel", Connection.PARALLEL, ("R", "L"), _P2.format("R", "L")),
	Topology(5, "RC in Series", Connection.SERIES, ("R", "C"),
		"+-----R-----C-----+\n"
		"|                 |\n"
		"+-----------------+"),
	Topology(6, "RC in Parallel", Connection.PARALLEL, ("R", "C"), _P2.format("R", "C")),
	Topology(7, "LC in Series", Connection.SERIES, ("L", "C"),
		"+-----L-----C-----+\n"
		"|                 |\n"
		"+-----------------+"),
	Topology(8, "LC in Parallel", Connection.PARALLEL, ("L", "C"), _P2.format("L", "C")),
)}

def get_topology(key) -> Topology:
	"""Look up a topology by number (int or digit string) or by name (case-insensitive)."""
	if isinstance(key, Topology):
		return key
	if isinstance(key, bool):
		raise InputValidationError(f"Unknown circuit type: {key!r}")
	if isinstance(key, int):
		number = key
	else:
		text = str(key).strip()
		if text.isdigit():
			number = int(text)
		else:
			for t in TOPOLOGIES.values():
				if t.name.lower() == text.lower():
					return t
			raise InputValidationError(f"Unknown circuit type: {key!r}")
	if number not in TOPOLOGIES:
		raise InputValidationError(f"Circuit type must be an integer between 1 and {len(TOPOLOGIES)}, got {number}.")
	return TOPOLOGIES[number]

def build_circuit(topology, values: Mapping[str, float], frequency: float) -> Circuit:
	"""Construct the topology's components from 'values' (keyed by parameter
	name) and register them in a circuit driven at 'frequency'."""
	topology = get_topology(topology)
	missing = [n for n in topology.parameters if values.get(n) is None]
	if missing:
		raise InputValidationError(f"{topology.name} requires: {', '.join(missing)}")
	# frequency first: an undriven inductor would short a parallel circuit
	circuit = Circuit(mode=topology.mode, frequency=frequency)
	for letter in topology.parts:
		name, cls = PARTS[letter]
		component = cls(values[name])
		if topology.mode is Connection.SERIES:
			circuit.add_component_in_series(component)
		else:
			circuit.add_component_in_parallel(component)
	return circuit
