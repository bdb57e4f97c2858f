from __future__ import annotations
from typing import Optional
import numpy as np
import pandas as pd

from .circuit import Circuit
from .topologies import Topology

def format_report(circuit: Circuit, topology: Optional[Topology] = None) -> str:
	"""Total impedance and phase, then every component, then the diagram."""
	lines = [
		f"Total Impedance Magnitude at {circuit.get_frequency():g}Hz: {circuit.get_total_impedance_magnitude():g} Ohms",
		f"Total Phase Difference: {circuit.get_phase_difference():g} rad",
		"",
		"Component Impedances and Phase Shifts:",
	]
	for c in circuit:
		lines += [
			f"Type: {c.get_type()}",
			f"Impedance Magnitude: {c.get_impedance_magnitude():g} Ohms",
			f"Phase Shift: {c.get_phase_difference():g} rad",
			"",
		]
	if topology is not None:
		lines += ["Circuit Diagram: ", topology.diagram]
	return "\n".join(lines)

def frequency_logspace(fmin=10.0, fmax=100000.0, n=25):
	return np.logspace(np.log10(fmin), np.log10(fmax), int(n))

def sweep(circuit: Circuit, freqs) -> pd.DataFrame:
	"""Drive the circuit through 'freqs' and tabulate the total impedance.
	A circuit that had a frequency is returned to it afterwards; one that had
	none is left at the last swept frequency."""
	f_prev = circuit.get_frequency() if circuit.has_frequency else None
	Z = []
	try:
		for f in freqs:
			circuit.set_frequency(float(f))
			Z.append(circuit.get_circuit_impedance())
	finally:
		if f_prev is not None:
			circuit.set_frequency(f_prev)
	Z = np.array(Z, dtype=complex)
	phase = np.angle(Z)
	return pd.DataFrame({
		"Frequency (Hz)": np.asarray(freqs, dtype=float),
		"Impedance Magnitude (Ohms)": np.abs(Z),
		"Impedance Phase (rad)": phase,
		"Impedance Phase (degrees)": np.rad2deg(phase),
	})

def format_sweep(df: pd.DataFrame) -> str:
	return df.to_string(index=False, float_format=lambda v: f"{v:.6g}")
