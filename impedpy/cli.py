from __future__ import annotations
import argparse, sys
from typing import Dict

from .config import CircuitConfig, SweepRange, load_config
from .constants import PROGRAMNAME
from .errors import CircuitError, DomainError, InputValidationError
from .prompts import Prompter
from .report import format_report, format_sweep, frequency_logspace, sweep
from .topologies import PARAMETER_ORDER, TOPOLOGIES, build_circuit, get_topology

def _get_version_from_pyproject() -> str:
	try:
		from importlib.resources import files
		pyproj = files(__package__).joinpath("../pyproject.toml")
		text = pyproj.read_text(encoding="utf-8")
		import re
		m = re.search(r'^version\s*=\s*"(.*?)"\s*$', text, re.M)
		return m.group(1) if m else "unknown"
	except Exception:
		return "unknown"

def _topology_arg(text: str):
	try:
		return get_topology(text)
	except InputValidationError as err:
		raise argparse.ArgumentTypeError(str(err))

def _positive_float(text: str) -> float:
	try:
		value = float(text)
	except ValueError:
		raise argparse.ArgumentTypeError(f"not a number: {text!r}")
	if not (value > 0.0):
		raise argparse.ArgumentTypeError(f"must be > 0, got {text}")
	return value

def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog='impedpy', description=f"{PROGRAMNAME}: total impedance and phase of series and parallel RLC circuits. Values not given as options or in the config file are asked for interactively.")
	parser.add_argument("--config", help="YAML config file describing the circuit (topology, frequency, resistance, capacitance, inductance, sweep)")
	parser.add_argument("-t", "--topology", type=_topology_arg, help="Circuit type: number 1-8 or its name (see --list)")
	parser.add_argument("-f", "--frequency", type=_positive_float, help="Frequency (Hz)")
	parser.add_argument("-R", "--resistance", type=float, help="Resistance (Ohms)")
	parser.add_argument("-C", "--capacitance", type=float, help="Capacitance (Farads)")
	parser.add_argument("-L", "--inductance", type=float, help="Inductance (Henry)")
	parser.add_argument("--sweep", nargs=3, type=float, metavar=("FMIN", "FMAX", "POINTS"),
		help="Also print a table of the total impedance at POINTS log-spaced frequencies")
	parser.add_argument("--list", action="store_true", help="List the circuit types and exit")
	parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version_from_pyproject()}")
	return parser

def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if args.list:
		for t in TOPOLOGIES.values():
			print(t)
		return 0

	prompter = Prompter()
	try:
		cfg = load_config(args.config) if args.config else CircuitConfig()
		sweep_range = cfg.sweep
		if args.sweep:
			fmin, fmax, npts = args.sweep
			if not npts.is_integer():
				raise InputValidationError("Sweep POINTS must be an integer.")
			sweep_range = SweepRange(fmin=fmin, fmax=fmax, points=int(npts))

		prompted = False
		topology = args.topology or cfg.topology
		if topology is None:
			topology = prompter.topology()
			prompted = True
		frequency = args.frequency if args.frequency is not None else cfg.frequency
		if frequency is None:
			frequency = prompter.frequency()
			prompted = True
		values: Dict[str, float] = {}
		for name in PARAMETER_ORDER:
			if name not in topology.parameters:
				continue
			value = getattr(args, name)
			if value is None:
				value = cfg.values.get(name)
			if value is None:
				value = prompter.value(name)
				prompted = True
			values[name] = value
		if prompted:
			print()

		circuit = build_circuit(topology, values, frequency)
		print(format_report(circuit, topology))
		if sweep_range is not None:
			print()
			print(format_sweep(sweep(circuit, frequency_logspace(sweep_range.fmin, sweep_range.fmax, sweep_range.points))))
	except (DomainError, CircuitError, InputValidationError, OSError, EOFError) as err:
		print(f"error: {err}", file=sys.stderr)
		return 1
	return 0

if __name__ == "__main__":
	raise SystemExit(main())
