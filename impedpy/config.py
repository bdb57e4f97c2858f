# impedpy/config.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import yaml

from .errors import InputValidationError
from .topologies import PARAMETER_ORDER, Topology, get_topology

# Unicode chars that often sneak in from copy/paste; replaced by a plain space
WEIRD_WHITESPACE = {
	"\u00A0": "NO-BREAK SPACE (U+00A0)",
	"\u2002": "EN SPACE (U+2002)",
	"\u2003": "EM SPACE (U+2003)",
	"\u2009": "THIN SPACE (U+2009)",
	"\u202F": "NARROW NO-BREAK SPACE (U+202F)",
	"\u3000": "IDEOGRAPHIC SPACE (U+3000)",
}

# removed entirely, so a number split by one still parses
ZERO_WIDTH = {
	"\u200B": "ZERO-WIDTH SPACE (U+200B)",
	"\u200C": "ZERO-WIDTH NON-JOINER (U+200C)",
	"\u200D": "ZERO-WIDTH JOINER (U+200D)",
	"\u2060": "WORD JOINER (U+2060)",
	"\uFEFF": "BOM / ZERO-WIDTH NO-BREAK SPACE (U+FEFF)",
}

KNOWN_KEYS = ("topology", "frequency", "sweep") + PARAMETER_ORDER

def sanitize_yaml_text(text: str) -> str:
	"""Make pasted YAML loadable: drop zero-width chars, turn odd spaces into
	ASCII spaces and tabs in leading indentation into two spaces (YAML forbids
	tabs for indentation)."""
	for ch in ZERO_WIDTH:
		text = text.replace(ch, "")
	for ch in WEIRD_WHITESPACE:
		text = text.replace(ch, " ")
	lines = []
	for line in text.splitlines():
		leading = len(line) - len(line.lstrip(" \t"))
		lines.append(line[:leading].replace("\t", "  ") + line[leading:])
	return "\n".join(lines)

def _number(value: Any, key: str) -> float:
	if isinstance(value, bool):
		raise InputValidationError(f"Config '{key}' must be a number, got {value!r}.")
	try:
		return float(value)
	except (TypeError, ValueError):
		raise InputValidationError(f"Config '{key}' must be a number, got {value!r}.") from None

@dataclass
class SweepRange:
	fmin: float
	fmax: float
	points: int

	def __post_init__(self):
		if not (self.fmin > 0.0):
			raise InputValidationError("Sweep 'min' must be > 0 Hz.")
		if not (self.fmax > self.fmin):
			raise InputValidationError("Sweep 'max' must be larger than 'min'.")
		if self.points < 2:
			raise InputValidationError("Sweep 'points' must be at least 2.")

	@classmethod
	def from_dict(cls, data: Any) -> "SweepRange":
		if not isinstance(data, dict):
			raise InputValidationError("Config 'sweep' must be a mapping with min, max and points.")
		for key in ("min", "max", "points"):
			if key not in data:
				raise InputValidationError(f"Sweep '{key}' is missing.")
		points = _number(data["points"], "sweep.points")
		if not points.is_integer():
			raise InputValidationError("Sweep 'points' must be an integer.")
		return cls(fmin=_number(data["min"], "sweep.min"), fmax=_number(data["max"], "sweep.max"), points=int(points))

@dataclass
class CircuitConfig:
	"""Circuit description; anything left as None is asked for interactively."""
	topology: Optional[Topology] = None
	frequency: Optional[float] = None
	values: Dict[str, float] = field(default_factory=dict)
	sweep: Optional[SweepRange] = None

def parse_config(text: str) -> CircuitConfig:
	try:
		data = yaml.safe_load(sanitize_yaml_text(text))
	except yaml.YAMLError as err:
		raise InputValidationError(f"Config is not valid YAML: {err}") from None
	if data is None:
		return CircuitConfig()
	if not isinstance(data, dict):
		raise InputValidationError("Config must be a YAML mapping (key: value).")
	unknown: List[str] = [str(k) for k in data if k not in KNOWN_KEYS]
	if unknown:
		raise InputValidationError(f"Unknown config key(s): {', '.join(unknown)}")

	cfg = CircuitConfig()
	if data.get("topology") is not None:
		cfg.topology = get_topology(data["topology"])
	if data.get("frequency") is not None:
		cfg.frequency = _number(data["frequency"], "frequency")
		if not (cfg.frequency > 0.0):
			raise InputValidationError("Config 'frequency' must be > 0 Hz.")
	for name in PARAMETER_ORDER:
		if data.get(name) is not None:
			cfg.values[name] = _number(data[name], name)
	if data.get("sweep") is not None:
		cfg.sweep = SweepRange.from_dict(data["sweep"])
	return cfg

def load_config(path: str) -> CircuitConfig:
	with open(path, "r", encoding="utf-8") as f:
		try:
			text = f.read()
		except UnicodeDecodeError as err:
			raise InputValidationError(f"Config {path} is not UTF-8 text: {err}") from None
	return parse_config(text)
