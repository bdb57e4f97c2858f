from __future__ import annotations
import sys
from typing import Callable, Optional, TextIO, TypeVar
import numpy as np

from .errors import InputValidationError
from .topologies import TOPOLOGIES, Topology

T = TypeVar("T")

PROMPTS = {
	"resistance": "Enter resistance value (Ohms): ",
	"capacitance": "Enter capacitance value (Farads): ",
	"inductance": "Enter inductance value (Henry): ",
}

def parse_number(text: str, what: str) -> float:
	try:
		value = float(text.strip())
	except ValueError:
		raise InputValidationError(f"Invalid {what}. Please enter a valid number.") from None
	if not np.isfinite(value):
		raise InputValidationError(f"Invalid {what}. Please enter a valid number.")
	return value

def parse_topology(text: str) -> Topology:
	try:
		number = int(text.strip())
	except ValueError:
		number = None
	if number not in TOPOLOGIES:
		raise InputValidationError(
			f"Invalid circuit type. Please enter an integer between 1 and {len(TOPOLOGIES)}.")
	return TOPOLOGIES[number]

def parse_frequency(text: str) -> float:
	f = parse_number(text, "frequency")
	if f <= 0:
		raise InputValidationError("Invalid frequency. Please enter a valid number.")
	return f

def parse_value(text: str, name: str) -> float:
	value = parse_number(text, f"{name} value")
	if not (value > 0.0):
		raise InputValidationError(f"Invalid {name} value. Please enter a valid number.")
	return value

class Prompter:
	"""Line-based console prompts. Invalid answers are reported and asked
	again until a valid one arrives; end of input raises EOFError."""

	def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
		self.stdin = stdin if stdin is not None else sys.stdin
		self.stdout = stdout if stdout is not None else sys.stdout

	def ask(self, prompt: str, parse: Callable[[str], T]) -> T:
		while True:
			self.stdout.write(prompt)
			self.stdout.flush()
			line = self.stdin.readline()
			if not line:
				raise EOFError("Input ended before a valid value was entered.")
			try:
				return parse(line)
			except InputValidationError as err:
				print(f"Error: {err}", file=self.stdout)

	def topology(self) -> Topology:
		print("Choose circuit type: ", file=self.stdout)
		for t in TOPOLOGIES.values():
			print(t, file=self.stdout)
		return self.ask("", parse_topology)

	def frequency(self) -> float:
		return self.ask("Frequency (Hz): ", parse_frequency)

	def value(self, name: str) -> float:
		return self.ask(PROMPTS[name], lambda text: parse_value(text, name))
