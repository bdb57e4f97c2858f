"""Tests for the fixed topologies, the console prompts and the text report."""

import io
import math
import pytest

from impedpy import TOPOLOGIES, Connection, DomainError, InputValidationError, build_circuit, get_topology
from impedpy.prompts import Prompter, parse_frequency, parse_topology, parse_value
from impedpy.report import format_report, format_sweep, frequency_logspace, sweep

VALUES = {"resistance": 100.0, "capacitance": 1e-6, "inductance": 0.01}


def test_eight_topologies():
    assert sorted(TOPOLOGIES) == list(range(1, 9))
    assert get_topology(1).mode is Connection.PARALLEL
    assert get_topology(2).mode is Connection.SERIES
    assert get_topology("7").parts == ("L", "C")
    assert get_topology("rc in parallel").number == 6


def test_parameters_are_asked_in_fixed_order():
    assert get_topology(1).parameters == ("resistance", "capacitance", "inductance")
    assert get_topology(8).parameters == ("capacitance", "inductance")
    assert get_topology(3).parameters == ("resistance", "inductance")


@pytest.mark.parametrize("key", [0, 9, "nine", True])
def test_unknown_topology(key):
    with pytest.raises(InputValidationError):
        get_topology(key)


@pytest.mark.parametrize("number", range(1, 9))
def test_build_every_topology(number):
    t = get_topology(number)
    f = 1000.0
    circuit = build_circuit(t, VALUES, f)
    assert circuit.mode is t.mode
    letters = {"Resistor": "R", "Capacitor": "C", "Inductor": "L"}
    assert [letters[c.get_type()] for c in circuit] == list(t.parts)
    zs = [c.get_impedance() for c in circuit]
    if t.mode is Connection.SERIES:
        expected = sum(zs)
    else:
        expected = 1 / sum(1 / z for z in zs)
    assert abs(circuit.get_circuit_impedance() - expected) < 1e-9 * abs(expected)
    assert all(c.get_frequency() == f for c in circuit)


def test_build_missing_value():
    with pytest.raises(InputValidationError):
        build_circuit(5, {"resistance": 100.0}, 1000.0)


def test_build_rejects_non_positive_values():
    with pytest.raises(DomainError):
        build_circuit(5, {"resistance": -1.0, "capacitance": 1e-6}, 1000.0)


def test_parsers():
    assert parse_topology(" 4\n").number == 4
    assert parse_frequency("50\n") == 50.0
    assert parse_value("1e-6", "capacitance") == 1e-6
    for text in ("-3", "0", "nan"):
        with pytest.raises(InputValidationError):
            parse_value(text, "resistance")
    for text in ("0", "-5", "x", "nan", ""):
        with pytest.raises(InputValidationError):
            parse_frequency(text)
    for text in ("0", "9", "2.5", "two"):
        with pytest.raises(InputValidationError):
            parse_topology(text)


def test_prompter_reprompts_until_valid():
    out = io.StringIO()
    p = Prompter(stdin=io.StringIO("abc\n-1\n250\n"), stdout=out)
    assert p.frequency() == 250.0
    assert out.getvalue().count("Error: Invalid frequency. Please enter a valid number.") == 2


def test_prompter_menu_and_values():
    out = io.StringIO()
    p = Prompter(stdin=io.StringIO("6\nfoo\n47\n"), stdout=out)
    assert p.topology().number == 6
    assert p.value("resistance") == 47.0
    text = out.getvalue()
    assert "Choose circuit type: " in text
    assert "6. RC in Parallel" in text
    assert "Enter resistance value (Ohms): " in text
    assert "Error: Invalid resistance value. Please enter a valid number." in text


def test_prompter_end_of_input():
    p = Prompter(stdin=io.StringIO("bad\n"), stdout=io.StringIO())
    with pytest.raises(EOFError):
        p.frequency()


def test_report_layout():
    t = get_topology(5)
    circuit = build_circuit(t, VALUES, 1000.0)
    text = format_report(circuit, t)
    lines = text.splitlines()
    assert lines[0].startswith("Total Impedance Magnitude at 1000Hz: 187.96")
    assert lines[0].endswith(" Ohms")
    assert lines[1] == "Total Phase Difference: -1.00981 rad"
    assert "Component Impedances and Phase Shifts:" in lines
    assert "Type: Resistor" in lines
    assert "Impedance Magnitude: 100 Ohms" in lines
    assert "Phase Shift: -1.5708 rad" in lines
    assert lines[-3:] == ["+-----R-----C-----+", "|                 |", "+-----------------+"]


def test_sweep_table():
    t = get_topology(5)
    circuit = build_circuit(t, VALUES, 1000.0)
    Z_before = circuit.get_circuit_impedance()
    freqs = frequency_logspace(10.0, 1e5, 9)
    df = sweep(circuit, freqs)
    assert len(df) == 9
    mag = df["Impedance Magnitude (Ohms)"].to_numpy()
    # RC in series: |Z| falls towards R as f grows
    assert all(mag[i] > mag[i + 1] for i in range(len(mag) - 1))
    assert mag[-1] > 100.0
    assert math.isclose(df["Frequency (Hz)"].iloc[0], 10.0)
    # circuit is back at its own frequency
    assert circuit.get_frequency() == 1000.0
    assert circuit.get_circuit_impedance() == Z_before
    assert "Impedance Phase (degrees)" in format_sweep(df)


def test_prompter_reprompts_on_non_positive_value():
    out = io.StringIO()
    p = Prompter(stdin=io.StringIO("-3\n0\n47\n"), stdout=out)
    assert p.value("resistance") == 47.0
    assert out.getvalue().count("Error: Invalid resistance value. Please enter a valid number.") == 2


def test_sweep_restores_explicit_zero_frequency():
    from impedpy import Circuit, Resistor, Inductor
    circuit = Circuit(frequency=0.0)
    circuit.add_component_in_series(Resistor(10.0))
    circuit.add_component_in_series(Inductor(0.01))
    sweep(circuit, frequency_logspace(10.0, 1000.0, 3))
    assert circuit.get_frequency() == 0.0
    assert circuit.get_circuit_impedance() == complex(10.0, 0.0)


def test_sweep_leaves_undriven_circuit_at_last_frequency():
    from impedpy import Circuit, Resistor, Capacitor
    circuit = Circuit()
    circuit.add_component_in_series(Resistor(10.0))
    circuit.add_component_in_series(Capacitor(1e-6))
    sweep(circuit, [100.0, 1000.0])
    assert circuit.get_frequency() == 1000.0
