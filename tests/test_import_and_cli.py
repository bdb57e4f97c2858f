import subprocess, sys

def _run(*args, stdin=""):
    cmd = [sys.executable, "-m", "impedpy.cli", *args]
    return subprocess.run(cmd, input=stdin, capture_output=True, text=True)

def test_import():
    import impedpy as pkg
    assert hasattr(pkg, "Circuit")
    assert hasattr(pkg, "Resistor")

def test_cli_help():
    # Just check the CLI runs and prints usage
    cp = _run("--help")
    assert cp.returncode == 0
    assert "topology" in cp.stdout
    assert "config" in cp.stdout

def test_cli_list():
    cp = _run("--list")
    assert cp.returncode == 0
    assert "1. Parallel RLC circuit" in cp.stdout
    assert "8. LC in Parallel" in cp.stdout

def test_cli_options_only():
    cp = _run("-t", "5", "-f", "1000", "-R", "100", "-C", "1e-6")
    assert cp.returncode == 0, cp.stderr
    assert "Total Impedance Magnitude at 1000Hz:" in cp.stdout
    assert "Type: Resistor" in cp.stdout
    assert "Type: Capacitor" in cp.stdout
    assert "Phase Shift: -1.5708 rad" in cp.stdout
    assert "+-----R-----C-----+" in cp.stdout

def test_cli_interactive_reprompts():
    # bad type, out-of-range type, then RL in Series; bad and zero frequency; bad resistance
    answers = "abc\n9\n3\nxyz\n0\n50\nohm\n10\n0.1\n"
    cp = _run(stdin=answers)
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout.count("Error: Invalid circuit type.") == 2
    assert cp.stdout.count("Error: Invalid frequency.") == 2
    assert "Error: Invalid resistance value." in cp.stdout
    assert "Total Impedance Magnitude at 50Hz:" in cp.stdout
    assert "+-----R-----L-----+" in cp.stdout

def test_cli_domain_error_exits_1():
    cp = _run("-t", "5", "-f", "1000", "-R", "0", "-C", "1e-6")
    assert cp.returncode == 1
    assert "error:" in cp.stderr
    assert "resistance" in cp.stderr

def test_cli_end_of_input_exits_1():
    cp = _run(stdin="")
    assert cp.returncode == 1
    assert "error:" in cp.stderr

def test_cli_sweep():
    cp = _run("-t", "2", "-f", "1000", "-R", "10", "-C", "1e-6", "-L", "0.01",
              "--sweep", "100", "10000", "5")
    assert cp.returncode == 0, cp.stderr
    assert "Frequency (Hz)" in cp.stdout
    assert "Impedance Magnitude (Ohms)" in cp.stdout

def test_cli_bad_sweep_points():
    cp = _run("-t", "5", "-f", "1000", "-R", "100", "-C", "1e-6", "--sweep", "10", "100", "2.5")
    assert cp.returncode == 1
    assert "POINTS" in cp.stderr
