import pytest

from numeral_converter import __version__


@pytest.mark.script_launch_mode("subprocess")
def test_no_values(script_runner):
    ret = script_runner.run(["roman-numerals"], print_result=False)
    assert ret.success
    assert "usage: roman-numerals" in ret.stdout
    assert ret.stderr == ""


@pytest.mark.script_launch_mode("subprocess")
def test_version(script_runner):
    ret = script_runner.run(["roman-numerals", "--version"], print_result=False)
    assert ret.success
    assert ret.stdout == __version__ + "\n"
    assert ret.stderr == ""


@pytest.mark.script_launch_mode("subprocess")
def test_help(script_runner):
    ret = script_runner.run(["roman-numerals", "--help"], print_result=False)
    assert ret.success
    assert "Integers to encode or Roman numerals to decode" in ret.stdout
    assert "canonical form" in ret.stdout
    assert ret.stderr == ""


@pytest.mark.script_launch_mode("subprocess")
def test_convert(script_runner):
    ret = script_runner.run(
        ["roman-numerals", "1994", "MMXXIV", "xiv", "3999"], print_result=False
    )
    assert ret.success
    assert ret.stdout == "1994: MCMXCIV\nMMXXIV: 2024\nxiv: 14\n3999: MMMCMXCIX\n"
    assert ret.stderr == ""

    ret = script_runner.run(["roman-numerals", "--brief", "4", "IX"], print_result=False)
    assert ret.success
    assert ret.stdout == "IV\n9\n"


@pytest.mark.script_launch_mode("subprocess")
def test_convert_errors(script_runner):
    ret = script_runner.run(["roman-numerals", "4000", "MCMXQ", "X"], print_result=False)
    assert not ret.success
    assert ret.returncode == 1
    assert ret.stdout == "X: 10\n"
    assert "4000: Number out of range for Roman numerals" in ret.stderr
    assert "MCMXQ: Invalid Roman digit 'Q' (position 4 in 'MCMXQ')" in ret.stderr

    ret = script_runner.run(
        ["roman-numerals", "\u00b2", "9" * 5000, "00012", "V"], print_result=False
    )
    assert ret.returncode == 1
    assert ret.stdout == "00012: XII\nV: 5\n"
    assert "Invalid Roman digit" in ret.stderr
    assert ret.stderr.count("Number out of range for Roman numerals") == 1
    assert "Traceback" not in ret.stderr


@pytest.mark.script_launch_mode("subprocess")
def test_strict(script_runner):
    ret = script_runner.run(["roman-numerals", "IIII"], print_result=False)
    assert ret.success
    assert ret.stdout == "IIII: 4\n"

    ret = script_runner.run(["roman-numerals", "--strict", "IIII"], print_result=False)
    assert not ret.success
    assert "IIII: Malformed Roman numeral 'IIII' (decodes to 4)" in ret.stderr


@pytest.mark.script_launch_mode("subprocess")
def test_check(script_runner):
    ret = script_runner.run(["roman-numerals", "--check", "XIV", "IIII"], print_result=False)
    assert ret.success
    assert ret.stdout == "XIV: valid\nIIII: valid\n"

    ret = script_runner.run(
        ["roman-numerals", "--check", "--strict", "XIV", "IIII", "Q"], print_result=False
    )
    assert ret.returncode == 1
    assert ret.stdout == "XIV: valid\nIIII: invalid\nQ: invalid\n"


@pytest.mark.script_launch_mode("subprocess")
def test_debug(script_runner):
    ret = script_runner.run(
        ["roman-numerals", "--debug", "--strict", "VX"], print_result=False
    )
    assert not ret.success
    assert "DEBUG:numeral_converter.roman:decode: VX is not canonical (decodes to 5)" in ret.stderr
