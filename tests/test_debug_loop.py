import io

import pytest

from remote_debug_demo.debug_loop import run_debug_loop


def test_default_loop(capsys):
    assert run_debug_loop() == 52
    assert capsys.readouterr().out.splitlines() == [
        "Debug variable value: 42",
        "Loop iteration: 0",
        "Loop iteration: 1",
        "Loop iteration: 2",
        "Loop iteration: 3",
        "Loop iteration: 4",
        "Final debug variable value: 52",
    ]


def test_zero_iterations():
    stream = io.StringIO()
    assert run_debug_loop(start=1, iterations=0, stream=stream) == 1
    assert stream.getvalue() == "Debug variable value: 1\nFinal debug variable value: 1\n"


def test_negative_iterations():
    with pytest.raises(ValueError):
        run_debug_loop(iterations=-1, stream=io.StringIO())
