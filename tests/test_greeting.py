import io

from remote_debug_demo.greeting import PROMPT, greet, prompt_and_greet, read_name


def test_greet_named_user():
    assert greet("Ada") == "Hello, Ada!"


def test_greet_empty_name():
    assert greet("") == "Hello, anonymous user!"


def test_read_name_strips_newline_only():
    stdout = io.StringIO()
    name = read_name(io.StringIO("  Grace  \nsecond line\n"), stdout)

    assert name == "  Grace  "
    assert stdout.getvalue() == PROMPT


def test_read_name_at_end_of_input():
    assert read_name(io.StringIO(""), io.StringIO()) == ""


def test_prompt_and_greet_empty_line():
    stdout = io.StringIO()
    greeting = prompt_and_greet(io.StringIO("\n"), stdout)

    assert greeting == "Hello, anonymous user!"
    assert stdout.getvalue() == "Enter your name: Hello, anonymous user!\n"


def test_prompt_and_greet_reads_one_line():
    stdin = io.StringIO("Ada\nLovelace\n")
    stdout = io.StringIO()

    assert prompt_and_greet(stdin, stdout) == "Hello, Ada!"
    assert stdin.read() == "Lovelace\n"


def test_read_name_keeps_carriage_return():
    assert read_name(io.StringIO("Ada\r\n", newline=""), io.StringIO()) == "Ada\r"
