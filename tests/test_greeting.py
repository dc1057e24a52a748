from introcs.greeting import greet, main


def test_greet_alice():
    assert greet("Alice") == "Hi, Alice. How are you?"


def test_greet_contains_name():
    assert greet("Zed Q").startswith("Hi, Zed Q.")


def test_main_prints_greeting(capsys):
    assert main(["Alice"]) == 0
    assert capsys.readouterr().out == "Hi, Alice. How are you?\n"


def test_main_ignores_extra_arguments(capsys):
    assert main(["Bob", "extra"]) == 0
    assert capsys.readouterr().out == "Hi, Bob. How are you?\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Usage: ./gauss <name>\n"