from rcutils.cmdline import get_option, option_exists

ARGS = ["prog", "--input", "data.txt", "-v", "--last"]


def test_option_exists():
    assert option_exists(ARGS, "--input") is True
    assert option_exists(ARGS, "-v") is True
    assert option_exists(ARGS, "--missing") is False


def test_option_exists_empty():
    assert option_exists([], "--input") is False


def test_option_exists_accepts_iterator():
    assert option_exists(iter(ARGS), "--last") is True


def test_get_option_value():
    assert get_option(ARGS, "--input") == "data.txt"
    assert get_option(ARGS, "-v") == "--last"


def test_get_option_last_argument_has_no_value():
    assert get_option(ARGS, "--last") is None


def test_get_option_missing():
    assert get_option(ARGS, "--missing") is None
    assert get_option([], "--input") is None


def test_get_option_uses_first_occurrence():
    assert get_option(["-a", "one", "-a", "two"], "-a") == "one"


def test_get_option_accepts_generator():
    assert get_option((a for a in ARGS), "--input") == "data.txt"