import logging

from godependants.reporting import format_dependant_map, make_reporter


def test_format_dependant_map():
    table = format_dependant_map(
        {
            "github.com/y/core": ["github.com/x/lib"],
            "github.com/x/lib": ["example.com/app/a", "example.com/app/b"],
        }
    )
    lines = table.splitlines()
    assert "Package" in lines[0] and "Dependants" in lines[0]
    # Rows are sorted by package
    assert table.index("github.com/x/lib") < table.index("github.com/y/core")
    assert "example.com/app/b" in table


def test_quiet_reporter_has_no_output(capsys):
    log = make_reporter(quiet=True)
    log.info("module example.com/app")
    log.warning("no such package in module: x")
    assert capsys.readouterr().err == ""
    assert all(isinstance(h, logging.NullHandler) for h in log.handlers)


def test_reporter_writes_prefixed_lines(capsys):
    log = make_reporter()
    log.info("module example.com/app")
    log.debug("hidden")
    err = capsys.readouterr().err
    assert "godependants: module example.com/app" in err
    assert "hidden" not in err


def test_verbose_reporter(capsys):
    log = make_reporter(verbose=True)
    log.debug("adding dependant example.com/app/a")
    assert "adding dependant example.com/app/a" in capsys.readouterr().err


def test_reporter_is_reconfigured():
    make_reporter()
    log = make_reporter(quiet=True)
    assert len(log.handlers) == 1
