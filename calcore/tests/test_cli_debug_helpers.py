from calcore.cli._debug_utils import _dbg, _debug_enabled


def test_debug_enabled_defaults_off():
    class Args:
        pass

    assert _debug_enabled(Args()) is False


def test_dbg_prefix_and_suppression(capsys):
    class Args:
        debug = True

    _dbg(Args(), "hello")
    out = capsys.readouterr().out.strip()
    assert out.startswith("[debug] ")
    assert out.endswith("hello")

    class ArgsOff:
        debug = False

    _dbg(ArgsOff(), "silent")
    out_off = capsys.readouterr().out
    assert out_off == ""
