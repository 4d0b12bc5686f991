import pytest

from bundlebash.main import main


def test_main_runs_limited_frames(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    assert main(["--width", "320", "--height", "240", "--frames", "2"]) == 0


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "0"],
        ["--height", "-5"],
        ["--frames", "0"],
        ["--width", "wide"],
    ],
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2