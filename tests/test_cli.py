import pandas as pd

from orbitsweep.cli import main, build_parser, config_from_args


SMALL_SWEEP = [
    "--dt", "5",
    "--orbits", "1",
    "--num-velocities", "2",
    "--min-velocity", "7000",
    "--max-velocity", "8000",
    "--quiet",
]


def test_main_writes_table(tmp_path):
    out = tmp_path / "sweep.csv"

    code = main(["--output", str(out)] + SMALL_SWEEP)

    assert code == 0
    df = pd.read_csv(out)
    assert list(df.columns) == ["tangential_velocity", "time_1"]
    assert len(df) == 2
    assert df["time_1"].notna().all()


def test_main_rejects_invalid_configuration(tmp_path, capsys):
    out = tmp_path / "sweep.csv"

    code = main(["--output", str(out), "--dt", "-1", "--quiet"])

    assert code == 1
    assert not out.exists()
    assert "[error]" in capsys.readouterr().out


def test_zero_max_steps_disables_guard():
    args = build_parser().parse_args(["--max-steps", "0", "--keep-midpoint", "--angle-measure", "signed"])
    cfg = config_from_args(args)

    assert cfg.max_steps is None
    assert cfg.skip_midpoint is False
    assert cfg.angle_measure == "signed"
