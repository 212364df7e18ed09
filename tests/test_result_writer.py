import math

import pytest

from orbitsweep.result_writer import ResultWriter, column_names, read_results
from orbitsweep.sweep_driver import SweepDriver, SweepSample
from orbitsweep.sim_config import SweepConfig


def test_column_names():
    assert column_names(3) == ["tangential_velocity", "time_1", "time_2", "time_3"]


def test_writer_round_trips_nan_slots(tmp_path):
    path = tmp_path / "periods.csv"
    samples = [
        SweepSample(-100.0, (float("nan"), float("nan"))),
        SweepSample(100.0, (5.0, 10.5)),
    ]

    ResultWriter(str(path)).write(samples, 2)

    text = path.read_text().splitlines()
    assert text[0] == "tangential_velocity,time_1,time_2"
    assert text[1] == "-100.0,NaN,NaN"

    df = read_results(str(path))
    assert df["tangential_velocity"].tolist() == [-100.0, 100.0]
    assert math.isnan(df["time_1"].iloc[0])
    assert df["time_2"].iloc[1] == 10.5


def test_unwritable_path_propagates(tmp_path):
    missing_dir = tmp_path / "does" / "not" / "exist" / "out.csv"
    with pytest.raises(OSError):
        ResultWriter(str(missing_dir)).write([SweepSample(1.0, (2.0,))], 1)


def test_save_before_run_reports_error(tmp_path, capsys):
    driver = SweepDriver(SweepConfig(verbose=False))
    assert driver.save_results(str(tmp_path / "x.csv")) is None
    assert "[error]" in capsys.readouterr().out
