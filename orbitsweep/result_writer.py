import pandas as pd
from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
	from .sweep_driver import SweepSample

"""
This module serializes sweep results to a tabular file. column_names builds the fixed header (tangential_velocity followed by one time_k column per orbit), samples_to_frame assembles SweepSample rows into a pandas DataFrame in sweep order, and ResultWriter writes that frame to CSV with NaN spelled out for unfilled orbit slots. read_results loads a written table back for analysis. File system errors are not caught here: a run that cannot write its output is aborted by the caller.


"""

VELOCITY_COLUMN = "tangential_velocity"


def column_names(n_orbits: int) -> List[str]:
	return [VELOCITY_COLUMN] + [f"time_{k}" for k in range(1, int(n_orbits) + 1)]


def samples_to_frame(samples: Sequence["SweepSample"], n_orbits: int) -> pd.DataFrame:
	columns = column_names(n_orbits)
	rows = [sample.as_row() for sample in samples]
	return pd.DataFrame(rows, columns=columns)


class ResultWriter:
	def __init__(self, path: str, na_rep: str = "NaN") -> None:
		self.path = str(path)
		self.na_rep = na_rep

	def write(self, samples: Sequence["SweepSample"], n_orbits: int) -> pd.DataFrame:
		df = samples_to_frame(samples, n_orbits)
		df.to_csv(self.path, index=False, na_rep=self.na_rep)
		print(f"Saved {len(df)} results to {self.path}")
		return df


def read_results(path: str) -> pd.DataFrame:
	return pd.read_csv(path)
