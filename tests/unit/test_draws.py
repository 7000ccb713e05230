import numpy as np
import polars as pl
import pytest

from zipf_sampler.draws import draw_samples, samples_frame, write_samples  # type: ignore
from zipf_sampler.sampler import ZipfSampler  # type: ignore
from zipf_sampler.sources import ReplaySource  # type: ignore


def test_draw_samples_shape_dtype_and_range():
    sampler = ZipfSampler(50, 1.1)
    out = draw_samples(sampler, np.random.default_rng(5), 1_000)
    assert isinstance(out, np.ndarray)
    assert out.shape == (1_000,)
    assert out.dtype == np.int64
    assert out.min() >= 1 and out.max() <= 50


def test_draw_samples_reproducible_and_errors():
    sampler = ZipfSampler(50, 1.1)
    a = draw_samples(sampler, np.random.default_rng(5), 200)
    b = draw_samples(sampler, np.random.default_rng(5), 200)
    assert np.array_equal(a, b)
    assert draw_samples(sampler, np.random.default_rng(5), 0).shape == (0,)
    with pytest.raises(ValueError):
        draw_samples(sampler, np.random.default_rng(5), -1)


def test_draw_samples_shares_one_source():
    sampler = ZipfSampler(10, 1.0)
    source = ReplaySource([0.0] * 5)
    out = draw_samples(sampler, source, 5)
    assert out.tolist() == [10] * 5
    assert source.consumed == 5


def test_samples_frame_columns_and_dtype():
    df = samples_frame(np.array([3, 1, 2]))
    assert list(df.columns) == ["draw", "value"]
    assert df["draw"].dtype == pl.Int64
    assert df["value"].dtype == pl.Int64
    assert df["draw"].to_list() == [0, 1, 2]
    assert df["value"].to_list() == [3, 1, 2]


@pytest.mark.parametrize("name", ["nested/out.parquet", "out.csv"])
def test_write_samples_round_trip(tmp_path, name):
    df = samples_frame(np.array([1, 1, 4, 2]))
    path = write_samples(df, tmp_path / name)
    assert path.exists()
    loaded = pl.read_parquet(path) if path.suffix == ".parquet" else pl.read_csv(path)
    assert loaded["value"].to_list() == [1, 1, 4, 2]


def test_write_samples_rejects_unknown_suffix(tmp_path):
    with pytest.raises(ValueError):
        write_samples(samples_frame(np.array([1])), tmp_path / "out.json")
