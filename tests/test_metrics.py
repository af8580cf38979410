import numpy as np
import pytest

import power2lms
from power2lms import Power2ErrorLMS, db10, msd, mse_db


def test_db10_guard():
    np.testing.assert_allclose(db10([1.0, 10.0, 100.0]), [0.0, 10.0, 20.0])
    np.testing.assert_allclose(db10([0.0]), [-200.0])


def test_mse_db_tail_window():
    e = np.concatenate((np.full(10, 10.0), np.full(10, 0.1)))
    assert mse_db(e, tail_window=10) == pytest.approx(-20.0)
    assert mse_db(e, tail_window=1000) == pytest.approx(10.0 * np.log10(50.005))
    assert mse_db(e) == pytest.approx(10.0 * np.log10(50.005))


def test_mse_db_degenerate_inputs():
    assert np.isnan(mse_db([]))
    assert np.isnan(mse_db([1.0, np.nan]))


def test_msd_accepts_vectors_histories_and_results():
    w_true = np.array([1.0, -1.0])
    assert msd(w_true, [1.0, -1.0]) == 0.0
    assert msd(w_true, [[0.0, 0.0], [2.0, -1.0]]) == pytest.approx(0.5)

    filt = Power2ErrorLMS(filter_order=1, bd=8, tau=0.01, w_init=[1.0, 1.0])
    res = filt.optimize([0.0], [0.0])
    assert msd(w_true, res) == pytest.approx(2.0)

    with pytest.raises(ValueError):
        msd(w_true, [1.0, 2.0, 3.0])


def test_info_prints_overview(capsys):
    power2lms.info()
    out = capsys.readouterr().out
    assert "Power2ErrorLMS" in out
