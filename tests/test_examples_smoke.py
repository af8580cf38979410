from __future__ import annotations
from pathlib import Path
import importlib.util
import numpy as np

REPO = Path(__file__).resolve().parents[1]
EXAMPLES = REPO / "examples"

def load_module(path: Path):
    name = f"ex_{path.stem}_{abs(hash(str(path)))%10**8}"
    spec = importlib.util.spec_from_file_location(name, str(path))
    mod = importlib.util.module_from_spec(spec)
    assert spec and spec.loader
    spec.loader.exec_module(mod)  # type: ignore
    return mod

def test_examples_smoke(monkeypatch):
    assert EXAMPLES.exists()

    monkeypatch.setenv("P2LMS_ENSEMBLE", "3")
    monkeypatch.setenv("P2LMS_K", "400")

    files = sorted(p for p in EXAMPLES.rglob("*.py") if p.is_file() and not p.name.startswith("_"))
    assert files, "No examples found"

    for p in files:
        mod = load_module(p)
        if not hasattr(mod, "main"):
            continue

        ret = mod.main(seed=0)

        assert ret is not None
        mse = np.asarray(ret["MSE_av"]).ravel()
        assert mse.size == 400
        assert np.isfinite(mse).all()

        # o MSE em regime não pode ficar abaixo do piso de ruído
        assert ret["MSE_ss_dB"] > ret["noise_floor_dB"] - 3.0
        assert np.isclose(ret["MSE_ss_dB"], 10.0 * np.log10(np.mean(mse[-200:])))
