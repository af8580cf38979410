#################################################################################
#                         Example: System Identification                        #
#################################################################################
#                                                                               #
#  In this example we have a typical system identification scenario. We want    #
# to estimate the filter coefficients of an unknown system given by Wo. In      #
# order to accomplish this task we use an adaptive filter with the same         #
# number of coefficients, N, as the unknown system. The procedure is:           #
# 1)  Excitate both filters (the unknown and the adaptive) with the signal      #
#   x. In this case, x is white Gaussian noise with unit variance.              #
# 2)  Generate the desired signal, d = Wo' x + n, which is the output of the    #
#   unknown system considering some disturbance (noise) in the model. The       #
#   noise power is given by sigma_n2.                                           #
# 3)  Adapt with the Power-of-Two Error LMS and average the squared error over   #
#   an ensemble of independent realizations.                                    #
#                                                                               #
#     Adaptive Algorithm used here: Power-of-Two Error LMS                      #
#                                                                               #
#################################################################################

# Imports
import os

import numpy as np

from power2lms import Power2ErrorConfig, db10, msd, power2_error
from power2lms.base import AdaptiveFilter


# Define a Plant class to simulate the unknown system
class Plant(AdaptiveFilter):
    def optimize(self, input_signal, desired_signal, **kwargs):
        """The Plant represents the static unknown system and does not update."""
        raise NotImplementedError


def main(seed: int = 0) -> dict:
    # 1. Experiment Parameters
    ensemble = int(os.environ.get("P2LMS_ENSEMBLE", 20))
    n_samples = int(os.environ.get("P2LMS_K", 1500))
    w_o = np.array([0.32, -0.3, 0.5, 0.2])
    filter_order = len(w_o) - 1
    sigma_n2 = 1e-3

    cfg = Power2ErrorConfig(
        filter_order_no=filter_order,
        bd=8,
        tau=1e-3,
        step=0.01,
        initial_coefficients=np.zeros(filter_order + 1),
    )

    rng = np.random.default_rng(seed)
    plant = Plant(filter_order, w_init=w_o)

    mse = np.zeros((ensemble, n_samples))
    w_final = np.zeros((ensemble, filter_order + 1))

    # 2. Ensemble of independent runs
    for l in range(ensemble):
        x = rng.standard_normal(n_samples)
        noise = np.sqrt(sigma_n2) * rng.standard_normal(n_samples)
        d = plant.filter_signal(x) + noise

        outputs, errors, coefficients = power2_error(d, x, cfg, verbose=(l == 0))
        mse[l] = errors ** 2
        w_final[l] = coefficients[-1]

    mse_av = mse.mean(axis=0)
    w_av = w_final.mean(axis=0)

    # mse_av already holds squared errors
    mse_ss_db = float(db10(np.mean(mse_av[-200:])))
    noise_floor_db = float(db10(sigma_n2))

    print("-" * 60)
    print(f"Power-of-Two Error LMS | ensemble={ensemble} | samples={n_samples}")
    print(f"Steady-state MSE (last 200): {mse_ss_db:7.2f} dB")
    print(f"Noise floor                : {noise_floor_db:7.2f} dB")
    print(f"MSD of averaged estimate   : {msd(w_o, w_av):.3e}")
    print(f"Wo   : {np.array2string(w_o, precision=4)}")
    print(f"W(k) : {np.array2string(w_av, precision=4)}")
    print("-" * 60)

    return {
        "MSE_av": mse_av,
        "MSE_ss_dB": mse_ss_db,
        "noise_floor_dB": noise_floor_db,
        "W_av": w_av,
        "Wo": w_o,
    }


if __name__ == "__main__":
    main()

# EOF
