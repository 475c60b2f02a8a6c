from __future__ import annotations

from typing import Tuple

import numpy as np

from .random_source import UniformSource


def clamp_correlation(rho: float) -> float:
    return float(np.clip(rho, -1.0, 1.0))


def gaussian_draw(source: UniformSource, std_dev: float = 1.0, mean: float = 0.0) -> float:
    """Box-Muller normal sample. u is taken as 1 - uniform() so log(u) stays finite."""
    u = 1.0 - source.uniform()
    v = source.uniform()
    z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
    return float(z * std_dev + mean)


def generate_correlated_shock(
    rho: float, house_price_std_dev: float, interest_rate_std_dev: float, source: UniformSource
) -> Tuple[float, float]:
    """Return (house_price_shock, rate_shock) with the rate shock mixed toward the house shock by rho.

    Each draw is already scaled by its volatility before mixing; the update rules
    in the engine scale by volatility a second time.
    """
    rho = clamp_correlation(rho)
    z1 = gaussian_draw(source, house_price_std_dev)
    z2 = gaussian_draw(source, interest_rate_std_dev)
    correlated_z2 = rho * z1 + np.sqrt(1.0 - rho**2) * z2
    return z1, float(correlated_z2)
