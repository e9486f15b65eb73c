"""utils/sampling.py"""
import logging

import numpy as np
import pandas as pd
from scipy.optimize import brentq

from config.config import SAMPLING_CONFIG

logger = logging.getLogger(__name__)

ROOT_TOLERANCE = 1e-6


def sample(solver, start=SAMPLING_CONFIG['start'], stop=SAMPLING_CONFIG['stop'],
           num=SAMPLING_CONFIG['num'], variable_symbol=None):
    """在 [start, stop] 上等距采样，返回以自变量取值为索引的 Series（索引名为自变量符号）"""
    if num < 1:
        raise ValueError(f"num must be positive, got {num}")
    grid = pd.Index(np.linspace(start, stop, num), name=variable_symbol or solver.variable_symbol)
    return solver.calculate_over(pd.Series(grid, index=grid))


def find_roots(solver, start=SAMPLING_CONFIG['start'], stop=SAMPLING_CONFIG['stop'],
               num=SAMPLING_CONFIG['num'], xtol=SAMPLING_CONFIG['root_xtol'], variable_symbol=None):
    """
    在采样网格上寻找变号区间，用 brentq 精化根

    Returns:
        升序排列的根列表；含 NaN/inf 的区间被跳过
    """
    values = sample(solver, start, stop, num, variable_symbol)
    xs = values.index.to_numpy()
    ys = values.to_numpy()

    roots = []
    for i in range(len(xs)):
        if ys[i] == 0:
            roots.append(float(xs[i]))
            continue
        if i + 1 >= len(xs):
            break
        y0, y1 = ys[i], ys[i + 1]
        if not (np.isfinite(y0) and np.isfinite(y1)):
            continue
        if y1 != 0 and np.sign(y0) != np.sign(y1):
            try:
                root = float(brentq(solver.calculate_for, xs[i], xs[i + 1], xtol=xtol))
            except (ValueError, RuntimeError) as e:
                logger.debug(f"Root refinement failed on [{xs[i]}, {xs[i + 1]}]: {e}")
                continue
            # 变号也可能来自极点 (如 1/x)
            if abs(solver.calculate_for(root)) < ROOT_TOLERANCE:
                roots.append(root)
            else:
                logger.debug(f"Discarding pole at {root}")

    logger.info(f"Found {len(roots)} roots of '{solver}' on [{start}, {stop}]")
    return roots
