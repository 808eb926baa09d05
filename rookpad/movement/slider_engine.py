import numpy as np
from numba import njit
from rookpad.common.shared_types import N_ROWS, N_COLS, COORD_DTYPE

@njit(cache=True)
def _generate_slider_targets(row, col, vectors, landable):
    """
    Slide outward from (row, col) along each direction vector.

    Args:
        row, col: origin cell.
        vectors: (M, 2) direction vectors, walked in order.
        landable: (N_ROWS, N_COLS) bool mask of cells a slide may stop on.

    Returns:
        (K, 2) array of reachable cells, grouped by direction, nearest first.
    """
    n_vectors = vectors.shape[0]

    # A slider can never visit more cells than the grid holds
    out = np.empty((N_ROWS * N_COLS, 2), dtype=COORD_DTYPE)
    count = 0

    for k in range(n_vectors):
        dr = vectors[k, 0]
        dc = vectors[k, 1]
        tr = row + dr
        tc = col + dc

        while True:
            # Bounds check
            if tr < 0 or tr >= N_ROWS or tc < 0 or tc >= N_COLS:
                break
            # Blocked cell ends this direction only
            if not landable[tr, tc]:
                break

            out[count, 0] = tr
            out[count, 1] = tc
            count += 1
            tr += dr
            tc += dc

    return out[:count]


def generate_slider_targets(position, vectors, landable) -> np.ndarray:
    """Python entry point; normalizes dtypes before handing off to the kernel."""
    row, col = position
    return _generate_slider_targets(
        COORD_DTYPE(row), COORD_DTYPE(col),
        np.ascontiguousarray(vectors, dtype=COORD_DTYPE),
        np.ascontiguousarray(landable, dtype=np.bool_),
    )


__all__ = ['generate_slider_targets']
