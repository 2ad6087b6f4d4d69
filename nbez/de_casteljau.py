"""
De Casteljau subdivision functions for Bézier curve segmentation.
"""

import numpy as np


def de_casteljau_split_1d(N, tau, basis_index, dtype=float):
    """
    Compute De Casteljau subdivision coefficients for a single basis vector.
    """
    w = np.zeros(N+1, dtype=dtype)
    w[basis_index] = 1.0
    left = [w[0]]
    right = [w[-1]]
    W = w.copy()

    for _ in range(1, N+1):
        W = (1 - tau) * W[:-1] + tau * W[1:]
        left.append(W[0])
        right.append(W[-1])

    L = np.array(left, dtype=dtype)
    R = np.array(right[::-1], dtype=dtype)
    return L, R


def de_casteljau_split_matrices(N, tau, dtype=float):
    """Compute subdivision matrices S_left and S_right."""
    S_left = np.zeros((N+1, N+1), dtype=dtype)
    S_right = np.zeros((N+1, N+1), dtype=dtype)

    for j in range(N+1):
        L, R = de_casteljau_split_1d(N, tau, j, dtype=dtype)
        S_left[:, j] = L
        S_right[:, j] = R
    return S_left, S_right


def segment_matrices_equal_params(N, n_seg, dtype=float):
    """
    Generate segment matrices for equal-parameter splitting.
    Returns list of (N+1, N+1) matrices, one per segment.
    """
    if n_seg < 1:
        raise ValueError("n_seg must be >= 1")
    if n_seg == 1:
        return [np.eye(N+1, dtype=dtype)]

    mats = []
    remainder = np.eye(N+1, dtype=dtype)

    for k in range(n_seg, 1, -1):
        tau = 1.0 / k
        S_L, S_R = de_casteljau_split_matrices(N, tau, dtype=dtype)
        mats.append(S_L @ remainder)
        remainder = S_R @ remainder
    mats.append(remainder)
    return mats


def split_points(P, tau):
    """
    Split a control polygon at tau with the De Casteljau recurrence.

    Args:
        P: Control points (N+1, dim)
        tau: Split parameter

    Returns:
        (left, right): Control points of the two halves, each (N+1, dim).
            left[-1] and right[0] are the same point on the curve.
    """
    P = np.asarray(P)
    tau = P.dtype.type(tau)
    left = [P[0]]
    right = [P[-1]]
    W = P

    for _ in range(1, P.shape[0]):
        W = (1 - tau) * W[:-1] + tau * W[1:]
        left.append(W[0])
        right.append(W[-1])

    return np.array(left), np.array(right[::-1])
