'''Checks on linear bases and the matrices whose rows/columns form them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np
from ..arraytypes import Shape, N, Numeric


def is_diagonal(matrix : np.ndarray[Shape[N, N], Numeric]) -> bool: # TODO: generalize to work for other diagonals
    '''Determine whether a matrix is digonal, i.e. has no nonzero elements off of the main diagonal'''
    return np.allclose(matrix - np.diag(np.diagonal(matrix)), 0.0)

def is_orthogonal(matrix : np.ndarray[Shape[N, N], Numeric], atol : float=1e-8) -> bool:
    '''
    Determine if a matrix is orthogonal, i.e. its left and right inverses are both its own transpose
    Note that the matrix does not necessarily have to be square in order for it to be orthogonal
    '''
    (n_rows, n_cols) = matrix.shape # implicitly assert 2-dimensionality
    return  np.allclose(matrix @ matrix.T, np.eye(n_rows, dtype=matrix.dtype), atol=atol) \
        and np.allclose(matrix.T @ matrix, np.eye(n_cols, dtype=matrix.dtype), atol=atol) # NOTE: can't optimize as the transpose of the above product for non-square matrices
is_orthonormal = is_orthogonal

def is_proper_rotation(matrix : np.ndarray[Shape[N, N], Numeric], atol : float=1e-8) -> bool:
    '''
    Determine if a matrix represents a proper rotation (an element of SO(n)),
    i.e. is square, orthogonal, and preserves handedness (determinant of +1, not -1)
    '''
    (n_rows, n_cols) = matrix.shape
    if n_rows != n_cols:
        return False
    return is_orthogonal(matrix, atol=atol) and bool(np.isclose(np.linalg.det(matrix), 1.0, atol=atol))
