'''Unit tests for basis coordinate operations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
import numpy as np

from quatalign.geometry.arraytypes import Shape, N
from quatalign.geometry.coordinates.basis import (
    is_diagonal,
    is_orthonormal,
    is_proper_rotation,
)


# Test matrices for orthogonality checks
ORTHO_COLS_ONLY = np.array([
    [ 1,  2,  5],
    [ 2,  2, -4],
    [ 3, -2,  1]
]) # an example of a matrix whose columns are mutually orthogonal but whose rows are not
RECTANGULAR = np.array([
    [1/np.sqrt(2), 0, 1/np.sqrt(2)],
    [0,            1, 0           ],
]) # orthonormal rows, but columns cannot be a basis for a nonsquare matrix
IDENTITY = np.eye(3) # identity matrix is orthogonal by definition
ROTATION = np.array([
    [np.cos(np.pi/3), -np.sin(np.pi/3), 0],
    [np.sin(np.pi/3),  np.cos(np.pi/3), 0],
    [0,                0,               1],
]) # by definition, proper rotation matrices are orthonormal
REFLECTION = np.diag([1.0, 1.0, -1.0]) # orthonormal, but inverts handedness
ROTOREFLECTION = ROTATION @ REFLECTION


@pytest.mark.parametrize(
    'matrix, expected_value',
    [
        (np.diag([1.0, 2.0, 3.0]), True),
        (IDENTITY, True),
        (ROTATION, False),
        (ORTHO_COLS_ONLY.T @ ORTHO_COLS_ONLY, True),
    ]
)
def test_diagonality_check(matrix : np.ndarray[Shape[N, N], float], expected_value : bool) -> None:
    '''Test that diagonal matrices are correctly identified'''
    assert is_diagonal(matrix) == expected_value

@pytest.mark.parametrize(
    'matrix, expected_value',
    [
        (ORTHO_COLS_ONLY, False),
        (RECTANGULAR, False),
        (ROTATION, True),
        (IDENTITY, True),
        (REFLECTION, True),
    ]
)
def test_orthonormality_check(matrix : np.ndarray[Shape[N, N], float], expected_value : bool) -> None:
    '''Test that the orthonormality check works as expected'''
    assert is_orthonormal(matrix) == expected_value

@pytest.mark.parametrize(
    'matrix, expected_value',
    [
        (ROTATION, True),
        (IDENTITY, True),
        (REFLECTION, False),
        (ROTOREFLECTION, False),
        (2*ROTATION, False),
        (RECTANGULAR, False),
    ]
)
def test_proper_rotation_check(matrix : np.ndarray[Shape[N, N], float], expected_value : bool) -> None:
    '''Test that only orthonormal matrices which preserve handedness are considered proper rotations'''
    assert is_proper_rotation(matrix) == expected_value
