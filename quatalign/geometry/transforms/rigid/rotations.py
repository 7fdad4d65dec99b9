'''Utilities for handling proper rotations (i.e. elements of the special orthogonal group SO(3))'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np
from scipy.spatial.transform import Rotation

from ...arraytypes import Shape, Numeric
from ...measure import normalized


def quaternion_to_rotation_matrix(quaternion : np.ndarray[Shape[4], Numeric]) -> np.ndarray[Shape[3, 3], Numeric]:
    '''
    Compute the 3x3 rotation matrix encoded by a scalar-first quaternion (q0, q1, q2, q3)
    
    The matrix produced is the one which, applied to a point set centered at the origin,
    performs the superposition encoded by the minimal eigenvector of a Horn key matrix;
    this is the transpose of the "active" matrix scipy associates with the same quaternion
    
    Since the matrix is built from a normalized quaternion, it is always a proper rotation (det = +1),
    and q and -q always produce the same matrix

    Parameters
    ----------
    quaternion : Array[[4,], float]
        Scalar-first quaternion; need not be unit-length, but must be nonzero

    Returns
    -------
    rotation_matrix : Array[[3, 3], float]
        Orthonormal matrix with determinant 1, with the same floating dtype as the quaternion
    '''
    quaternion = np.asarray(quaternion)
    if quaternion.shape != (4,):
        raise ValueError(f'Quaternion must be a 4-vector, not an array of shape {quaternion.shape}')
    if np.isclose(np.linalg.norm(quaternion), 0.0):
        raise ValueError('Cannot extract a rotation from a zero quaternion')
    q0, q1, q2, q3 = normalized(quaternion)
    
    return np.array([
        [q0**2 + q1**2 - q2**2 - q3**2, 2*(q1*q2 + q0*q3),             2*(q1*q3 - q0*q2)            ],
        [2*(q1*q2 - q0*q3),             q0**2 + q2**2 - q1**2 - q3**2, 2*(q2*q3 + q0*q1)            ],
        [2*(q1*q3 + q0*q2),             2*(q2*q3 - q0*q1),             q0**2 + q3**2 - q1**2 - q2**2],
    ], dtype=np.result_type(quaternion, np.float32))

def quaternion_to_rotation(quaternion : np.ndarray[Shape[4], Numeric]) -> Rotation:
    '''Wrap the rotation matrix encoded by a scalar-first quaternion into a scipy Rotation'''
    return Rotation.from_matrix(quaternion_to_rotation_matrix(quaternion))
