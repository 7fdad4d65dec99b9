'''
Optimal rigid superposition of one set of points onto another with known
point-to-point correspondence (i.e. the weighted orthogonal Procrustes problem),
solved by the quaternion method of Horn (J. Opt. Soc. Am. A, 4(4), 1987)
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Sequence, TypeAlias, Union

import numpy as np
from scipy.spatial.transform import RigidTransform

from .rotations import quaternion_to_rotation_matrix, quaternion_to_rotation
from ...arraytypes import ArrayNx3, Array3x3, Array4x4, Vector3, Vector4, VectorN
from ...coordinates.basis import is_proper_rotation
from ...coordinates.reference import centroid

PointsLike: TypeAlias = Union[ArrayNx3, Sequence[Sequence[float]]]
WeightsLike: TypeAlias = Union[VectorN, Sequence[float]]


class AlignmentError(ValueError):
    '''Raised when a pair of point sets can't be superimposed as given'''
    pass

class DimensionMismatchError(AlignmentError):
    '''Raised when point sets and/or weights don't have mutually-compatible shapes'''
    pass

class EmptyInputError(AlignmentError):
    '''Raised when attempting to align sets containing no points'''
    pass

class InvalidWeightError(AlignmentError):
    '''Raised when weights are negative, non-finite, or don't have a positive sum'''
    pass


# INPUT VALIDATION
def _validated_inputs(
        x : PointsLike,
        y : PointsLike,
        xmass : WeightsLike,
        ymass : WeightsLike,
    ) -> tuple[ArrayNx3, ArrayNx3, VectorN, VectorN]:
    '''
    Coerce points and weights into arrays of a common floating-point dtype, checking
    that they describe a pair of corresponding, equally-sized, properly-weighted point sets

    No copy is made for inputs which are already arrays of the working dtype, so
    NOTHING downstream of this is permitted to write into the arrays returned here
    '''
    x, y = np.asarray(x), np.asarray(y)
    xmass, ymass = np.asarray(xmass), np.asarray(ymass)

    if any(arr.ndim == 0 for arr in (x, y, xmass, ymass)):
        raise DimensionMismatchError('Point sets and weights must be sequences, not scalars')

    n_points = {len(arr) for arr in (x, y, xmass, ymass)}
    if len(n_points) > 1:
        raise DimensionMismatchError(
            f'Point sets and weights must all be the same length; got {len(x)} and {len(y)} points with {len(xmass)} and {len(ymass)} weights'
        )
    (N,) = n_points
    if N == 0:
        raise EmptyInputError('Cannot align empty point sets')

    for label, points in (('x', x), ('y', y)):
        if points.shape != (N, 3):
            raise DimensionMismatchError(f'Point set "{label}" must be an Nx3 array of 3D points, not of shape {points.shape}')
    for label, weights in (('xmass', xmass), ('ymass', ymass)):
        if weights.shape != (N,):
            raise DimensionMismatchError(f'Weights "{label}" must be a flat array of {N} values, not of shape {weights.shape}')
        if not np.all(np.isfinite(weights)):
            raise InvalidWeightError(f'Weights "{label}" must all be finite')
        if np.any(weights < 0.0):
            raise InvalidWeightError(f'Weights "{label}" must all be non-negative')
        if not (weights.sum() > 0.0):
            raise InvalidWeightError(f'Weights "{label}" must have a positive sum (got {weights.sum()})')

    dtype = np.promote_types(np.result_type(x, y), np.float32) # float32 inputs are kept in single precision; anything else computes in (at least) double
    return (
        np.asarray(x, dtype=dtype),
        np.asarray(y, dtype=dtype),
        np.asarray(xmass, dtype=dtype),
        np.asarray(ymass, dtype=dtype),
    )


# STAGES OF THE ALIGNMENT ALGORITHM
def key_matrix(x_centered : ArrayNx3, y_centered : ArrayNx3) -> Array4x4:
    '''
    Build the symmetric 4x4 "key" matrix whose minimal-eigenvalue eigenvector
    is the quaternion of the rotation which best superimposes x onto y

    Parameters
    ----------
    x_centered : Array[[N, 3], float]
        Points to be rotated, already translated so their centroid lies at the origin
    y_centered : Array[[N, 3], float]
        Target points, already translated so their centroid lies at the origin

    Returns
    -------
    key_matrix : Array[[4, 4], float]
        Real symmetric (and positive semidefinite) matrix, in the working dtype of the points
    '''
    (dx, dy, dz) = (y_centered - x_centered).T
    (sx, sy, sz) = (y_centered + x_centered).T

    Q = np.zeros((4, 4), dtype=np.result_type(x_centered, y_centered))
    Q[0, 0] = np.sum(dx**2 + dy**2 + dz**2)
    Q[0, 1] = np.sum(sy*dz - dy*sz)
    Q[0, 2] = np.sum(dx*sz - sx*dz)
    Q[0, 3] = np.sum(sx*dy - dx*sy)
    Q[1, 1] = np.sum(sy**2 + sz**2 + dx**2)
    Q[1, 2] = np.sum(dx*dy - sx*sy)
    Q[1, 3] = np.sum(dx*dz - sx*sz)
    Q[2, 2] = np.sum(sx**2 + sz**2 + dy**2)
    Q[2, 3] = np.sum(dy*dz - sy*sz)
    Q[3, 3] = np.sum(sx**2 + sy**2 + dz**2)

    lower = np.tril_indices(4, k=-1)
    Q[lower] = Q.T[lower] # mirror upper triangle into lower

    return Q

def minimal_eigenpair(matrix : Array4x4, degeneracy_tol : float=1e-8) -> tuple[float, Vector4]:
    '''
    Find the algebraically smallest eigenvalue of a real symmetric matrix and a unit eigenvector for it

    The minimum is located explicitly, independent of the order in which the solver reports eigenvalues
    If the minimal eigenvalue is repeated (to within "degeneracy_tol", relative to the largest eigenvalue magnitude),
    the eigenvector returned is an arbitrary member of the minimal eigenspace
    '''
    if not np.allclose(matrix, matrix.T):
        raise ValueError('Eigen-decomposition here is only valid for symmetric matrices')

    eigvals, eigvecs = np.linalg.eigh(matrix)
    i_min = np.argmin(eigvals)

    scale = max(1.0, float(np.max(np.abs(eigvals))))
    if np.count_nonzero(eigvals - eigvals[i_min] <= degeneracy_tol * scale) > 1:
        LOGGER.debug(f'Minimal eigenvalue {eigvals[i_min]} is degenerate; choice of optimal rotation is not unique')

    return float(eigvals[i_min]), eigvecs[:, i_min]

def _optimal_superposition(
        x : ArrayNx3,
        y : ArrayNx3,
        xmass : VectorN,
        ymass : VectorN,
    ) -> tuple[Vector3, Vector3, ArrayNx3, Vector4, Array3x3]:
    '''
    Run the full alignment pipeline on pre-validated inputs
    Returns the centroids of x and y, the centered copy of x, and the optimal quaternion and rotation matrix
    '''
    cmx = centroid(x, xmass)
    cmy = centroid(y, ymass)
    LOGGER.debug(f'Aligning {len(x)} points with centroid {cmx} onto centroid {cmy}')

    x_centered = x - cmx # NOTE: subtraction produces fresh arrays, so the caller's inputs are never modified
    y_centered = y - cmy

    min_eigval, quaternion = minimal_eigenpair(key_matrix(x_centered, y_centered))
    LOGGER.debug(f'Optimal rotation quaternion {quaternion} has residual eigenvalue {min_eigval}')

    rotation_matrix = quaternion_to_rotation_matrix(quaternion)
    assert is_proper_rotation(rotation_matrix, atol=float(np.sqrt(np.finfo(rotation_matrix.dtype).eps))), 'Optimal rotation must be proper (orthonormal, with determinant 1.0)'

    return cmx, cmy, x_centered, quaternion, rotation_matrix


# PUBLIC ENTRY POINTS
def alignment_quaternion(x : PointsLike, y : PointsLike, xmass : WeightsLike, ymass : WeightsLike) -> Vector4:
    '''Compute the scalar-first unit quaternion of the rotation which optimally superimposes x onto y (sign is arbitrary)'''
    _, _, _, quaternion, _ = _optimal_superposition(*_validated_inputs(x, y, xmass, ymass))
    return quaternion

def alignment_rotation_matrix(x : PointsLike, y : PointsLike, xmass : WeightsLike, ymass : WeightsLike) -> Array3x3:
    '''Compute the proper rotation matrix U which, applied to x about its centroid, optimally superimposes x onto y'''
    *_, rotation_matrix = _optimal_superposition(*_validated_inputs(x, y, xmass, ymass))
    return rotation_matrix

def optimal_rigid_transformation(x : PointsLike, y : PointsLike, xmass : WeightsLike, ymass : WeightsLike) -> RigidTransform:
    '''
    Compute the rigid transformation which minimizes the mass-weighted RMSD of x to y,
    namely rotation about the centroid of x followed by translation onto the centroid of y

    Returned as a scipy RigidTransform, so that the same transformation can be applied to other objects
    '''
    cmx, cmy, _, quaternion, _ = _optimal_superposition(*_validated_inputs(x, y, xmass, ymass))
    return (
        RigidTransform.from_translation(cmy)
        * RigidTransform.from_rotation(quaternion_to_rotation(quaternion))
        * RigidTransform.from_translation(-cmx)
    )

def align_into(
        out : ArrayNx3,
        x : PointsLike,
        y : PointsLike,
        xmass : WeightsLike,
        ymass : WeightsLike,
    ) -> None:
    '''
    Rigidly rotate and translate x to minimize its mass-weighted RMSD to y, writing the result into "out"
    Point correspondence between x and y is taken from their order

    Parameters
    ----------
    out : Array[[N, 3], float]
        Preallocated floating-point array which will receive the aligned coordinates of x
        Must not share memory with x or y
    x : Array[[N, 3], float]
        The points to be aligned
    y : Array[[N, 3], float]
        The points to align onto
    xmass : Array[[N,], float]
        Non-negative weights (e.g. masses) of the points in x; must have a positive sum
    ymass : Array[[N,], float]
        Non-negative weights (e.g. masses) of the points in y; must have a positive sum

    Raises
    ------
    DimensionMismatchError
        If x, y, xmass, ymass, and out don't all describe the same number of points
    EmptyInputError
        If no points are provided
    InvalidWeightError
        If either set of weights contains negative or non-finite values, or sums to zero
    AlignmentError
        If "out" overlaps x or y in memory
    TypeError
        If "out" is not a floating-point numpy array

    Notes
    -----
    Neither x nor y is ever written to; centering is carried out on internal copies,
    so both are guaranteed to be bitwise-unchanged on return
    '''
    x, y, xmass, ymass = _validated_inputs(x, y, xmass, ymass)
    if not isinstance(out, np.ndarray):
        raise TypeError(f'Output buffer must be a numpy array, not {type(out).__name__}')
    if out.shape != x.shape:
        raise DimensionMismatchError(f'Output buffer must have the same shape as the points being aligned {x.shape}, not {out.shape}')
    if not np.issubdtype(out.dtype, np.floating):
        raise TypeError(f'Output buffer must have a floating-point dtype, not {out.dtype}')
    if np.shares_memory(out, x) or np.shares_memory(out, y):
        raise AlignmentError('Output buffer must not share memory with either of the point sets being aligned')

    _, cmy, x_centered, _, rotation_matrix = _optimal_superposition(x, y, xmass, ymass)
    out[:] = cmy + x_centered @ rotation_matrix.T # row-wise equivalent of cmy + U @ x_i

def align(x : PointsLike, y : PointsLike, xmass : WeightsLike, ymass : WeightsLike) -> ArrayNx3:
    '''
    Return a rigidly rotated and translated copy of x which minimizes its mass-weighted RMSD to y
    Point correspondence between x and y is taken from their order; neither input is modified

    See align_into() for details of parameters and exceptions raised
    '''
    x, y, xmass, ymass = _validated_inputs(x, y, xmass, ymass)
    out = np.empty_like(x)
    align_into(out, x, y, xmass, ymass)

    return out
